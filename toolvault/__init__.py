"""
ToolVault
=========
Power-tool warranty tracking: brand detection from serial numbers, receipt
parsing, warranty windows and rule-based claim verdicts.
"""

__version__ = "0.1.0"
