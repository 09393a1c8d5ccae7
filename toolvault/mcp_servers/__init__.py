"""MCP tool functions for the tool vault."""
