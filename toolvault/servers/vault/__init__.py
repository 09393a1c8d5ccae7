"""Vault MCP server."""
