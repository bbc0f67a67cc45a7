"""MCP server exposing termination calculations as tools."""
