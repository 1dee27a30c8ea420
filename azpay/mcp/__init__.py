"""MCP server exposing azpay calculations as tools."""
