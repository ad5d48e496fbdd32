"""API clients for Tofu MCP."""
