"""Tool implementations for Tofu MCP."""
