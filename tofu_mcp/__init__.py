"""
Tofu MCP - OpenTofu Registry MCP server.
"""

__version__ = "0.1.0"
