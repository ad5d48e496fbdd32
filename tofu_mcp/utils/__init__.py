"""Utility helpers for Tofu MCP."""
