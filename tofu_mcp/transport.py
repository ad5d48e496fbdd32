"""
Transport configuration for the Tofu MCP server.

STDIO serves a single local agent; HTTP serves hosted deployments, always
stateless since no tool keeps state between calls.
"""

from dataclasses import dataclass
from typing import Literal

TransportMode = Literal["stdio", "http"]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass
class TransportConfig:
    """Base transport configuration."""

    mode: TransportMode


@dataclass
class StdioConfig(TransportConfig):
    """STDIO transport (default)."""

    mode: TransportMode = "stdio"


@dataclass
class HttpConfig(TransportConfig):
    """Streamable HTTP transport."""

    mode: TransportMode = "http"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self):
        if not self.host:
            raise ValueError("Host cannot be empty")

        if not isinstance(self.port, int) or not (1 <= self.port <= 65535):
            raise ValueError("Port must be an integer between 1 and 65535")


def create_transport_config(
    use_http: bool = False, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> TransportConfig:
    """
    Create a transport configuration from CLI options.

    Raises:
        ValueError: If the HTTP host or port is invalid
    """
    if use_http:
        return HttpConfig(host=host, port=port)
    return StdioConfig()
