"""
Configuration for Tofu MCP.

This module handles environment variables and configuration settings
for the Tofu MCP server.
"""

import os

from pydantic import BaseModel, Field, HttpUrl

from . import __version__
from .exceptions import ConfigurationError

DEFAULT_CLIENT_NAME = "tofu-mcp"


class Config(BaseModel):
    """Configuration model for Tofu MCP."""

    # OpenTofu Registry Configuration
    registry_api_url: HttpUrl = Field(
        default_factory=lambda: HttpUrl("https://api.opentofu.org"),
        description="OpenTofu Registry API base URL",
    )

    # Client identity, sent as the User-Agent header
    client_name: str = Field(
        DEFAULT_CLIENT_NAME, min_length=1, description="Client name for User-Agent"
    )
    client_version: str = Field(
        __version__, min_length=1, description="Client version for User-Agent"
    )

    # Request Configuration
    request_timeout: int = Field(30, ge=1, description="Request timeout in seconds")
    max_retries: int = Field(
        0, ge=0, description="Retry attempts for transport failures (0 disables retry)"
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    structured_logging: bool = Field(True, description="Use structured logging")

    @property
    def user_agent(self) -> str:
        """User-Agent header value for registry requests."""
        return f"{self.client_name}/{self.client_version}"


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Returns:
        Configured Config instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        config_data = {}

        # Registry configuration
        if registry_api_url := os.getenv("TOFU_REGISTRY_API_URL"):
            config_data["registry_api_url"] = registry_api_url

        if client_name := os.getenv("TOFU_CLIENT_NAME"):
            config_data["client_name"] = client_name

        if client_version := os.getenv("TOFU_CLIENT_VERSION"):
            config_data["client_version"] = client_version

        # Request configuration
        if request_timeout := os.getenv("TOFU_REQUEST_TIMEOUT"):
            config_data["request_timeout"] = int(request_timeout)

        if max_retries := os.getenv("TOFU_MAX_RETRIES"):
            config_data["max_retries"] = int(max_retries)

        # Logging
        if log_level := os.getenv("TOFU_LOG_LEVEL"):
            config_data["log_level"] = log_level.upper()

        if structured_logging := os.getenv("TOFU_STRUCTURED_LOGGING"):
            config_data["structured_logging"] = structured_logging.lower() == "true"

        return Config(**config_data)

    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_registry_headers(config: Config) -> dict[str, str]:
    """
    Get OpenTofu Registry headers.

    Args:
        config: Configuration instance

    Returns:
        Dictionary of headers for registry API requests
    """
    return {
        "User-Agent": config.user_agent,
    }
