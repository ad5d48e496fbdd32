"""
Exception classes for Tofu MCP.

This module defines custom exception classes used throughout the Tofu MCP
server for better error handling and debugging.
"""

from typing import Any


class TofuMCPError(Exception):
    """Base exception class for Tofu MCP errors."""

    def __init__(
        self,
        message: str,
        code: str = "TOFU_MCP_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize Tofu MCP error.

        Args:
            message: Error message
            code: Error code for programmatic handling
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class RequestError(TofuMCPError):
    """Exception for registry responses with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        url: str | None = None,
        **kwargs,
    ):
        """
        Initialize request error.

        Args:
            status_code: HTTP status code
            status_text: HTTP reason phrase
            url: Requested URL
            **kwargs: Additional details
        """
        message = f"API request failed: {status_code} {status_text}".rstrip()
        details = {
            "status_code": status_code,
            "status_text": status_text,
            "url": url,
            **kwargs,
        }
        super().__init__(message, code="REQUEST_ERROR", details=details)
        self.status_code = status_code
        self.status_text = status_text
        self.url = url


class ResolutionError(TofuMCPError):
    """Exception for when no version can be determined for a provider."""

    def __init__(self, namespace: str, name: str, **kwargs):
        """
        Initialize resolution error.

        Args:
            namespace: Provider namespace
            name: Provider name
            **kwargs: Additional details
        """
        message = f"Could not determine latest version for provider {namespace}/{name}"
        details = {"namespace": namespace, "name": name, **kwargs}
        super().__init__(message, code="RESOLUTION_ERROR", details=details)
        self.namespace = namespace
        self.name = name


class ValidationError(TofuMCPError):
    """Exception for validation errors."""

    def __init__(self, message: str, field: str | None = None, **kwargs):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field that failed validation
            **kwargs: Additional details
        """
        details = {"field": field, **kwargs}
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class ConfigurationError(TofuMCPError):
    """Exception for configuration errors."""

    def __init__(self, message: str, setting: str | None = None, **kwargs):
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Configuration setting that caused the error
            **kwargs: Additional details
        """
        details = {"setting": setting, **kwargs}
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.setting = setting
