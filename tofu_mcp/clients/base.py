"""
Base client utilities for API clients.

Provides the request/response plumbing shared by registry clients: timing,
structured request logging, status checking and optional retry of
transport failures.
"""

import time
from typing import Any, Literal

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..exceptions import RequestError
from ..logging import get_logger, log_api_request

ResponseType = Literal["json", "text"]


def build_query_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """
    Drop query parameters whose value is None.

    Args:
        params: Raw query parameters

    Returns:
        Parameters safe to pass to httpx
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


class BaseAPIClient:
    """Base class for API clients with common functionality."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_name: str = "API",
        max_retries: int = 0,
    ):
        """
        Initialize the base client.

        Args:
            client: The httpx async client
            api_name: Name of the API for logging/errors
            max_retries: Extra attempts after a transport failure
        """
        self.client = client
        self.api_name = api_name
        self.max_retries = max_retries
        self.logger = get_logger(__name__, client=api_name.lower())

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def _get(self, path: str, params: dict[str, Any]) -> httpx.Response:
        """Issue a GET, retrying transport failures when configured."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self.client.get(path, params=params)

    async def _fetch(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        response_type: ResponseType = "json",
        **log_context,
    ) -> Any:
        """
        Make a GET request and return the decoded body.

        Args:
            path: Path relative to the client's base URL
            params: Optional query parameters; None values are omitted
            response_type: "json" for a parsed body, "text" for the raw text
            **log_context: Additional context for logging

        Returns:
            Parsed JSON or response text

        Raises:
            RequestError: If the response has a non-success status
            httpx.TransportError: If the request could not be completed
        """
        start_time = time.time()

        try:
            response = await self._get(path, build_query_params(params))
        except httpx.TransportError as e:
            self.logger.error(
                "Request error", path=path, error=str(e), **log_context
            )
            raise

        duration_ms = (time.time() - start_time) * 1000

        log_api_request(
            self.logger,
            "GET",
            str(response.url),
            response.status_code,
            duration_ms,
            **log_context,
        )

        if not response.is_success:
            raise RequestError(
                response.status_code,
                response.reason_phrase,
                url=str(response.url),
                api_name=self.api_name,
            )

        return response.json() if response_type == "json" else response.text
