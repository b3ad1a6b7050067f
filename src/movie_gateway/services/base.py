"""Base HTTP client and error types for upstream API integrations."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base exception for every error raised by the gateway core."""


class ConfigurationError(GatewayError):
    """Raised when the upstream client cannot be built from its configuration."""


class InvalidArgumentError(GatewayError, ValueError):
    """Raised when an identifier or page number is out of range."""


class UpstreamError(GatewayError):
    """Raised when a call to the upstream API fails.

    The message never contains the full upstream URL or the credential,
    only the endpoint path and what the upstream reported.
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class NotFoundError(UpstreamError):
    """Raised when the upstream reports that a resource does not exist."""

    def __init__(self, endpoint: str | None = None, message: str = "Resource not found") -> None:
        super().__init__(message, endpoint=endpoint, status_code=404)


class UpstreamTimeoutError(UpstreamError):
    """Raised when the upstream does not answer within the configured timeout."""

    def __init__(self, endpoint: str | None = None) -> None:
        super().__init__(f"Upstream request to {endpoint} timed out", endpoint=endpoint)


class EnvelopeError(UpstreamError):
    """Raised when a response body does not have the shape the endpoint declares."""


class BaseAPIClient(ABC):
    """Abstract base class for upstream API clients.

    Provides common functionality for HTTP requests and error handling.
    Retries are not attempted here.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        """Initialize the base API client.

        Args:
            base_url: The base URL for the API.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def default_headers(self) -> dict[str, str]:
        """Return default headers for API requests."""
        ...

    @property
    def default_params(self) -> dict[str, Any]:
        """Return query parameters appended to every request."""
        return {}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.default_headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, etc.).
            endpoint: API endpoint path.
            params: Query parameters, merged over the default ones.

        Returns:
            Parsed JSON response body.

        Raises:
            NotFoundError: If the resource is not found (404).
            UpstreamTimeoutError: If the request timed out.
            UpstreamError: For other transport or HTTP errors.
        """
        client = await self._get_client()
        url = endpoint.lstrip("/")

        request_params = dict(self.default_params)
        if params:
            request_params.update(params)

        logger.debug("%s %s", method, url)
        try:
            response = await client.request(method=method, url=url, params=request_params)
        except httpx.TimeoutException as e:
            logger.warning("Upstream request to %s timed out", url)
            raise UpstreamTimeoutError(url) from e
        except httpx.RequestError as e:
            # httpx puts the full URL (and so the credential) in the message
            logger.warning("Upstream request to %s failed: %s", url, type(e).__name__)
            raise UpstreamError(
                f"Upstream request to {url} failed: {type(e).__name__}", endpoint=url
            ) from e

        return self._handle_response(response, url)

    def _handle_response(self, response: httpx.Response, endpoint: str) -> Any:
        """Handle the HTTP response.

        Args:
            response: The HTTP response object.
            endpoint: Endpoint path the response belongs to.

        Returns:
            Parsed JSON response body.

        Raises:
            NotFoundError: If the resource is not found (404).
            UpstreamError: For other HTTP errors or an unparseable body.
        """
        if response.status_code == 404:
            logger.warning("Upstream %s returned 404", endpoint)
            raise NotFoundError(endpoint, self._error_message(response) or "Resource not found")

        if not response.is_success:
            logger.warning("Upstream %s returned %s", endpoint, response.status_code)
            detail = self._error_message(response) or response.reason_phrase
            raise UpstreamError(
                f"Upstream {endpoint} returned {response.status_code}: {detail}",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Upstream %s returned a body that is not JSON", endpoint)
            raise UpstreamError(
                f"Upstream {endpoint} returned invalid JSON",
                endpoint=endpoint,
                status_code=response.status_code,
            ) from e

    def _error_message(self, response: httpx.Response) -> str | None:
        """Extract a human readable message from an error response body."""
        return None

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request to the API."""
        return await self._request("GET", endpoint, params=params)

    async def __aenter__(self) -> "BaseAPIClient":
        """Async context manager entry."""
        await self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
