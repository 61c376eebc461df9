"""HTTP client for a single Network as Code microservice.

Provides request execution with API-key authentication, thread safety,
HTTP status to exception mapping, and Pydantic validation of response
bodies.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx
import pydantic
import structlog

from .. import errors

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

@dataclass(frozen=True)
class ServiceEndpoint:
    """Base URL and routing host of one microservice."""

    base_url: str
    host: str

class ServiceClient:
    """HTTP client for a single Network as Code microservice.

    Handles authentication headers, request execution, status-code to
    exception mapping and JSON parsing. Endpoint-specific request building
    and response validation live in the endpoint wrappers.

    Thread-safe through thread-local storage of httpx.Client instances.
    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        token: str,
        endpoint: ServiceEndpoint,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the service client.

        Args:
            token: Network as Code API key.
            endpoint: Base URL and routing host of the service.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If token is empty or timeout is not positive.
        """
        if not token:
            msg = "token cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self.base_url = endpoint.base_url.rstrip("/")
        self.host = endpoint.host
        self._timeout = timeout
        self._transport = transport

        self._headers = {
            "X-RapidAPI-Key": token,
            "X-RapidAPI-Host": endpoint.host,
            "content-type": "application/json",
        }

        self._local = threading.local()

    @property
    def client(self) -> httpx.Client:
        """Get or create the thread-local httpx client."""
        if not hasattr(self._local, "client") or self._local.client.is_closed:
            self._local.client = httpx.Client(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._local.client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the thread-local HTTP client if open."""
        if hasattr(self._local, "client") and not self._local.client.is_closed:
            self._local.client.close()

    def request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the parsed JSON body.

        Args:
            method: HTTP method.
            endpoint: Path relative to the service base URL.
            json: Optional request body.
            params: Optional query parameters.

        Returns:
            Parsed JSON body, or None when the response has no body.

        Raises:
            NetworkError: If no HTTP response was received.
            AuthError: On 401/403.
            NotFoundError: On 404.
            ServerError: On 5xx or an unparseable body.
            APIError: On any other non-2xx status.
        """
        start_time = time.time()
        logger.debug(
            "Making API request",
            method=method,
            host=self.host,
            endpoint=endpoint,
            params=params or {},
        )

        try:
            response = self.client.request(method, endpoint, json=json, params=params)
        except httpx.TransportError as exc:
            logger.exception(
                "API request failed",
                method=method,
                endpoint=endpoint,
                duration_seconds=round(time.time() - start_time, 3),
            )
            msg = f"Request to {self.host} failed: {exc}"
            raise errors.NetworkError(msg) from exc

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            status=response.status_code,
            duration_seconds=round(duration, 3),
        )

        if response.is_error:
            raise self._error_for(response)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            msg = f"Invalid JSON response from {self.host}"
            raise errors.ServerError(msg, status=response.status_code) from exc

    def _error_for(self, response: httpx.Response) -> errors.APIError:
        details: Any = None
        message = response.reason_phrase or f"HTTP {response.status_code}"
        try:
            details = response.json()
        except ValueError:
            details = response.text or None
        if isinstance(details, dict):
            message = details.get("message") or details.get("detail") or message

        logger.error(
            "API error response",
            host=self.host,
            status=response.status_code,
            error_message=message,
        )
        return errors.error_from_status(response.status_code, message, details)

def parse(model: type[pydantic.BaseModel], data: Any):
    """Validate a JSON body against a raw model.

    Raises:
        ServerError: If the body does not match the model.
    """
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        msg = f"Malformed {model.__name__} response: {exc.error_count()} error(s)"
        raise errors.ServerError(msg, details=data) from exc


def path_segment(value: str) -> str:
    """Percent-encode a value for use as one URL path segment."""
    return quote(value, safe="")
