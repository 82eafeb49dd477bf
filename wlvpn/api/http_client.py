"""
HTTP transport for the WLVPN API.

Defines the gateway interface the client talks through and a default
implementation on top of httpx. The gateway only moves bytes: it does not
interpret status codes, retry, or decode envelopes.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx
import structlog

from wlvpn.config import WLVPNConfig
from wlvpn.exceptions import TransportError

logger = structlog.get_logger(__name__)

API_KEY_USERNAME = "api-key"

SENSITIVE_KEYS = frozenset(
    {
        "cust_password",
        "password",
        "api_key",
    }
)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Recursively sanitizes nested dictionaries and lists.

    Args:
        data: Dictionary that may contain sensitive values.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    result = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS:
            result[key] = "***"
        elif isinstance(value, dict):
            result[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status code and undecoded body of a single API call."""

    status_code: int
    body: bytes = b""


@runtime_checkable
class TransportGateway(Protocol):
    """
    Abstract interface for performing API requests.

    Implementations own connection handling, TLS, authentication,
    timeouts and any retry policy. Network failures should surface
    as TransportError.
    """

    async def execute(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> RawResponse:
        """
        Perform a request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: API path relative to the base URL (e.g., "/v2/servers").
            json: Optional JSON body.

        Returns:
            The raw response, whatever its status code.
        """
        ...


class AsyncHttpClient:
    """Default TransportGateway backed by httpx.AsyncClient."""

    def __init__(
        self,
        config: WLVPNConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport

        self._client: httpx.AsyncClient | None = None
        self._open_count = 0
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def client_options(self) -> dict[str, Any]:
        """Keyword arguments for httpx.AsyncClient, user overrides merged over defaults."""
        defaults: dict[str, Any] = {
            "base_url": self._config.api_url,
            "auth": httpx.BasicAuth(API_KEY_USERNAME, self._config.api_key),
            "timeout": self._config.timeout,
            "headers": {
                "Accept": "application/json",
                "User-Agent": self._config.user_agent,
            },
            "transport": self._transport,
        }
        return {**defaults, **self._config.client_options}

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(**self.client_options())
            self._open_count += 1
        return self._client

    async def close(self) -> None:
        """Close the HTTP client once the last context manager holding it exits."""
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            self._open_count = max(self._open_count - 1, 0)
            if self._open_count != 0:
                logger.debug("Skipping close, client still in use", count=self._open_count)
                return
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> RawResponse:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: API path (e.g., "/v2/customers").
            json: JSON body for POST/PUT requests.

        Returns:
            Raw response with status code and body bytes.

        Raises:
            TransportError: If the request fails due to network issues.
            RuntimeError: If used outside of ``async with``.
        """
        client = self._client
        if client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        logger.debug(
            "Sending request",
            method=method,
            path=path,
            body=sanitize_for_log(json) if json is not None else None,
        )
        try:
            response = await client.request(method=method, url=path, json=json)
        except (httpx.TransportError, httpx.InvalidURL) as e:
            logger.debug("Request failed", method=method, path=path, error=str(e))
            msg = f"Request to WLVPN API failed: {e}"
            raise TransportError(msg, method=method, path=path) from e

        logger.debug("Received response", method=method, path=path, status=response.status_code)
        return RawResponse(status_code=response.status_code, body=response.content)
