"""
WLVPN exception hierarchy.

All exceptions inherit from WLVPNError for easy catching.
"""

from typing import Any


class WLVPNError(Exception):
    """Base exception for all wlvpn errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class TransportError(WLVPNError):
    """Network-level error (connection failed, timeout, invalid URL)."""


class APIError(WLVPNError):
    """The API answered, but not with usable data."""

    def __init__(self, message: str, *, endpoint: str | None = None, **context: Any) -> None:
        super().__init__(message, endpoint=endpoint, **context)
        self.endpoint = endpoint


class UnexpectedStatusError(APIError):
    """HTTP status outside of 200/204 (auth failure, not found, rate limited, server error)."""

    def __init__(
        self,
        message: str,
        *,
        code: int,
        reason: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, endpoint=endpoint, code=code)
        self.code = code
        self.reason = reason


class MalformedEnvelopeError(APIError):
    """Successful HTTP status but the body is not a valid response envelope."""


class BusinessError(APIError):
    """Envelope decoded but the provider reported a failed operation."""

    def __init__(
        self, message: str, *, api_status: Any = None, endpoint: str | None = None
    ) -> None:
        super().__init__(message, endpoint=endpoint, api_status=api_status)
        self.api_status = api_status


class MissingFieldError(APIError):
    """Expected payload field absent from an otherwise successful response."""

    def __init__(self, message: str, *, field: str, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint=endpoint, field=field)
        self.field = field
