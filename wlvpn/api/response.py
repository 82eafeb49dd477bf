"""
Response envelope handling.

WLVPN wraps every successful payload in an envelope carrying its own
business status (``api_status``). A call only succeeds when both the HTTP
status and the business status say so.
"""

import json
from enum import IntEnum
from typing import Any

from wlvpn.api.http_client import RawResponse
from wlvpn.exceptions import (
    BusinessError,
    MalformedEnvelopeError,
    MissingFieldError,
    UnexpectedStatusError,
)

API_STATUS_FIELD = "api_status"
ERROR_FIELD = "error"


class ResponseCode(IntEnum):
    """HTTP status codes documented by the WLVPN API."""

    SUCCESS = 200
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORISED = 401
    NOT_FOUND = 404
    NO_LONGER_EXISTS = 410
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503


class APIStatus(IntEnum):
    """Business status carried in the envelope."""

    SUCCESS = 1


ACCEPTED_CODES = frozenset({ResponseCode.SUCCESS, ResponseCode.NO_CONTENT})


def normalize(raw: RawResponse, *, endpoint: str | None = None) -> dict[str, Any]:
    """
    Validate a raw response and unwrap its envelope.

    Args:
        raw: Response returned by the transport gateway.
        endpoint: Path of the call, attached to raised errors.

    Returns:
        Envelope payload without ``api_status``; empty for 204 responses.

    Raises:
        UnexpectedStatusError: If the HTTP status is not 200 or 204.
        MalformedEnvelopeError: If a 200 body is not a JSON object with ``api_status``.
        BusinessError: If ``api_status`` is not the success marker.
    """
    code = raw.status_code
    if code not in ACCEPTED_CODES:
        try:
            reason = ResponseCode(code).name
        except ValueError:
            reason = None
        raise UnexpectedStatusError(
            f"Unknown WLVPN response status code - {code}",
            code=code,
            reason=reason,
            endpoint=endpoint,
        )

    if code == ResponseCode.NO_CONTENT:
        return {}

    data = _decode_envelope(raw.body, endpoint)

    api_status = data[API_STATUS_FIELD]
    # exactly the integer 1: true and 1.0 are failures
    if type(api_status) is not int or api_status != APIStatus.SUCCESS:
        error = data.get(ERROR_FIELD)
        raise BusinessError(
            "Unknown error" if error is None else str(error),
            api_status=api_status,
            endpoint=endpoint,
        )

    return {key: value for key, value in data.items() if key != API_STATUS_FIELD}


def require_field(result: dict[str, Any], field: str, *, endpoint: str | None = None) -> Any:
    """
    Get a payload field that must be present in a normalized result.

    Raises:
        MissingFieldError: If the field is absent.
    """
    if field not in result:
        raise MissingFieldError(
            f"Response is missing expected field '{field}'",
            field=field,
            endpoint=endpoint,
        )
    return result[field]


def _decode_envelope(body: bytes, endpoint: str | None) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedEnvelopeError(
            "Invalid JSON response from API", endpoint=endpoint
        ) from e

    if not isinstance(data, dict):
        raise MalformedEnvelopeError(
            f"Expected a JSON object, got {type(data).__name__}", endpoint=endpoint
        )
    if API_STATUS_FIELD not in data:
        raise MalformedEnvelopeError(
            f"Response envelope has no '{API_STATUS_FIELD}'", endpoint=endpoint
        )
    return data
