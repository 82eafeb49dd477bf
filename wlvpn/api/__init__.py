"""
WLVPN API layer.

Transport gateway plus response envelope normalization.
"""

from wlvpn.api.http_client import AsyncHttpClient, RawResponse, TransportGateway, sanitize_for_log
from wlvpn.api.response import APIStatus, ResponseCode, normalize, require_field

__all__ = [
    "APIStatus",
    "AsyncHttpClient",
    "RawResponse",
    "ResponseCode",
    "TransportGateway",
    "normalize",
    "require_field",
    "sanitize_for_log",
]
