"""
WLVPN Python Client.

An async Python client for the WLVPN account provisioning API.

Example:
    ```python
    from datetime import date

    from wlvpn import AccountStatus, WLVPNClient, WLVPNConfig

    config = WLVPNConfig(api_key="secret", default_group_id=7)

    async with WLVPNClient(config) as client:
        customer_id = await client.create_account("bob", "pw", close_date=date(2024, 1, 15))
        await client.update_account(customer_id, AccountStatus.SUSPENDED)
        await client.create_account_limitation(customer_id, 1024)
    ```
"""

from wlvpn.api.http_client import AsyncHttpClient, RawResponse, TransportGateway
from wlvpn.api.response import normalize
from wlvpn.client import WLVPNClient
from wlvpn.config import WLVPNConfig
from wlvpn.exceptions import (
    APIError,
    BusinessError,
    MalformedEnvelopeError,
    MissingFieldError,
    TransportError,
    UnexpectedStatusError,
    WLVPNError,
)
from wlvpn.models.account import AccountStatus, Limitation

__version__ = "0.1.0"

__all__ = [
    # Main client
    "WLVPNClient",
    "WLVPNConfig",
    # Transport
    "AsyncHttpClient",
    "RawResponse",
    "TransportGateway",
    "normalize",
    # Models
    "AccountStatus",
    "Limitation",
    # Exceptions
    "WLVPNError",
    "TransportError",
    "APIError",
    "UnexpectedStatusError",
    "MalformedEnvelopeError",
    "BusinessError",
    "MissingFieldError",
]
