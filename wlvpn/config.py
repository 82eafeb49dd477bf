"""
WLVPN client configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

DEFAULT_API_URL = "https://api.wlvpn.com"


@dataclass(frozen=True, kw_only=True)
class WLVPNConfig:
    """
    Attributes:
        api_key: API credential issued by WLVPN.
        default_group_id: Account group used when a call does not name one.
        api_url: Base URL for the WLVPN API.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        client_options: Extra ``httpx.AsyncClient`` keyword arguments,
            merged over the defaults built from the fields above.
    """

    api_key: str = field(repr=False)
    default_group_id: int
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    user_agent: str = "WLVPN-Python/0.1.0"
    client_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.api_key:
            msg = "api_key must not be empty"
            raise ValueError(msg)
        if isinstance(self.default_group_id, bool) or not isinstance(self.default_group_id, int):
            msg = "default_group_id must be an integer"
            raise ValueError(msg)
        if self.default_group_id <= 0:
            msg = "default_group_id must be positive"
            raise ValueError(msg)
        if not self.api_url:
            msg = "api_url must not be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        # detach from the caller's dict
        object.__setattr__(self, "client_options", MappingProxyType(dict(self.client_options)))
