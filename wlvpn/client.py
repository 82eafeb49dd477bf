"""
WLVPN client facade.

This is the main entry point for users of the library. Each method maps one
business action to a single API call and returns the relevant part of the
response.
"""

from collections.abc import Iterable
from datetime import date
from typing import Any, Self
from urllib.parse import quote

import httpx

from wlvpn.api.http_client import AsyncHttpClient, TransportGateway
from wlvpn.api.response import normalize, require_field
from wlvpn.config import WLVPNConfig
from wlvpn.models.account import (
    DEFAULT_LIMITATION_TYPE,
    AccountStatus,
    AccountUpdate,
    Limitation,
    NewAccount,
    UsageReportQuery,
)


class WLVPNClient:
    """
    Async client for the WLVPN account API.

    Example:
        ```python
        config = WLVPNConfig(api_key="secret", default_group_id=7)
        async with WLVPNClient(config) as client:
            if not await client.username_exists("bob"):
                customer_id = await client.create_account("bob", "pw")
            servers = await client.get_servers()
        ```

    Args:
        config: Client configuration.
        gateway: Transport used for requests. Defaults to an httpx-backed
            AsyncHttpClient owned by this client.
        transport: Optional httpx transport for the default gateway (testing).
    """

    def __init__(
        self,
        config: WLVPNConfig,
        *,
        gateway: TransportGateway | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if gateway is not None and transport is not None:
            msg = "Pass either a gateway or an httpx transport, not both"
            raise ValueError(msg)

        self._config = config
        self._owned_http: AsyncHttpClient | None = None
        if gateway is None:
            self._owned_http = gateway = AsyncHttpClient(config, transport=transport)
        self._gateway: TransportGateway = gateway

    async def __aenter__(self) -> Self:
        if self._owned_http is not None:
            await self._owned_http.__aenter__()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the default gateway. Caller-supplied gateways are left alone."""
        if self._owned_http is not None:
            await self._owned_http.close()

    @property
    def config(self) -> WLVPNConfig:
        return self._config

    async def username_exists(self, username: str) -> bool:
        """
        Check whether a username is taken.

        Raises:
            MissingFieldError: If the response has no ``username_exists`` field.
        """
        path = f"/v2/username_exists/{_username_segment(username)}"
        result = await self._call("GET", path)
        return require_field(result, "username_exists", endpoint=path) == 1

    async def get_account_by_username(self, username: str) -> dict[str, Any]:
        """Retrieve account info by username."""
        path = f"/v2/customers/username/{_username_segment(username)}"
        result = await self._call("GET", path)
        return require_field(result, "customer", endpoint=path)

    async def get_account_by_customer_id(self, customer_id: int) -> dict[str, Any]:
        """Retrieve account info by customer ID."""
        path = _customer_path(customer_id)
        result = await self._call("GET", path)
        return require_field(result, "customer", endpoint=path)

    async def create_account(
        self,
        username: str,
        password: str,
        acct_group_id: int | None = None,
        close_date: date | None = None,
    ) -> int:
        """
        Create an account.

        Args:
            username: Login of the new customer.
            password: Initial password.
            acct_group_id: Account group; the configured default when omitted.
            close_date: Expiry date; the account never expires when omitted.

        Returns:
            ID of the created customer.
        """
        account = NewAccount(
            username=str(username),
            password=password,
            acct_group_id=self._resolve_group(acct_group_id),
            close_date=close_date,
        )
        path = "/v2/customers"
        result = await self._call("POST", path, json=account.to_payload())
        return int(require_field(result, "cust_id", endpoint=path))

    async def update_account(
        self,
        customer_id: int,
        status: AccountStatus | int,
        password: str | None = None,
        close_date: date | None = None,
        acct_group_id: int | None = None,
    ) -> bool:
        """
        Update an account.

        Only close_date, password, status and group can be changed; every
        other property is read-only. Omitted optional values stay unchanged.

        Raises:
            ValueError: If status is not a known AccountStatus.
        """
        update = AccountUpdate(
            status=AccountStatus(status),
            acct_group_id=self._resolve_group(acct_group_id),
            password=password,
            close_date=close_date,
        )
        result = await self._call("PUT", _customer_path(customer_id), json=update.to_payload())
        return isinstance(result, dict)

    async def usage_report_by_account(
        self,
        customer_id: int,
        start_date: date,
        metrics: Iterable[str],
        end_date: date | None = None,
    ) -> Any:
        """Fetch usage metrics of an account starting at start_date."""
        query = UsageReportQuery(start_date=start_date, metrics=tuple(metrics), end_date=end_date)
        path = f"{_customer_path(customer_id)}/usage-report"
        result = await self._call("POST", path, json=query.to_payload())
        return require_field(result, "usage", endpoint=path)

    async def create_account_limitation(
        self, customer_id: int, value: str | int, type: str = DEFAULT_LIMITATION_TYPE
    ) -> bool:
        limitation = Limitation(value=value, type=type)
        path = f"{_customer_path(customer_id)}/limitations"
        result = await self._call("POST", path, json=limitation.to_payload())
        return isinstance(result, dict)

    async def update_account_limitation(
        self, customer_id: int, value: str | int, type: str = DEFAULT_LIMITATION_TYPE
    ) -> bool:
        limitation = Limitation(value=value, type=type)
        path = f"{_customer_path(customer_id)}/limitations"
        result = await self._call("PUT", path, json=limitation.to_payload())
        return isinstance(result, dict)

    async def delete_account_limitation(self, customer_id: int) -> bool:
        result = await self._call("DELETE", f"{_customer_path(customer_id)}/limitations")
        return isinstance(result, dict)

    async def get_servers(self) -> Any:
        """List VPN servers available to the account group."""
        path = "/v2/servers"
        result = await self._call("GET", path)
        return require_field(result, "server", endpoint=path)

    async def _call(
        self, method: str, path: str, *, json: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        raw = await self._gateway.execute(method, path, json=json)
        return normalize(raw, endpoint=path)

    def _resolve_group(self, acct_group_id: int | None) -> int:
        if acct_group_id is None:
            return self._config.default_group_id
        return int(acct_group_id)


def _username_segment(username: str) -> str:
    username = str(username)
    if not username:
        msg = "username must not be empty"
        raise ValueError(msg)
    return quote(username, safe="")


def _customer_path(customer_id: int) -> str:
    return f"/v2/customers/{int(customer_id)}"
