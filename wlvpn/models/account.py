"""
Account-related domain models and request payloads.
"""

from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Any

DEFAULT_LIMITATION_TYPE = "rate-limit"


class AccountStatus(IntEnum):
    """Account status accepted by the update endpoint."""

    ACTIVE = 1
    SUSPENDED = 2
    CLOSED = 3


def format_date(value: date) -> str:
    """Format a date (or datetime) the way the API expects: YYYY-MM-DD."""
    return date.isoformat(value)


@dataclass(frozen=True, kw_only=True)
class Limitation:
    """
    Customer-level constraint, e.g. a bandwidth cap.

    Attributes:
        value: Limitation value, passed through as given.
        type: Limitation tag.
    """

    value: str | int
    type: str = DEFAULT_LIMITATION_TYPE

    def to_payload(self) -> dict[str, Any]:
        return {"limitations": {"type": self.type, "value": self.value}}


@dataclass(frozen=True, kw_only=True)
class NewAccount:
    """
    Payload for account creation.

    Attributes:
        username: Login of the new customer.
        password: Initial password.
        acct_group_id: Resolved account group.
        close_date: Expiry date. None means the account never expires.
    """

    username: str
    password: str
    acct_group_id: int
    close_date: date | None = None

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "cust_user_id": self.username,
            "cust_password": self.password,
            "acct_group_id": self.acct_group_id,
        }
        if self.close_date is not None:
            data["close_date"] = format_date(self.close_date)
        return data


@dataclass(frozen=True, kw_only=True)
class AccountUpdate:
    """
    Payload for account update.

    Only status, group, password and close date are writable; absent
    optional fields are left unchanged by the API.
    """

    status: AccountStatus
    acct_group_id: int
    password: str | None = None
    close_date: date | None = None

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "acct_status_id": int(self.status),
            "acct_group_id": self.acct_group_id,
        }
        if self.password is not None:
            data["cust_password"] = self.password
        if self.close_date is not None:
            data["close_date"] = format_date(self.close_date)
        return data


@dataclass(frozen=True, kw_only=True)
class UsageReportQuery:
    """Usage report parameters. A missing end_date lets the API pick the range end."""

    start_date: date
    metrics: tuple[str, ...]
    end_date: date | None = None

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "start_date": format_date(self.start_date),
            "metrics": list(self.metrics),
        }
        if self.end_date is not None:
            data["end_date"] = format_date(self.end_date)
        return data
