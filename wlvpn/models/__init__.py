"""
Domain models for the WLVPN API.

These are immutable (frozen) dataclasses describing request payloads.
"""

from wlvpn.models.account import (
    DEFAULT_LIMITATION_TYPE,
    AccountStatus,
    AccountUpdate,
    Limitation,
    NewAccount,
    UsageReportQuery,
    format_date,
)

__all__ = [
    "DEFAULT_LIMITATION_TYPE",
    "AccountStatus",
    "AccountUpdate",
    "Limitation",
    "NewAccount",
    "UsageReportQuery",
    "format_date",
]
