import json
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from wlvpn.api.http_client import RawResponse
from wlvpn.config import WLVPNConfig
from wlvpn.tests.utils.mock_transport import MockTransport

API_KEY = "test-api-key"
DEFAULT_GROUP_ID = 7


def make_success_response(data: dict[str, Any] | None = None) -> RawResponse:
    return RawResponse(status_code=200, body=json.dumps({"api_status": 1, **(data or {})}).encode())


@pytest.fixture
def config() -> WLVPNConfig:
    return WLVPNConfig(api_key=API_KEY, default_group_id=DEFAULT_GROUP_ID)


@pytest.fixture
def mock_gateway() -> Mock:
    gateway = Mock()
    gateway.execute = AsyncMock(return_value=make_success_response())
    return gateway


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()
