import os

import pytest

from wlvpn.config import WLVPNConfig


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not (os.getenv("WLVPN_TEST_API_KEY") and os.getenv("WLVPN_TEST_GROUP_ID"))
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason="WLVPN_TEST_API_KEY / WLVPN_TEST_GROUP_ID not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def wlvpn_config() -> WLVPNConfig:
    api_key = os.getenv("WLVPN_TEST_API_KEY")
    group_id = os.getenv("WLVPN_TEST_GROUP_ID")
    if not api_key or not group_id:
        pytest.fail("WLVPN_TEST_API_KEY and WLVPN_TEST_GROUP_ID must be set to run integration tests.")
    return WLVPNConfig(api_key=api_key, default_group_id=int(group_id))
