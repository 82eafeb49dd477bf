from wlvpn.exceptions import (
    APIError,
    BusinessError,
    MissingFieldError,
    UnexpectedStatusError,
    WLVPNError,
)


def test_wlvpn_error_str_without_context() -> None:
    error = WLVPNError("Something failed")

    assert str(error) == "Something failed"


def test_wlvpn_error_str_with_context() -> None:
    error = WLVPNError("Failed", path="/v2/servers", attempt=3)

    assert "Failed" in str(error)
    assert "path='/v2/servers'" in str(error)
    assert "attempt=3" in str(error)


def test_unexpected_status_error_carries_code() -> None:
    error = UnexpectedStatusError("Unknown WLVPN response status code - 401", code=401)

    assert error.code == 401
    assert isinstance(error, APIError)


def test_business_error_keeps_provider_message() -> None:
    error = BusinessError("duplicate username", api_status=0)

    assert error.message == "duplicate username"
    assert str(error).startswith("duplicate username")


def test_missing_field_error_carries_field() -> None:
    error = MissingFieldError("missing", field="cust_id")

    assert error.field == "cust_id"
