import uuid

import pytest
from mangadex_api.api.response_handler import ApiError
from mangadex_api.core.exceptions import (
    MangaDexError,
    ConfigError,
    LoggerError,
    DispatchError,
    MissingTokens,
    TransportError,
    DecodeError,
    RefreshError,
    ApiErrors
)

def test_base_exception():
    """Test MangaDexError base exception"""
    with pytest.raises(MangaDexError) as exc_info:
        raise MangaDexError("Base error message")
    assert str(exc_info.value) == "Base error message"
    assert isinstance(exc_info.value, Exception)

def test_missing_tokens_default_message():
    assert str(MissingTokens()) == "Authentication tokens are missing"

def test_error_with_details():
    """Test exception with additional details"""
    details = {"status": 502, "path": "/user"}
    with pytest.raises(DecodeError) as exc_info:
        raise DecodeError("Response body is not valid JSON", details=details)
    assert exc_info.value.details == details

def test_error_inheritance():
    """Test proper exception inheritance"""
    for exception_class in [ConfigError, LoggerError, DispatchError]:
        assert issubclass(exception_class, MangaDexError)

    for exception_class in [MissingTokens, TransportError, DecodeError, RefreshError, ApiErrors]:
        assert issubclass(exception_class, DispatchError)

def test_api_errors_keep_order():
    errors = [ApiError(id=uuid.uuid4(), status=status, title=f"e{status}") for status in (400, 404)]

    exc = ApiErrors(errors, status=400)

    assert exc.errors == errors
    assert exc.errors is not errors
    assert "400 e400" in str(exc)
    assert "404 e404" in str(exc)

@pytest.mark.parametrize("http_status,item_status,expected", [
    (401, 401, True),
    (400, 401, True),
    (401, 400, True),
    (403, 403, False),
    (400, 400, False),
])
def test_api_errors_auth_failure(http_status, item_status, expected):
    exc = ApiErrors([ApiError(id=uuid.uuid4(), status=item_status)], status=http_status)
    assert exc.is_auth_failure() is expected
