from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..api.response_handler import ApiError

class MangaDexError(Exception):
    """Base exception class for all mangadex_api exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(MangaDexError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(MangaDexError):
    """Raised when there is a logging error"""
    pass

class DispatchError(MangaDexError):
    """Base class for failures of the request/response pipeline"""
    pass

class MissingTokens(DispatchError):
    """Raised when an authenticated endpoint is sent without stored tokens"""
    def __init__(self, message: str = "Authentication tokens are missing", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)

class TransportError(DispatchError):
    """Raised when the HTTP round trip itself fails (timeout, DNS, TLS, ...)"""
    pass

class DecodeError(DispatchError):
    """Raised when a response body does not match the expected envelope or payload"""
    pass

class RefreshError(DispatchError):
    """Raised when the session token could not be refreshed"""
    pass

class ApiErrors(DispatchError):
    """
    Raised when the API answers with an error envelope.

    ``errors`` keeps the server-reported order. ``refresh_error`` is set when
    an automatic token refresh was attempted after this failure and failed.
    """
    def __init__(
        self,
        errors: List["ApiError"],
        status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        summary = "; ".join(
            f"{error.status} {error.title or ''}".strip() for error in errors
        ) or "no error items"
        super().__init__(f"API returned an error: {summary}", details)
        self.errors = list(errors)
        self.status = status
        self.refresh_error: Optional[RefreshError] = None

    def is_auth_failure(self) -> bool:
        """Whether the server rejected the session token"""
        if self.status == 401:
            return True
        return any(error.status == 401 for error in self.errors)
