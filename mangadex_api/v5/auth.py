"""
Authentication endpoints.

Logging in stores the returned token pair in the client's credential store,
which every authenticated endpoint then reads. Logging out clears it.
"""

import logging
from typing import Optional

from pydantic import Field, model_validator

from ..api.auth import REFRESH_PATH, refresh_descriptor
from ..api.endpoint import ContentMode, Endpoint, RequestDescriptor, RequestMethod, ResultMode
from ..core.exceptions import DispatchError, MissingTokens
from ..schema import AuthTokenResponse, AuthTokens
from .base import Namespace

logger = logging.getLogger(__name__)

class Login(Endpoint):
    """Makes a request to ``POST /auth/login``"""
    method = RequestMethod.POST
    path = "/auth/login"
    content = ContentMode.BODY
    response_type = AuthTokenResponse
    result_mode = ResultMode.FLATTEN

    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(repr=False)

    @model_validator(mode="after")
    def check_identity(self) -> "Login":
        if not self.username and not self.email:
            raise ValueError("either username or email is required")
        return self

    async def send(self) -> AuthTokenResponse:
        response = await super().send()
        self._http_client.set_auth_tokens(response.token)
        logger.info("Logged in, session tokens stored")
        return response

class Logout(Endpoint):
    """Makes a request to ``POST /auth/logout``"""
    method = RequestMethod.POST
    path = "/auth/logout"
    auth = True

    async def send(self) -> None:
        await super().send()
        self._http_client.clear_auth_tokens()
        logger.info("Logged out, session tokens cleared")

class RefreshToken(Endpoint):
    """
    Explicitly renew the stored session token.

    Goes through the same coordinator as the automatic refresh, so the new
    pair is stored before it is returned.
    """
    method = RequestMethod.POST
    path = REFRESH_PATH
    content = ContentMode.BODY
    response_type = AuthTokenResponse
    result_mode = ResultMode.FLATTEN

    def _current_tokens(self) -> AuthTokens:
        if self._http_client is None:
            raise DispatchError("RefreshToken is not bound to an HttpClient")
        tokens = self._http_client.get_tokens()
        if tokens is None:
            raise MissingTokens(details={"method": self.method.value, "path": self.path})
        return tokens

    def descriptor(self) -> RequestDescriptor:
        return refresh_descriptor(self._current_tokens())

    async def send(self) -> AuthTokens:
        return await self._http_client.refresher.refresh(self._current_tokens())

class AuthBuilder(Namespace):
    def login(self, **fields) -> Login:
        return self._bind(Login(**fields))

    def logout(self) -> Logout:
        return self._bind(Logout())

    def refresh_token(self) -> RefreshToken:
        return self._bind(RefreshToken())
