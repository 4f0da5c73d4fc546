# mangadex_api/api/auth.py
# Created: 2026-10-19 12:03:55

from typing import Any, Awaitable, Callable, Optional
import asyncio
import json
import logging
import threading

from ..core.exceptions import DispatchError, RefreshError
from ..schema import AuthTokenResponse, AuthTokens
from .endpoint import ContentMode, RequestDescriptor, RequestMethod, ResultMode

logger = logging.getLogger(__name__)

REFRESH_PATH = "/auth/refresh"

Dispatch = Callable[[RequestDescriptor, Optional[AuthTokens]], Awaitable[Any]]

class CredentialStore:
    """
    Holds the current session/refresh token pair.

    The pair is only ever replaced or removed as a whole under one lock, so a
    reader sees either the previous pair, the new pair, or nothing.
    """

    def __init__(self, tokens: Optional[AuthTokens] = None):
        self._lock = threading.Lock()
        self._tokens: Optional[AuthTokens] = None
        if tokens is not None:
            self.set(tokens)

    def get(self) -> Optional[AuthTokens]:
        """Current token pair, or None when logged out"""
        with self._lock:
            return self._tokens

    def set(self, tokens: AuthTokens) -> None:
        """Replace the stored pair"""
        if not isinstance(tokens, AuthTokens):
            raise TypeError(f"Expected AuthTokens, got {type(tokens).__name__}")
        with self._lock:
            self._tokens = tokens

    def clear(self) -> None:
        """Forget the stored pair"""
        with self._lock:
            self._tokens = None

def refresh_descriptor(tokens: AuthTokens) -> RequestDescriptor:
    """Descriptor for the token refresh call; the token travels in the body"""
    body = json.dumps({"token": {"refresh": tokens.refresh}}).encode("utf-8")
    return RequestDescriptor(
        method=RequestMethod.POST,
        path=REFRESH_PATH,
        content=ContentMode.BODY,
        body=body,
        auth_required=False,
        response_type=AuthTokenResponse,
        result_mode=ResultMode.FLATTEN
    )

class AuthRefresher:
    """
    Renews the session token of a credential store.

    Refreshes for one store are serialized. A caller that waited on the lock
    while another request already replaced its pair gets the new pair back
    without a second round trip.
    """

    def __init__(self, store: CredentialStore, dispatch: Dispatch):
        self._store = store
        self._dispatch = dispatch
        self._lock = asyncio.Lock()

    async def refresh(self, current: AuthTokens) -> AuthTokens:
        """
        Exchange the refresh token of ``current`` for a new pair

        Args:
            current: Pair whose session token was rejected

        Returns:
            The new token pair, already written to the store

        Raises:
            RefreshError: the refresh call failed; the store is left untouched
        """
        async with self._lock:
            latest = self._store.get()
            if latest is None:
                raise RefreshError("Credentials were cleared before the refresh started")
            if latest != current:
                logger.debug("Session token was already refreshed by a concurrent request")
                return latest

            logger.info("Refreshing session token")
            try:
                response = await self._dispatch(refresh_descriptor(current), None)
            except DispatchError as e:
                logger.warning(f"Session token refresh failed: {e.message}")
                raise RefreshError(f"Failed to refresh session token: {e.message}") from e

            self._store.set(response.token)
            logger.info("Session token refreshed")
            return response.token
