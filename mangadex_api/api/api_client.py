# mangadex_api/api/api_client.py
# Created: 2026-10-19 12:30:27

from typing import Any, Dict, Optional
from dataclasses import dataclass, field
import logging

import yarl

from .. import __version__
from ..core.config import Config
from ..core.exceptions import ApiErrors, DecodeError, MissingTokens, RefreshError
from ..schema import AuthTokens
from .auth import AuthRefresher, CredentialStore
from .endpoint import RequestDescriptor, ResultMode
from .response_handler import ErrorEnvelope, parse_envelope
from .transport import AiohttpTransport, Transport

logger = logging.getLogger(__name__)

@dataclass
class APIConfig:
    """Configuration for the HTTP client"""
    base_url: str = "https://api.mangadex.org"
    timeout: float = 30.0
    connection_timeout: float = 10.0
    verify_ssl: bool = True
    user_agent: str = field(default_factory=lambda: f"mangadex-api-python/{__version__}")

    @classmethod
    def from_config(cls, config: Config) -> "APIConfig":
        """Build the client configuration from the ``api`` section of a Config"""
        defaults = cls()
        return cls(
            base_url=config.get("api.base_url", defaults.base_url),
            timeout=float(config.get("api.timeout", defaults.timeout)),
            connection_timeout=float(config.get("api.connection_timeout", defaults.connection_timeout)),
            verify_ssl=bool(config.get("api.verify_ssl", defaults.verify_ssl)),
            user_agent=config.get("api.user_agent", defaults.user_agent)
        )

class HttpClient:
    """
    Sends request descriptors and decodes their responses.

    This class provides:
    - One generic send for every endpoint
    - Bearer authentication from a shared credential store
    - A single token refresh and retry when the session token is rejected
    - Envelope decoding into typed payloads or ApiErrors
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        transport: Optional[Transport] = None,
        auth_tokens: Optional[AuthTokens] = None,
        store: Optional[CredentialStore] = None
    ):
        self.config = config or APIConfig()
        self.transport = transport or AiohttpTransport(
            timeout=self.config.timeout,
            connection_timeout=self.config.connection_timeout,
            user_agent=self.config.user_agent,
            verify_ssl=self.config.verify_ssl
        )
        self.store = store or CredentialStore()
        if auth_tokens is not None:
            self.store.set(auth_tokens)
        self.refresher = AuthRefresher(self.store, self._dispatch)

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport"""
        await self.transport.close()

    def get_tokens(self) -> Optional[AuthTokens]:
        return self.store.get()

    def set_auth_tokens(self, tokens: AuthTokens) -> None:
        self.store.set(tokens)

    def clear_auth_tokens(self) -> None:
        self.store.clear()

    def _build_url(self, descriptor: RequestDescriptor) -> yarl.URL:
        url = yarl.URL(self.config.base_url) / descriptor.path.lstrip('/')
        if descriptor.query:
            url = url.with_query(list(descriptor.query))
        return url

    @staticmethod
    def _headers(
        descriptor: RequestDescriptor,
        tokens: Optional[AuthTokens]
    ) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if descriptor.body is not None:
            headers["Content-Type"] = "application/json"
        if tokens is not None:
            headers["Authorization"] = f"Bearer {tokens.session}"
        return headers

    @staticmethod
    def _unwrap(payload: Any, mode: ResultMode) -> Any:
        if mode is ResultMode.DISCARD:
            return None
        if mode is ResultMode.DATA:
            try:
                return payload.data
            except AttributeError:
                raise DecodeError(
                    f"{type(payload).__name__} has no data field to unwrap"
                ) from None
        return payload

    async def _dispatch(
        self,
        descriptor: RequestDescriptor,
        tokens: Optional[AuthTokens]
    ) -> Any:
        """One round trip: build, execute and decode, without any recovery"""
        url = self._build_url(descriptor)
        context = {"method": descriptor.method.value, "path": descriptor.path}
        logger.debug(
            f"Sending {descriptor.method.value} {descriptor.path}",
            extra=context
        )

        response = await self.transport.execute(
            descriptor.method.value,
            url,
            self._headers(descriptor, tokens),
            descriptor.body
        )

        try:
            envelope = parse_envelope(response.body, descriptor.response_type)
        except DecodeError as e:
            e.details.setdefault("status", response.status)
            logger.error(f"Undecodable response ({response.status}): {e.message}", extra=context)
            raise

        if isinstance(envelope, ErrorEnvelope):
            logger.debug(
                f"API reported {len(envelope.errors)} error(s) with status {response.status}",
                extra=context
            )
            raise ApiErrors(envelope.errors, status=response.status)

        return self._unwrap(envelope.payload, descriptor.result_mode)

    async def send(self, descriptor: RequestDescriptor) -> Any:
        """
        Send a request descriptor

        Args:
            descriptor: The call to perform

        Returns:
            The decoded payload, its ``data`` field, or None, depending on
            the descriptor's result mode

        Raises:
            MissingTokens: authentication is required and no tokens are stored
            TransportError: the HTTP round trip failed
            DecodeError: the response did not match the expected shape
            ApiErrors: the API reported errors; when a token refresh was
                attempted and failed, it is attached as ``refresh_error``
        """
        tokens: Optional[AuthTokens] = None
        if descriptor.auth_required:
            tokens = self.store.get()
            if tokens is None:
                raise MissingTokens(
                    details={"method": descriptor.method.value, "path": descriptor.path}
                )

        try:
            return await self._dispatch(descriptor, tokens)
        except ApiErrors as e:
            if tokens is None or not tokens.refresh or not e.is_auth_failure():
                raise
            rejected = e

        logger.info(
            "Session token rejected, refreshing before retrying once",
            extra={"method": descriptor.method.value, "path": descriptor.path}
        )
        try:
            tokens = await self.refresher.refresh(tokens)
        except RefreshError as refresh_error:
            rejected.refresh_error = refresh_error
            raise rejected from refresh_error

        return await self._dispatch(descriptor, tokens)
