"""
Entry point bundling an HttpClient with the endpoint namespaces.

Example::

    async with MangaDexClient() as client:
        await client.auth.login(username="myusername", password="hunter23").send()
        users = await client.user.list(limit=1).send()
"""

import logging
from pathlib import Path
from typing import Any, Optional

from .api.api_client import APIConfig, HttpClient
from .core.config import Config
from .core.logger import Logger
from .schema import AuthTokens
from .v5 import (
    AccountBuilder,
    AuthBuilder,
    RatingBuilder,
    SettingsBuilder,
    UploadBuilder,
    UserBuilder
)

logger = logging.getLogger(__name__)

class MangaDexClient:
    """Typed client for the MangaDex v5 API"""

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        config: Optional[Config] = None
    ):
        if http_client is None:
            api_config = APIConfig.from_config(config) if config is not None else None
            http_client = HttpClient(config=api_config)
        self.http_client = http_client

    @classmethod
    def new_with_http_client(cls, http_client: HttpClient) -> "MangaDexClient":
        return cls(http_client=http_client)

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        config_path: Optional[Path] = None,
        auth_tokens: Optional[AuthTokens] = None,
        setup_logging: bool = True
    ) -> "MangaDexClient":
        """
        Build a client from a Config, loading one from ``config_path`` or the
        environment when none is given

        Args:
            config: Ready configuration
            config_path: JSON file to load when ``config`` is None
            auth_tokens: Token pair to start with
            setup_logging: Whether to configure the package logger from the
                ``logging`` section

        Returns:
            MangaDexClient
        """
        config = config or Config(config_path)
        if setup_logging:
            Logger(config)
        api_config = APIConfig.from_config(config)
        logger.debug(f"Client configured for {api_config.base_url}")
        return cls(HttpClient(config=api_config, auth_tokens=auth_tokens))

    async def __aenter__(self) -> "MangaDexClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.http_client.close()

    @property
    def account(self) -> AccountBuilder:
        return AccountBuilder(self.http_client)

    @property
    def auth(self) -> AuthBuilder:
        return AuthBuilder(self.http_client)

    @property
    def rating(self) -> RatingBuilder:
        return RatingBuilder(self.http_client)

    @property
    def settings(self) -> SettingsBuilder:
        return SettingsBuilder(self.http_client)

    @property
    def upload(self) -> UploadBuilder:
        return UploadBuilder(self.http_client)

    @property
    def user(self) -> UserBuilder:
        return UserBuilder(self.http_client)
