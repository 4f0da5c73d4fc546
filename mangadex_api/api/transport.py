# mangadex_api/api/transport.py
# Created: 2026-10-19 11:20:41

from typing import Dict, Optional, Protocol
from dataclasses import dataclass, field
import asyncio
import logging

import aiohttp
import yarl

from ..core.exceptions import TransportError

logger = logging.getLogger(__name__)

@dataclass
class TransportResponse:
    """Raw outcome of one HTTP round trip"""
    status: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)

class Transport(Protocol):
    """Protocol for HTTP transports used by the dispatch engine"""
    async def execute(
        self,
        method: str,
        url: yarl.URL,
        headers: Dict[str, str],
        body: Optional[bytes] = None
    ) -> TransportResponse:
        """Send one request, raising TransportError on network failure"""
        ...

    async def close(self) -> None:
        ...

class AiohttpTransport:
    """
    Transport backed by a lazily created ``aiohttp.ClientSession``.

    The session is shared by every request sent through this transport, so
    connection pooling is whatever aiohttp provides.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        connection_timeout: float = 10.0,
        user_agent: Optional[str] = None,
        verify_ssl: bool = True
    ):
        self.timeout = timeout
        self.connection_timeout = connection_timeout
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(
                    total=self.timeout,
                    connect=self.connection_timeout
                ),
                headers=headers
            )
        return self._session

    async def close(self) -> None:
        """Close the underlying session"""
        if self._session and not self._session.closed:
            await self._session.close()

    async def execute(
        self,
        method: str,
        url: yarl.URL,
        headers: Dict[str, str],
        body: Optional[bytes] = None
    ) -> TransportResponse:
        session = await self._get_session()
        try:
            async with session.request(
                method,
                url,
                headers=headers,
                data=body,
                ssl=self.verify_ssl
            ) as response:
                payload = await response.read()
                return TransportResponse(
                    status=response.status,
                    body=payload,
                    headers=dict(response.headers)
                )
        except asyncio.TimeoutError as e:
            logger.error(f"{method} {url.path} timed out")
            raise TransportError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} {url.path} failed: {str(e)}")
            raise TransportError(f"Request to {url} failed: {str(e)}") from e
