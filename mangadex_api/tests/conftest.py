"""Global test configuration and fixtures."""
import json
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import pytest
import yarl

from mangadex_api.api.api_client import APIConfig, HttpClient
from mangadex_api.api.transport import TransportResponse
from mangadex_api.client import MangaDexClient
from mangadex_api.schema import AuthTokens

BASE_URL = "https://api.mangadex.test"

@dataclass
class RecordedCall:
    method: str
    url: yarl.URL
    headers: Dict[str, str]
    body: Optional[bytes]

    def json(self) -> Any:
        return json.loads(self.body)

class StubTransport:
    """Transport replaying canned responses and recording every call"""

    def __init__(self, responses: List[Union[TransportResponse, Exception]]):
        self.responses = list(responses)
        self.calls: List[RecordedCall] = []
        self.closed = False

    async def execute(self, method, url, headers, body=None):
        self.calls.append(RecordedCall(method, url, dict(headers), body))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self):
        self.closed = True

def _json_response(status: int, body: Any) -> TransportResponse:
    return TransportResponse(
        status=status,
        body=json.dumps(body).encode("utf-8"),
        headers={"Content-Type": "application/json"}
    )

def _error_body(status: int, title: str, detail: Optional[str] = None, error_id: Optional[uuid.UUID] = None) -> Dict[str, Any]:
    return {
        "result": "error",
        "errors": [{
            "id": str(error_id or uuid.uuid4()),
            "status": status,
            "title": title,
            "detail": detail
        }]
    }

@pytest.fixture
def json_response():
    """Factory for JSON transport responses"""
    return _json_response

@pytest.fixture
def error_body():
    """Factory for single-item error envelopes"""
    return _error_body

@pytest.fixture
def tokens():
    return AuthTokens(session="sessiontoken", refresh="refreshtoken")

@pytest.fixture
def make_http_client():
    """Factory for an HttpClient wired to a StubTransport"""
    def factory(responses, auth_tokens: Optional[AuthTokens] = None):
        transport = StubTransport(responses)
        http_client = HttpClient(
            config=APIConfig(base_url=BASE_URL),
            transport=transport,
            auth_tokens=auth_tokens
        )
        return http_client, transport
    return factory

@pytest.fixture
def make_client(make_http_client):
    """Factory for a MangaDexClient wired to a StubTransport"""
    def factory(responses, auth_tokens: Optional[AuthTokens] = None):
        http_client, transport = make_http_client(responses, auth_tokens)
        return MangaDexClient.new_with_http_client(http_client), transport
    return factory
