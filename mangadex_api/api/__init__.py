# mangadex_api/api/__init__.py
# Created: 2026-10-19 11:00:02

"""
Request/response pipeline: descriptors, dispatch, envelopes and tokens.
"""

from .api_client import (
    APIConfig,
    HttpClient
)

from .auth import (
    AuthRefresher,
    CredentialStore,
    REFRESH_PATH
)

from .endpoint import (
    ContentMode,
    Endpoint,
    RequestDescriptor,
    RequestMethod,
    ResultMode,
    encode_query
)

from .response_handler import (
    ApiError,
    Envelope,
    ErrorEnvelope,
    SuccessEnvelope,
    parse_envelope
)

from .transport import (
    AiohttpTransport,
    Transport,
    TransportResponse
)

__all__ = [
    'APIConfig',
    'HttpClient',
    'AuthRefresher',
    'CredentialStore',
    'REFRESH_PATH',
    'ContentMode',
    'Endpoint',
    'RequestDescriptor',
    'RequestMethod',
    'ResultMode',
    'encode_query',
    'ApiError',
    'Envelope',
    'ErrorEnvelope',
    'SuccessEnvelope',
    'parse_envelope',
    'AiohttpTransport',
    'Transport',
    'TransportResponse'
]
