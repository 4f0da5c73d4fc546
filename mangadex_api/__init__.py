"""
Typed asynchronous client for the MangaDex v5 API.
"""

__version__ = "0.1.0"

from .api import (
    APIConfig,
    ApiError,
    CredentialStore,
    Endpoint,
    HttpClient,
    RequestDescriptor,
    RequestMethod
)
from .client import MangaDexClient
from .core.config import Config
from .core.exceptions import (
    ApiErrors,
    ConfigError,
    DecodeError,
    DispatchError,
    LoggerError,
    MangaDexError,
    MissingTokens,
    RefreshError,
    TransportError
)
from .schema import AuthTokens

__all__ = [
    '__version__',
    'APIConfig',
    'ApiError',
    'CredentialStore',
    'Endpoint',
    'HttpClient',
    'RequestDescriptor',
    'RequestMethod',
    'MangaDexClient',
    'Config',
    'ApiErrors',
    'ConfigError',
    'DecodeError',
    'DispatchError',
    'LoggerError',
    'MangaDexError',
    'MissingTokens',
    'RefreshError',
    'TransportError',
    'AuthTokens'
]
