# mangadex_api/api/endpoint.py
# Created: 2026-10-19 11:41:09

from typing import Any, ClassVar, List, Mapping, Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass
from enum import Enum
from string import Formatter
from urllib.parse import quote
import json

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel

from ..core.exceptions import DispatchError
from ..schema import NoData

if TYPE_CHECKING:
    from .api_client import HttpClient

class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

class ContentMode(Enum):
    """Where an endpoint's fields travel"""
    NONE = "none"
    BODY = "body"
    QUERY = "query"

class ResultMode(Enum):
    """How much of a decoded success envelope is handed back to the caller"""
    FLATTEN = "flatten"   # the whole decoded payload model
    DATA = "data"         # only its ``data`` field
    DISCARD = "discard"   # nothing, success is confirmed by not raising

QueryPairs = Tuple[Tuple[str, str], ...]

@dataclass(frozen=True)
class RequestDescriptor:
    """
    Everything the dispatch engine needs to perform one API call.

    ``path`` already has its placeholders substituted. ``body`` holds the
    serialized JSON when ``content`` is BODY, ``query`` the encoded pairs when
    it is QUERY.
    """
    method: RequestMethod
    path: str
    content: ContentMode = ContentMode.NONE
    body: Optional[bytes] = None
    query: QueryPairs = ()
    auth_required: bool = False
    response_type: Any = NoData
    result_mode: ResultMode = ResultMode.FLATTEN

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"path must start with '/', got {self.path!r}")
        if self.content is ContentMode.BODY and self.body is None:
            raise ValueError("BODY content requires a serialized body")
        if self.content is not ContentMode.BODY and self.body is not None:
            raise ValueError(f"{self.content.name} content must not carry a body")
        if self.content is not ContentMode.QUERY and self.query:
            raise ValueError(f"{self.content.name} content must not carry query parameters")

def _encode_value(pairs: List[Tuple[str, str]], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_value(pairs, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _encode_value(pairs, f"{key}[]", item)
    elif isinstance(value, bool):
        pairs.append((key, "true" if value else "false"))
    elif isinstance(value, Enum):
        pairs.append((key, str(value.value)))
    else:
        pairs.append((key, str(value)))

def encode_query(params: Mapping[str, Any]) -> QueryPairs:
    """
    Flatten parameters into query pairs the way the API expects them.

    Lists become repeated ``key[]`` entries, mappings become ``key[sub]``
    entries, booleans are lowercase and ``None`` values are dropped.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        _encode_value(pairs, key, value)
    return tuple(pairs)

def path_fields(template: str) -> List[str]:
    """Names of the placeholders in a path template"""
    return [name for _, name, _, _ in Formatter().parse(template) if name]

class Endpoint(BaseModel):
    """
    Base class for one API operation.

    Subclasses declare their fields as pydantic fields and describe the call
    with class variables. Fields named in ``path`` are substituted into it;
    the remaining ones (camelCase, ``None`` omitted) form the JSON body or the
    query string depending on ``content``.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True
    )

    method: ClassVar[RequestMethod]
    path: ClassVar[str]
    content: ClassVar[ContentMode] = ContentMode.NONE
    auth: ClassVar[bool] = False
    response_type: ClassVar[Any] = NoData
    result_mode: ClassVar[ResultMode] = ResultMode.DISCARD

    _http_client: Optional["HttpClient"] = PrivateAttr(default=None)

    def bind(self, http_client: "HttpClient") -> "Endpoint":
        """Attach the client used by :meth:`send`"""
        self._http_client = http_client
        return self

    def _resolve_path(self) -> str:
        values = {
            name: quote(str(getattr(self, name)), safe="")
            for name in path_fields(self.path)
        }
        return self.path.format(**values)

    def _payload(self) -> dict:
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=set(path_fields(self.path))
        )

    def descriptor(self) -> RequestDescriptor:
        """Build the request descriptor for this call"""
        body = None
        query: QueryPairs = ()
        if self.content is ContentMode.BODY:
            body = json.dumps(self._payload()).encode("utf-8")
        elif self.content is ContentMode.QUERY:
            query = encode_query(self._payload())

        return RequestDescriptor(
            method=self.method,
            path=self._resolve_path(),
            content=self.content,
            body=body,
            query=query,
            auth_required=self.auth,
            response_type=self.response_type,
            result_mode=self.result_mode
        )

    async def send(self) -> Any:
        """Send this call through the bound client"""
        if self._http_client is None:
            raise DispatchError(f"{type(self).__name__} is not bound to an HttpClient")
        return await self._http_client.send(self.descriptor())
