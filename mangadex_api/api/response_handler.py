# mangadex_api/api/response_handler.py
# Created: 2026-10-19 11:02:14

from typing import Any, Generic, List, Optional, Type, TypeVar, Union
from dataclasses import dataclass
from functools import lru_cache
from uuid import UUID
import json
import logging

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..core.exceptions import DecodeError
from ..types import ResultType

T = TypeVar('T')
logger = logging.getLogger(__name__)

class ApiError(BaseModel):
    """One error item reported inside an error envelope"""
    model_config = ConfigDict(frozen=True, extra='ignore')

    id: UUID
    status: int
    title: Optional[str] = None
    detail: Optional[str] = None

class _ErrorBody(BaseModel):
    model_config = ConfigDict(extra='ignore')

    errors: List[ApiError]

@dataclass(frozen=True)
class SuccessEnvelope(Generic[T]):
    """Envelope whose ``result`` is ``ok``; ``payload`` has the declared type"""
    payload: T

@dataclass(frozen=True)
class ErrorEnvelope:
    """Envelope whose ``result`` is ``error``"""
    errors: List[ApiError]

Envelope = Union[SuccessEnvelope, ErrorEnvelope]

@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)

def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)

def parse_envelope(raw: Union[bytes, str], response_type: Type[T]) -> Envelope:
    """
    Decode a response body into a success or error envelope.

    The ``result`` discriminator is inspected first. Error envelopes never
    touch ``response_type``; success envelopes are validated against it as a
    whole object in strict mode, so JSON values of the wrong type (a numeric
    string where an integer is declared) are rejected rather than coerced.

    Args:
        raw: Raw response body
        response_type: Declared type of a successful payload

    Returns:
        SuccessEnvelope or ErrorEnvelope

    Raises:
        DecodeError: body is not JSON, the discriminator is missing or
            unknown, or the payload does not match its declared shape
    """
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"Response body is not valid JSON: {str(e)}") from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"Response envelope must be a JSON object, got {type(data).__name__}"
        )

    tag = data.get("result")
    try:
        result = ResultType(tag)
    except (ValueError, TypeError):
        raise DecodeError(
            f"Unrecognized envelope result {tag!r}",
            details={"result": tag}
        ) from None

    if result is ResultType.ERROR:
        try:
            body = _ErrorBody.model_validate_json(raw, strict=True)
        except ValidationError as e:
            raise DecodeError(
                f"Malformed error envelope: {_describe(e)}",
                details={"errors": e.errors(include_url=False)}
            ) from e
        return ErrorEnvelope(errors=list(body.errors))

    try:
        payload = _adapter(response_type).validate_json(raw, strict=True)
    except ValidationError as e:
        type_name = getattr(response_type, "__name__", repr(response_type))
        logger.debug(f"Payload did not match {type_name}: {_describe(e)}")
        raise DecodeError(
            f"Response does not match {type_name}: {_describe(e)}",
            details={"errors": e.errors(include_url=False)}
        ) from e
    return SuccessEnvelope(payload=payload)
