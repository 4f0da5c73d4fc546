"""
Response payload models used by the bundled endpoint declarations.

Every model validates the whole success envelope, so ``result`` is part of
each of them. Unknown fields are ignored so additive server changes do not
break decoding; declared fields are validated and mis-typed values rejected.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .types import ResponseType, ResultType

class _Payload(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)

    result: ResultType = Field(default_factory=ResultType.default)

class NoData(_Payload):
    """Success envelope carrying nothing but ``result``"""

class AuthTokens(BaseModel):
    """Session token and the refresh token used to renew it"""
    model_config = ConfigDict(frozen=True, extra='ignore')

    session: str
    refresh: str

    def __repr__(self) -> str:
        return "AuthTokens(session='***', refresh='***')"

    __str__ = __repr__

class AuthTokenResponse(_Payload):
    token: AuthTokens
    message: Optional[str] = None

class Relationship(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: UUID
    type: str

class UserAttributes(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)

    username: str
    roles: List[str] = Field(default_factory=list)
    version: int

class UserObject(BaseModel):
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: UUID
    type: str
    attributes: UserAttributes
    relationships: List[Relationship] = Field(default_factory=list)

class UserListResponse(_Payload):
    response: ResponseType
    data: List[UserObject]
    limit: int
    offset: int
    total: int

class UserSettingsResponse(_Payload):
    model_config = ConfigDict(extra='ignore', frozen=True, populate_by_name=True)

    updated_at: datetime = Field(alias='updatedAt')
    settings: Dict[str, Any] = Field(default_factory=dict)
    template: Optional[UUID] = None
