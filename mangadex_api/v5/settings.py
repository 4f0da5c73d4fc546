from datetime import datetime
from typing import Any, Dict

from pydantic import Field, field_serializer

from ..api.endpoint import ContentMode, Endpoint, RequestMethod, ResultMode
from ..schema import UserSettingsResponse
from .base import Namespace

class CreateOrUpdateUserSettings(Endpoint):
    """
    Create or update a user's settings.

    This requires authentication.

    Makes a request to ``POST /settings``.
    """
    method = RequestMethod.POST
    path = "/settings"
    content = ContentMode.BODY
    auth = True
    response_type = UserSettingsResponse
    result_mode = ResultMode.FLATTEN

    settings: Dict[str, Any] = Field(default_factory=dict)
    updated_at: datetime

    @field_serializer("updated_at")
    def serialize_updated_at(self, value: datetime) -> str:
        # the API only accepts second precision without an offset
        return value.strftime("%Y-%m-%dT%H:%M:%S")

class SettingsBuilder(Namespace):
    def create_or_update_user_settings(self, **fields) -> CreateOrUpdateUserSettings:
        return self._bind(CreateOrUpdateUserSettings(**fields))
