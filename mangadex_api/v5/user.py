"""
User endpoints.

Authentication is required. This can be done by logging in::

    users = await client.user.list(username="holo", limit=10).send()
    print(users.total, [user.attributes.username for user in users.data])
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from ..api.endpoint import ContentMode, Endpoint, RequestMethod, ResultMode
from ..schema import UserListResponse
from ..types import UserSortOrder
from .base import Namespace

class ListUser(Endpoint):
    """Makes a request to ``GET /user``"""
    method = RequestMethod.GET
    path = "/user"
    content = ContentMode.QUERY
    auth = True
    response_type = UserListResponse
    result_mode = ResultMode.FLATTEN

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    user_ids: List[UUID] = Field(default_factory=list, alias="ids")
    username: Optional[str] = None
    order: Optional[UserSortOrder] = None

class UserBuilder(Namespace):
    def list(self, **fields) -> ListUser:
        return self._bind(ListUser(**fields))

    search = list
