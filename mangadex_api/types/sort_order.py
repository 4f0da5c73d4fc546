from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

class OrderDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

class UserSortOrder(BaseModel):
    """Sort order for the user list, sent as ``order[field]=direction``"""
    model_config = ConfigDict(frozen=True)

    username: Optional[OrderDirection] = None
