"""
Closed enumerations and small value types shared by endpoints and schema.
"""

from .manga_state import MangaState
from .response_type import ResponseType
from .result import ResultType
from .sort_order import OrderDirection, UserSortOrder

__all__ = [
    'MangaState',
    'OrderDirection',
    'ResponseType',
    'ResultType',
    'UserSortOrder'
]
