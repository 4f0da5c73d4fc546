from typing import TYPE_CHECKING, TypeVar

from ..api.endpoint import Endpoint

if TYPE_CHECKING:
    from ..api.api_client import HttpClient

E = TypeVar('E', bound=Endpoint)

class Namespace:
    """Groups the endpoints of one API section and binds them to a client"""

    def __init__(self, http_client: "HttpClient"):
        self._http_client = http_client

    def _bind(self, endpoint: E) -> E:
        endpoint.bind(self._http_client)
        return endpoint
