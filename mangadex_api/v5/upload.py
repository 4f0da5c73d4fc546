from uuid import UUID

from ..api.endpoint import Endpoint, RequestMethod
from .base import Namespace

class AbandonUploadSession(Endpoint):
    """Makes a request to ``DELETE /upload/{session_id}``"""
    method = RequestMethod.DELETE
    path = "/upload/{session_id}"
    auth = True

    session_id: UUID

class UploadBuilder(Namespace):
    def abandon_session(self, **fields) -> AbandonUploadSession:
        return self._bind(AbandonUploadSession(**fields))
