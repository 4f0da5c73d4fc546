"""
Rating endpoints.

Deleting a rating requires authentication::

    async with MangaDexClient() as client:
        await client.auth.login(username="myusername", password="hunter23").send()
        await client.rating.delete_for_manga(manga_id=manga_id).send()
"""

from uuid import UUID

from ..api.endpoint import Endpoint, RequestMethod
from .base import Namespace

class DeleteMangaRating(Endpoint):
    """Makes a request to ``DELETE /rating/{manga_id}``"""
    method = RequestMethod.DELETE
    path = "/rating/{manga_id}"
    auth = True

    manga_id: UUID

class RatingBuilder(Namespace):
    def delete_for_manga(self, **fields) -> DeleteMangaRating:
        return self._bind(DeleteMangaRating(**fields))
