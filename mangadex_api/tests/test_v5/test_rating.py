import uuid

import pytest

from mangadex_api.core.exceptions import MissingTokens

@pytest.mark.asyncio
async def test_delete_manga_rating_fires_a_request_to_base_url(make_client, json_response, tokens):
    client, transport = make_client([json_response(200, {"result": "ok"})], tokens)
    manga_id = uuid.uuid4()

    result = await client.rating.delete_for_manga(manga_id=manga_id).send()

    assert result is None
    assert len(transport.calls) == 1
    assert transport.calls[0].method == "DELETE"
    assert transport.calls[0].url.path == f"/rating/{manga_id}"
    assert transport.calls[0].headers["Authorization"] == "Bearer sessiontoken"

@pytest.mark.asyncio
async def test_delete_manga_rating_requires_auth(make_client, json_response, error_body):
    client, transport = make_client([json_response(403, error_body(403, "Forbidden"))])

    with pytest.raises(MissingTokens):
        await client.rating.delete_for_manga(manga_id=uuid.uuid4()).send()

    assert transport.calls == []
