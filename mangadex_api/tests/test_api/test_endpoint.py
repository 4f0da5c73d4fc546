"""Tests for request descriptors and endpoint declarations."""
import json
import uuid
from datetime import datetime
from typing import Optional

import pytest
from pydantic import ValidationError

from mangadex_api.api.endpoint import (
    ContentMode,
    Endpoint,
    RequestDescriptor,
    RequestMethod,
    ResultMode,
    encode_query,
    path_fields
)
from mangadex_api.core.exceptions import DispatchError
from mangadex_api.schema import NoData, UserListResponse
from mangadex_api.types import OrderDirection, UserSortOrder
from mangadex_api.v5 import (
    CreateOrUpdateUserSettings,
    DeleteMangaRating,
    ListUser,
    Login,
    RecoverAccount
)

class _ChapterRelation(Endpoint):
    method = RequestMethod.POST
    path = "/chapter/{chapter_id}/relation/{target_name}"
    content = ContentMode.BODY
    auth = True

    chapter_id: uuid.UUID
    target_name: str
    relation_type: str
    notes: Optional[str] = None

def test_path_fields():
    assert path_fields("/rating/{manga_id}") == ["manga_id"]
    assert path_fields("/user") == []

def test_descriptor_without_data():
    manga_id = uuid.uuid4()

    descriptor = DeleteMangaRating(manga_id=manga_id).descriptor()

    assert descriptor == RequestDescriptor(
        method=RequestMethod.DELETE,
        path=f"/rating/{manga_id}",
        content=ContentMode.NONE,
        auth_required=True,
        response_type=NoData,
        result_mode=ResultMode.DISCARD
    )

def test_path_values_are_excluded_from_body_and_quoted():
    chapter_id = uuid.uuid4()

    descriptor = _ChapterRelation(
        chapter_id=chapter_id,
        target_name="a b/c",
        relation_type="sequel"
    ).descriptor()

    assert descriptor.path == f"/chapter/{chapter_id}/relation/a%20b%2Fc"
    assert json.loads(descriptor.body) == {"relationType": "sequel"}

def test_body_descriptor_serializes_camel_case():
    descriptor = CreateOrUpdateUserSettings(
        settings={"theme": "dark"},
        updated_at=datetime(2026, 10, 19, 12, 30, 5)
    ).descriptor()

    assert descriptor.content is ContentMode.BODY
    assert descriptor.auth_required is True
    assert descriptor.result_mode is ResultMode.FLATTEN
    assert json.loads(descriptor.body) == {
        "settings": {"theme": "dark"},
        "updatedAt": "2026-10-19T12:30:05"
    }

def test_unauthenticated_body_descriptor():
    descriptor = RecoverAccount(email="test@example.com").descriptor()

    assert descriptor.auth_required is False
    assert json.loads(descriptor.body) == {"email": "test@example.com"}

def test_query_descriptor():
    first, second = uuid.uuid4(), uuid.uuid4()

    descriptor = ListUser(
        limit=10,
        user_ids=[first, second],
        order=UserSortOrder(username=OrderDirection.ASCENDING)
    ).descriptor()

    assert descriptor.content is ContentMode.QUERY
    assert descriptor.body is None
    assert descriptor.response_type is UserListResponse
    assert descriptor.query == (
        ("limit", "10"),
        ("ids[]", str(first)),
        ("ids[]", str(second)),
        ("order[username]", "asc"),
    )

def test_query_descriptor_omits_unset_fields():
    assert ListUser().descriptor().query == ()
    assert ListUser(limit=0).descriptor().query == (("limit", "0"),)

def test_encode_query():
    assert encode_query({
        "includes": ["author", "artist"],
        "contentRating": None,
        "hasAvailableChapters": True,
        "order": {"createdAt": "desc"},
        "offset": 5
    }) == (
        ("includes[]", "author"),
        ("includes[]", "artist"),
        ("hasAvailableChapters", "true"),
        ("order[createdAt]", "desc"),
        ("offset", "5"),
    )

def test_required_fields_are_validated():
    with pytest.raises(ValidationError):
        DeleteMangaRating()
    with pytest.raises(ValidationError):
        Login(password="hunter23")

def test_login_password_hidden_from_repr():
    assert "hunter23" not in repr(Login(username="myusername", password="hunter23"))

@pytest.mark.parametrize("kwargs", [
    {"path": "rating"},
    {"path": "/settings", "content": ContentMode.BODY},
    {"path": "/rating", "body": b"{}"},
    {"path": "/user", "content": ContentMode.NONE, "query": (("limit", "1"),)},
])
def test_inconsistent_descriptor_is_rejected(kwargs):
    with pytest.raises(ValueError):
        RequestDescriptor(method=RequestMethod.GET, **kwargs)

def test_descriptor_is_immutable():
    descriptor = RecoverAccount(email="test@example.com").descriptor()
    with pytest.raises(AttributeError):
        descriptor.path = "/elsewhere"

@pytest.mark.asyncio
async def test_unbound_endpoint_cannot_be_sent():
    with pytest.raises(DispatchError):
        await RecoverAccount(email="test@example.com").send()
