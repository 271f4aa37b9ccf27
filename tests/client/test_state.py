"""
RemoteCollection state machine against the in-process backend
"""

import pytest

from client.api import NO_RESPONSE_MESSAGE
from client.state import CollectionState, PostsCollection, UsersCollection
from models.user import UserCreateRequest, UserUpdateRequest


@pytest.fixture
def users(api_client) -> UsersCollection:
    return UsersCollection(api_client.users)


@pytest.fixture
def posts(api_client) -> PostsCollection:
    return PostsCollection(api_client.posts)


def ada() -> UserCreateRequest:
    return UserCreateRequest(name="Ada", username="ada", email="ada@x.com")


@pytest.mark.client
class TestUsersCollection:

    async def test_initial_state_is_idle_and_empty(self, users):
        assert users.state == CollectionState()

    async def test_ensure_loaded_fetches_only_once(self, users, api_client):
        await api_client.users.create(ada())
        await users.ensure_loaded()
        assert [u.id for u in users.items] == [1]

        await api_client.users.create(ada())
        await users.ensure_loaded()
        assert [u.id for u in users.items] == [1]

        await users.refresh()
        assert [u.id for u in users.items] == [1, 2]

    async def test_create_appends_and_returns_entity(self, users):
        await users.ensure_loaded()
        created = await users.create(ada())

        assert created.id == 1
        assert users.items == (created,)
        assert not users.state.creating
        assert users.error is None

    async def test_update_replaces_matching_entry(self, users):
        first = await users.create(ada())
        second = await users.create(ada())

        updated = await users.update(first.id, UserUpdateRequest(email="new@x.com"))

        assert updated.email == "new@x.com"
        assert users.items == (updated, second)

    async def test_delete_removes_entry(self, users):
        first = await users.create(ada())
        second = await users.create(ada())

        assert await users.delete(first.id) is True
        assert users.items == (second,)

    async def test_failed_update_keeps_items_and_returns_none(self, users):
        await users.create(ada())
        before = users.items

        assert await users.update(42, {"name": "ghost"}) is None
        assert users.items == before
        assert users.error == "User with ID 42 not found"
        assert not users.state.updating

    async def test_failed_delete_keeps_items_and_returns_false(self, users):
        await users.create(ada())
        before = users.items

        assert await users.delete(42) is False
        assert users.items == before
        assert users.error == "User with ID 42 not found"

    async def test_failed_create_keeps_items_and_returns_none(self, users):
        await users.create(ada())
        before = users.items

        assert await users.create({"name": "incomplete"}) is None
        assert users.items == before
        assert users.error == "Request validation failed"

    async def test_busy_flag_set_during_action(self, users):
        seen = []
        users.subscribe(seen.append)

        await users.create(ada())

        assert seen[0].creating and seen[0].error is None
        assert not seen[-1].creating
        assert len(seen[-1].items) == 1

    async def test_next_action_clears_previous_error(self, users):
        await users.delete(1)
        assert users.error is not None

        seen = []
        users.subscribe(seen.append)
        await users.refresh()

        assert seen[0].loading and seen[0].error is None
        assert users.error is None

    async def test_clear_error(self, users):
        await users.delete(1)
        users.clear_error()
        assert users.error is None

    async def test_unsubscribe_stops_updates(self, users):
        seen = []
        unsubscribe = users.subscribe(seen.append)
        unsubscribe()
        await users.refresh()
        assert seen == []


@pytest.mark.client
class TestPostsCollection:

    async def test_filter_by_user_replaces_items(self, posts):
        await posts.create({"userId": 1, "title": "a"})
        await posts.create({"userId": 2, "title": "b"})

        await posts.filter_by_user(2)
        assert [p.title for p in posts.items] == ["b"]

        await posts.filter_by_user(99)
        assert posts.items == ()
        assert posts.error is None

    async def test_update_keeps_author(self, posts):
        created = await posts.create({"userId": 5, "title": "old"})
        updated = await posts.update(created.id, {"title": "new"})
        assert (updated.user_id, updated.title) == (5, "new")
        assert posts.items == (updated,)


@pytest.mark.client
class TestOfflineCollection:

    async def test_refresh_records_transport_error(self, offline_client):
        users = UsersCollection(offline_client.users)
        await users.ensure_loaded()

        assert users.error == NO_RESPONSE_MESSAGE
        assert not users.state.loading
        assert users.items == ()

    async def test_filter_failure_leaves_items(self, offline_client):
        posts = PostsCollection(offline_client.posts)
        await posts.filter_by_user(1)
        assert posts.error == NO_RESPONSE_MESSAGE
        assert posts.items == ()
