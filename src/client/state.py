"""
Client-side view state for remote collections

RemoteCollection tracks a cached copy of one server collection together with
its in-flight operation flags and the last error. Every transition replaces
the immutable CollectionState and notifies subscribers. Actions never raise
ApiError: failures land in ``state.error`` and the action returns a sentinel
(None for create/update, False for delete).
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel

from client.api import ApiError, PostsApi, ResourceApi, UsersApi
from models.post import Post
from models.user import User

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)
Payload = Union[BaseModel, Dict[str, Any]]


@dataclass(frozen=True)
class CollectionState(Generic[EntityT]):
    items: Tuple[EntityT, ...] = ()
    loading: bool = False
    error: Optional[str] = None
    creating: bool = False
    updating: bool = False
    deleting: bool = False


class RemoteCollection(Generic[EntityT]):
    """State machine over one ResourceApi"""

    def __init__(self, api: ResourceApi[EntityT]):
        self.api = api
        self.state: CollectionState[EntityT] = CollectionState()
        self._loaded = False
        self._subscribers: List[Callable[[CollectionState[EntityT]], None]] = []

    @property
    def items(self) -> Tuple[EntityT, ...]:
        return self.state.items

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    def subscribe(self, callback: Callable[[CollectionState[EntityT]], None]) -> Callable[[], None]:
        """Register a callback run after every state change; returns an unsubscribe function"""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    async def ensure_loaded(self) -> None:
        """Initial load; only the first call fetches"""
        if self._loaded:
            return
        self._loaded = True
        await self.refresh()

    async def refresh(self) -> None:
        await self._load(self.api.get_all)

    async def create(self, data: Payload) -> Optional[EntityT]:
        self._set_state(creating=True, error=None)
        try:
            entity = await self.api.create(data)
        except ApiError as e:
            self._set_state(creating=False, error=e.message)
            return None
        self._set_state(items=self.state.items + (entity,), creating=False, error=None)
        return entity

    async def update(self, record_id: int, data: Payload) -> Optional[EntityT]:
        self._set_state(updating=True, error=None)
        try:
            entity = await self.api.update(record_id, data)
        except ApiError as e:
            self._set_state(updating=False, error=e.message)
            return None
        items = tuple(entity if item.id == record_id else item for item in self.state.items)
        self._set_state(items=items, updating=False, error=None)
        return entity

    async def delete(self, record_id: int) -> bool:
        self._set_state(deleting=True, error=None)
        try:
            await self.api.delete(record_id)
        except ApiError as e:
            self._set_state(deleting=False, error=e.message)
            return False
        items = tuple(item for item in self.state.items if item.id != record_id)
        self._set_state(items=items, deleting=False, error=None)
        return True

    def clear_error(self) -> None:
        self._set_state(error=None)

    async def _load(self, fetch: Callable[[], Awaitable[List[EntityT]]]) -> None:
        self._set_state(loading=True, error=None)
        try:
            items = await fetch()
        except ApiError as e:
            self._set_state(loading=False, error=e.message)
            return
        self._set_state(items=tuple(items), loading=False, error=None)

    def _set_state(self, **changes) -> None:
        self.state = replace(self.state, **changes)
        for callback in list(self._subscribers):
            callback(self.state)


class UsersCollection(RemoteCollection[User]):
    def __init__(self, api: UsersApi):
        super().__init__(api)


class PostsCollection(RemoteCollection[Post]):
    def __init__(self, api: PostsApi):
        super().__init__(api)

    async def filter_by_user(self, user_id: int) -> None:
        """Replace the cached posts with those written by one user"""
        await self._load(lambda: self.api.get_by_user_id(user_id))
