"""
Client API adapter for the Users & Posts backend

Wraps every endpoint call in one httpx.AsyncClient, parses responses into the
shared pydantic models and normalizes every failure into ApiError. Mutations
also report their outcome through the Notifier side channel.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from client.notifications import Notifier
from config.settings import DEFAULT_API_BASE_URL
from models.post import Post, PostCreateRequest, PostUpdateRequest
from models.user import User, UserCreateRequest, UserUpdateRequest

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response from server. Please check your connection."
GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

EntityT = TypeVar("EntityT", bound=BaseModel)
Payload = Union[BaseModel, Dict[str, Any]]


class ApiError(Exception):
    """Single error shape for transport, server and unexpected client failures"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message}
        if self.status is not None:
            data["status"] = self.status
        return data


def handle_api_error(error: Exception) -> ApiError:
    """Normalize any failure raised while talking to the backend"""
    if isinstance(error, ApiError):
        return error

    if isinstance(error, httpx.HTTPStatusError):
        # Server responded with error status
        response = error.response
        message = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message")
            if isinstance(message, list):
                message = ", ".join(str(item) for item in message)
        if not message or not isinstance(message, str):
            message = f"Request failed with status {response.status_code}"
        return ApiError(message, status=response.status_code)

    if isinstance(error, httpx.TransportError):
        # Request made but no response
        return ApiError(NO_RESPONSE_MESSAGE)

    return ApiError(str(error) or GENERIC_ERROR_MESSAGE)


def _to_payload(data: Payload) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True)
    return dict(data)


class ResourceApi(Generic[EntityT]):
    """CRUD calls for one resource collection"""

    def __init__(self, client: "ApiClient", path: str, model: Type[EntityT], label: str):
        self._client = client
        self.path = path
        self.model = model
        self.label = label

    async def get_all(self) -> List[EntityT]:
        return await self._send("GET", self.path, parse=self._parse_list)

    async def get_by_id(self, record_id: int) -> EntityT:
        return await self._send("GET", f"{self.path}/{record_id}", parse=self.model.model_validate)

    async def create(self, data: Payload) -> EntityT:
        return await self._mutate(
            "create", "POST", self.path, json=_to_payload(data), parse=self.model.model_validate
        )

    async def update(self, record_id: int, data: Payload) -> EntityT:
        return await self._mutate(
            "update", "PATCH", f"{self.path}/{record_id}", json=_to_payload(data), parse=self.model.model_validate
        )

    async def delete(self, record_id: int) -> None:
        await self._mutate("delete", "DELETE", f"{self.path}/{record_id}")

    def _parse_list(self, body: Any) -> List[EntityT]:
        return [self.model.model_validate(item) for item in body]

    async def _mutate(self, action: str, method: str, url: str, **kwargs) -> Any:
        notifier = self._client.notifier
        try:
            result = await self._send(method, url, **kwargs)
        except ApiError:
            notifier.error(f"Failed to {action} {self.label}")
            raise
        notifier.success(f"{self.label.capitalize()} {action}d successfully")
        return result

    async def _send(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        parse: Optional[Callable[[Any], Any]] = None
    ) -> Any:
        try:
            response = await self._client.http.request(method, url, json=json)
            response.raise_for_status()
            return parse(response.json()) if parse else None
        except Exception as e:
            api_error = handle_api_error(e)
            logger.debug(f"{method} {url} failed: {api_error.to_dict()}")
            raise api_error from e


class UsersApi(ResourceApi[User]):
    def __init__(self, client: "ApiClient"):
        super().__init__(client, "/users", User, "user")

    async def create(self, data: Union[UserCreateRequest, Dict[str, Any]]) -> User:
        return await super().create(data)

    async def update(self, record_id: int, data: Union[UserUpdateRequest, Dict[str, Any]]) -> User:
        return await super().update(record_id, data)


class PostsApi(ResourceApi[Post]):
    def __init__(self, client: "ApiClient"):
        super().__init__(client, "/posts", Post, "post")

    async def get_by_user_id(self, user_id: int) -> List[Post]:
        """Posts written by one user, via the nested users route"""
        return await self._send("GET", f"/users/{user_id}/posts", parse=self._parse_list)

    async def create(self, data: Union[PostCreateRequest, Dict[str, Any]]) -> Post:
        return await super().create(data)

    async def update(self, record_id: int, data: Union[PostUpdateRequest, Dict[str, Any]]) -> Post:
        return await super().update(record_id, data)


class ApiClient:
    """Entry point for backend calls; owns the HTTP connection pool"""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        notifier: Optional[Notifier] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url
        self.notifier = notifier or Notifier()
        # No transport timeout
        self.http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
            timeout=None,
            transport=transport
        )
        self.users = UsersApi(self)
        self.posts = PostsApi(self)

    async def aclose(self):
        await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
