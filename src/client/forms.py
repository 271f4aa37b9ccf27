"""
Create/edit forms with client-side validation

Validation runs entirely before submission; the backend accepts whatever
well-typed values it is sent.
"""

import re
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Sequence, Union

from models.post import Post, PostCreateRequest, PostUpdateRequest
from models.user import User, UserCreateRequest, UserUpdateRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_user_form(data: Mapping[str, str]) -> Dict[str, str]:
    """Field name -> error message for every invalid user field"""
    errors = {}

    if not data.get("name", "").strip():
        errors["name"] = "Name is required"

    if not data.get("username", "").strip():
        errors["username"] = "Username is required"

    email = data.get("email", "")
    if not email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Please enter a valid email address"

    return errors


def validate_post_form(data: Mapping[str, Any], require_user: bool = True) -> Dict[str, str]:
    """Field name -> error message for every invalid post field; the author is only checked on create"""
    errors = {}

    if not str(data.get("title", "")).strip():
        errors["title"] = "Title is required"

    if require_user and not data.get("userId"):
        errors["userId"] = "Please select a user"

    return errors


class BaseForm:
    """Shared field/error bookkeeping for the user and post forms"""

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.errors: Dict[str, str] = {}

    def set_field(self, field: str, value: Any) -> None:
        self.data[field] = value
        # Editing a field clears its error
        self.errors.pop(field, None)

    def validate(self) -> bool:
        self.errors = self._collect_errors()
        return not self.errors

    async def submit(self, on_submit: Callable[[Any], Awaitable[Any]]) -> bool:
        """
        Validate and hand the payload to on_submit

        Returns:
            True when the form should close: validation passed and on_submit
            returned an entity rather than a failure sentinel
        """
        if not self.validate():
            return False
        result = await on_submit(self.payload())
        return bool(result)

    def _collect_errors(self) -> Dict[str, str]:
        raise NotImplementedError

    def payload(self):
        raise NotImplementedError


class UserForm(BaseForm):
    def __init__(self, user: Optional[User] = None):
        self.user = user
        if user:
            data = {"name": user.name, "username": user.username, "email": user.email}
        else:
            data = {"name": "", "username": "", "email": ""}
        super().__init__(data)

    @property
    def submit_label(self) -> str:
        return "Update User" if self.user else "Create User"

    def _collect_errors(self) -> Dict[str, str]:
        return validate_user_form(self.data)

    def payload(self) -> Union[UserCreateRequest, UserUpdateRequest]:
        if self.user:
            return UserUpdateRequest(**self.data)
        return UserCreateRequest(**self.data)


class PostForm(BaseForm):
    def __init__(self, post: Optional[Post] = None, users: Sequence[User] = ()):
        self.post = post
        self.users = list(users)
        if post:
            data = {"userId": post.user_id, "title": post.title}
        else:
            # New posts default to the first known user
            data = {"userId": self.users[0].id if self.users else 0, "title": ""}
        super().__init__(data)

    @property
    def submit_label(self) -> str:
        return "Update Post" if self.post else "Create Post"

    @property
    def selected_user(self) -> Optional[User]:
        return next((user for user in self.users if user.id == self.data["userId"]), None)

    def set_field(self, field: str, value: Any) -> None:
        if field == "userId":
            value = int(value)
        super().set_field(field, value)

    def _collect_errors(self) -> Dict[str, str]:
        return validate_post_form(self.data, require_user=self.post is None)

    def payload(self) -> Union[PostCreateRequest, PostUpdateRequest]:
        if self.post:
            # Edits only send the title
            return PostUpdateRequest(title=self.data["title"])
        return PostCreateRequest(user_id=self.data["userId"], title=self.data["title"])
