"""
Plain-text views over collection state

Pure functions: every view takes state and returns the text to print.
"""

from typing import Optional, Sequence

from client.state import CollectionState
from models.user import User


def render_header(users: CollectionState, posts: CollectionState) -> str:
    api_status = "API is Not Ready" if users.error or posts.error else "API is Ready"
    return "\n".join([
        "User & Post Management",
        f"{api_status} | {len(users.items)} Users, {len(posts.items)} Posts",
    ])


def render_error_alert(message: Optional[str]) -> str:
    return f"Error: {message}" if message else ""


def _actions(state: CollectionState, record_id: int, deleting_id: Optional[int]) -> str:
    if deleting_id == record_id:
        return "[deleting...]"
    edit = "[edit]" if not state.updating else "[edit (busy)]"
    delete = "[delete]" if not state.deleting else "[delete (busy)]"
    return f"{edit} {delete}"


def render_users_list(state: CollectionState, deleting_id: Optional[int] = None) -> str:
    """Users table with loading, empty and populated states"""
    lines = ["Users"]

    if state.loading and not state.items:
        lines.append("Loading users...")
        return "\n".join(lines)

    if not state.items:
        lines.append("No users found")
        lines.append("Get started by creating a new user.")
        return "\n".join(lines)

    for user in state.items:
        lines.append(
            f"#{user.id}  {user.name} (@{user.username})  {user.email}  "
            f"{_actions(state, user.id, deleting_id)}"
        )
    return "\n".join(lines)


def author_label(user_id: int, users: Sequence[User]) -> str:
    """Author display name; orphaned posts fall back to the raw id"""
    user = next((u for u in users if u.id == user_id), None)
    return f"{user.name} (@{user.username})" if user else f"User #{user_id}"


def render_posts_list(
    state: CollectionState,
    users: Sequence[User] = (),
    selected_user_id: int = 0,
    deleting_id: Optional[int] = None
) -> str:
    """Posts list with loading, empty and populated states"""
    lines = ["Posts"]
    if selected_user_id > 0:
        lines[0] += f" by {author_label(selected_user_id, users)}"

    if state.loading and not state.items:
        lines.append("Loading posts...")
        return "\n".join(lines)

    if not state.items:
        lines.append("No posts found")
        if selected_user_id > 0:
            lines.append("This user has no posts yet.")
        else:
            lines.append("Get started by creating a new post.")
        return "\n".join(lines)

    for post in state.items:
        lines.append(
            f"#{post.id}  {post.title}  by {author_label(post.user_id, users)}  "
            f"{_actions(state, post.id, deleting_id)}"
        )
    return "\n".join(lines)
