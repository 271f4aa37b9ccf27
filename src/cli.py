#!/usr/bin/env python3
"""
Command line front end for the Users & Posts backend

Lists, creates, edits and deletes users and posts through the same client
state, forms and views a UI would use.
"""

import sys
import asyncio
import argparse
import logging
from typing import Optional

from client.api import ApiClient
from client.forms import PostForm, UserForm, BaseForm
from client.notifications import Notification, NotificationLevel
from client.state import PostsCollection, RemoteCollection, UsersCollection
from client.views import render_error_alert, render_header, render_posts_list, render_users_list
from config.settings import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)


def print_notification(notification: Notification):
    icon = "✅" if notification.level == NotificationLevel.SUCCESS else "❌"
    print(f"{icon} {notification.message}")


def _report_form_failure(form: BaseForm, collection: RemoteCollection) -> int:
    """Print validation or API errors for a form that did not close"""
    if form.errors:
        for field, message in form.errors.items():
            print(f"  {field}: {message}")
    elif collection.error:
        print(render_error_alert(collection.error))
    return 1


async def _load(collection: RemoteCollection) -> bool:
    await collection.ensure_loaded()
    if collection.error:
        print(render_error_alert(collection.error))
        return False
    return True


async def run_users_command(args, client: ApiClient) -> int:
    users = UsersCollection(client.users)
    if not await _load(users):
        return 1

    if args.action == "list":
        print(render_users_list(users.state))
        return 0

    if args.action == "create":
        form = UserForm()
        for field in ("name", "username", "email"):
            form.set_field(field, getattr(args, field) or "")
        if not await form.submit(users.create):
            return _report_form_failure(form, users)
        print(render_users_list(users.state))
        return 0

    user = next((u for u in users.items if u.id == args.id), None)
    if user is None:
        print(render_error_alert(f"User with ID {args.id} not found"))
        return 1

    if args.action == "update":
        form = UserForm(user)
        for field in ("name", "username", "email"):
            value = getattr(args, field)
            if value is not None:
                form.set_field(field, value)
        if not await form.submit(lambda payload: users.update(user.id, payload)):
            return _report_form_failure(form, users)
        print(render_users_list(users.state))
        return 0

    if args.action == "delete":
        if not await users.delete(user.id):
            print(render_error_alert(users.error))
            return 1
        print(render_users_list(users.state))
        return 0

    return 1


async def run_posts_command(args, client: ApiClient) -> int:
    users = UsersCollection(client.users)
    posts = PostsCollection(client.posts)
    if not await _load(users) or not await _load(posts):
        return 1

    if args.action == "list":
        selected_user_id = args.user_id or 0
        if selected_user_id > 0:
            await posts.filter_by_user(selected_user_id)
            if posts.error:
                print(render_error_alert(posts.error))
                return 1
        print(render_header(users.state, posts.state))
        print(render_posts_list(posts.state, users.items, selected_user_id=selected_user_id))
        return 0

    if args.action == "create":
        form = PostForm(users=users.items)
        if args.user_id is not None:
            form.set_field("userId", args.user_id)
        form.set_field("title", args.title or "")
        if not await form.submit(posts.create):
            return _report_form_failure(form, posts)
        print(render_posts_list(posts.state, users.items))
        return 0

    post = next((p for p in posts.items if p.id == args.id), None)
    if post is None:
        print(render_error_alert(f"Post with ID {args.id} not found"))
        return 1

    if args.action == "update":
        form = PostForm(post, users=users.items)
        if args.title is not None:
            form.set_field("title", args.title)
        if not await form.submit(lambda payload: posts.update(post.id, payload)):
            return _report_form_failure(form, posts)
        print(render_posts_list(posts.state, users.items))
        return 0

    if args.action == "delete":
        if not await posts.delete(post.id):
            print(render_error_alert(posts.error))
            return 1
        print(render_posts_list(posts.state, users.items))
        return 0

    return 1


async def run(args, client: Optional[ApiClient] = None) -> int:
    """Execute a parsed command; returns the process exit code"""
    owns_client = client is None
    if client is None:
        client = ApiClient(base_url=args.base_url)

    unsubscribe = client.notifier.subscribe(print_notification)
    try:
        if args.resource == "users":
            return await run_users_command(args, client)
        return await run_posts_command(args, client)
    finally:
        unsubscribe()
        if owns_client:
            await client.aclose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage users and posts on the CRUD backend")
    parser.add_argument("--base-url", default=DEFAULT_API_BASE_URL, help="Backend base URL")

    resources = parser.add_subparsers(dest="resource", help="Resource to manage")

    # Users
    users_parser = resources.add_parser("users", help="Manage users")
    users_actions = users_parser.add_subparsers(dest="action", help="Available actions")
    users_actions.add_parser("list", help="List all users")

    create_user = users_actions.add_parser("create", help="Create a user")
    create_user.add_argument("--name", help="Full name")
    create_user.add_argument("--username", help="Username")
    create_user.add_argument("--email", help="Email address")

    update_user = users_actions.add_parser("update", help="Update a user")
    update_user.add_argument("id", type=int, help="User id")
    update_user.add_argument("--name", help="New full name")
    update_user.add_argument("--username", help="New username")
    update_user.add_argument("--email", help="New email address")

    delete_user = users_actions.add_parser("delete", help="Delete a user")
    delete_user.add_argument("id", type=int, help="User id")

    # Posts
    posts_parser = resources.add_parser("posts", help="Manage posts")
    posts_actions = posts_parser.add_subparsers(dest="action", help="Available actions")

    list_posts = posts_actions.add_parser("list", help="List posts")
    list_posts.add_argument("--user-id", type=int, help="Only posts written by this user")

    create_post = posts_actions.add_parser("create", help="Create a post")
    create_post.add_argument("--user-id", type=int, help="Author id (defaults to the first user)")
    create_post.add_argument("--title", help="Post title")

    update_post = posts_actions.add_parser("update", help="Update a post title")
    update_post.add_argument("id", type=int, help="Post id")
    update_post.add_argument("--title", help="New title")

    delete_post = posts_actions.add_parser("delete", help="Delete a post")
    delete_post.add_argument("id", type=int, help="Post id")

    return parser


def main():
    """Main CLI interface"""
    parser = build_parser()
    args = parser.parse_args()

    if not args.resource or not getattr(args, "action", None):
        parser.print_help()
        return

    try:
        exit_code = asyncio.run(run(args))
    except Exception as e:
        print(f"❌ Error: {str(e)}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
