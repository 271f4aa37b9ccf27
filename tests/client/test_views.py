"""
Plain-text list views
"""

from client.state import CollectionState
from client.views import author_label, render_error_alert, render_header, render_posts_list, render_users_list
from models.post import Post
from models.user import User

ADA = User(id=1, name="Ada", username="ada", email="ada@x.com")


class TestUsersList:

    def test_loading_state(self):
        assert "Loading users..." in render_users_list(CollectionState(loading=True))

    def test_empty_state(self):
        text = render_users_list(CollectionState())
        assert "No users found" in text
        assert "Get started by creating a new user." in text

    def test_populated_state(self):
        text = render_users_list(CollectionState(items=(ADA,)))
        assert "#1  Ada (@ada)  ada@x.com  [edit] [delete]" in text

    def test_refresh_keeps_rows_visible(self):
        text = render_users_list(CollectionState(items=(ADA,), loading=True))
        assert "Ada (@ada)" in text
        assert "Loading users..." not in text

    def test_actions_gated_on_busy_flags(self):
        text = render_users_list(CollectionState(items=(ADA,), updating=True, deleting=True))
        assert "[edit (busy)] [delete (busy)]" in text

    def test_row_being_deleted(self):
        text = render_users_list(CollectionState(items=(ADA,), deleting=True), deleting_id=1)
        assert "[deleting...]" in text


class TestPostsList:

    def test_orphaned_post_shows_raw_author_id(self):
        post = Post(id=1, user_id=9, title="Hi")
        text = render_posts_list(CollectionState(items=(post,)), users=[ADA])
        assert "#1  Hi  by User #9" in text

    def test_known_author(self):
        assert author_label(1, [ADA]) == "Ada (@ada)"

    def test_empty_filtered_list(self):
        text = render_posts_list(CollectionState(), users=[ADA], selected_user_id=1)
        assert text.splitlines()[0] == "Posts by Ada (@ada)"
        assert "This user has no posts yet." in text

    def test_empty_unfiltered_list(self):
        assert "Get started by creating a new post." in render_posts_list(CollectionState())

    def test_loading_state(self):
        assert "Loading posts..." in render_posts_list(CollectionState(loading=True))


class TestHeaderAndAlerts:

    def test_header_counts_and_status(self):
        text = render_header(CollectionState(items=(ADA,)), CollectionState())
        assert "API is Ready | 1 Users, 0 Posts" in text

    def test_header_reports_errors(self):
        text = render_header(CollectionState(error="boom"), CollectionState())
        assert "API is Not Ready" in text

    def test_error_alert(self):
        assert render_error_alert("boom") == "Error: boom"
        assert render_error_alert(None) == ""
