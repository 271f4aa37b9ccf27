"""
Users endpoint suite
"""

import pytest


@pytest.mark.crud
class TestUsersCRUD:
    """CREATE → READ → UPDATE → DELETE over /users"""

    async def test_users_full_crud_cycle(self, http_client, user_payload):
        # === CREATE ===
        response = await http_client.post("/users", json=user_payload("ada"))
        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Ada", "username": "ada", "email": "ada@x.com"}

        # === READ ===
        response = await http_client.get("/users/1")
        assert response.status_code == 200
        assert response.json()["username"] == "ada"

        # === UPDATE ===
        response = await http_client.patch("/users/1", json={"email": "new@x.com"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Ada", "username": "ada", "email": "new@x.com"}

        # === DELETE ===
        response = await http_client.delete("/users/1")
        assert response.status_code == 204
        assert response.content == b""

        response = await http_client.get("/users/1")
        assert response.status_code == 404

    async def test_users_list_in_creation_order(self, http_client, user_payload):
        first = (await http_client.post("/users", json=user_payload("ada"))).json()
        second = (await http_client.post("/users", json=user_payload("ada"))).json()
        assert (first["id"], second["id"]) == (1, 2)

        response = await http_client.get("/users")
        assert response.status_code == 200
        assert response.json() == [first, second]

    async def test_users_list_empty(self, http_client):
        response = await http_client.get("/users")
        assert response.json() == []

    async def test_empty_patch_returns_unchanged_user(self, http_client, user_payload):
        created = (await http_client.post("/users", json=user_payload("ada"))).json()
        response = await http_client.patch("/users/1", json={})
        assert response.status_code == 200
        assert response.json() == created

    async def test_patch_ignores_id_in_body(self, http_client, user_payload):
        await http_client.post("/users", json=user_payload("ada"))
        response = await http_client.patch("/users/1", json={"id": 7, "name": "Ada L."})
        assert response.json()["id"] == 1

    @pytest.mark.parametrize("method", ["get", "patch", "delete"])
    async def test_missing_user_returns_404(self, http_client, method):
        kwargs = {"json": {"name": "x"}} if method == "patch" else {}
        response = await getattr(http_client, method)("/users/3", **kwargs)

        assert response.status_code == 404
        body = response.json()
        assert body["message"] == "User with ID 3 not found"
        assert body["error"] == "HTTP 404"
        assert "trace_id" in body

    async def test_failed_lookups_do_not_mutate(self, http_client, user_payload):
        await http_client.post("/users", json=user_payload("ada"))
        before = (await http_client.get("/users")).json()

        await http_client.patch("/users/2", json={"name": "ghost"})
        await http_client.delete("/users/2")

        assert (await http_client.get("/users")).json() == before

    async def test_create_with_missing_field_is_422(self, http_client):
        response = await http_client.post("/users", json={"name": "Ada"})
        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "Request validation failed"
        fields = {detail["field"] for detail in body["detail"]}
        assert "body -> username" in fields
        assert "body -> email" in fields

    async def test_non_integer_id_is_422(self, http_client):
        response = await http_client.get("/users/abc")
        assert response.status_code == 422

    async def test_user_posts_nested_route(self, http_client, user_payload):
        await http_client.post("/users", json=user_payload("ada"))
        await http_client.post("/posts", json={"userId": 1, "title": "Hi"})
        await http_client.post("/posts", json={"userId": 2, "title": "Other"})

        response = await http_client.get("/users/1/posts")
        assert response.status_code == 200
        assert response.json() == [{"id": 1, "userId": 1, "title": "Hi"}]

        response = await http_client.get("/users/42/posts")
        assert response.status_code == 200
        assert response.json() == []
