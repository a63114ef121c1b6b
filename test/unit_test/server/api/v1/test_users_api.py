"""
Unit tests for the user API endpoints.

Every test starts with a single ``root`` user in the database.
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from bloglist.core.database.entities import Blog
from bloglist.core.database.repositories import BlogRepository, UserRepository

pytestmark = pytest.mark.asyncio

USERS_URL = "/api/users"


@pytest.fixture
async def root_user(create_user):
    return await create_user("root", "sekret", "Superuser")


async def usernames_in_db(session) -> list[str]:
    return [user.username for user in await UserRepository(session).list()]


class TestViewingUsers:
    async def test_users_are_returned_as_json(self, client: AsyncClient, root_user):
        response = await client.get(USERS_URL)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")

    async def test_password_hash_is_never_returned(self, client: AsyncClient, root_user):
        user = (await client.get(USERS_URL)).json()[0]

        assert user["username"] == "root"
        assert "password" not in user
        assert "password_hash" not in user

    async def test_users_include_their_blogs(self, client: AsyncClient, session, root_user):
        await BlogRepository(session).create(Blog(title="Type wars", author="Robert C. Martin", url="u", user_id=root_user.id))
        await BlogRepository(session).create(Blog(title="orphan", url="u2"))

        user = (await client.get(USERS_URL)).json()[0]

        assert [blog["title"] for blog in user["blogs"]] == ["Type wars"]
        assert set(user["blogs"][0]) == {"id", "title", "author", "url", "likes"}


class TestUserCreation:
    async def test_creation_succeeds_with_fresh_username(self, client: AsyncClient, session, root_user):
        new_user = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}

        response = await client.post(USERS_URL, json=new_user)

        assert response.status_code == 201
        assert response.headers["content-type"].startswith("application/json")
        assert response.json()["blogs"] == []
        assert await usernames_in_db(session) == ["root", "mluukkai"]

    async def test_password_is_stored_hashed(self, client: AsyncClient, session, root_user):
        await client.post(USERS_URL, json={"username": "mluukkai", "password": "salainen"})

        stored = await UserRepository(session).get_by_username("mluukkai")
        assert stored.password_hash != "salainen"

    async def test_duplicate_username(self, client: AsyncClient, session, root_user):
        response = await client.post(USERS_URL, json={"username": "root", "name": "Superuser", "password": "salainen"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/json")
        assert "expected `username` to be unique" in response.json()["error"]
        assert await usernames_in_db(session) == ["root"]

    async def test_missing_username(self, client: AsyncClient, session, root_user):
        response = await client.post(USERS_URL, json={"name": "Superuser", "password": "salainen"})

        assert response.status_code == 400
        assert "A username is required" in response.json()["error"]
        assert await usernames_in_db(session) == ["root"]

    async def test_username_too_short(self, client: AsyncClient, session, root_user):
        response = await client.post(USERS_URL, json={"username": "SU", "name": "Superuser", "password": "salainen"})

        assert response.status_code == 400
        assert "is shorter than the minimum allowed length" in response.json()["error"]
        assert await usernames_in_db(session) == ["root"]

    async def test_missing_password(self, client: AsyncClient, session, root_user):
        response = await client.post(USERS_URL, json={"username": "superuser", "name": "Superuser"})

        assert response.status_code == 400
        assert "password missing" in response.json()["error"]
        assert await usernames_in_db(session) == ["root"]

    async def test_password_too_short(self, client: AsyncClient, session, root_user):
        response = await client.post(USERS_URL, json={"username": "superuser", "name": "Superuser", "password": "su"})

        assert response.status_code == 400
        assert "password too short" in response.json()["error"]
        assert await usernames_in_db(session) == ["root"]

    async def test_password_too_long(self, client: AsyncClient, session, root_user):
        response = await client.post(USERS_URL, json={"username": "superuser", "password": "x" * 73})

        assert response.status_code == 400
        assert response.json() == {"error": "password too long"}
