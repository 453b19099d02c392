"""Integration tests for Profiles API."""

from collections.abc import Callable
from uuid import uuid4

import pytest
from httpx import AsyncClient

from infrastructure.auth.provider import TokenUser

Headers = Callable[[TokenUser], dict[str, str]]


class TestUpsertProfile:
    @pytest.mark.asyncio
    async def test_create_profile(
        self, client: AsyncClient, auth_headers: dict[str, str], test_user: TokenUser
    ) -> None:
        """Test POST /api/v1/profile with only the required fields."""
        response = await client.post(
            "/api/v1/profile",
            json={"status": "Developer", "skills": "a, b, c"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "Developer"
        assert data["skills"] == ["a", "b", "c"]
        assert data["user"] == {
            "id": str(test_user.id),
            "name": "Alice Author",
            "avatar": "//gravatar/alice",
        }
        assert data["company"] is None
        assert data["website"] is None
        assert data["github_username"] is None
        assert data["social"] == {}

    @pytest.mark.asyncio
    async def test_update_keeps_unsent_fields(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        first = await client.post(
            "/api/v1/profile",
            json={
                "status": "Junior Developer",
                "skills": "go",
                "company": "Acme",
                "githubusername": "alice",
                "twitter": "https://twitter.com/alice",
                "youtube": "https://youtube.com/alice",
            },
            headers=auth_headers,
        )

        response = await client.post(
            "/api/v1/profile",
            json={
                "status": "Senior Developer",
                "skills": "python,sql",
                "location": "Berlin",
                "twitter": "https://twitter.com/alice2",
            },
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == first.json()["data"]["id"]
        assert data["status"] == "Senior Developer"
        assert data["skills"] == ["python", "sql"]
        assert data["company"] == "Acme"
        assert data["location"] == "Berlin"
        assert data["github_username"] == "alice"
        assert data["social"] == {
            "twitter": "https://twitter.com/alice2",
            "youtube": "https://youtube.com/alice",
        }

    @pytest.mark.asyncio
    async def test_create_profile_without_user_record(
        self, client: AsyncClient, headers_for: Headers
    ) -> None:
        """A verified identity with no user record still gets a profile."""
        stranger = TokenUser(id=uuid4())

        response = await client.post(
            "/api/v1/profile",
            json={"status": "Developer", "skills": "a"},
            headers=headers_for(stranger),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user"] == {"id": str(stranger.id), "name": None, "avatar": None}
        mine = await client.get("/api/v1/profile/me", headers=headers_for(stranger))
        assert mine.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["githubUserName", "githubusername", "github_username"])
    async def test_github_username_spellings(
        self, client: AsyncClient, auth_headers: dict[str, str], key: str
    ) -> None:
        response = await client.post(
            "/api/v1/profile",
            json={"status": "Developer", "skills": "a", key: "alice"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["github_username"] == "alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("body", "field"),
        [
            ({"skills": "a"}, "status"),
            ({"status": "Developer"}, "skills"),
            ({"status": "Developer", "skills": " , "}, "skills"),
        ],
    )
    async def test_required_fields(
        self, client: AsyncClient, auth_headers: dict[str, str], body: dict, field: str
    ) -> None:
        response = await client.post("/api/v1/profile", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == field

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/profile", json={"status": "Developer", "skills": "a"}
        )

        assert response.status_code == 401


class TestReadProfiles:
    @pytest.mark.asyncio
    async def test_me_before_creating(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await client.get("/api/v1/profile/me", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_me_after_creating(
        self, client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        await client.post(
            "/api/v1/profile", json={"status": "Developer", "skills": "a"}, headers=auth_headers
        )

        response = await client.get("/api/v1/profile/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "Developer"

    @pytest.mark.asyncio
    async def test_list_profiles_is_public(
        self, client: AsyncClient, headers_for: Headers, test_user: TokenUser, other_user: TokenUser
    ) -> None:
        for user in (test_user, other_user):
            await client.post(
                "/api/v1/profile",
                json={"status": "Developer", "skills": "a"},
                headers=headers_for(user),
            )

        response = await client.get("/api/v1/profile")

        assert response.status_code == 200
        names = {p["user"]["name"] for p in response.json()["data"]}
        assert names == {"Alice Author", "Bob Reader"}

    @pytest.mark.asyncio
    async def test_get_by_user_id(
        self, client: AsyncClient, auth_headers: dict[str, str], test_user: TokenUser
    ) -> None:
        await client.post(
            "/api/v1/profile", json={"status": "Developer", "skills": "a"}, headers=auth_headers
        )

        response = await client.get(f"/api/v1/profile/user/{test_user.id}")

        assert response.status_code == 200
        assert response.json()["data"]["user"]["id"] == str(test_user.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["123", str(uuid4())])
    async def test_get_by_user_id_not_found(self, client: AsyncClient, user_id: str) -> None:
        response = await client.get(f"/api/v1/profile/user/{user_id}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"
