from uuid import uuid4

from fastapi.testclient import TestClient

from giftem.models.api.users import UserResponse


class TestUsersRouter:
    """Tests for the users router endpoints."""

    def test_list_users(self, api_client: TestClient) -> None:
        response = api_client.get("/api/users")

        assert response.status_code == 200
        assert len(response.json()) == 6

    def test_get_current_user(
        self, api_client: TestClient, users: list[UserResponse]
    ) -> None:
        response = api_client.get("/api/users/me")

        assert response.status_code == 200
        assert response.json()["id"] == str(users[0].id)

    def test_get_unknown_user(self, api_client: TestClient) -> None:
        response = api_client.get(f"/api/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_follow_user(
        self, api_client: TestClient, users: list[UserResponse]
    ) -> None:
        """Test that following bumps both counters."""
        response = api_client.post(f"/api/users/{users[2].id}/follow")

        assert response.status_code == 200
        assert response.json()["follower_count"] == users[2].follower_count + 1
        me = api_client.get("/api/users/me").json()
        assert me["following_count"] == users[0].following_count + 1

    def test_follow_unknown_user(self, api_client: TestClient) -> None:
        response = api_client.post(f"/api/users/{uuid4()}/follow")

        assert response.status_code == 404
