"""API resource tests."""

from falcon.testing import TestClient


class TestAuthorizationCheck:
    """GET /v1/authorization/check"""

    def test_permission_allowed(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/authorization/check",
            params={"subject": "User:1", "permission": "team.read", "resource": "Team:5"},
        )
        assert result.status_code == 200
        assert result.json == {"allowed": True}

    def test_permission_denied(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/authorization/check",
            params={"subject": "User:1", "permission": "team.delete", "resource": "Team:5"},
        )
        assert result.status_code == 200
        assert result.json == {"allowed": False}

    def test_global_permission(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/authorization/check",
            params={"subject": "User:2", "permission": "team.delete"},
        )
        assert result.json == {"allowed": True}

    def test_role(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/authorization/check",
            params={"subject": "User:1", "role": "editor", "resource": "Team:5"},
        )
        assert result.json == {"allowed": True}

    def test_permission_by_id(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/authorization/check",
            params={"subject": "User:1", "permission": "2", "resource": "Team:5"},
        )
        assert result.json == {"allowed": True}

    def test_missing_params(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/authorization/check", params={"subject": "User:1"})
        assert result.status_code == 400

    def test_malformed_subject(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/authorization/check",
            params={"subject": "User", "permission": "team.read"},
        )
        assert result.status_code == 400


class TestEffectivePermissions:
    """GET /v1/roles/{role_id}/permissions"""

    def test_lists_closure_sorted_by_id(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles/10/permissions")
        assert result.status_code == 200
        assert [p["name"] for p in result.json["items"]] == [
            "team.manage",
            "team.read",
            "team.update",
        ]

    def test_unknown_role_is_not_found(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles/999/permissions")
        assert result.status_code == 404
        assert result.json == {"error": "Role not found: 999"}

    def test_invalid_role_id(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles/abc/permissions")
        assert result.status_code == 400
