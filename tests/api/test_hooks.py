"""Authorization hook tests."""

from falcon.testing import TestClient

USER_1 = {"X-Subject": "User:1"}
USER_2 = {"X-Subject": "User:2"}


def test_permission_hook_allows_implied_permission(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_patch("/teams/5", headers=USER_1)
    assert result.status_code == 200
    assert result.json == {"updated": 5}


def test_permission_hook_forbids_other_resource(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_patch("/teams/6", headers=USER_1)
    assert result.status_code == 403


def test_missing_subject_is_unauthorized(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_patch("/teams/5")
    assert result.status_code == 401


def test_malformed_subject_is_bad_request(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_patch("/teams/5", headers={"X-Subject": "nobody"})
    assert result.status_code == 400


def test_non_numeric_resource_id_is_bad_request(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_patch("/teams/abc", headers=USER_1)
    assert result.status_code == 400


def test_role_hook(guarded_client: TestClient) -> None:
    assert guarded_client.simulate_get("/teams/5", headers=USER_1).status_code == 200
    assert guarded_client.simulate_get("/teams/5", headers=USER_2).status_code == 403


def test_role_hook_unknown_resource_is_not_found(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_get("/teams/7", headers=USER_1)
    assert result.status_code == 404


def test_role_or_permission_hook(guarded_client: TestClient) -> None:
    result = guarded_client.simulate_delete("/teams/5", headers=USER_1)
    assert result.status_code == 403


def test_global_role_hook(guarded_client: TestClient) -> None:
    assert guarded_client.simulate_get("/admin", headers=USER_2).status_code == 200
    assert guarded_client.simulate_get("/admin", headers=USER_1).status_code == 403
