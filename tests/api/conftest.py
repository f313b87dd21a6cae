"""Fixtures for API tests."""

from datetime import UTC, datetime

import falcon
import falcon.asgi
import pytest
from falcon.testing import TestClient

from aclgraph.domain.entities import Permission, Role, RoleAssignment
from aclgraph.domain.value_objects import Effect, ModelRef
from aclgraph.interfaces.api.hooks import (
    require_permission,
    require_role,
    require_role_or_permission,
)
from aclgraph.interfaces.api.middleware.subject import TrustedSubjectMiddleware
from aclgraph.main import create_aclgraph_app


@pytest.fixture
def seeded(fake_uow):
    """Team permissions, an editor role held by User:1 on Team:5, and an admin role."""
    t = fake_uow.tables
    t.permissions[1] = Permission(id=1, name="team.manage", resource_type="Team")
    t.permissions[2] = Permission(id=2, name="team.read", resource_type="Team")
    t.permissions[3] = Permission(id=3, name="team.update", resource_type="Team")
    t.permissions[4] = Permission(id=4, name="team.delete", resource_type="Team")
    t.implications |= {(1, 2), (1, 3)}
    t.roles[10] = Role(id=10, name="editor", resource_type="Team")
    t.roles[11] = Role(id=11, name="admin")
    t.grants[(10, 1)] = Effect.ALLOW
    t.grants[(11, 4)] = Effect.ALLOW
    now = datetime(2025, 6, 1, tzinfo=UTC)
    t.assignments[20] = RoleAssignment(
        id=20,
        subject=ModelRef("User", 1),
        role_id=10,
        resource=ModelRef("Team", 5),
        created_at=now,
        updated_at=now,
    )
    t.assignments[21] = RoleAssignment(
        id=21,
        subject=ModelRef("User", 2),
        role_id=11,
        created_at=now,
        updated_at=now,
    )
    t.next_id = 100
    return t


class FakeModelResolver:
    """Only Team:5 exists."""

    async def exists(self, ref: ModelRef) -> bool:
        return ref == ModelRef("Team", 5)


@pytest.fixture
def client(services, seeded) -> TestClient:
    """Full aclgraph app over the fake graph store."""
    return TestClient(create_aclgraph_app(services))


@pytest.fixture
def guarded_client(services, seeded) -> TestClient:
    """App with hook-protected team routes."""
    checker = services.checker
    resolver = FakeModelResolver()

    class TeamResource:
        @falcon.before(require_permission(checker, "team.update", "Team", param="team_id"))
        async def on_patch(self, req, resp, team_id):
            resp.media = {"updated": int(team_id)}

        @falcon.before(
            require_role(checker, "owner|editor", "Team", param="team_id", resolver=resolver)
        )
        async def on_get(self, req, resp, team_id):
            resp.media = {"team": int(team_id)}

        @falcon.before(require_role_or_permission(checker, "owner|team.delete", "Team", param="team_id"))
        async def on_delete(self, req, resp, team_id):
            resp.status = falcon.HTTP_204

    class AdminResource:
        @falcon.before(require_role(checker, "admin"))
        async def on_get(self, req, resp):
            resp.media = {"ok": True}

    app = falcon.asgi.App(middleware=[TrustedSubjectMiddleware()])
    app.add_route("/teams/{team_id}", TeamResource())
    app.add_route("/admin", AdminResource())
    return TestClient(app)
