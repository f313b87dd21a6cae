"""Unit tests for AclPermissionChecker and PostgresModelResolver input checks."""

from datetime import timedelta

import pytest

from aclgraph.domain.exceptions import ValidationError
from aclgraph.domain.value_objects import Effect, ModelRef
from aclgraph.infrastructure.models.model_resolver import PostgresModelResolver

ALICE = ModelRef("User", 1)
TEAM = ModelRef("Team", 5)


@pytest.mark.asyncio
async def test_check_uses_active_role(services, fake_uow, team_graph) -> None:
    editor = await fake_uow.roles.create("editor", "Team")
    await fake_uow.grants.put(editor.id, team_graph["team.manage"].id, Effect.ALLOW)
    await services.assignments.assign(ALICE, editor, TEAM)

    assert await services.checker.check(ALICE, "team.update", TEAM)
    assert not await services.checker.check(ALICE, "team.delete", TEAM)
    assert not await services.checker.check(ALICE, "team.update", ModelRef("Team", 6))
    assert not await services.checker.check(ModelRef("User", 2), "team.update", TEAM)


@pytest.mark.asyncio
async def test_check_after_expiry(services, fake_uow, clock, team_graph) -> None:
    viewer = await fake_uow.roles.create("viewer", "Team")
    await fake_uow.grants.put(viewer.id, team_graph["team.read"].id, Effect.ALLOW)
    await services.assignments.assign(
        ALICE, viewer, TEAM, expires_at=clock.now() + timedelta(minutes=10)
    )

    assert await services.checker.check(ALICE, "team.read", TEAM)
    clock.advance(minutes=10)
    assert not await services.checker.check(ALICE, "team.read", TEAM)


@pytest.mark.asyncio
async def test_check_role_and_role_or_permission(services, fake_uow, team_graph) -> None:
    viewer = await fake_uow.roles.create("viewer", "Team")
    await fake_uow.grants.put(viewer.id, team_graph["team.read"].id, Effect.ALLOW)
    await services.assignments.assign(ALICE, viewer, TEAM)

    assert await services.checker.check_role(ALICE, ["admin", "viewer"], TEAM)
    assert not await services.checker.check_role(ALICE, ["admin"], TEAM)
    assert await services.checker.check_role_or_permission(ALICE, ["admin", "team.read"], TEAM)
    assert await services.checker.check_role_or_permission(ALICE, ["viewer"], TEAM)
    assert not await services.checker.check_role_or_permission(ALICE, ["admin", " "], TEAM)


@pytest.mark.asyncio
async def test_model_resolver_rejects_unknown_type() -> None:
    resolver = PostgresModelResolver(pool=None, tables={"User": "users"})
    assert resolver.supported_types() == ["User"]
    with pytest.raises(ValidationError):
        await resolver.exists(ModelRef("Team", 1))
