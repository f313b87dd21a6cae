"""Pytest fixtures for aclgraph tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Collection, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio

from aclgraph.domain.entities import (
    Grant,
    Implication,
    Permission,
    Role,
    RoleAssignment,
)
from aclgraph.domain.value_objects import ChangeSet, Effect, ModelRef
from aclgraph.infrastructure.cache import MemoryCache
from aclgraph.main import AclServices, build_services


# --- In-memory graph store ---


@dataclass
class FakeTables:
    """Rows shared by all fake repositories, so cascades can be applied."""

    permissions: dict[int, Permission] = field(default_factory=dict)
    implications: set[tuple[int, int]] = field(default_factory=set)
    roles: dict[int, Role] = field(default_factory=dict)
    grants: dict[tuple[int, int], Effect] = field(default_factory=dict)
    assignments: dict[int, RoleAssignment] = field(default_factory=dict)
    next_id: int = 1

    def new_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


class FakePermissionRepository:
    """In-memory permission repository."""

    def __init__(self, tables: FakeTables) -> None:
        self._t = tables

    async def get_by_id(self, permission_id: int) -> Permission | None:
        return self._t.permissions.get(permission_id)

    async def get_by_name(self, name: str) -> Permission | None:
        for p in self._t.permissions.values():
            if p.name == name:
                return p
        return None

    async def list_by_ids(self, permission_ids: Collection[int]) -> list[Permission]:
        ids = set(permission_ids)
        return sorted(
            (p for p in self._t.permissions.values() if p.id in ids),
            key=lambda p: p.id,
        )

    async def list_all(self) -> list[Permission]:
        return sorted(self._t.permissions.values(), key=lambda p: p.id)

    async def create(self, name: str, resource_type: str | None = None) -> Permission:
        permission = Permission(id=self._t.new_id(), name=name, resource_type=resource_type)
        self._t.permissions[permission.id] = permission
        return permission

    async def update(self, permission: Permission) -> ChangeSet:
        self._t.permissions[permission.id] = permission
        return ChangeSet.of(permission_ids=[permission.id])

    async def delete(self, permission_id: int) -> ChangeSet:
        parents = [p for p, c in self._t.implications if c == permission_id]
        roles = [r for r, p in self._t.grants if p == permission_id]
        self._t.permissions.pop(permission_id, None)
        self._t.implications = {
            e for e in self._t.implications if permission_id not in e
        }
        self._t.grants = {
            k: v for k, v in self._t.grants.items() if k[1] != permission_id
        }
        return ChangeSet.of(permission_ids=[permission_id, *parents], role_ids=roles)


class FakeImplicationRepository:
    """In-memory implication edge repository."""

    def __init__(self, tables: FakeTables) -> None:
        self._t = tables
        self.list_all_calls = 0

    async def list_all(self) -> list[Implication]:
        self.list_all_calls += 1
        return [Implication(parent_id=p, child_id=c) for p, c in sorted(self._t.implications)]

    async def list_children(self, permission_id: int) -> list[int]:
        return [c for p, c in self._t.implications if p == permission_id]

    async def add(self, parent_id: int, child_id: int) -> ChangeSet:
        if (parent_id, child_id) in self._t.implications:
            return ChangeSet()
        self._t.implications.add((parent_id, child_id))
        return ChangeSet.of(permission_ids=[parent_id])

    async def remove(self, parent_id: int, child_id: int) -> ChangeSet:
        if (parent_id, child_id) not in self._t.implications:
            return ChangeSet()
        self._t.implications.discard((parent_id, child_id))
        return ChangeSet.of(permission_ids=[parent_id])


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self, tables: FakeTables) -> None:
        self._t = tables

    async def get_by_id(self, role_id: int) -> Role | None:
        role = self._t.roles.get(role_id)
        return replace(role) if role else None

    async def get_by_name(self, name: str, resource_type: str | None = None) -> Role | None:
        for r in self._t.roles.values():
            if r.name == name and r.resource_type == resource_type:
                return replace(r)
        return None

    async def list_all(self) -> list[Role]:
        return [replace(r) for r in sorted(self._t.roles.values(), key=lambda r: r.id)]

    async def create(
        self,
        name: str,
        resource_type: str | None = None,
        description: str | None = None,
    ) -> Role:
        role = Role(
            id=self._t.new_id(),
            name=name,
            resource_type=resource_type,
            description=description,
        )
        self._t.roles[role.id] = role
        return replace(role)

    async def update(self, role: Role) -> ChangeSet:
        self._t.roles[role.id] = replace(role)
        return ChangeSet.of(role_ids=[role.id])

    async def delete(self, role_id: int) -> ChangeSet:
        self._t.roles.pop(role_id, None)
        self._t.grants = {k: v for k, v in self._t.grants.items() if k[0] != role_id}
        return ChangeSet.of(role_ids=[role_id])


class FakeGrantRepository:
    """In-memory grant repository."""

    def __init__(self, tables: FakeTables) -> None:
        self._t = tables

    async def list_for_role(self, role_id: int) -> list[Grant]:
        return [
            Grant(role_id=r, permission_id=p, effect=e)
            for (r, p), e in sorted(self._t.grants.items())
            if r == role_id
        ]

    async def list_role_ids_for_permissions(
        self, permission_ids: Collection[int]
    ) -> set[int]:
        ids = set(permission_ids)
        return {r for r, p in self._t.grants if p in ids}

    async def put(self, role_id: int, permission_id: int, effect: Effect) -> ChangeSet:
        self._t.grants[(role_id, permission_id)] = effect
        return ChangeSet.of(permission_ids=[permission_id], role_ids=[role_id])

    async def remove(self, role_id: int, permission_id: int) -> ChangeSet:
        if self._t.grants.pop((role_id, permission_id), None) is None:
            return ChangeSet()
        return ChangeSet.of(permission_ids=[permission_id], role_ids=[role_id])

    async def sync(self, role_id: int, effects: Mapping[int, Effect]) -> ChangeSet:
        previous = [p for r, p in self._t.grants if r == role_id]
        self._t.grants = {k: v for k, v in self._t.grants.items() if k[0] != role_id}
        for permission_id, effect in effects.items():
            self._t.grants[(role_id, permission_id)] = effect
        return ChangeSet.of(permission_ids=[*previous, *effects], role_ids=[role_id])


class FakeRoleAssignmentRepository:
    """In-memory role assignment repository."""

    def __init__(self, tables: FakeTables) -> None:
        self._t = tables

    async def get_for(
        self, subject: ModelRef, resource: ModelRef | None = None
    ) -> RoleAssignment | None:
        for a in self._t.assignments.values():
            if a.subject == subject and a.resource == resource:
                return replace(a)
        return None

    async def list_by_subject(self, subject: ModelRef) -> list[RoleAssignment]:
        return [replace(a) for a in self._t.assignments.values() if a.subject == subject]

    async def exists_for_role(self, role_id: int) -> bool:
        return any(a.role_id == role_id for a in self._t.assignments.values())

    async def create(self, assignment: RoleAssignment) -> RoleAssignment:
        assignment.id = self._t.new_id()
        self._t.assignments[assignment.id] = replace(assignment)
        return assignment

    async def update(self, assignment: RoleAssignment) -> None:
        self._t.assignments[assignment.id] = replace(assignment)

    async def delete(self, assignment_id: int) -> None:
        self._t.assignments.pop(assignment_id, None)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories over shared tables."""

    def __init__(self, tables: FakeTables | None = None) -> None:
        self.tables = tables or FakeTables()
        self.permissions = FakePermissionRepository(self.tables)
        self.implications = FakeImplicationRepository(self.tables)
        self.roles = FakeRoleRepository(self.tables)
        self.grants = FakeGrantRepository(self.tables)
        self.assignments = FakeRoleAssignmentRepository(self.tables)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.current = now or datetime(2025, 6, 1, 12, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class FakeTimer:
    """Monotonic timer for MemoryCache expiry tests."""

    def __init__(self) -> None:
        self.value = 1000.0

    def __call__(self) -> float:
        return self.value


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Single in-memory UnitOfWork shared by every factory call in a test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the shared FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def services(uow_factory, cache: MemoryCache, clock: FixedClock) -> AclServices:
    """Fully wired services over the fake graph store and a memory cache."""
    return build_services(uow_factory, cache, clock=clock, ttl=3600)


@pytest_asyncio.fixture
async def team_graph(fake_uow: FakeUnitOfWork) -> dict[str, Permission]:
    """team.manage implies team.read and team.update; team.delete stands alone."""
    perms = {}
    for name in ("team.manage", "team.read", "team.update", "team.delete"):
        perms[name] = await fake_uow.permissions.create(name, "Team")
    await fake_uow.implications.add(perms["team.manage"].id, perms["team.read"].id)
    await fake_uow.implications.add(perms["team.manage"].id, perms["team.update"].id)
    return perms
