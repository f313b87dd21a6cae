"""Role assignment repository port."""

from typing import Protocol

from aclgraph.domain.entities import RoleAssignment
from aclgraph.domain.value_objects import ModelRef


class RoleAssignmentRepository(Protocol):
    """Port for subject role assignments; one row per (subject, resource)."""

    async def get_for(
        self, subject: ModelRef, resource: ModelRef | None = None
    ) -> RoleAssignment | None: ...

    async def list_by_subject(self, subject: ModelRef) -> list[RoleAssignment]: ...

    async def exists_for_role(self, role_id: int) -> bool: ...

    async def create(self, assignment: RoleAssignment) -> RoleAssignment: ...

    async def update(self, assignment: RoleAssignment) -> None: ...

    async def delete(self, assignment_id: int) -> None: ...
