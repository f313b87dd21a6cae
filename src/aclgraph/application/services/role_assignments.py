"""Role-assignment resolver - subject and resource to the active role."""

import logging
from collections.abc import Iterable
from datetime import datetime

from aclgraph.application.ports import Clock
from aclgraph.application.services.references import RoleRef, resolve_role, role_matches
from aclgraph.domain.entities import Role, RoleAssignment
from aclgraph.domain.exceptions import NotFound, ValidationError
from aclgraph.domain.value_objects import ModelRef

logger = logging.getLogger(__name__)


class RoleAssignmentResolver:
    """One role per (subject, resource); expired assignments stop matching but stay stored."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def assign(
        self,
        subject: ModelRef,
        role: RoleRef,
        resource: ModelRef | None = None,
        expires_at: datetime | None = None,
    ) -> RoleAssignment:
        """Assign role to subject on resource, replacing any current role there."""
        resource_type = resource.type if resource else None
        async with self._uow_factory() as uow:
            resolved = await resolve_role(uow, role, resource_type)
            if not resolved:
                raise NotFound("Role", role.name if isinstance(role, Role) else role)
            if resolved.resource_type != resource_type:
                raise ValidationError(
                    f"Role {resolved.name!r} is scoped to "
                    f"{resolved.resource_type or 'global'}, "
                    f"cannot be assigned on {resource_type or 'global'}"
                )

            now = self._clock.now()
            existing = await uow.assignments.get_for(subject, resource)
            if existing:
                existing.role_id = resolved.id
                existing.expires_at = expires_at
                existing.updated_at = now
                await uow.assignments.update(existing)
                assignment = existing
            else:
                assignment = await uow.assignments.create(
                    RoleAssignment(
                        id=None,
                        subject=subject,
                        role_id=resolved.id,
                        resource=resource,
                        expires_at=expires_at,
                        created_at=now,
                        updated_at=now,
                    )
                )

        logger.info(
            "Assigned role %s to %s on %s", resolved.name, subject, resource or "global"
        )
        return assignment

    async def active_role(
        self, subject: ModelRef, resource: ModelRef | None = None
    ) -> Role | None:
        """Role of a non-expired assignment for (subject, resource), if any."""
        async with self._uow_factory() as uow:
            assignment = await uow.assignments.get_for(subject, resource)
            if not assignment or not assignment.is_active(self._clock.now()):
                return None
            return await uow.roles.get_by_id(assignment.role_id)

    async def remove(self, subject: ModelRef, resource: ModelRef | None = None) -> bool:
        """Delete the assignment for (subject, resource). Returns whether one existed."""
        async with self._uow_factory() as uow:
            assignment = await uow.assignments.get_for(subject, resource)
            if not assignment:
                return False
            await uow.assignments.delete(assignment.id)
        logger.info("Removed role of %s on %s", subject, resource or "global")
        return True

    async def has_role(
        self, subject: ModelRef, role: RoleRef, resource: ModelRef | None = None
    ) -> bool:
        return await self.has_any_role(subject, [role], resource)

    async def has_any_role(
        self,
        subject: ModelRef,
        roles: RoleRef | Iterable[RoleRef],
        resource: ModelRef | None = None,
    ) -> bool:
        """True when the active role matches any reference by id or name.

        A single role reference is treated as a one-item list.
        """
        if isinstance(roles, (str, int, Role)):
            roles = [roles]
        current = await self.active_role(subject, resource)
        if not current:
            return False
        return any(role_matches(current, ref) for ref in roles)
