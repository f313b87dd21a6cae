"""Role assignment entity - subject holds a role, optionally on a resource."""

from dataclasses import dataclass
from datetime import datetime

from aclgraph.domain.value_objects import ModelRef


@dataclass
class RoleAssignment:
    """Binds a subject to one role per resource (or globally), optionally time-limited."""

    id: int | None
    subject: ModelRef
    role_id: int
    created_at: datetime
    updated_at: datetime
    resource: ModelRef | None = None
    expires_at: datetime | None = None

    def is_active(self, now: datetime) -> bool:
        """Expired rows are kept but stop matching."""
        return self.expires_at is None or self.expires_at > now
