"""Permission entity - a named capability."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Permission:
    """Permission such as ``team.read``; resource_type None means global."""

    id: int
    name: str
    resource_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "resource_type": self.resource_type}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Permission":
        return cls(id=data["id"], name=data["name"], resource_type=data.get("resource_type"))
