"""Entities touched by a graph store write."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChangeSet:
    """Permission and role ids whose cached closures may be stale after a write.

    ``permission_ids`` are nodes whose position in the implication graph, or
    whose attributes, changed. ``role_ids`` are roles whose direct grants or
    identity changed.
    """

    permission_ids: frozenset[int] = field(default_factory=frozenset)
    role_ids: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        permission_ids: Iterable[int] = (),
        role_ids: Iterable[int] = (),
    ) -> "ChangeSet":
        return cls(frozenset(permission_ids), frozenset(role_ids))

    def __or__(self, other: "ChangeSet") -> "ChangeSet":
        return ChangeSet(
            self.permission_ids | other.permission_ids,
            self.role_ids | other.role_ids,
        )

    def __bool__(self) -> bool:
        return bool(self.permission_ids or self.role_ids)
