"""In-memory snapshot of the permission implication graph."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImplicationGraph:
    """Adjacency lists over permission ids, in both directions.

    Edges may form cycles. Traversals keep an explicit stack and visited set,
    so they terminate on any input and never recurse.
    """

    children: dict[int, tuple[int, ...]] = field(default_factory=dict)
    parents: dict[int, tuple[int, ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]]) -> "ImplicationGraph":
        children: dict[int, list[int]] = {}
        parents: dict[int, list[int]] = {}
        for parent_id, child_id in edges:
            children.setdefault(parent_id, []).append(child_id)
            parents.setdefault(child_id, []).append(parent_id)
        return cls(
            children={k: tuple(v) for k, v in children.items()},
            parents={k: tuple(v) for k, v in parents.items()},
        )

    def descendants(self, permission_id: int) -> set[int]:
        """Permission itself plus everything it transitively implies."""
        return _walk(self.children, permission_id)

    def ancestors(self, permission_id: int) -> set[int]:
        """Permission itself plus everything that transitively implies it."""
        return _walk(self.parents, permission_id)


def _walk(adjacency: dict[int, tuple[int, ...]], start: int) -> set[int]:
    visited: set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        stack.extend(n for n in adjacency.get(node, ()) if n not in visited)
    return visited
