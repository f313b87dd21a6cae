"""Implication edge between two permissions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Implication:
    """Granting the parent permission also grants the child."""

    parent_id: int
    child_id: int
