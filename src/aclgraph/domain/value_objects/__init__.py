"""Domain value objects."""

from aclgraph.domain.value_objects.change_set import ChangeSet
from aclgraph.domain.value_objects.effect import Effect
from aclgraph.domain.value_objects.implication_graph import ImplicationGraph
from aclgraph.domain.value_objects.model_ref import ModelRef

__all__ = [
    "ChangeSet",
    "Effect",
    "ImplicationGraph",
    "ModelRef",
]
