"""Polymorphic reference to a subject or resource."""

from dataclasses import dataclass

from aclgraph.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ModelRef:
    """Type tag plus numeric id, e.g. ``User:1`` or ``Team:5``."""

    type: str
    id: int

    def __post_init__(self) -> None:
        if not self.type or not self.type.strip():
            raise ValidationError("Model reference needs a type tag")
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise ValidationError(f"Model reference id must be an integer, got {self.id!r}")

    @classmethod
    def parse(cls, value: str) -> "ModelRef":
        """Parse ``Type:id``. The id is taken after the last colon."""
        if ":" not in value:
            raise ValidationError(f"Invalid model reference {value!r}, expected Type:id")
        type_tag, _, raw_id = value.rpartition(":")
        try:
            model_id = int(raw_id)
        except ValueError:
            raise ValidationError(f"Invalid model id in {value!r}") from None
        return cls(type=type_tag.strip(), id=model_id)

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"
