"""Base model class for all allocation models."""

from pydantic import BaseModel, ConfigDict


def to_camel(name: str) -> str:
    """Convert a snake_case field name to its camelCase wire alias."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class WireModel(BaseModel):
    """Base model for everything that crosses the JSON boundary."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        """Dump with camelCase keys, the shape the webhook side expects."""
        return self.model_dump(by_alias=True)
