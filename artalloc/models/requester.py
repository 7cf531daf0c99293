"""Requester (priority field) model."""

from pydantic import Field

from .base import WireModel


class PriorityField(WireModel):
    """Team member with a requested article count for one allocation run."""

    id: str = Field(..., description="Stable roster identifier")
    label: str = Field(..., description="Display and allocation name")
    value: int = Field(0, description="Requested article count, 0 skips", ge=0)
