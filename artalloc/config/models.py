"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..allocation.strategies import AllocationMethod


class AllocationConfig(BaseModel):
    """Allocation defaults."""

    default_method: str = Field(
        AllocationMethod.BY_PRIORITY.value,
        description="Allocation method used when --method is not given",
    )
    output_dir: str = Field("~/Article-Allocations", description="Where allocation JSON is written")

    @field_validator("default_method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        """Only the two known methods are accepted in config."""
        normalized = v.strip().lower()
        allowed = [method.value for method in AllocationMethod]
        if normalized not in allowed:
            raise ValueError(f"default_method must be one of {allowed}, got {v!r}")
        return normalized


class WebhookConfig(BaseModel):
    """Allocation webhook configuration."""

    allocations_url: Optional[str] = Field(None, description="Webhook receiving allocation rows")
    url_env: Optional[str] = Field(
        "ARTALLOC_WEBHOOK_URL",
        description="Environment variable overriding allocations_url",
    )
    timeout: float = Field(30.0, description="Request timeout in seconds", gt=0)


class ConfigModel(BaseModel):
    """Main configuration model."""

    timezone: str = Field("UTC", description="Timezone used to stamp month and date")
    allocation: AllocationConfig = Field(default_factory=AllocationConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)


class MemberConfig(BaseModel):
    """Team member from roster.yaml."""

    id: str = Field(..., description="Stable member id")
    label: str = Field(..., description="Name used on allocations")


class RosterConfig(BaseModel):
    """Roster file: members plus the saved priority order."""

    members: List[MemberConfig] = Field(default_factory=list)
    priority_order: List[str] = Field(
        default_factory=list,
        description="Member ids in priority order",
    )
