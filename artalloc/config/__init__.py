"""Configuration management for the Article Allocator."""

from .loader import (
    Config,
    load_config,
    load_roster,
    roster_priority_fields,
    save_config,
    save_roster,
)
from .models import AllocationConfig, ConfigModel, MemberConfig, RosterConfig, WebhookConfig

__all__ = [
    "AllocationConfig",
    "Config",
    "ConfigModel",
    "MemberConfig",
    "RosterConfig",
    "WebhookConfig",
    "load_config",
    "load_roster",
    "roster_priority_fields",
    "save_config",
    "save_roster",
]
