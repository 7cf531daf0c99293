"""Configuration loader."""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from ..allocation.priority import create_initial_priority_fields, reorder_priority_fields
from ..models import PriorityField
from .models import ConfigModel, RosterConfig

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "artalloc"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_dir = os.environ.get("ARTALLOC_CONFIG_DIR")
            base = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
            config_path = base / "config.yaml"
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def roster_path(self) -> Path:
        """Roster file next to the config file."""
        return self.config_path.parent / "roster.yaml"

    @property
    def output_dir(self) -> Path:
        """Get output directory path."""
        path = Path(self.config.allocation.output_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def get_webhook_url(self) -> Optional[str]:
        """Webhook URL, with the environment variable taking precedence."""
        webhook = self.config.webhook
        if webhook.url_env:
            url = os.environ.get(webhook.url_env)
            if url:
                return url
        return webhook.allocations_url

    def load_priority_fields(self) -> List[PriorityField]:
        """Roster members as priority fields, in saved priority order."""
        return roster_priority_fields(load_roster(self.roster_path))


def roster_priority_fields(roster: RosterConfig) -> List[PriorityField]:
    """Priority fields for an already loaded roster."""
    fields = create_initial_priority_fields(m.model_dump() for m in roster.members)
    return reorder_priority_fields(fields, roster.priority_order)


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def load_roster(roster_path: Path) -> RosterConfig:
    """Load team roster from YAML file."""
    if not roster_path.exists():
        raise FileNotFoundError(f"Roster file not found: {roster_path}")

    try:
        with open(roster_path) as f:
            roster_data = yaml.safe_load(f)

        if roster_data is None:
            return RosterConfig()

        return RosterConfig(**roster_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in roster file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid roster: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)


def save_roster(roster: RosterConfig, roster_path: Path) -> None:
    """Save team roster to YAML file."""
    roster_path.parent.mkdir(parents=True, exist_ok=True)

    with open(roster_path, "w") as f:
        yaml.dump(roster.model_dump(), f, default_flow_style=False, sort_keys=False)
