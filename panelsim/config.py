"""Configuration loading from YAML + environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from panelsim.simulation.graph import DEFAULT_PROXIMITY
from panelsim.simulation.roles import RoleTable


class PanelSimConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PANELSIM_")

    # Server
    host: str = "127.0.0.1"
    port: int = 8350
    log_level: str = "INFO"

    # Simulation
    proximity_threshold: float = DEFAULT_PROXIMITY
    role_overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Catalog kind -> sub-role, applied on top of the default role table",
    )

    # HTTP API
    http_api_require_auth: bool = False
    api_key: str = ""

    # Storage (empty = ~/.panelsim/schematics)
    schematics_dir: str = ""

    @classmethod
    def from_yaml(cls, path: str | Path = "panelsim.yaml") -> PanelSimConfig:
        """Load config from a YAML file; a missing file gives the defaults."""
        yaml_path = Path(path)
        yaml_data: dict[str, Any] = {}

        if yaml_path.exists():
            with yaml_path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            yaml_data = _flatten_yaml(raw.get("panelsim", {}))

        return cls(**yaml_data)

    def role_table(self) -> RoleTable:
        return RoleTable.with_overrides(self.role_overrides)


def _flatten_yaml(data: dict, prefix: str = "") -> dict:
    """Flatten nested YAML into flat key-value pairs for Pydantic."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        full_key = key if not prefix else f"{prefix}_{key}"
        if isinstance(value, dict) and key != "role_overrides":
            flat.update(_flatten_yaml(value, full_key))
        else:
            flat[full_key] = value
    return flat
