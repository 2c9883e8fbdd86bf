"""
Run configuration for the WordPress → Jekyll migration.

Configuration is read from a JSON file (``config/migration_config.json`` by
default), completed with environment variables for database credentials and
finally overridden with explicit values such as command line flags.  The
result is an immutable :class:`MigrationConfig`; components receive only the
fields they need.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from wp2jekyll.utils.errors import ConfigurationError

CONFIG_FILE = "config/migration_config.json"

# Environment fallbacks for connection settings.
_ENV_DEFAULTS = {
    "dbname": "WP_DB_NAME",
    "user": "WP_DB_USER",
    "password": "WP_DB_PASSWORD",
    "host": "WP_DB_HOST",
}


class MigrationConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Connection
    dbname: str = ""
    user: str = ""
    password: str = ""
    host: str = "localhost"
    port: int = 3306
    socket: Optional[str] = None
    duckdb_path: Optional[str] = None

    # Source layout
    table_prefix: str = "wp_"
    site_prefix: str = ""

    # Transformation
    clean_entities: bool = True
    entity_encoder: str = "named"
    comments: bool = True
    categories: bool = True
    tags: bool = True
    more_excerpt: bool = True
    more_anchor: bool = True
    extension: str = "html"
    status: List[str] = ["publish"]

    # Output
    output_dir: str = "."
    autop: bool = True
    reports_dir: str = os.path.join("reports", "migration")

    @field_validator("status", mode="before")
    @classmethod
    def _split_status(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("extension", mode="before")
    @classmethod
    def _strip_dot(cls, v: Any) -> Any:
        return v.lstrip(".") if isinstance(v, str) else v

    @field_validator("site_prefix", "table_prefix", mode="before")
    @classmethod
    def _none_prefix(cls, v: Any) -> Any:
        return "" if v is None else v

    def status_allowed(self, status: str) -> bool:
        """An empty allow-list lets every status through."""
        return not self.status or status in self.status


def load_config(
    config_file: Optional[str] = CONFIG_FILE,
    overrides: Optional[Dict[str, Any]] = None,
    *,
    environ: Optional[Dict[str, str]] = None,
) -> MigrationConfig:
    """
    Build a :class:`MigrationConfig` from a JSON file, the environment and
    explicit overrides (highest precedence).  ``None`` override values are
    ignored so that unset CLI flags do not mask file settings.  Unknown keys
    and invalid values raise :class:`ConfigurationError`.
    """
    data: Dict[str, Any] = {}
    if config_file and os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {config_file}: {e}") from e

    env = os.environ if environ is None else environ
    for key, var in _ENV_DEFAULTS.items():
        if key not in data and env.get(var):
            data[key] = env[var]

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return MigrationConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
