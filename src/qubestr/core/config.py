"""Configuration management.

Loads from the process environment (plus an optional ``.env`` file) and
an optional TOML config file.  Uses pydantic-settings for validation.

Numeric and boolean options that fail to parse fall back to their
documented default with a warning instead of aborting startup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import (
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .roster import AuthorizationRoster

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Top-level relay settings.

    Environment variable names match the field names upper-cased
    (``AUTHORIZED_PUBKEYS``, ``DB_QUERY_LIMIT``, ...).
    """

    # Access control
    authorized_pubkeys: str = ""  # Comma-separated hex pubkeys

    # Relay information (NIP-11)
    relay_admin_pubkey: str = ""

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 3334

    # Event store
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_host: str = "localhost"
    db_port: str = "5432"
    db_name: str = "qubestr"
    db_sslmode: str = "disable"
    db_query_limit: int = 100
    db_keep_recent_events: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("port", "db_query_limit", "db_keep_recent_events", mode="wrap")
    @classmethod
    def _fallback_to_default(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            default = cls.model_fields[info.field_name].default
            logger.warning(
                "Invalid %s value %r, using default %r. Error: %s",
                info.field_name.upper(),
                value,
                default,
                exc.errors()[0]["msg"],
            )
            return default

    @property
    def roster(self) -> AuthorizationRoster:
        return AuthorizationRoster.from_csv(self.authorized_pubkeys)

    @property
    def database_url(self) -> str:
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
            f"?sslmode={self.db_sslmode}"
        )

    @property
    def redacted_database_url(self) -> str:
        """``database_url`` with the password masked, for logs."""
        return self.database_url.replace(
            f":{self.db_password}@", ":***@", 1
        )

    @property
    def listen_addr(self) -> str:
        return f"{self.host}:{self.port}"


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: If the TOML file exists but cannot be parsed.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Cannot parse config file {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    return Settings(**data)
