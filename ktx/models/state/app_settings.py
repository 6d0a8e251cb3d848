"""Application settings models."""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ktx.constants.defaults import (
    CLOUD_CLI_TIMEOUT_DEFAULT,
    IMPORT_BATCH_DELAY_DEFAULT,
    IMPORT_SETTLE_DELAY_DEFAULT,
    KUBECONFIG_PATH_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PROBE_MAX_CONCURRENT_DEFAULT,
    PROBE_REQUEST_TIMEOUT_DEFAULT,
    PROBE_SPAWN_DELAY_DEFAULT,
    STATUS_MESSAGE_SECONDS_DEFAULT,
)
from ktx.constants.limits import PROBE_MAX_CONCURRENT_MAX, PROBE_MAX_CONCURRENT_MIN


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Paths
    kubeconfig_path: str = KUBECONFIG_PATH_DEFAULT

    # Connectivity probing
    probe_max_concurrent: int = Field(
        default=PROBE_MAX_CONCURRENT_DEFAULT,
        ge=PROBE_MAX_CONCURRENT_MIN,
        le=PROBE_MAX_CONCURRENT_MAX,
    )
    probe_spawn_delay_seconds: float = Field(default=PROBE_SPAWN_DELAY_DEFAULT, ge=0)
    probe_request_timeout: str = PROBE_REQUEST_TIMEOUT_DEFAULT  # kubectl duration

    # Cloud import
    import_batch_delay_seconds: float = Field(default=IMPORT_BATCH_DELAY_DEFAULT, ge=0)
    import_settle_seconds: float = Field(default=IMPORT_SETTLE_DELAY_DEFAULT, ge=0)
    cloud_cli_timeout_seconds: float = Field(default=CLOUD_CLI_TIMEOUT_DEFAULT, gt=0)

    # UI
    status_message_seconds: float = Field(default=STATUS_MESSAGE_SECONDS_DEFAULT, gt=0)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsLoadError(SettingsError):
    """Raised when settings fail to load."""
