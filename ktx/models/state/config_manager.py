"""Loading of the ktx settings file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ktx.constants.values import DEFAULT_SETTINGS_PATH, SETTINGS_PATH_ENV
from ktx.models.state.app_settings import (
    AppSettings,
    SettingsError,
    SettingsLoadError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads :class:`AppSettings` from a YAML file."""

    @staticmethod
    def settings_path() -> Path:
        """Return the settings path, honouring the ``KTX_SETTINGS`` override."""
        override = os.environ.get(SETTINGS_PATH_ENV, "").strip()
        return Path(override or DEFAULT_SETTINGS_PATH).expanduser()

    @classmethod
    def load(cls, path: Path | str | None = None) -> AppSettings:
        """Load settings, returning defaults when the file does not exist.

        Raises:
            SettingsLoadError: If the file exists but cannot be read or validated.
        """
        settings_path = Path(path).expanduser() if path else cls.settings_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise SettingsLoadError(f"Cannot read {settings_path}: {e}") from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise SettingsLoadError(f"{settings_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as e:
            raise SettingsLoadError(f"Invalid settings in {settings_path}: {e}") from e


__all__ = [
    "AppSettings",
    "ConfigManager",
    "SettingsError",
    "SettingsLoadError",
]
