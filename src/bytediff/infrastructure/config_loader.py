"""
Configuration loader module.

Handles loading and validation of the JSON configuration file:
- service_settings.json: storage, HTTP listener and logging settings

Precedence:
1. Config file settings (primary)
2. CLI overrides (applied by the caller via with_overrides)
3. Reasonable defaults (fallback)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from bytediff.domain.settings import ServiceSettings

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "service_settings"


class ConfigLoader:
    """
    Load and validate configuration files.

    Implements schema validation and provides typed access to configuration data.
    """

    def __init__(self, config_dir: str | Path = "config"):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing configuration files.
        """
        self.config_dir = Path(config_dir)

    def _find_settings_file(self) -> Path | None:
        for suffix in (".json", ".jsonc"):
            path = self.config_dir / f"{SETTINGS_FILENAME}{suffix}"
            if path.exists():
                return path
        return None

    def load_json_file(self, path: Path) -> Dict[str, Any]:
        """
        Load a JSON file.

        Raises:
            ValueError: If file cannot be parsed or is not a JSON object
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        return data

    def load_settings(self) -> ServiceSettings:
        """
        Load service settings.

        Returns:
            ServiceSettings from the config file, or defaults if there is none

        Raises:
            ValueError: If the file exists but is invalid
        """
        path = self._find_settings_file()
        if path is None:
            logger.info(
                "No %s.json in %s - using default settings",
                SETTINGS_FILENAME, self.config_dir,
            )
            return ServiceSettings()

        data = self.load_json_file(path)
        try:
            settings = ServiceSettings.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {path}: {e}") from e

        logger.info("Loaded settings from %s", path)
        return settings


def with_overrides(settings: ServiceSettings, **overrides: Any) -> ServiceSettings:
    """
    Apply CLI overrides on top of loaded settings.

    None values mean "not given" and are ignored.
    """
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return settings
    # Re-validate so overrides get the same checks as the file
    return ServiceSettings.model_validate({**settings.model_dump(), **update})
