"""Configuration loading utilities."""

from __future__ import annotations

import json
import os
from typing import Any

from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import AltNickConfig

CONFIG_FILE_ENV = "ALTNICK_CONF_FILE"
DEFAULT_CONFIG_FILE = "altnick.conf"


class ConfigLoader:
    """Loads the alternate-nick configuration from a JSON file."""

    def load_raw(self, config_file: str | os.PathLike[str]) -> dict[str, Any]:
        """Read the raw JSON object from ``config_file``.

        Raises:
            ConfigError: If the file is missing, unreadable, not JSON or not
                a JSON object.
        """
        try:
            with open(config_file, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(
                f"Configuration file not found: {config_file}",
                data={"path": str(config_file)},
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(
                f"Could not read configuration file {config_file}: {e}",
                data={"path": str(config_file)},
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration file must contain a JSON object",
                data={"path": str(config_file)},
            )
        return data

    def load(self, config_file: str | os.PathLike[str]) -> AltNickConfig:
        config = AltNickConfig.from_dict(self.load_raw(config_file))
        logger.log_event(
            "config", "loaded", count=len(config.nicks), recovery=config.recovery
        )
        return config

    def get_configuration(self) -> AltNickConfig:
        """Load the file named by ``ALTNICK_CONF_FILE`` (or the default)."""
        return self.load(os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE))
