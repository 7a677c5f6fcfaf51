"""Configuration package exports."""

from .config_loader import CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE, ConfigLoader
from .model import AltNickConfig

__all__ = [
    "AltNickConfig",
    "CONFIG_FILE_ENV",
    "ConfigLoader",
    "DEFAULT_CONFIG_FILE",
]
