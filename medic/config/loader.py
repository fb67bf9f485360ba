"""
Configuration loader for YAML files.

Handles loading and validation of the medic configuration file.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import MedicConfig

logger = logging.getLogger(__name__)

COLOR_ENV_VAR = "MEDIC_COLOR"


class ConfigLoader:
    """
    Loads and validates medic configuration from a YAML file.

    The file holds the settings either at the top level or under a
    ``medic:`` section, so it can live inside a host program's own config.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML config file
        """
        self.config_path = Path(config_path) if config_path else None

    def load(self) -> MedicConfig:
        """
        Load the configuration.

        Returns:
            Validated configuration, with environment overrides applied

        Raises:
            ConfigError: If the file is unreadable or invalid
        """
        data: Dict[str, Any] = {}
        if self.config_path is not None:
            if not self.config_path.is_file():
                raise ConfigError(f"Configuration file does not exist: {self.config_path}")
            data = self._read_yaml(self.config_path)
            if isinstance(data.get("medic"), dict):
                data = data["medic"]

        color = os.environ.get(COLOR_ENV_VAR)
        if color:
            logger.debug("Color mode overridden by %s=%s", COLOR_ENV_VAR, color)
            data = {**data, "color": color}

        try:
            return MedicConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid medic configuration: {e}")

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {file_path}, got {type(data).__name__}")
        return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> MedicConfig:
    """Load configuration from a file, or defaults when no path is given."""
    return ConfigLoader(config_path).load()
