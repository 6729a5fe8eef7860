import os
from pathlib import Path
from string import Template
from typing import Optional

import structlog
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from papertime.models.config import AppConfig
from papertime.utils.exceptions import ConfigValidationError

logger = structlog.get_logger()

DEFAULT_CONFIG_PATH = "config/papertime.yaml"


class ConfigManager:
    """Loads and validates the YAML application configuration"""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        self.config_path = Path(config_path)
        self.env_loaded = False
        self._config: Optional[AppConfig] = None

    def load_config(self) -> AppConfig:
        """Load and validate configuration"""
        if self._config:
            return self._config

        # 1. Load environment
        if not self.env_loaded:  # pragma: no cover
            load_dotenv()
            self.env_loaded = True

        # 2. Check file existence
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        # 3. Read YAML
        try:
            with open(self.config_path, encoding="utf-8") as f:
                raw_content = f.read()
        except OSError as e:
            raise ConfigValidationError(f"Failed to read config file: {e}")

        # 4. Substitute ${VAR} from the environment, then parse
        try:
            substituted = Template(raw_content).safe_substitute(os.environ)
            config_data = yaml.safe_load(substituted) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Failed to parse YAML: {e}")

        if not isinstance(config_data, dict):
            raise ConfigValidationError("Configuration root must be a mapping")

        # 5. Validate with Pydantic
        try:
            self._config = AppConfig(**config_data)
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid configuration: {e}")

        logger.info(
            "config_loaded",
            path=str(self.config_path),
            default_max_results=self._config.settings.default_max_results,
        )
        return self._config

    def load_or_default(self) -> AppConfig:
        """Load the file if it exists, otherwise fall back to defaults."""
        if not self.config_path.exists():
            logger.info("config_defaults_used", path=str(self.config_path))
            self._config = AppConfig()
            return self._config
        return self.load_config()
