"""
Configuration Manager for the AE Commission Calculator
Location: commission_app/config/config_manager.py
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..models.payout_schemas import PlanConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "plan.yaml"

# Environment variable -> PlanConfig field
PLAN_ENV_OVERRIDES = {
    "PLAN_QUOTA_ARR": "quota_arr",
    "PLAN_BASE_PAYOUT_AT_100": "base_payout_at_100",
    "PLAN_BUNDLE20_BONUS": "bundle20_bonus",
    "PLAN_BUNDLE35_BONUS": "bundle35_bonus",
}

logger = logging.getLogger(__name__)


class ConfigManager:
    def __init__(self, config_path: str):
        """
        Initialize ConfigManager with the path to the configuration file.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = str(config_path)
        self.config: Dict[str, Any] = {}
        self.logger = logging.getLogger(__name__)

        self._load_config()

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.
        """
        try:
            self.logger.info(f"Loading configuration from: {self.config_path}")

            if not os.path.exists(self.config_path):
                self.logger.error(f"Configuration file not found: {self.config_path}")
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r') as config_file:
                self.config = yaml.safe_load(config_file) or {}

            if self.config:
                section_keys = list(self.config.keys())
                self.logger.info(f"Configuration loaded successfully with sections: {section_keys}")
            else:
                self.logger.warning("Configuration file is empty")

        except Exception as e:
            self.logger.exception(f"Error loading configuration: {str(e)}")
            raise

    def get(self, section: str, key: str = None, default: Any = None) -> Any:
        """
        Get configuration value by section and key.

        Args:
            section: Configuration section
            key: Configuration key (optional)
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        try:
            if key is None:
                return self.config.get(section, default)
            return self.config.get(section, {}).get(key, default)

        except (AttributeError, KeyError):
            self.logger.warning(f"Configuration value not found for [{section}]{'.'+key if key else ''}")
            return default

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section, or an empty dict if missing."""
        section_data = self.config.get(section)
        return section_data if isinstance(section_data, dict) else {}

    def set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config or not isinstance(self.config[section], dict):
            self.config[section] = {}
        self.config[section][key] = value

    def save(self, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            output_path: Path to save configuration (uses current config path by default)
        """
        save_path = str(output_path or self.config_path)

        try:
            self.logger.info(f"Saving configuration to: {save_path}")
            os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)

            with open(save_path, 'w') as config_file:
                yaml.safe_dump(self.config, config_file, default_flow_style=False)

            self.logger.info("Configuration saved successfully")

        except Exception as e:
            self.logger.exception(f"Error saving configuration: {str(e)}")
            raise


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Build a ConfigManager from ``config_path``, ``PAYOUT_CONFIG_PATH`` or the bundled default."""
    load_dotenv()
    path = config_path or os.getenv("PAYOUT_CONFIG_PATH") or DEFAULT_CONFIG_PATH
    return ConfigManager(path)


def load_plan_config(manager: ConfigManager) -> PlanConfig:
    """Build the default PlanConfig from the ``plan`` section plus env overrides.

    Missing keys fall back to the built-in plan defaults. Values go through
    the same normalization as form input, so a malformed override reads as 0.
    """
    values = dict(manager.get_section("plan"))
    for env_name, field in PLAN_ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            logger.info(f"Plan value {field} overridden from {env_name}")
            values[field] = raw
    return PlanConfig.model_validate(values)
