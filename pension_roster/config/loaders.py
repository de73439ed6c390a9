import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from cerberus import Validator
from pydantic import ValidationError

from .models import ReportConfig

# Configure logger for this module
logger = logging.getLogger(__name__)

CONFIG_SCHEMA: Dict[str, Any] = {
    "reference_date": {"type": ["date", "string"], "required": False, "nullable": True},
    "census_path": {"type": "string", "required": False, "nullable": True},
    "enrollment": {
        "type": "dict",
        "required": False,
        "schema": {
            "min_service_years": {"type": "integer", "min": 0},
        },
    },
    "output": {
        "type": "dict",
        "required": False,
        "schema": {
            "indent": {"type": "integer", "min": 0},
            "output_dir": {"type": "string", "nullable": True},
        },
    },
    "logging": {
        "type": "dict",
        "required": False,
        "schema": {
            "log_dir": {"type": "string", "nullable": True},
            "debug": {"type": "boolean"},
        },
    },
}


class ConfigLoadError(Exception):
    """Custom exception for errors during config loading."""

    pass


def load_yaml_config(config_path: Path) -> Optional[Dict[str, Any]]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path object pointing to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration. An empty file yields
        an empty dictionary.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    if not isinstance(config_path, Path):
        config_path = Path(config_path)

    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def parse_report_config(config_data: Dict[str, Any]) -> ReportConfig:
    """
    Validates a raw configuration mapping and builds a ReportConfig.
    - Unknown top-level keys are rejected by the schema check.
    - Raises ConfigLoadError on validation errors.
    """
    v = Validator(CONFIG_SCHEMA)
    if not v.validate(config_data):
        raise ConfigLoadError(f"Config validation failed: {v.errors}")

    try:
        cfg = ReportConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}") from e

    logger.debug(f"Report configuration resolved: {cfg}")
    return cfg


def load_report_config(config_path: Optional[Path] = None) -> ReportConfig:
    """Loads YAML from ``config_path`` into a ReportConfig; defaults when no path is given."""
    if config_path is None:
        return ReportConfig()
    return parse_report_config(load_yaml_config(config_path))


# Expose for import
__all__ = [
    "CONFIG_SCHEMA",
    "load_yaml_config",
    "parse_report_config",
    "load_report_config",
    "ConfigLoadError",
]
