"""
Settings for the holiday resolver: nested YAML file plus environment overrides.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

from holiday_resolver.data.schemas import Config

logger = logging.getLogger(__name__)

ENV_PREFIX = "HOLIDAY_RESOLVER_"
CONFIG_PATH_ENV = ENV_PREFIX + "CONFIG"


class ConfigManager:
    """Reads settings.yaml, applies HOLIDAY_RESOLVER_* variables and builds a Config."""

    # (YAML section, key) -> Config field
    SECTION_MAPPINGS = {
        ("data", "catalog_path"): "catalog_path",
        ("data", "equinox_table_path"): "equinox_table_path",
        ("equinox", "min_year"): "equinox_min_year",
        ("equinox", "max_year"): "equinox_max_year",
        ("holidays", "rest_day"): "rest_day",
        ("holidays", "run_detection"): "run_detection",
        ("holidays", "language"): "holiday_language",
        ("holidays", "message"): "message",
        ("holidays", "min_year"): "min_year",
        ("holidays", "max_year"): "max_year",
        ("output", "format"): "output_format",
        ("output", "directory"): "output_directory",
        ("api", "host"): "api_host",
        ("api", "port"): "api_port",
    }

    # Environment variable suffix -> (Config field, converter)
    ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
        "CATALOG_PATH": ("catalog_path", str),
        "EQUINOX_TABLE_PATH": ("equinox_table_path", str),
        "EQUINOX_MIN_YEAR": ("equinox_min_year", int),
        "EQUINOX_MAX_YEAR": ("equinox_max_year", int),
        "REST_DAY": ("rest_day", str),
        "RUN_DETECTION": ("run_detection", str),
        "LANGUAGE": ("holiday_language", str),
        "OUTPUT_FORMAT": ("output_format", str),
        "OUTPUT_DIRECTORY": ("output_directory", str),
        "API_HOST": ("api_host", str),
        "API_PORT": ("api_port", int),
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Args:
            config_path: Settings file to read. Defaults to $HOLIDAY_RESOLVER_CONFIG,
                then to the settings.yaml shipped next to this module.
        """
        self.config_path = (
            config_path
            or os.environ.get(CONFIG_PATH_ENV)
            or str(Path(__file__).parent / "settings.yaml")
        )

    def load_config(self) -> Config:
        """
        Build the effective configuration.

        Values come from the YAML file first, then from environment variables.

        Raises:
            ValueError: If the file cannot be parsed or a value fails validation.
        """
        values = self._read_yaml()
        values.update(self._env_values())

        try:
            return Config(**values)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _read_yaml(self) -> Dict[str, Any]:
        path = Path(self.config_path)
        if not path.exists():
            logger.debug("Config file %s not found, using defaults", path)
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                nested = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file {path}: {e}")

        return self._flatten_config(nested) if nested else {}

    def _flatten_config(self, nested: Dict[str, Any]) -> Dict[str, Any]:
        """
        Map the nested YAML sections onto Config field names.

        Empty values are skipped so the packaged defaults apply. Relative
        paths in the data section are taken relative to the settings file.
        """
        flat = {}
        base_dir = Path(self.config_path).parent

        for (section, key), field in self.SECTION_MAPPINGS.items():
            value = (nested.get(section) or {}).get(key)
            if value is None or value == "":
                continue
            if section == "data" and not Path(value).is_absolute():
                value = str(base_dir / value)
            flat[field] = value

        return flat

    def _env_values(self) -> Dict[str, Any]:
        """Collect overrides from HOLIDAY_RESOLVER_* variables, skipping unparseable numbers."""
        overrides = {}
        for suffix, (field, convert) in self.ENV_OVERRIDES.items():
            name = ENV_PREFIX + suffix
            raw = os.environ.get(name)
            if raw is None:
                continue
            try:
                overrides[field] = convert(raw)
            except ValueError:
                logger.warning("Ignoring invalid value for %s: %r", name, raw)
        return overrides

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Write a Config back as nested YAML.

        Args:
            config: Configuration to write.
            output_path: Target file, defaults to the file this manager reads.
        """
        target = Path(output_path or self.config_path)

        values = config.model_dump()
        values["rest_day"] = config.rest_day.name.lower()
        nested: Dict[str, Dict[str, Any]] = {}
        for (section, key), field in self.SECTION_MAPPINGS.items():
            nested.setdefault(section, {})[key] = values[field]

        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            yaml.dump(nested, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
