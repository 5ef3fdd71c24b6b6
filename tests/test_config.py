"""
Tests for configuration loading.
"""

import os
from pathlib import Path

import pytest
import yaml

from holiday_resolver.config.manager import ConfigManager
from holiday_resolver.data.schemas import PACKAGE_DATA_DIR, Config, Weekday


@pytest.fixture
def clean_env(monkeypatch):
    """Remove HOLIDAY_RESOLVER_* variables set outside the test."""
    for name in list(os.environ):
        if name.startswith("HOLIDAY_RESOLVER_"):
            monkeypatch.delenv(name)
    return monkeypatch


def write_yaml(path: Path, data) -> str:
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return str(path)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_packaged_settings(self, clean_env):
        config = ConfigManager().load_config()

        assert config == Config()
        assert config.rest_day == Weekday.SUNDAY
        assert config.catalog_path == str(PACKAGE_DATA_DIR / "base.json")

    def test_missing_file_uses_defaults(self, clean_env, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config == Config()

    def test_nested_sections(self, clean_env, tmp_path):
        path = write_yaml(
            tmp_path / "settings.yaml",
            {
                "equinox": {"min_year": 2025, "max_year": 2035},
                "holidays": {"rest_day": "Sat", "run_detection": "catalog_order", "language": "en"},
                "api": {"port": 9000},
            },
        )

        config = ConfigManager(path).load_config()

        assert config.equinox_min_year == 2025
        assert config.equinox_max_year == 2035
        assert config.rest_day == Weekday.SATURDAY
        assert config.run_detection == "catalog_order"
        assert config.holiday_language == "en"
        assert config.api_port == 9000

    def test_relative_data_paths(self, clean_env, tmp_path):
        path = write_yaml(tmp_path / "settings.yaml", {"data": {"catalog_path": "my_catalog.csv"}})

        config = ConfigManager(path).load_config()

        assert config.catalog_path == str(tmp_path / "my_catalog.csv")
        assert config.equinox_table_path == Config().equinox_table_path

    def test_env_overrides(self, clean_env, tmp_path):
        clean_env.setenv("HOLIDAY_RESOLVER_REST_DAY", "monday")
        clean_env.setenv("HOLIDAY_RESOLVER_EQUINOX_MAX_YEAR", "2040")
        clean_env.setenv("HOLIDAY_RESOLVER_API_PORT", "not-a-port")

        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config.rest_day == Weekday.MONDAY
        assert config.equinox_max_year == 2040
        assert config.api_port == 8000

    def test_invalid_rest_day(self, clean_env, tmp_path):
        path = write_yaml(tmp_path / "settings.yaml", {"holidays": {"rest_day": "someday"}})

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(path).load_config()

    def test_invalid_equinox_range(self, clean_env, tmp_path):
        path = write_yaml(tmp_path / "settings.yaml", {"equinox": {"min_year": 2050, "max_year": 2020}})

        with pytest.raises(ValueError, match="equinox_min_year"):
            ConfigManager(path).load_config()

    def test_invalid_yaml(self, clean_env, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("holidays: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, clean_env, tmp_path):
        path = str(tmp_path / "nested" / "settings.yaml")
        manager = ConfigManager(path)
        config = Config(rest_day=Weekday.SATURDAY, run_detection="catalog_order", api_port=8123)

        manager.save_config(config)

        saved = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        assert saved["holidays"]["rest_day"] == "saturday"
        assert manager.load_config() == config

    def test_config_path_from_env(self, clean_env, tmp_path):
        path = write_yaml(tmp_path / "settings.yaml", {"holidays": {"language": "en"}})
        clean_env.setenv("HOLIDAY_RESOLVER_CONFIG", path)

        assert ConfigManager().load_config().holiday_language == "en"

    def test_output_format_from_env(self, clean_env, tmp_path):
        clean_env.setenv("HOLIDAY_RESOLVER_OUTPUT_FORMAT", "both")

        assert ConfigManager(str(tmp_path / "missing.yaml")).load_config().output_format == "both"

    def test_invalid_output_format(self, clean_env, tmp_path):
        path = write_yaml(tmp_path / "settings.yaml", {"output": {"format": "xlsx"}})

        with pytest.raises(ValueError, match="output_format"):
            ConfigManager(path).load_config()
