"""Tests for configuration loading and the configuration manager."""

import json
import os
from decimal import Decimal
from unittest.mock import patch

import pytest
import yaml

from solidkit.config import AppConfig, LoggingConfig, WiringConfig
from solidkit.config.loader import ConfigurationLoader
from solidkit.config.manager import ConfigurationManager
from solidkit.domain.base import ConfigurationError


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "solidkit.yaml"
    path.write_text(yaml.safe_dump({
        "logging": {"level": "debug"},
        "wiring": {"record_store": "mysql", "payment_source": "rewards"},
        "variants": {"credit_card": {"card_number": 5500000000000004, "limit": "250.00"}},
    }))
    return path


class TestConfigurationLoader:
    """Test raw configuration loading."""

    def test_load_yaml(self, yaml_config):
        """Test loading a YAML file."""
        data = ConfigurationLoader().load_from_file(str(yaml_config))
        assert data["wiring"]["record_store"] == "mysql"

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "solidkit.json"
        path.write_text(json.dumps({"wiring": {"printer": "laser"}}))

        assert ConfigurationLoader().load_from_file(str(path)) == {"wiring": {"printer": "laser"}}

    def test_empty_file_is_empty_config(self, tmp_path):
        """Test that an empty file yields an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigurationLoader().load_from_file(str(path)) == {}

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationLoader().load_from_file(str(tmp_path / "absent.yaml"))

    def test_malformed_json(self, tmp_path):
        """Test that malformed JSON raises ConfigurationError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Failed to load"):
            ConfigurationLoader().load_from_file(str(path))

    def test_non_mapping_rejected(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- mysql\n- postgres\n")
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            ConfigurationLoader().load_from_file(str(path))

    def test_default_location_search(self, tmp_path, yaml_config):
        """Test that the first default location found is loaded."""
        data = ConfigurationLoader().load_configuration(str(tmp_path))
        assert data["wiring"]["payment_source"] == "rewards"

    def test_no_default_location(self, tmp_path):
        """Test that no configuration file yields an empty configuration."""
        assert ConfigurationLoader().load_configuration(str(tmp_path)) == {}

    def test_environment_overrides_nest_and_parse(self):
        """Test SOLIDKIT_ overrides with nested keys and typed values."""
        environ = {
            "SOLIDKIT_WIRING__RECORD_STORE": "mysql",
            "SOLIDKIT_VARIANTS__REWARDS__POINTS": "120",
            "OTHER_VAR": "ignored",
        }
        original = {"wiring": {"printer": "laser"}}

        result = ConfigurationLoader().apply_environment_overrides(original, environ)

        assert result == {
            "wiring": {"printer": "laser", "record_store": "mysql"},
            "variants": {"rewards": {"points": 120}},
        }
        assert original == {"wiring": {"printer": "laser"}}

    def test_environment_overrides_keep_string_fields_raw(self):
        """Test that digit strings for str fields are not read as numbers."""
        environ = {
            "SOLIDKIT_VARIANTS__CREDIT_CARD__CARD_NUMBER": "0123456701234567",
            "SOLIDKIT_VERSION": "1.10",
            "SOLIDKIT_VARIANTS__CREDIT_CARD__LIMIT": "75.5",
        }

        result = ConfigurationLoader().apply_environment_overrides({}, environ)

        assert result["variants"]["credit_card"]["card_number"] == "0123456701234567"
        assert result["version"] == "1.10"
        assert result["variants"]["credit_card"]["limit"] == 75.5

    def test_environment_overrides_default_to_os_environ(self):
        """Test that os.environ is read when no mapping is given."""
        with patch.dict(os.environ, {"SOLIDKIT_LOGGING__LEVEL": "ERROR"}):
            result = ConfigurationLoader().apply_environment_overrides({})
        assert result["logging"]["level"] == "ERROR"


class TestConfigurationManager:
    """Test the configuration manager."""

    def test_defaults(self, tmp_path, monkeypatch):
        """Test defaults when no file or override exists."""
        monkeypatch.chdir(tmp_path)
        manager = ConfigurationManager(environ={})

        assert manager.app_config == AppConfig()
        assert manager.get_wiring_config().record_store == "postgres"
        assert manager.get_logging_config().level == "WARNING"

    def test_file_values(self, yaml_config):
        """Test values loaded from a file."""
        manager = ConfigurationManager(str(yaml_config), environ={})

        assert manager.get_logging_config().level == "DEBUG"
        assert manager.get_wiring_config().payment_source == "rewards"
        assert manager.get_variant_options("credit_card") == {
            "card_number": "5500000000000004",
            "limit": Decimal("250.00"),
        }

    def test_environment_beats_file(self, yaml_config):
        """Test that environment overrides win over the file."""
        manager = ConfigurationManager(str(yaml_config), environ={"SOLIDKIT_WIRING__RECORD_STORE": "postgres"})
        assert manager.get_wiring_config().record_store == "postgres"

    def test_environment_card_number_keeps_leading_zero(self, yaml_config):
        """Test that a card number from the environment reaches the options unchanged."""
        manager = ConfigurationManager(
            str(yaml_config), environ={"SOLIDKIT_VARIANTS__CREDIT_CARD__CARD_NUMBER": "0123456701234567"}
        )

        assert manager.get_variant_options("credit_card")["card_number"] == "0123456701234567"

    def test_variant_without_options(self, yaml_config):
        """Test that stateless variants have empty options."""
        assert ConfigurationManager(str(yaml_config), environ={}).get_variant_options("mysql") == {}

    def test_get_typed_cached(self, yaml_config):
        """Test that typed sections are cached until reload."""
        manager = ConfigurationManager(str(yaml_config), environ={})
        first = manager.get_typed(WiringConfig)

        assert manager.get_typed(WiringConfig) is first
        manager.reload()
        assert manager.get_typed(WiringConfig) is not first
        assert isinstance(manager.get_typed(LoggingConfig), LoggingConfig)

    def test_unknown_typed_section(self, yaml_config):
        """Test that unknown typed sections raise ValueError."""
        with pytest.raises(ValueError, match="Unknown configuration type"):
            ConfigurationManager(str(yaml_config), environ={}).get_typed(dict)

    def test_unknown_wiring_field(self, tmp_path, monkeypatch):
        """Test that unknown wiring fields are reported."""
        monkeypatch.chdir(tmp_path)
        manager = ConfigurationManager(environ={"SOLIDKIT_WIRING__QUEUE": "kafka"})

        with pytest.raises(ConfigurationError) as exc_info:
            manager.app_config

        assert exc_info.value.missing_fields == ["wiring.queue"]

    def test_invalid_log_level(self, tmp_path):
        """Test that an invalid log level is rejected."""
        path = tmp_path / "solidkit.json"
        path.write_text(json.dumps({"logging": {"level": "LOUD"}}))

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(path), environ={}).get_logging_config()

        assert exc_info.value.missing_fields == ["logging.level"]
