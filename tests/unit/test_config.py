"""
Unit tests for configuration.

Tests config.yaml loading, schema validation, settings precedence,
admin credentials and log level resolution.
"""

import logging

import pytest
import yaml

from altare.config import (
    DEFAULT_CONFIG,
    AdminSettings,
    get_api_settings,
    hash_password,
    load_yaml_config,
    verify_password_hash,
)
from altare.config_schema import get_validation_errors, validate_config
from altare.utils.custom_logger import CustomFormatter, resolve_level, setup_logger


class TestConfigLoading:
    """Test config.yaml loading."""

    def test_creates_default_when_missing(self, tmp_path):
        config_path = tmp_path / "nested" / "config.yaml"

        config = load_yaml_config(str(config_path))

        assert config_path.exists()
        assert config["vendor_access"]["login_url"] == "http://localhost:3000/vendor/login"
        assert config["seating"]["seed_predefined_templates"] is True

    def test_reads_existing_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("vendor_access:\n  login_url: https://altare.example/v\n")

        assert load_yaml_config(str(config_path))["vendor_access"]["login_url"] == "https://altare.example/v"

    def test_empty_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")

        assert load_yaml_config(str(config_path)) == {}

    def test_default_config_is_valid(self):
        assert get_validation_errors(yaml.safe_load(DEFAULT_CONFIG)) == []


class TestConfigSchema:
    """Test config schema validation."""

    def test_empty_config_uses_defaults(self):
        config = validate_config({})
        assert config.application.timezone == "UTC"
        assert config.admin.username == "admin"

    def test_invalid_timezone(self):
        errors = get_validation_errors({"application": {"timezone": "Mars/Olympus"}})
        assert len(errors) == 1
        assert errors[0].startswith("application.timezone")

    def test_invalid_log_level(self):
        errors = get_validation_errors({"application": {"logging": {"level": "LOUD"}}})
        assert any("logging.level" in e for e in errors)

    def test_empty_login_url(self):
        assert get_validation_errors({"vendor_access": {"login_url": ""}}) != []


class TestAPISettings:
    """Test settings precedence."""

    def test_environment_overrides_yaml(self):
        settings = get_api_settings()
        assert settings.log_to_file is False
        assert settings.seed_templates_on_startup is False

    def test_defaults(self):
        settings = get_api_settings()
        assert settings.api_prefix == "/api/v1"
        assert settings.vendor_access_ttl_days == 7
        assert settings.jwt_algorithm == "HS256"


class TestPasswords:
    """Test bcrypt helpers and admin settings."""

    def test_hash_and_verify(self):
        hashed = hash_password("correct-horse-42")
        assert hashed != "correct-horse-42"
        assert verify_password_hash("correct-horse-42", hashed) is True
        assert verify_password_hash("wrong", hashed) is False

    def test_admin_default_password(self):
        admin = AdminSettings()
        assert admin.username == "admin"
        assert admin.is_default_password is True
        assert admin.verify_password("admin") is True
        assert admin.verify_password("nope") is False


class TestLogging:
    """Test log level resolution and the formatter."""

    @pytest.mark.parametrize(
        "level, expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("nonsense", logging.INFO), (logging.ERROR, logging.ERROR)],
    )
    def test_resolve_level(self, level, expected):
        assert resolve_level(level) == expected

    def test_formatter_layout(self):
        record = logging.LogRecord("altare.test", logging.INFO, __file__, 1, "hello", None, None)
        line = CustomFormatter().format(record)
        assert line.endswith(" - altare.test - INFO: hello")
        assert line[9:11] in ("AM", "PM")

    def test_file_logging(self, tmp_path):
        logger = setup_logger("altare.test.file", log_to_console=False, logs_dir=tmp_path)
        logger.info("written")
        for handler in logger.handlers:
            handler.flush()

        files = list(tmp_path.glob("altare_*.log"))
        assert len(files) == 1
        assert "written" in files[0].read_text()

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
