### Description ###
# Altare Planner - Wedding Planning API
# - API Configuration -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Configuration Management

Uses Pydantic Settings for configuration with environment variable support.
Loads settings from .env file and data/config.yaml.

Config file location (in order of precedence):
1. ALTARE_CONFIG_PATH environment variable
2. data/config.yaml (default - created on first run)
"""

import os
from functools import lru_cache
from pathlib import Path

import bcrypt
import yaml
from pydantic_settings import BaseSettings


def get_project_root() -> Path:
    """Get the project root directory"""
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """
    Get the path to config.yaml.

    Priority:
    1. ALTARE_CONFIG_PATH environment variable (if set)
    2. data/config.yaml under the project root
    """
    env_path = os.environ.get("ALTARE_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    return get_project_root() / "data" / "config.yaml"


def get_version() -> str:
    """Read version from VERSION file"""
    version_file = get_project_root() / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


class APISettings(BaseSettings):
    """API Server Settings"""

    # API Configuration
    api_title: str = "Altare Planner API"
    api_version: str = get_version()
    api_prefix: str = "/api/v1"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # App database (SQLite by default)
    database_url: str = f"sqlite:///{get_project_root() / 'data' / 'altare.db'}"

    # Security
    secret_key: str = "change-this-in-production"  # Used for JWT signing
    jwt_algorithm: str = "HS256"
    user_token_hours: int = 24
    admin_token_hours: int = 24
    vendor_session_hours: int = 12

    # Vendor temporary access
    vendor_access_ttl_days: int = 7
    vendor_login_url: str = "http://localhost:3000/vendor/login"

    # Seating
    seed_templates_on_startup: bool = True

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = True
    log_to_console: bool = True

    # Timezone (loaded from config.yaml)
    timezone: str = "UTC"

    class Config:
        env_prefix = "ALTARE_"
        env_file = ".env"
        extra = "ignore"


DEFAULT_CONFIG = """# Altare Planner Configuration
# Main configuration file for application settings

# Application Settings
application:
  # Timezone for logs and timestamps (IANA timezone name)
  # Examples: America/New_York, America/Los_Angeles, Europe/London, UTC
  timezone: "UTC"

  # Logging Configuration
  logging:
    level: "INFO"             # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_to_file: true         # Enable file logging
    log_to_console: true      # Enable console logging

# Vendor Temporary Access
vendor_access:
  # Base URL of the vendor login page; the access token is appended as a path segment
  login_url: "http://localhost:3000/vendor/login"

# Seating Chart
seating:
  # Insert the predefined table templates on startup (existing names are skipped)
  seed_predefined_templates: true

# Admin Authentication
# If not configured, defaults to admin/admin (change in production!)
admin:
  username: "admin"
  # password_hash: "$2b$12$..."  # Generate with: python -c "import bcrypt; print(bcrypt.hashpw(b'YOUR_PASSWORD', bcrypt.gensalt()).decode())"
  # Leave password_hash commented out to use default password 'admin'
"""


def load_yaml_config(config_path: str | None = None) -> dict:
    """Load configuration from YAML file, creating default if missing"""
    config_file = get_config_path() if config_path is None else Path(config_path)

    if not config_file.exists():
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)
        print(f"Created default configuration file: {config_file}")

    with open(config_file, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_api_settings() -> APISettings:
    """Get cached API settings instance"""
    from altare.config_schema import get_validation_errors

    config = load_yaml_config()
    for error in get_validation_errors(config):
        import warnings

        warnings.warn(f"Config validation warning: {error}", UserWarning, stacklevel=2)

    app_config = config.get("application", {}) or {}
    logging_config = app_config.get("logging", {}) or {}
    vendor_config = config.get("vendor_access", {}) or {}
    seating_config = config.get("seating", {}) or {}

    overrides = {
        "timezone": app_config.get("timezone", "UTC"),
        "log_level": logging_config.get("level", "INFO"),
        "log_to_file": logging_config.get("log_to_file", True),
        "log_to_console": logging_config.get("log_to_console", True),
    }
    if "login_url" in vendor_config:
        overrides["vendor_login_url"] = vendor_config["login_url"]
    if "seed_predefined_templates" in seating_config:
        overrides["seed_templates_on_startup"] = seating_config["seed_predefined_templates"]

    # Environment variables win over config.yaml
    overrides = {
        key: value
        for key, value in overrides.items()
        if f"ALTARE_{key.upper()}" not in os.environ
    }
    return APISettings(**overrides)


class AdminSettings:
    """Admin authentication settings loaded from config.yaml"""

    def __init__(self):
        config = load_yaml_config()
        admin_config = config.get("admin", {}) or {}

        self.username: str = admin_config.get("username", "admin")
        self.password_hash: str | None = admin_config.get("password_hash")

        # If no password hash set, create a default one (for initial setup)
        if not self.password_hash:
            self.password_hash = bcrypt.hashpw(b"admin", bcrypt.gensalt()).decode()
            self._is_default = True
        else:
            self._is_default = False

    def verify_password(self, password: str) -> bool:
        """Verify a password against the stored hash"""
        if not self.password_hash:
            return False
        return bcrypt.checkpw(password.encode(), self.password_hash.encode())

    @property
    def is_default_password(self) -> bool:
        """Check if using default password (should prompt to change)"""
        return self._is_default


def get_admin_settings() -> AdminSettings:
    """Get admin settings instance (not cached - reloads from config)"""
    return AdminSettings()


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (admin config and planner accounts)"""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password_hash(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash"""
    return bcrypt.checkpw(password.encode(), hashed.encode())
