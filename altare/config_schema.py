"""
Config Schema Validation

Pydantic models for validating config.yaml structure.
Provides clear error messages when configuration is invalid.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_to_file: bool = Field(default=True, description="Enable file logging")
    log_to_console: bool = Field(default=True, description="Enable console logging")


class ApplicationConfig(BaseModel):
    """Application settings"""

    timezone: str = Field(
        default="UTC",
        description="IANA timezone name (e.g., America/New_York)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone"""
        try:
            from zoneinfo import ZoneInfo

            ZoneInfo(v)
        except Exception:
            raise ValueError(
                f"Invalid timezone '{v}'. Use IANA format like 'America/New_York' or 'UTC'"
            )
        return v


class VendorAccessConfig(BaseModel):
    """Vendor temporary access settings"""

    login_url: str = Field(
        default="http://localhost:3000/vendor/login",
        min_length=1,
        description="Vendor login page; the access token is appended as a path segment",
    )


class SeatingConfig(BaseModel):
    """Seating chart settings"""

    seed_predefined_templates: bool = Field(
        default=True,
        description="Insert the predefined table templates on startup",
    )


class AdminConfig(BaseModel):
    """Admin authentication"""

    username: str = Field(default="admin", min_length=1, description="Admin username")
    password_hash: Optional[str] = Field(
        default=None,
        description="bcrypt password hash (leave empty for default 'admin')",
    )


class AppConfig(BaseModel):
    """
    Root configuration model for config.yaml

    Validates the entire configuration structure on load.
    """

    application: ApplicationConfig = Field(default_factory=ApplicationConfig)
    vendor_access: VendorAccessConfig = Field(default_factory=VendorAccessConfig)
    seating: SeatingConfig = Field(default_factory=SeatingConfig)
    admin: AdminConfig = Field(default_factory=AdminConfig)

    model_config = {"populate_by_name": True}


def validate_config(config_dict: dict) -> AppConfig:
    """
    Validate a config dictionary against the schema.

    Raises:
        pydantic.ValidationError: If config is invalid
    """
    return AppConfig.model_validate(config_dict)


def get_validation_errors(config_dict: dict) -> List[str]:
    """
    Get a list of validation errors for a config dictionary.

    Returns:
        List of error messages (empty if valid)
    """
    try:
        validate_config(config_dict)
        return []
    except ValidationError as e:
        return [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
