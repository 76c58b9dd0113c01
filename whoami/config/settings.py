"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the probe server and its TLS material.

    Environment variable names map directly to field names in uppercase.
    Example: `whoami_name` reads from `WHOAMI_NAME`.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port.
        whoami_name: Optional display name reported by identity endpoints.
        tls_cert_path: Server certificate path; TLS is enabled when it exists with the key.
        tls_key_path: Server private key path.
        tls_ca_path: Optional client CA bundle path enabling mutual TLS.
        log_level: Root level for the `whoami` logger tree.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=80, ge=1, le=65535)
    whoami_name: str | None = Field(default=None)
    tls_cert_path: str = Field(default="/cert/tls.crt")
    tls_key_path: str = Field(default="/cert/tls.key")
    tls_ca_path: str | None = Field(default=None)
    log_level: str = Field(default="info")

    @field_validator("whoami_name", "tls_ca_path")
    @classmethod
    def _validate_optional_string(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        if not stripped_value:
            return None
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(SUPPORTED_LOG_LEVELS)}")
        return normalized_value


def config_load_settings(**overrides: object) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        **overrides: Explicit values (for example from command-line flags) that take
            precedence over the environment. `None` values are ignored.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    explicit_values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return AppSettings(**explicit_values)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update flags, .env or environment variables. Details: {error}"
        ) from error
