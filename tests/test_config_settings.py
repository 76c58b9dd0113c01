"""Tests for runtime settings loading and validation."""

import pytest

from whoami.config import SettingsLoadError, config_load_settings

_SETTINGS_ENVIRONMENT = (
    "APPLICATION_HOST",
    "APPLICATION_PORT",
    "WHOAMI_NAME",
    "TLS_CERT_PATH",
    "TLS_KEY_PATH",
    "TLS_CA_PATH",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate settings from the host environment and any dotenv file."""

    for name in _SETTINGS_ENVIRONMENT:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_load_settings_uses_defaults() -> None:
    """Load defaults matching the container deployment layout.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when a default differs.
    """

    settings = config_load_settings()

    assert settings.application_host == "0.0.0.0"
    assert settings.application_port == 80
    assert settings.whoami_name is None
    assert settings.tls_cert_path == "/cert/tls.crt"
    assert settings.tls_key_path == "/cert/tls.key"
    assert settings.tls_ca_path is None
    assert settings.log_level == "info"


def test_config_load_settings_reads_name_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read the display name from `WHOAMI_NAME`.

    Returns:
        None: Assertions validate environment mapping.

    Raises:
        AssertionError: Raised when the environment is ignored.
    """

    monkeypatch.setenv("WHOAMI_NAME", "  blue ")
    monkeypatch.setenv("APPLICATION_PORT", "8080")

    settings = config_load_settings()

    assert settings.whoami_name == "blue"
    assert settings.application_port == 8080


def test_config_load_settings_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefer explicit overrides and ignore None overrides.

    Returns:
        None: Assertions validate override precedence.

    Raises:
        AssertionError: Raised when the environment wins.
    """

    monkeypatch.setenv("WHOAMI_NAME", "blue")

    settings = config_load_settings(whoami_name="green", application_port=None, log_level="DEBUG")

    assert settings.whoami_name == "green"
    assert settings.application_port == 80
    assert settings.log_level == "debug"


def test_config_load_settings_blank_name_means_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Treat a blank display name as not configured.

    Returns:
        None: Assertions validate blank handling.

    Raises:
        AssertionError: Raised when a blank name is kept.
    """

    monkeypatch.setenv("WHOAMI_NAME", "   ")

    assert config_load_settings().whoami_name is None


@pytest.mark.parametrize(
    "overrides",
    [{"application_port": 0}, {"application_port": 70000}, {"log_level": "verbose"}],
)
def test_config_load_settings_rejects_invalid_values(overrides: dict) -> None:
    """Raise SettingsLoadError for out-of-range or unknown values.

    Returns:
        None: Assertions validate startup validation.

    Raises:
        AssertionError: Raised when invalid settings load.
    """

    with pytest.raises(SettingsLoadError):
        config_load_settings(**overrides)
