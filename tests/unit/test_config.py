import pytest
from pydantic import ValidationError

from doublevisuals.config import Config, get_config


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the defaults match the site's storage contract."""
    monkeypatch.delenv("SERVER_PORT", raising=False)
    config = Config(_env_file=None)
    assert config.server_port == 8080
    assert config.log_level == "INFO"
    assert config.consent_key == "dv_cookies_accepted"
    assert config.consent_cookie_max_age == 31536000
    assert config.theme_key == "theme"
    assert config.banner_close_delay_ms == 260
    assert config.storage_path is None
    assert config.memory_store_max_items == 100000


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVER_PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://doublevisuals.net, https://www.doublevisuals.net,")
    monkeypatch.setenv("STORAGE_PATH", "/var/lib/dv/store.json")

    config = Config(_env_file=None)

    assert config.server_port == 9000
    assert config.log_level == "DEBUG"
    assert config.allowed_origins == ["https://doublevisuals.net", "https://www.doublevisuals.net"]
    assert config.storage_path == "/var/lib/dv/store.json"


def test_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVER_PORT", "70000")
    with pytest.raises(ValidationError):
        Config(_env_file=None)


def test_tone_specs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BANNER_TONE_FREQUENCY_HZ", "1000")
    config = Config(_env_file=None)
    assert config.banner_tone.frequency_hz == 1000
    assert config.nav_tone.duration_ms == 60


def test_get_config_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the get_config function caches its result."""
    monkeypatch.delenv("SERVER_PORT", raising=False)
    config1 = get_config()
    config2 = get_config()
    assert config1 is config2

    monkeypatch.setenv("SERVER_PORT", "5000")
    config3 = get_config()
    assert config3.server_port == 8080
    assert config1 is config3

    get_config.cache_clear()
    config4 = get_config()
    assert config4.server_port == 5000
    assert config1 is not config4


def test_memory_store_cap_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEMORY_STORE_MAX_ITEMS", "500")
    assert Config(_env_file=None).memory_store_max_items == 500

    monkeypatch.setenv("MEMORY_STORE_MAX_ITEMS", "0")
    with pytest.raises(ValidationError):
        Config(_env_file=None)
