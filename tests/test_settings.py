# Tests for reading settings from the environment.

from fintrack.services.settings.base import Settings


def test_cors_origins_default_allows_everything(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).cors_origins == ["*"]


def test_cors_origins_accepts_a_single_url(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000")
    assert Settings(_env_file=None).cors_origins == ["http://localhost:3000"]


def test_cors_origins_accepts_a_comma_separated_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://app.example.com,")
    settings = Settings(_env_file=None)
    assert settings.cors_origins == ["http://localhost:3000", "https://app.example.com"]


def test_numeric_settings_are_read_from_strings(monkeypatch):
    monkeypatch.setenv("ACCESS_EXPIRE_MIN", "15")
    monkeypatch.setenv("PORT", "9000")
    settings = Settings(_env_file=None)
    assert settings.access_expire_min == 15
    assert settings.port == 9000
