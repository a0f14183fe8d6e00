import pytest

from shape_api.config import load_settings


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("GEMINI_TIMEOUT", "12.5")
    monkeypatch.setenv("SHAPE_API_TOKENS", "tok1:alice, tok2:bob")
    monkeypatch.setenv("SHAPE_API_CORS_ORIGINS", "http://a.test,http://b.test")

    settings = load_settings()

    assert settings.gemini_api_key == "secret"
    assert settings.gemini_model == "gemini-test"
    assert settings.gemini_timeout == 12.5
    assert settings.api_tokens == {"tok1": "alice", "tok2": "bob"}
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_load_settings_defaults(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "GEMINI_TIMEOUT",
        "SHAPE_API_TOKENS",
        "SHAPE_API_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.gemini_api_key is None
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.gemini_timeout is None
    assert settings.api_tokens == {}


def test_malformed_token_entry(monkeypatch):
    monkeypatch.setenv("SHAPE_API_TOKENS", "just-a-token")
    with pytest.raises(ValueError):
        load_settings()
