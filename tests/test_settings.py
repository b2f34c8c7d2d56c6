# tests/test_settings.py
import pytest

from pkg_tokens.domain.exceptions import KeyConfigurationError
from pkg_tokens.domain.value_objects import SigningKey
from pkg_tokens.env import settings_from_env
from pkg_tokens.settings import TokenSettings

ENV_KEYS = (
    "TOKEN_SECRET_KEY",
    "TOKEN_ALGORITHM",
    "TOKEN_ACCESS_TTL",
    "TOKEN_REFRESH_TTL",
    "TOKEN_HEADER_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults():
    settings = TokenSettings(secret_key="secret1")

    assert settings.algorithm == "HS256"
    assert settings.access_ttl_seconds == 900
    assert settings.refresh_ttl_seconds == 2_592_000
    assert settings.header_name == "Authorization"
    assert settings.signing_key == SigningKey(b"secret1")


def test_settings_signing_key_rejects_empty_secret():
    with pytest.raises(KeyConfigurationError):
        TokenSettings(secret_key="").signing_key


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TOKEN_SECRET_KEY", "secret1")
    monkeypatch.setenv("TOKEN_ALGORITHM", "HS512")
    monkeypatch.setenv("TOKEN_ACCESS_TTL", "60")
    monkeypatch.setenv("TOKEN_REFRESH_TTL", " 3600 ")
    monkeypatch.setenv("TOKEN_HEADER_NAME", "X-Token")

    assert settings_from_env() == TokenSettings(
        secret_key="secret1",
        algorithm="HS512",
        access_ttl_seconds=60,
        refresh_ttl_seconds=3600,
        header_name="X-Token",
    )


def test_settings_from_env_defaults(monkeypatch):
    monkeypatch.setenv("TOKEN_SECRET_KEY", "secret1")

    assert settings_from_env() == TokenSettings(secret_key="secret1")


def test_settings_from_env_requires_secret(monkeypatch):
    with pytest.raises(RuntimeError, match="TOKEN_SECRET_KEY"):
        settings_from_env()

    monkeypatch.setenv("TOKEN_SECRET_KEY", "")
    with pytest.raises(RuntimeError, match="TOKEN_SECRET_KEY"):
        settings_from_env()


@pytest.mark.parametrize("value", ["soon", "-5", "0"])
def test_settings_from_env_rejects_bad_ttl(monkeypatch, value):
    monkeypatch.setenv("TOKEN_SECRET_KEY", "secret1")
    monkeypatch.setenv("TOKEN_ACCESS_TTL", value)

    with pytest.raises(RuntimeError, match="TOKEN_ACCESS_TTL"):
        settings_from_env()
