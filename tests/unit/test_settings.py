"""Unit tests for ecx_client.client.settings."""

from __future__ import annotations

import dataclasses

import pytest

from ecx_client.client.settings import EcxSettings


def test_settings_defaults() -> None:
    settings = EcxSettings.from_env({"ECX_BASE_URL": "https://api.equinix.com"})
    assert settings == EcxSettings(base_url="https://api.equinix.com")
    assert settings.token is None
    assert settings.timeout_s == 30.0
    assert settings.verify_tls is True


def test_settings_all_values() -> None:
    settings = EcxSettings.from_env(
        {
            "ECX_BASE_URL": "http://localhost:8888",
            "ECX_TOKEN": "tok",
            "ECX_TIMEOUT": "5.5",
            "ECX_VERIFY_TLS": "Off",
        }
    )
    assert settings.token == "tok"
    assert settings.timeout_s == 5.5
    assert settings.verify_tls is False


@pytest.mark.parametrize("raw", ["1", "true", "yes", "anything"])
def test_settings_verify_tls_truthy(raw: str) -> None:
    settings = EcxSettings.from_env({"ECX_BASE_URL": "h", "ECX_VERIFY_TLS": raw})
    assert settings.verify_tls is True


def test_settings_empty_token_is_none() -> None:
    settings = EcxSettings.from_env({"ECX_BASE_URL": "h", "ECX_TOKEN": ""})
    assert settings.token is None


def test_settings_missing_base_url_raises() -> None:
    with pytest.raises(ValueError, match="ECX_BASE_URL"):
        EcxSettings.from_env({})


def test_settings_bad_timeout_raises() -> None:
    with pytest.raises(ValueError, match="ECX_TIMEOUT"):
        EcxSettings.from_env({"ECX_BASE_URL": "h", "ECX_TIMEOUT": "soon"})


def test_settings_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ECX_BASE_URL", "https://sandbox.example")
    monkeypatch.delenv("ECX_TOKEN", raising=False)
    assert EcxSettings.from_env().base_url == "https://sandbox.example"


def test_settings_frozen() -> None:
    settings = EcxSettings(base_url="h")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.token = "other"  # type: ignore[misc]
