"""Testes para config.settings (base e Asaas)."""

from __future__ import annotations

import pytest

from config.settings import (
    ASAAS_PRODUCTION_URL,
    ASAAS_SANDBOX_URL,
    AsaasSettings,
    BaseSettings,
    get_asaas_settings,
    get_base_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_asaas_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_asaas_settings.cache_clear()
    get_base_settings.cache_clear()


class TestAsaasSettings:
    def test_defaults_point_to_sandbox(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ASAAS_API_URL", "AS_URL", "ASAAS_ACCESS_TOKEN", "AS_TOKEN"):
            monkeypatch.delenv(name, raising=False)

        settings = get_asaas_settings()

        assert settings.api_base_url == ASAAS_SANDBOX_URL
        assert settings.is_sandbox is True
        assert settings.validate() == ["ASAAS_ACCESS_TOKEN não configurado"]

    def test_legacy_variable_names_are_accepted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ASAAS_API_URL", raising=False)
        monkeypatch.delenv("ASAAS_ACCESS_TOKEN", raising=False)
        monkeypatch.setenv("AS_URL", ASAAS_PRODUCTION_URL)
        monkeypatch.setenv("AS_TOKEN", "legacy-token")

        settings = get_asaas_settings()

        assert settings.api_base_url == ASAAS_PRODUCTION_URL
        assert settings.access_token == "legacy-token"
        assert settings.is_sandbox is False

    def test_new_names_take_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AS_TOKEN", "legacy-token")
        monkeypatch.setenv("ASAAS_ACCESS_TOKEN", "new-token")
        monkeypatch.setenv("ASAAS_WEBHOOK_TOKEN", "hook-secret")
        monkeypatch.setenv("ASAAS_MAX_RETRIES", "0")

        settings = get_asaas_settings()

        assert settings.access_token == "new-token"
        assert settings.webhook_auth_token == "hook-secret"
        assert settings.max_retries == 0

    def test_validate_reports_each_problem(self) -> None:
        settings = AsaasSettings(
            api_base_url="ftp://asaas",
            access_token="",
            request_timeout_seconds=0,
            max_retries=-1,
        )

        errors = settings.validate()

        assert len(errors) == 4
        assert any("ASAAS_API_URL" in error for error in errors)


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("anything", "development")],
    )
    def test_environment_parsing(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected

    def test_strict_validation_outside_development(self) -> None:
        assert BaseSettings(environment="production").strict_validation is True
        assert BaseSettings(environment="development").strict_validation is False

    def test_invalid_log_level(self) -> None:
        assert BaseSettings(log_level="LOUD").validate() == ["LOG_LEVEL inválido: LOUD"]
