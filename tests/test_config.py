import pytest

from config import Settings, get_settings
from errors import MissingCredential


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "s-key")
    monkeypatch.setenv("SUPABASE_TABLE", "profiles")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("STRICT_ANALYSIS_VALIDATION", "true")

    settings = get_settings()

    assert settings == Settings(
        gemini_api_key="g-key",
        gemini_model="gemini-2.0-flash",
        supabase_url="https://project.supabase.co",
        supabase_service_role_key="s-key",
        supabase_table="profiles",
        http_timeout=12.5,
        strict_analysis=True,
    )


def test_empty_values_count_as_missing(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY",
                 "SUPABASE_TABLE", "HTTP_TIMEOUT_SECONDS", "STRICT_ANALYSIS_VALIDATION"):
        monkeypatch.setenv(name, "")

    settings = Settings.from_env()

    assert settings.gemini_api_key is None
    assert settings.supabase_url is None
    assert settings.supabase_service_role_key is None
    assert settings.gemini_model == "gemini-1.5-flash"
    assert settings.supabase_table == "skill_analyses"
    assert settings.http_timeout == 30.0
    assert settings.strict_analysis is False


def test_invalid_timeout_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "abc")

    with pytest.raises(MissingCredential) as exc:
        get_settings()

    assert exc.value.error == "Invalid configuration"
    assert exc.value.status_code == 500
