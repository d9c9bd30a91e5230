from __future__ import annotations

from pathlib import Path

import pytest

from language_service.core.config import Settings, parse_voice_map
from language_service.models.language import LanguageCode

_ENV_NAMES = [
    "LANGUAGE_SERVER_HOST",
    "LANGUAGE_SERVER_PORT",
    "LANGUAGE_SERVER_MAX_WORKERS",
    "LANGUAGE_SERVER_GRACE_SECONDS",
    "LANGUAGE_ERROR_REPORTING",
    "LANGUAGE_CLIENT_TARGET",
    "LANGUAGE_CLIENT_TIMEOUT",
    "LANGUAGE_AUDIO_OUTPUT_DIR",
    "TRANSLATION_PROVIDER",
    "TRANSLATION_MODEL",
    "TRANSLATION_TEMPERATURE",
    "SPEECH_PROVIDER",
    "SPEECH_TTS_MODEL",
    "SPEECH_TTS_VOICE",
    "SPEECH_TTS_VOICES",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = Settings()

    assert settings.server.address == "0.0.0.0:8081"
    assert settings.server.max_workers == 10
    assert settings.server.error_reporting == "field"
    assert settings.client.target == "localhost:8081"
    assert settings.client.audio_output_dir == Path(".")
    assert settings.translation.provider == "openai"
    assert settings.speech.provider == "google"
    assert settings.speech.voices == {}
    assert settings.log_level == "INFO"


def test_environment_overrides(clean_env) -> None:
    clean_env.setenv("LANGUAGE_SERVER_PORT", "9090")
    clean_env.setenv("LANGUAGE_SERVER_MAX_WORKERS", "0")
    clean_env.setenv("LANGUAGE_ERROR_REPORTING", " Status ")
    clean_env.setenv("TRANSLATION_PROVIDER", "Gemini")
    clean_env.setenv("SPEECH_TTS_VOICES", "fr=fr-FR-Neural2-A, zh=cmn-CN-Wavenet-A")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.server.port == 9090
    assert settings.server.max_workers == 1
    assert settings.server.error_reporting == "status"
    assert settings.translation.provider == "gemini"
    assert settings.speech.voices == {
        LanguageCode.FR: "fr-FR-Neural2-A",
        LanguageCode.ZH: "cmn-CN-Wavenet-A",
    }
    assert settings.log_level == "DEBUG"


def test_invalid_port_raises(clean_env) -> None:
    clean_env.setenv("LANGUAGE_SERVER_PORT", "eighty")

    with pytest.raises(RuntimeError):
        Settings()


def test_invalid_reporting_mode_raises(clean_env) -> None:
    clean_env.setenv("LANGUAGE_ERROR_REPORTING", "loud")

    with pytest.raises(RuntimeError):
        Settings()


@pytest.mark.parametrize("raw", ["fr", "xx=voice", "unknown=voice", "en="])
def test_invalid_voice_map_entries(raw) -> None:
    with pytest.raises(RuntimeError):
        parse_voice_map(raw)


def test_voice_map_ignores_empty_entries() -> None:
    assert parse_voice_map("en=en-US-Neural2-C,,") == {LanguageCode.EN: "en-US-Neural2-C"}
