from __future__ import annotations

import pytest

from language_service.core.config import Settings
from language_service.services import factory
from language_service.services.speech import OpenAISpeechService
from language_service.services.translation import OpenAITranslationService


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("TRANSLATION_PROVIDER", "openai")
    monkeypatch.setenv("SPEECH_PROVIDER", "openai")
    return Settings()


def test_builds_openai_backends(settings) -> None:
    service = factory.build_language_service(settings)

    assert isinstance(service._translator, OpenAITranslationService)
    assert isinstance(service._speech, OpenAISpeechService)


def test_unknown_translation_provider(monkeypatch) -> None:
    monkeypatch.setenv("TRANSLATION_PROVIDER", "babelfish")

    with pytest.raises(ValueError, match="Unknown translation provider"):
        factory.create_translation_service(Settings())


def test_unknown_speech_provider(monkeypatch) -> None:
    monkeypatch.setenv("SPEECH_PROVIDER", "espeak")

    with pytest.raises(ValueError, match="Unknown speech provider"):
        factory.create_speech_service(Settings())


def test_openai_provider_requires_key(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.setenv("TRANSLATION_PROVIDER", "openai")

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        factory.create_translation_service(Settings())


def test_gemini_provider_requires_key(monkeypatch) -> None:
    pytest.importorskip("google.genai")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_GENAI_USE_VERTEXAI", raising=False)
    monkeypatch.setenv("TRANSLATION_PROVIDER", "gemini")

    with pytest.raises(ValueError, match="Gemini API key"):
        factory.create_translation_service(Settings())
