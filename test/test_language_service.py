from __future__ import annotations

import pytest

from conftest import FAKE_MP3, StubSpeech
from language_service.models.language import ErrorType, LanguageCode, LanguageQuery
from language_service.services.language_service import LanguageService
from language_service.services.speech import SpeechServiceError
from language_service.services.translation import TranslationServiceError


@pytest.fixture
def service(translator, speech) -> LanguageService:
    return LanguageService(translator=translator, speech=speech)


def _query(text: str, source: LanguageCode, target: LanguageCode) -> LanguageQuery:
    return LanguageQuery(text=text, source=source, target=target)


def test_translate_success(service, translator) -> None:
    result = service.translate(_query("Hello", LanguageCode.EN, LanguageCode.FR))

    assert result.ok
    assert result.error_type is ErrorType.NONE
    assert result.translated_text == "Bonjour"
    assert translator.calls == [{"text": "Hello", "source": LanguageCode.EN, "target": LanguageCode.FR}]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_translate_blank_text_is_user_error(service, translator, text) -> None:
    result = service.translate(_query(text, LanguageCode.EN, LanguageCode.FR))

    assert result.error_type is ErrorType.USER
    assert result.translated_text == ""
    assert translator.calls == []


def test_translate_unknown_target_is_user_error(service, translator) -> None:
    result = service.translate(_query("Hello", LanguageCode.EN, LanguageCode.UNKNOWN))

    assert result.error_type is ErrorType.USER
    assert translator.calls == []


def test_translate_unknown_source_lets_backend_detect(service, translator) -> None:
    result = service.translate(_query("Hello", LanguageCode.UNKNOWN, LanguageCode.DE))

    assert result.ok
    assert result.translated_text == "Hallo"
    assert translator.calls[0]["source"] is LanguageCode.UNKNOWN


def test_translate_same_language_returns_input(service, translator) -> None:
    result = service.translate(_query("Hello", LanguageCode.EN, LanguageCode.EN))

    assert result.ok
    assert result.translated_text == "Hello"
    assert translator.calls == []


def test_translate_backend_rejection_is_user_error(service, translator) -> None:
    result = service.translate(_query("Untranslatable", LanguageCode.EN, LanguageCode.FR))

    assert result.error_type is ErrorType.USER
    assert "Unsupported phrase" in result.detail


def test_translate_backend_failure_is_internal_error(service, translator) -> None:
    translator.error = TranslationServiceError("upstream model failed")

    result = service.translate(_query("Hello", LanguageCode.EN, LanguageCode.FR))

    assert result.error_type is ErrorType.INTERNAL
    assert result.translated_text == ""


def test_translate_unexpected_exception_is_internal_error(service, translator) -> None:
    translator.error = KeyError("boom")

    result = service.translate(_query("Hello", LanguageCode.EN, LanguageCode.FR))

    assert result.error_type is ErrorType.INTERNAL


def test_translate_empty_backend_text_is_internal_error(translator, speech) -> None:
    translator.translations[("Hello", LanguageCode.FR)] = ""
    service = LanguageService(translator=translator, speech=speech)

    result = service.translate(_query("Hello", LanguageCode.EN, LanguageCode.FR))

    assert result.error_type is ErrorType.INTERNAL


def test_synthesize_same_language_skips_translation(service, translator, speech) -> None:
    result = service.synthesize(_query("Hello", LanguageCode.EN, LanguageCode.EN))

    assert result.ok
    assert result.audio_bytes == FAKE_MP3
    assert translator.calls == []
    assert speech.calls == [{"text": "Hello", "language": LanguageCode.EN, "voice": None}]


def test_synthesize_translates_before_speaking(service, translator, speech) -> None:
    result = service.synthesize(_query("Hello", LanguageCode.EN, LanguageCode.ES))

    assert result.ok
    assert speech.calls[0]["text"] == "Hola"
    assert speech.calls[0]["language"] is LanguageCode.ES


@pytest.mark.parametrize(
    "source, target",
    [
        (LanguageCode.UNKNOWN, LanguageCode.EN),
        (LanguageCode.EN, LanguageCode.UNKNOWN),
        (LanguageCode.UNKNOWN, LanguageCode.UNKNOWN),
    ],
)
def test_synthesize_requires_known_languages(service, speech, source, target) -> None:
    result = service.synthesize(_query("Hello", source, target))

    assert result.error_type is ErrorType.USER
    assert result.audio_bytes == b""
    assert speech.calls == []


def test_synthesize_blank_text_is_user_error(service, speech) -> None:
    result = service.synthesize(_query(" ", LanguageCode.EN, LanguageCode.EN))

    assert result.error_type is ErrorType.USER
    assert speech.calls == []


def test_synthesize_translation_failure_stops_before_speech(service, translator, speech) -> None:
    translator.error = TranslationServiceError("upstream model failed")

    result = service.synthesize(_query("Hello", LanguageCode.EN, LanguageCode.FR))

    assert result.error_type is ErrorType.INTERNAL
    assert speech.calls == []


def test_synthesize_missing_voice_is_user_error(service, speech) -> None:
    speech.error = ValueError("No Google voice is available for locale pt-PT.")

    result = service.synthesize(_query("Olá", LanguageCode.PT, LanguageCode.PT))

    assert result.error_type is ErrorType.USER


def test_synthesize_backend_failure_is_internal_error(service, speech) -> None:
    speech.error = SpeechServiceError("tts unavailable")

    result = service.synthesize(_query("Hello", LanguageCode.EN, LanguageCode.EN))

    assert result.error_type is ErrorType.INTERNAL
    assert result.detail == "tts unavailable"


def test_synthesize_empty_audio_is_internal_error(translator) -> None:
    service = LanguageService(translator=translator, speech=StubSpeech(payload=b""))

    result = service.synthesize(_query("Hello", LanguageCode.EN, LanguageCode.EN))

    assert result.error_type is ErrorType.INTERNAL
