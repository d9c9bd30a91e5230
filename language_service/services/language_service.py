from __future__ import annotations

import logging

from language_service.models.language import (
    ErrorType,
    LanguageCode,
    LanguageQuery,
    SynthesisResult,
    TranslationResult,
)
from language_service.services.speech import SpeechService, SpeechServiceError
from language_service.services.translation import TranslationService, TranslationServiceError

logger = logging.getLogger(__name__)


class _CallFailed(Exception):
    def __init__(self, error_type: ErrorType, detail: str) -> None:
        super().__init__(detail)
        self.error_type = error_type
        self.detail = detail


class LanguageService:
    """Validates requests, drives the backends and classifies every outcome.

    Nothing raised by a backend escapes: caller mistakes become
    ``ErrorType.USER`` and everything else ``ErrorType.INTERNAL``. The service
    keeps no per-call state and may be shared between server threads.
    """

    def __init__(self, *, translator: TranslationService, speech: SpeechService) -> None:
        self._translator = translator
        self._speech = speech

    def translate(self, query: LanguageQuery) -> TranslationResult:
        try:
            if not query.has_text:
                raise _CallFailed(ErrorType.USER, "Text must be provided for translation.")
            if query.target is LanguageCode.UNKNOWN:
                raise _CallFailed(ErrorType.USER, "A target language is required for translation.")
            translated = self._translate_text(query.text, query.source, query.target)
        except _CallFailed as failure:
            logger.warning("Translation failed (%s): %s", failure.error_type.name, failure.detail)
            return TranslationResult(error_type=failure.error_type, detail=failure.detail)

        return TranslationResult(translated_text=translated)

    def synthesize(self, query: LanguageQuery) -> SynthesisResult:
        try:
            if not query.has_text:
                raise _CallFailed(ErrorType.USER, "Text must be provided for synthesis.")
            if query.source is LanguageCode.UNKNOWN or query.target is LanguageCode.UNKNOWN:
                raise _CallFailed(ErrorType.USER, "Source and target languages are required for synthesis.")

            text = self._translate_text(query.text, query.source, query.target)
            audio_bytes = self._speak(text, query.target)
        except _CallFailed as failure:
            logger.warning("Synthesis failed (%s): %s", failure.error_type.name, failure.detail)
            return SynthesisResult(error_type=failure.error_type, detail=failure.detail)

        return SynthesisResult(audio_bytes=audio_bytes)

    def _translate_text(self, text: str, source: LanguageCode, target: LanguageCode) -> str:
        if source is target:
            return text

        try:
            translated = self._translator.translate(text, source=source, target=target)
        except ValueError as exc:
            raise _CallFailed(ErrorType.USER, str(exc)) from exc
        except TranslationServiceError as exc:
            raise _CallFailed(ErrorType.INTERNAL, str(exc)) from exc
        except Exception as exc:
            logger.exception("Unexpected translation backend error")
            raise _CallFailed(ErrorType.INTERNAL, f"Unexpected translation error: {exc}") from exc

        if not translated:
            raise _CallFailed(ErrorType.INTERNAL, "Translation backend returned no text.")
        return translated

    def _speak(self, text: str, language: LanguageCode) -> bytes:
        try:
            audio_bytes = self._speech.synthesize(text, language=language)
        except ValueError as exc:
            raise _CallFailed(ErrorType.USER, str(exc)) from exc
        except SpeechServiceError as exc:
            raise _CallFailed(ErrorType.INTERNAL, str(exc)) from exc
        except Exception as exc:
            logger.exception("Unexpected speech backend error")
            raise _CallFailed(ErrorType.INTERNAL, f"Unexpected speech error: {exc}") from exc

        if not audio_bytes:
            raise _CallFailed(ErrorType.INTERNAL, "Speech backend returned no audio.")
        return audio_bytes
