from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping

try:  # pragma: no cover - optional dependency
    from google.api_core import exceptions as google_exceptions
    from google.cloud import texttospeech
except ImportError:  # pragma: no cover - optional dependency
    google_exceptions = None
    texttospeech = None

from language_service.core.config import SpeechSettings
from language_service.models.language import LanguageCode

from .base import SpeechService, SpeechServiceError

logger = logging.getLogger(__name__)


class GoogleSpeechService(SpeechService):
    """Text-to-speech service backed by Google Cloud Text-to-Speech.

    Voices are resolved per language: an explicit ``voice`` argument wins,
    then the configured voice for that language, then the first voice Google
    lists for the language's locale. Listed voices are cached for the life of
    the service.
    """

    def __init__(
        self,
        *,
        settings: SpeechSettings,
        tts_client: Any | None = None,
    ) -> None:
        if texttospeech is None:  # pragma: no cover - optional dependency
            raise RuntimeError("google-cloud-texttospeech is required for GoogleSpeechService.")
        if settings is None:
            raise ValueError("Speech settings must be provided.")

        self._configured_voices: Mapping[LanguageCode, str] = dict(settings.voices)
        self._tts_client = tts_client or texttospeech.TextToSpeechClient()
        self._voice_cache: Dict[str, str] = {}
        self._voice_lock = threading.Lock()

    def synthesize(self, text: str, *, language: LanguageCode, voice: str | None = None) -> bytes:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Text must be provided for synthesis.")

        locale = language.locale
        if not locale:
            raise ValueError(f"No voice locale is defined for language {language.name}.")

        voice_name = (voice or "").strip() or self._configured_voices.get(language) or self._lookup_voice(locale)

        synthesis_input = texttospeech.SynthesisInput(text=cleaned)
        voice_params = texttospeech.VoiceSelectionParams(language_code=locale, name=voice_name)
        audio_config = texttospeech.AudioConfig(audio_encoding=texttospeech.AudioEncoding.MP3)

        logger.info("Google TTS using voice=%s locale=%s chars=%d", voice_name, locale, len(cleaned))
        try:
            response = self._tts_client.synthesize_speech(
                input=synthesis_input,
                voice=voice_params,
                audio_config=audio_config,
            )
        except google_exceptions.InvalidArgument as exc:
            raise ValueError(f"Google text-to-speech rejected the request: {exc}") from exc
        except google_exceptions.GoogleAPICallError as exc:
            raise SpeechServiceError(f"Google text-to-speech request failed: {exc}") from exc

        audio_content = getattr(response, "audio_content", None)
        if not audio_content:
            raise SpeechServiceError("Google text-to-speech request returned no audio bytes.")

        return audio_content

    def _lookup_voice(self, locale: str) -> str:
        with self._voice_lock:
            cached = self._voice_cache.get(locale)
            if cached:
                return cached

        try:
            response = self._tts_client.list_voices(language_code=locale)
        except google_exceptions.InvalidArgument as exc:
            raise ValueError(f"Google text-to-speech does not accept locale {locale}: {exc}") from exc
        except google_exceptions.GoogleAPICallError as exc:
            raise SpeechServiceError(f"Listing Google voices for {locale} failed: {exc}") from exc

        voices = getattr(response, "voices", None) or []
        names = [getattr(entry, "name", "") for entry in voices]
        names = [name for name in names if name]
        if not names:
            raise ValueError(f"No Google voice is available for locale {locale}.")

        with self._voice_lock:
            self._voice_cache.setdefault(locale, names[0])
            return self._voice_cache[locale]
