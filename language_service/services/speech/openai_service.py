from __future__ import annotations

import logging
from typing import Any

import openai
from openai import OpenAI

from language_service.core.config import SpeechSettings
from language_service.models.language import AUDIO_FORMAT, LanguageCode

from .base import SpeechService, SpeechServiceError

logger = logging.getLogger(__name__)

_DEFAULT_VOICE = "alloy"

# Request parameters taken from server configuration rather than from the caller.
_CONFIGURED_PARAMS = frozenset({"model", "voice", "response_format"})


class OpenAISpeechService(SpeechService):
    """Speech service backed by OpenAI text-to-speech.

    OpenAI voices are multilingual, so ``language`` only picks a configured
    per-language voice when one exists.
    """

    def __init__(self, *, api_key: str | None, settings: SpeechSettings, client: Any | None = None) -> None:
        if client is None and not api_key:
            raise ValueError("An OpenAI API key is required for the speech service.")
        self._client = client or OpenAI(api_key=api_key)
        self._tts_model = settings.tts_model
        self._default_voice = settings.tts_voice or _DEFAULT_VOICE
        self._voices = dict(settings.voices)

    def synthesize(self, text: str, *, language: LanguageCode, voice: str | None = None) -> bytes:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Text must be provided for synthesis.")

        target_voice = voice or self._voices.get(language) or self._default_voice

        logger.info("OpenAI TTS using model=%s voice=%s language=%s", self._tts_model, target_voice, language.name)
        try:
            speech_response = self._client.audio.speech.create(
                model=self._tts_model,
                voice=target_voice,
                input=cleaned,
                response_format=AUDIO_FORMAT,
            )
        except openai.BadRequestError as exc:
            if exc.param in _CONFIGURED_PARAMS or exc.code == "model_not_found":
                raise SpeechServiceError(f"OpenAI rejected the configured text-to-speech settings: {exc}") from exc
            raise ValueError(f"OpenAI text-to-speech rejected the request: {exc}") from exc
        except openai.OpenAIError as exc:
            raise SpeechServiceError(f"OpenAI text-to-speech request failed: {exc}") from exc

        audio_bytes = speech_response.read()
        speech_response.close()

        if not audio_bytes:
            raise SpeechServiceError("OpenAI text-to-speech request returned no audio bytes.")

        return audio_bytes
