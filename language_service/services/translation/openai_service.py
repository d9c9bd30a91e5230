from __future__ import annotations

import logging
from typing import Any

import openai
from openai import OpenAI

from language_service.core.config import TranslationSettings
from language_service.models.language import LanguageCode

from .base import SYSTEM_PROMPT, TranslationService, TranslationServiceError, build_instruction

logger = logging.getLogger(__name__)

_DEFAULT_MODEL = "gpt-4o-mini"

# Request parameters taken from server configuration rather than from the caller.
_CONFIGURED_PARAMS = frozenset({"model", "temperature"})


class OpenAITranslationService(TranslationService):
    """Translation backed by OpenAI chat completions."""

    def __init__(self, *, api_key: str | None, settings: TranslationSettings, client: Any | None = None) -> None:
        if client is None and not api_key:
            raise ValueError("An OpenAI API key is required for the translation service.")
        self._client = client or OpenAI(api_key=api_key)
        self._model = settings.model or _DEFAULT_MODEL
        self._temperature = settings.temperature

    def translate(self, text: str, *, source: LanguageCode, target: LanguageCode) -> str:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Text must be provided for translation.")

        messages = [
            {"role": "system", "content": f"{SYSTEM_PROMPT}\n{build_instruction(source, target)}"},
            {"role": "user", "content": cleaned},
        ]

        logger.info("OpenAI translation model=%s %s->%s", self._model, source.name, target.name)
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                temperature=self._temperature,
            )
        except openai.BadRequestError as exc:
            if exc.param in _CONFIGURED_PARAMS or exc.code == "model_not_found":
                raise TranslationServiceError(f"OpenAI rejected the configured translation settings: {exc}") from exc
            raise ValueError(f"OpenAI rejected the translation request: {exc}") from exc
        except openai.OpenAIError as exc:
            raise TranslationServiceError(f"OpenAI translation request failed: {exc}") from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            raise TranslationServiceError("OpenAI translation response did not include any choices.")

        content = getattr(getattr(choices[0], "message", None), "content", None) or ""
        translated = content.strip()
        if not translated:
            raise TranslationServiceError("OpenAI translation response did not include text.")

        return translated
