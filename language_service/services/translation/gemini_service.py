from __future__ import annotations

import logging
import os
from typing import Any

try:  # pragma: no cover - optional dependency
    from google import genai
    from google.genai import errors as genai_errors
except ImportError:  # pragma: no cover - optional dependency
    genai = None
    genai_errors = None

from language_service.core.config import TranslationSettings
from language_service.models.language import LanguageCode

from .base import TranslationService, TranslationServiceError, build_prompt

logger = logging.getLogger(__name__)

_DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiTranslationService(TranslationService):
    """Stateless translation wrapper around Google's Gemini/Vertex SDK."""

    def __init__(
        self,
        *,
        settings: TranslationSettings,
        api_key: str | None = None,
        use_vertex: bool | None = None,
        project: str | None = None,
        location: str | None = None,
        client: Any | None = None,
    ) -> None:
        if genai is None:  # pragma: no cover - optional dependency
            raise RuntimeError(
                "The google-genai package is required for GeminiTranslationService. "
                "Install it to enable Gemini/Vertex support."
            )

        self._model_name = settings.model or _DEFAULT_MODEL
        self._temperature = settings.temperature

        if client is not None:
            self._client = client
            return

        client_kwargs: dict[str, Any] = {}

        vertex_flag = use_vertex if use_vertex is not None else bool(
            os.getenv("GOOGLE_GENAI_USE_VERTEXAI")
        )
        if vertex_flag:
            resolved_project = project or os.getenv("GOOGLE_CLOUD_PROJECT")
            resolved_location = location or os.getenv("GOOGLE_CLOUD_LOCATION")
            if not resolved_project or not resolved_location:
                raise ValueError(
                    "Vertex mode requires GOOGLE_CLOUD_PROJECT and GOOGLE_CLOUD_LOCATION."
                )
            client_kwargs.update(
                vertexai=True,
                project=resolved_project,
                location=resolved_location,
            )
        else:
            if not api_key:
                raise ValueError("A Gemini API key must be configured.")
            client_kwargs["api_key"] = api_key

        self._client = genai.Client(**client_kwargs)

    def translate(self, text: str, *, source: LanguageCode, target: LanguageCode) -> str:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Text must be provided for translation.")

        logger.info("Gemini translation model=%s %s->%s", self._model_name, source.name, target.name)
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=build_prompt(cleaned, source, target),
                config={"temperature": self._temperature},
            )
        except genai_errors.ClientError as exc:
            if getattr(exc, "code", None) == 400:
                raise ValueError(f"Gemini rejected the translation request: {exc}") from exc
            raise TranslationServiceError(f"Gemini translation request failed: {exc}") from exc
        except genai_errors.APIError as exc:
            raise TranslationServiceError(f"Gemini translation request failed: {exc}") from exc

        translated = _extract_response_text(response).strip()
        if not translated:
            raise TranslationServiceError("Gemini translation response did not include text.")
        return translated


def _extract_response_text(response: Any) -> str:
    """Normalize Google GenAI responses to plain strings."""

    text = getattr(response, "text", None)
    if isinstance(text, str) and text:
        return text

    candidates = getattr(response, "candidates", None) or []
    collected: list[str] = []

    for candidate in candidates:
        content = getattr(candidate, "content", None)
        if not content:
            continue
        parts = getattr(content, "parts", None) or []
        for part in parts:
            part_text = getattr(part, "text", None)
            if isinstance(part_text, str) and part_text:
                collected.append(part_text)

    return "".join(collected)
