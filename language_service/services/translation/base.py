from __future__ import annotations

from abc import ABC, abstractmethod
from textwrap import dedent

from language_service.models.language import LanguageCode


class TranslationServiceError(RuntimeError):
    """Raised when the translation backend fails to complete a request."""


class TranslationService(ABC):
    """Defines the expected behaviour for translation backends.

    ``translate`` raises ``ValueError`` when the provider rejects the caller's
    input and ``TranslationServiceError`` when the provider itself fails.
    """

    @abstractmethod
    def translate(self, text: str, *, source: LanguageCode, target: LanguageCode) -> str:
        """Translate ``text`` from ``source`` into ``target``."""
        raise NotImplementedError


SYSTEM_PROMPT = dedent(
    """
    You are a professional translator. Translate the user's text faithfully,
    keeping its meaning, tone and formatting. Reply with the translation only:
    no explanations, quotes or notes.
    """
).strip()


def build_instruction(source: LanguageCode, target: LanguageCode) -> str:
    """Describe the language pair for the model."""

    if not target.iso_code:
        raise ValueError("A target language is required for translation.")

    target_label = f"{target.display_name} ({target.iso_code})"
    if source is LanguageCode.UNKNOWN:
        return f"Detect the language of the text and translate it into {target_label}."
    return f"Translate the text from {source.display_name} ({source.iso_code}) into {target_label}."


def build_prompt(text: str, source: LanguageCode, target: LanguageCode) -> str:
    """Single-message prompt for backends without a separate system role."""

    return f"{SYSTEM_PROMPT}\n\n{build_instruction(source, target)}\n\nText:\n{text}"
