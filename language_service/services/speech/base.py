from __future__ import annotations

from typing import Protocol, runtime_checkable

from language_service.models.language import LanguageCode


class SpeechServiceError(RuntimeError):
    """Raised when the speech service fails to complete a request."""


@runtime_checkable
class SpeechService(Protocol):
    """Abstraction over text-to-speech backends.

    Implementations return MP3 bytes. Problems with the caller's input (an
    unsupported language, text the provider refuses) raise ``ValueError``;
    failures of the backend itself raise ``SpeechServiceError``.
    """

    def synthesize(self, text: str, *, language: LanguageCode, voice: str | None = None) -> bytes:
        """Convert text into audio bytes spoken in ``language``."""
