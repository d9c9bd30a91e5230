from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("OPENAI_API_KEY", "test-key")

from language_service.models.language import LanguageCode  # noqa: E402
from language_service.services.translation import TranslationService  # noqa: E402

FAKE_MP3 = b"ID3\x04\x00fake-mp3-frames"


class StubTranslator(TranslationService):
    """Dictionary-backed translator that records every call."""

    def __init__(self, translations: dict[tuple[str, LanguageCode], str] | None = None) -> None:
        self.translations = translations or {
            ("Hello", LanguageCode.FR): "Bonjour",
            ("Hello", LanguageCode.DE): "Hallo",
            ("Hello", LanguageCode.ES): "Hola",
        }
        self.calls: list[dict[str, object]] = []
        self.error: Exception | None = None

    def translate(self, text: str, *, source: LanguageCode, target: LanguageCode) -> str:
        self.calls.append({"text": text, "source": source, "target": target})
        if self.error is not None:
            raise self.error
        try:
            return self.translations[(text, target)]
        except KeyError as exc:
            raise ValueError(f"Unsupported phrase: {text!r}") from exc


class StubSpeech:
    """Speech backend returning a fixed MP3 payload."""

    def __init__(self, payload: bytes = FAKE_MP3) -> None:
        self.payload = payload
        self.calls: list[dict[str, object]] = []
        self.error: Exception | None = None

    def synthesize(self, text: str, *, language: LanguageCode, voice: str | None = None) -> bytes:
        self.calls.append({"text": text, "language": language, "voice": voice})
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def translator() -> StubTranslator:
    return StubTranslator()


@pytest.fixture
def speech() -> StubSpeech:
    return StubSpeech()
