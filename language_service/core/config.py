from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from language_service.models.language import LanguageCode

load_dotenv()

ERROR_REPORTING_MODES = ("field", "status")


def _strip_or_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _int_from_env(name: str, default: int) -> int:
    raw = _strip_or_none(os.getenv(name))
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


def _float_from_env(name: str, default: float) -> float:
    raw = _strip_or_none(os.getenv(name))
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc


def parse_voice_map(raw: Optional[str]) -> Dict[LanguageCode, str]:
    """Parse ``en=en-US-Neural2-C,fr=fr-FR-Neural2-A`` into a per-language voice map."""

    voices: Dict[LanguageCode, str] = {}
    if not raw:
        return voices

    for entry in raw.split(","):
        if not entry.strip():
            continue
        if "=" not in entry:
            raise RuntimeError(f"Voice entry {entry.strip()!r} must look like 'en=<voice name>'")
        code_part, voice_part = entry.split("=", maxsplit=1)
        code_name = code_part.strip().upper()
        voice = voice_part.strip()
        try:
            code = LanguageCode[code_name]
        except KeyError as exc:
            raise RuntimeError(f"Unknown language code in voice map: {code_part.strip()!r}") from exc
        if code is LanguageCode.UNKNOWN or not voice:
            raise RuntimeError(f"Invalid voice entry: {entry.strip()!r}")
        voices[code] = voice
    return voices


@dataclass(frozen=True)
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8081
    max_workers: int = 10
    grace_seconds: float = 5.0
    error_reporting: str = "field"

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ClientSettings:
    target: str = "localhost:8081"
    timeout: float = 30.0
    audio_output_dir: Path = Path(".")


@dataclass(frozen=True)
class TranslationSettings:
    provider: str = "openai"
    model: Optional[str] = None
    temperature: float = 0.0


@dataclass(frozen=True)
class SpeechSettings:
    provider: str = "google"
    tts_model: str = "gpt-4o-mini-tts"
    tts_voice: Optional[str] = None
    voices: Mapping[LanguageCode, str] = field(default_factory=dict)


class Settings:

    def __init__(self) -> None:
        self.openai_api_key = _strip_or_none(os.getenv("OPENAI_API_KEY")) or _strip_or_none(
            os.getenv("LLM_API_KEY")
        )
        self.gemini_api_key = _strip_or_none(os.getenv("GEMINI_API_KEY")) or _strip_or_none(
            os.getenv("GOOGLE_API_KEY")
        )
        self.log_level = (_strip_or_none(os.getenv("LOG_LEVEL")) or "INFO").upper()

        error_reporting = (_strip_or_none(os.getenv("LANGUAGE_ERROR_REPORTING")) or "field").lower()
        if error_reporting not in ERROR_REPORTING_MODES:
            raise RuntimeError(
                f"LANGUAGE_ERROR_REPORTING must be one of {', '.join(ERROR_REPORTING_MODES)}, "
                f"got {error_reporting!r}"
            )

        self.server = ServerSettings(
            host=_strip_or_none(os.getenv("LANGUAGE_SERVER_HOST")) or "0.0.0.0",
            port=_int_from_env("LANGUAGE_SERVER_PORT", 8081),
            max_workers=max(1, _int_from_env("LANGUAGE_SERVER_MAX_WORKERS", 10)),
            grace_seconds=_float_from_env("LANGUAGE_SERVER_GRACE_SECONDS", 5.0),
            error_reporting=error_reporting,
        )

        output_dir = _strip_or_none(os.getenv("LANGUAGE_AUDIO_OUTPUT_DIR")) or "."
        self.client = ClientSettings(
            target=_strip_or_none(os.getenv("LANGUAGE_CLIENT_TARGET")) or "localhost:8081",
            timeout=_float_from_env("LANGUAGE_CLIENT_TIMEOUT", 30.0),
            audio_output_dir=Path(output_dir).expanduser(),
        )

        self.translation = TranslationSettings(
            provider=(_strip_or_none(os.getenv("TRANSLATION_PROVIDER")) or "openai").lower(),
            model=_strip_or_none(os.getenv("TRANSLATION_MODEL")),
            temperature=_float_from_env("TRANSLATION_TEMPERATURE", 0.0),
        )

        self.speech = SpeechSettings(
            provider=(_strip_or_none(os.getenv("SPEECH_PROVIDER")) or "google").lower(),
            tts_model=_strip_or_none(os.getenv("SPEECH_TTS_MODEL")) or "gpt-4o-mini-tts",
            tts_voice=_strip_or_none(os.getenv("SPEECH_TTS_VOICE")),
            voices=parse_voice_map(_strip_or_none(os.getenv("SPEECH_TTS_VOICES"))),
        )


settings = Settings()
