from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field

AUDIO_FORMAT = "mp3"
AUDIO_MIME_TYPE = "audio/mpeg"

# Trailing metadata entry carrying the numeric ErrorType when a call is aborted.
ERROR_TYPE_METADATA_KEY = "error-type"


class LanguageCode(IntEnum):
    """Languages understood by the service, numbered as on the wire."""

    UNKNOWN = 0
    EN = 1
    ZH = 2
    FR = 3
    DE = 4
    PT = 5
    ES = 6

    @classmethod
    def from_wire(cls, value: int) -> "LanguageCode":
        """Return the member for ``value``, or ``UNKNOWN`` for unrecognised numbers."""

        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def known(cls) -> list["LanguageCode"]:
        """Return every code except ``UNKNOWN``."""

        return [code for code in cls if code is not cls.UNKNOWN]

    @property
    def iso_code(self) -> str:
        """ISO 639-1 code, empty for ``UNKNOWN``."""

        if self is LanguageCode.UNKNOWN:
            return ""
        return self.name.lower()

    @property
    def locale(self) -> str:
        """Locale used to pick a synthesis voice, e.g. ``fr-FR``."""

        return _VOICE_LOCALES.get(self, "")

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_VOICE_LOCALES = {
    LanguageCode.EN: "en-US",
    LanguageCode.ZH: "cmn-CN",
    LanguageCode.FR: "fr-FR",
    LanguageCode.DE: "de-DE",
    LanguageCode.PT: "pt-PT",
    LanguageCode.ES: "es-ES",
}

_DISPLAY_NAMES = {
    LanguageCode.UNKNOWN: "Unknown",
    LanguageCode.EN: "English",
    LanguageCode.ZH: "Mandarin",
    LanguageCode.FR: "French",
    LanguageCode.DE: "German",
    LanguageCode.PT: "Portuguese",
    LanguageCode.ES: "Spanish",
}


class ErrorType(IntEnum):
    """Outcome of a call, numbered as on the wire."""

    NONE = 0
    USER = 1
    INTERNAL = 2

    @classmethod
    def from_wire(cls, value: int) -> "ErrorType":
        """Return the member for ``value``; unrecognised numbers count as ``INTERNAL``."""

        try:
            return cls(value)
        except ValueError:
            return cls.INTERNAL


class LanguageQuery(BaseModel):
    """A single translate or synthesize request."""

    text: str = ""
    source: LanguageCode = LanguageCode.UNKNOWN
    target: LanguageCode = LanguageCode.UNKNOWN

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def has_text(self) -> bool:
        """Return True when the text contains something other than whitespace."""

        return bool(self.text and self.text.strip())


class TranslationResult(BaseModel):
    """Outcome of a translate call."""

    translated_text: str = ""
    error_type: ErrorType = ErrorType.NONE
    detail: str | None = Field(default=None, description="Server-side explanation, never sent on the wire.")

    model_config = {"extra": "forbid"}

    @property
    def ok(self) -> bool:
        return self.error_type is ErrorType.NONE


class SynthesisResult(BaseModel):
    """Outcome of a synthesize call. ``audio_bytes`` is MP3."""

    audio_bytes: bytes = b""
    error_type: ErrorType = ErrorType.NONE
    detail: str | None = Field(default=None, description="Server-side explanation, never sent on the wire.")

    model_config = {"extra": "forbid"}

    @property
    def ok(self) -> bool:
        return self.error_type is ErrorType.NONE
