"""Interactive terminal client for the language server.

The session walks through four stages: pick an operation, a source language,
a target language, then enter the text. A blank line at any prompt ends the
session. Synthesized audio is written to numbered ``syn-<n>.mp3`` files.
"""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from language_service.API.grpc_client import LanguageClient, LanguageClientError
from language_service.core.config import settings
from language_service.core.logging_config import setup_logging
from language_service.models.language import AUDIO_FORMAT, LanguageCode

logger = logging.getLogger(__name__)

OPERATIONS = ("Translate", "Synthesize")

# Menu order shown to the user; the wire numbering is different.
LANGUAGE_MENU: Sequence[LanguageCode] = (
    LanguageCode.ZH,
    LanguageCode.EN,
    LanguageCode.FR,
    LanguageCode.DE,
    LanguageCode.ES,
    LanguageCode.PT,
)


class Stage(Enum):
    OPERATION = "operation"
    SRC = "src"
    TARGET = "target"
    TEXT = "text"


def _format_menu(options: Sequence[str]) -> str:
    return "\n".join(f"{index} {option}" for index, option in enumerate(options, start=1))


def _pick(raw: str, count: int) -> Optional[int]:
    try:
        choice = int(raw)
    except ValueError:
        return None
    if 1 <= choice <= count:
        return choice - 1
    return None


class ConsoleSession:
    """State machine behind the interactive prompt."""

    def __init__(
        self,
        client: LanguageClient,
        *,
        output_dir: Path,
        read_line: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._client = client
        self._output_dir = Path(output_dir)
        self._read_line = read_line
        self._write = write

        self.stage = Stage.OPERATION
        self.operation: Optional[str] = None
        self.source = LanguageCode.UNKNOWN
        self.target = LanguageCode.UNKNOWN
        self.audio_count = 0
        self.written_files: List[Path] = []

    def run(self) -> None:
        self._write("Hello! Welcome to the translation service. Press ENTER to exit...")
        while True:
            try:
                raw = self._prompt()
            except EOFError:
                raw = ""
            if not raw.strip():
                self._write("Bye!")
                return
            self.handle(raw.strip())

    def _prompt(self) -> str:
        if self.stage is Stage.OPERATION:
            self._write(f"\nWhat would you like to do?\n{_format_menu(OPERATIONS)}")
        elif self.stage is Stage.SRC:
            self._write(f"\nWhat is the source language?\n{self._language_menu()}")
        elif self.stage is Stage.TARGET:
            self._write(f"\nWhat is the target language?\n{self._language_menu()}")
        else:
            self._write("Enter the text to translate or synthesize")
        return self._read_line()

    def _language_menu(self) -> str:
        return _format_menu([code.display_name for code in LANGUAGE_MENU])

    def handle(self, raw: str) -> None:
        """Advance the session with one line of non-blank input."""

        if self.stage is Stage.OPERATION:
            choice = _pick(raw, len(OPERATIONS))
            if choice is not None:
                self.operation = OPERATIONS[choice]
                self.stage = Stage.SRC
        elif self.stage is Stage.SRC:
            choice = _pick(raw, len(LANGUAGE_MENU))
            self.source = LANGUAGE_MENU[choice] if choice is not None else LanguageCode.UNKNOWN
            if self.source is not LanguageCode.UNKNOWN:
                self.stage = Stage.TARGET
        elif self.stage is Stage.TARGET:
            choice = _pick(raw, len(LANGUAGE_MENU))
            self.target = LANGUAGE_MENU[choice] if choice is not None else LanguageCode.UNKNOWN
            if self.target is not LanguageCode.UNKNOWN:
                self.stage = Stage.TEXT
        elif self.operation == "Translate":
            self._translate(raw)
        else:
            self._synthesize(raw)

    def _translate(self, text: str) -> None:
        self._write(f"Translating: {text}")
        try:
            result = self._client.translate(text, self.source, self.target)
        except LanguageClientError as exc:
            self._write(f"Not able to translate text: {exc}")
            return

        if not result.ok:
            self._write(f"Not able to translate text ({result.error_type.name.lower()} error)")
            return

        self._write(f"Translated Text: {result.translated_text}\n")
        self.stage = Stage.OPERATION

    def _synthesize(self, text: str) -> None:
        self._write(f"Synthesizing: {text}")
        try:
            result = self._client.synthesize(text, self.source, self.target)
        except LanguageClientError as exc:
            self._write(f"Not able to synthesize text: {exc}")
            return

        if not result.ok:
            self._write(f"Not able to synthesize text ({result.error_type.name.lower()} error)")
            return

        self.audio_count += 1
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / f"syn-{self.audio_count}.{AUDIO_FORMAT}"
        path.write_bytes(result.audio_bytes)
        self.written_files.append(path)
        self._write(f"Synthesized Text, audio bytes written to {path.name}\n")
        self.stage = Stage.OPERATION


def main() -> None:
    """Run the interactive console against the configured server."""

    setup_logging(settings.log_level)
    with LanguageClient(settings.client.target, timeout=settings.client.timeout) as client:
        ConsoleSession(client, output_dir=settings.client.audio_output_dir).run()


if __name__ == "__main__":
    main()
