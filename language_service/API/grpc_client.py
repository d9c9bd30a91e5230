from __future__ import annotations

import logging
from typing import Optional

import grpc

from language_service.models.language import (
    ERROR_TYPE_METADATA_KEY,
    ErrorType,
    LanguageCode,
    SynthesisResult,
    TranslationResult,
)
from language_service.protos import language_pb2, language_pb2_grpc

logger = logging.getLogger(__name__)

# Fallback for servers that abort failed calls without the error-type metadata.
_ERROR_FOR_STATUS = {
    grpc.StatusCode.INVALID_ARGUMENT: ErrorType.USER,
    grpc.StatusCode.INTERNAL: ErrorType.INTERNAL,
}


class LanguageClientError(RuntimeError):
    """Raised when a call fails at the transport level (unreachable server, deadline, ...)."""

    def __init__(self, message: str, code: Optional[grpc.StatusCode] = None) -> None:
        super().__init__(message)
        self.code = code


class LanguageClient:
    """Typed client for the ``language.Language`` service.

    Results always carry an ``error_type``; check ``result.ok`` before using
    the payload.
    """

    def __init__(
        self,
        target: str = "localhost:8081",
        *,
        timeout: Optional[float] = 30.0,
        channel: Optional[grpc.Channel] = None,
    ) -> None:
        self._owns_channel = channel is None
        self._channel = channel or grpc.insecure_channel(target)
        self._stub = language_pb2_grpc.LanguageStub(self._channel)
        self._timeout = timeout
        self._target = target

    def __enter__(self) -> "LanguageClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_channel:
            self._channel.close()

    def translate(self, text: str, source: LanguageCode, target: LanguageCode) -> TranslationResult:
        request = _build_request(text, source, target)
        try:
            response = self._stub.Translate(request, timeout=self._timeout)
        except grpc.RpcError as exc:
            return TranslationResult(error_type=self._error_from_status(exc, "Translate"), detail=exc.details())

        error_type = ErrorType.from_wire(response.error_type)
        return TranslationResult(
            translated_text=response.translated_text if error_type is ErrorType.NONE else "",
            error_type=error_type,
        )

    def synthesize(self, text: str, source: LanguageCode, target: LanguageCode) -> SynthesisResult:
        request = _build_request(text, source, target)
        try:
            response = self._stub.Synthesize(request, timeout=self._timeout)
        except grpc.RpcError as exc:
            return SynthesisResult(error_type=self._error_from_status(exc, "Synthesize"), detail=exc.details())

        error_type = ErrorType.from_wire(response.error_type)
        return SynthesisResult(
            audio_bytes=response.audio_bytes if error_type is ErrorType.NONE else b"",
            error_type=error_type,
        )

    def _error_from_status(self, exc: grpc.RpcError, method: str) -> ErrorType:
        code = exc.code()
        error_type = _error_from_metadata(exc)
        if error_type is None:
            error_type = _ERROR_FOR_STATUS.get(code)
        if error_type is None:
            logger.error("%s call to %s failed: %s %s", method, self._target, code, exc.details())
            raise LanguageClientError(f"{method} call to {self._target} failed: {exc.details()}", code) from exc
        return error_type


def _build_request(text: str, source: LanguageCode, target: LanguageCode) -> language_pb2.LanguageRequest:
    return language_pb2.LanguageRequest(
        text=text,
        source_language_code=int(source),
        target_language_code=int(target),
    )


def _error_from_metadata(exc: grpc.RpcError) -> Optional[ErrorType]:
    for key, value in exc.trailing_metadata() or ():
        if key == ERROR_TYPE_METADATA_KEY:
            try:
                return ErrorType.from_wire(int(value))
            except ValueError:
                logger.warning("Ignoring malformed %s metadata: %r", key, value)
    return None
