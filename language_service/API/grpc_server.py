from __future__ import annotations

import logging
import signal
import threading
from concurrent import futures
from typing import Tuple

import grpc

from language_service.core.config import ServerSettings
from language_service.models.language import ERROR_TYPE_METADATA_KEY, ErrorType, LanguageCode, LanguageQuery
from language_service.protos import language_pb2, language_pb2_grpc
from language_service.services.language_service import LanguageService

logger = logging.getLogger(__name__)

_STATUS_FOR_ERROR = {
    ErrorType.USER: grpc.StatusCode.INVALID_ARGUMENT,
    ErrorType.INTERNAL: grpc.StatusCode.INTERNAL,
}


def query_from_request(request: language_pb2.LanguageRequest) -> LanguageQuery:
    """Convert a wire request into the domain query."""

    return LanguageQuery(
        text=request.text,
        source=LanguageCode.from_wire(request.source_language_code),
        target=LanguageCode.from_wire(request.target_language_code),
    )


class LanguageServicer(language_pb2_grpc.LanguageServicer):
    """gRPC adapter over :class:`LanguageService`.

    By default failures are reported through ``error_type`` in an OK response.
    With ``error_reporting="status"`` a failed call is aborted with
    ``INVALID_ARGUMENT`` or ``INTERNAL`` instead, and the numeric error type
    travels in the ``error-type`` trailing metadata entry.
    """

    def __init__(self, service: LanguageService, *, error_reporting: str = "field") -> None:
        if error_reporting not in ("field", "status"):
            raise ValueError(f"Unknown error reporting mode: {error_reporting}")
        self._service = service
        self._abort_on_error = error_reporting == "status"

    def Translate(self, request, context):
        query = query_from_request(request)
        logger.info(
            "Got translation request source=%s target=%s chars=%d",
            query.source.name,
            query.target.name,
            len(query.text),
        )

        result = self._service.translate(query)
        logger.info("Translation finished with error_type=%s", result.error_type.name)
        self._maybe_abort(context, result.error_type, result.detail)

        return language_pb2.TranslateResponse(
            translated_text=result.translated_text if result.ok else "",
            error_type=int(result.error_type),
        )

    def Synthesize(self, request, context):
        query = query_from_request(request)
        logger.info(
            "Got synthesis request source=%s target=%s chars=%d",
            query.source.name,
            query.target.name,
            len(query.text),
        )

        result = self._service.synthesize(query)
        logger.info(
            "Synthesis finished with error_type=%s audio_bytes=%d",
            result.error_type.name,
            len(result.audio_bytes),
        )
        self._maybe_abort(context, result.error_type, result.detail)

        return language_pb2.SynthesizeResponse(
            audio_bytes=result.audio_bytes if result.ok else b"",
            error_type=int(result.error_type),
        )

    def _maybe_abort(self, context, error_type: ErrorType, detail: str | None) -> None:
        if not self._abort_on_error or error_type is ErrorType.NONE:
            return
        context.set_trailing_metadata(((ERROR_TYPE_METADATA_KEY, str(int(error_type))),))
        context.abort(_STATUS_FOR_ERROR[error_type], detail or error_type.name)


def create_server(
    servicer: LanguageServicer,
    *,
    address: str,
    max_workers: int,
) -> Tuple[grpc.Server, int]:
    """Build an unstarted server; port 0 in ``address`` binds a free port.

    Returns the server and the port actually bound.
    """

    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    language_pb2_grpc.add_LanguageServicer_to_server(servicer, server)

    bound_port = server.add_insecure_port(address)
    if not bound_port:
        raise RuntimeError(f"Could not bind the language server to {address}")

    return server, bound_port


def serve(service: LanguageService, settings: ServerSettings) -> None:
    """Run the server until SIGINT or SIGTERM."""

    servicer = LanguageServicer(service, error_reporting=settings.error_reporting)
    server, bound_port = create_server(
        servicer,
        address=settings.address,
        max_workers=settings.max_workers,
    )

    stop_requested = threading.Event()

    def _request_stop(signum, _frame) -> None:
        logger.info("Received signal %s, shutting down", signal.Signals(signum).name)
        stop_requested.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    server.start()
    logger.info(
        "Language server listening on %s:%d (workers=%d, error_reporting=%s)",
        settings.host,
        bound_port,
        settings.max_workers,
        settings.error_reporting,
    )

    while not stop_requested.wait(timeout=1.0):
        pass
    server.stop(settings.grace_seconds).wait()
    logger.info("Language server stopped")
