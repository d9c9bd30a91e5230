from __future__ import annotations
import os
if os.getenv("DEBUG_ATTACH") == "1":
    import debugpy

    if os.environ.get("DEBUGPY_LISTENING") != "1":
        debugpy.listen(("0.0.0.0", 5678))
        os.environ["DEBUGPY_LISTENING"] = "1"
        print("Waiting for debugger attach on port 5678...")

    if not debugpy.is_client_connected():
        debugpy.wait_for_client()
        print("Debugger attached!")
from language_service.API.grpc_server import serve
from language_service.core.config import settings
from language_service.core.logging_config import setup_logging
from language_service.services.factory import build_language_service


def main() -> None:
    """Start the gRPC language server."""

    setup_logging(settings.log_level)
    serve(build_language_service(settings), settings.server)


if __name__ == "__main__":
    main()
