from __future__ import annotations

from language_service.UI import run_app


def main() -> None:
    """Launch the Streamlit language client."""

    run_app()


if __name__ == "__main__":
    main()
