from __future__ import annotations

import streamlit as st

from language_service.API.grpc_client import LanguageClient, LanguageClientError
from language_service.core.config import settings
from language_service.models.language import AUDIO_FORMAT, AUDIO_MIME_TYPE, ErrorType, LanguageCode

from . import state

_OPERATIONS = ("Translate", "Synthesize")
_ERROR_MESSAGES = {
    ErrorType.USER: "The server rejected the request. Check the text and the language pair.",
    ErrorType.INTERNAL: "The server failed to process the request. Try again later.",
}


@st.cache_resource
def get_client() -> LanguageClient:
    """Create one gRPC client per Streamlit process."""

    return LanguageClient(settings.client.target, timeout=settings.client.timeout)


def run_app() -> None:
    """Entry point for the Streamlit language client."""

    st.set_page_config(page_title="Language Service", page_icon="🌐", layout="centered")
    state.ensure_defaults()

    st.title("Translate & Synthesize")
    st.caption(f"Connected to {settings.client.target}")

    operation = st.radio("Operation", _OPERATIONS, key=state.OPERATION_KEY, horizontal=True)

    languages = LanguageCode.known()
    source_column, target_column = st.columns(2)
    with source_column:
        source = st.selectbox("Source language", languages, format_func=lambda code: code.display_name)
    with target_column:
        target = st.selectbox("Target language", languages, index=2, format_func=lambda code: code.display_name)

    text = st.text_area("Text", placeholder="Type the text to translate or synthesize")

    if st.button(operation, type="primary", use_container_width=True):
        state.reset_results()
        _submit(operation, text, source, target)

    _render_translation()
    _render_synthesis()


def _submit(operation: str, text: str, source: LanguageCode, target: LanguageCode) -> None:
    client = get_client()
    try:
        with st.spinner(f"{operation.rstrip('e')}ing..."):
            if operation == "Translate":
                state.set_translation(client.translate(text, source, target))
            else:
                state.set_synthesis(client.synthesize(text, source, target))
    except LanguageClientError as exc:  # pragma: no cover - UI feedback path
        st.error(f"Could not reach the language server: {exc}")


def _render_translation() -> None:
    result = state.get_translation()
    if result is None:
        return
    if not result.ok:
        st.error(_ERROR_MESSAGES[result.error_type])
        return
    st.subheader("Translation")
    st.write(result.translated_text)


def _render_synthesis() -> None:
    result = state.get_synthesis()
    if result is None:
        return
    if not result.ok:
        st.error(_ERROR_MESSAGES[result.error_type])
        return
    st.subheader("Audio")
    st.audio(result.audio_bytes, format=AUDIO_MIME_TYPE)
    st.download_button(
        "Download",
        data=result.audio_bytes,
        file_name=f"syn-{state.synthesis_count()}.{AUDIO_FORMAT}",
        mime=AUDIO_MIME_TYPE,
    )
