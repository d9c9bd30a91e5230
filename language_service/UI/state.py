from __future__ import annotations

from typing import Optional

import streamlit as st

from language_service.models.language import SynthesisResult, TranslationResult

OPERATION_KEY = "operation"
LAST_TRANSLATION_KEY = "last_translation"
LAST_SYNTHESIS_KEY = "last_synthesis"
SYNTHESIS_COUNT_KEY = "synthesis_count"


def ensure_defaults() -> None:
    """Ensure the expected session state keys exist with sensible defaults."""

    st.session_state.setdefault(OPERATION_KEY, "Translate")
    st.session_state.setdefault(LAST_TRANSLATION_KEY, None)
    st.session_state.setdefault(LAST_SYNTHESIS_KEY, None)
    st.session_state.setdefault(SYNTHESIS_COUNT_KEY, 0)


def reset_results() -> None:
    """Forget the results of previous calls."""

    st.session_state[LAST_TRANSLATION_KEY] = None
    st.session_state[LAST_SYNTHESIS_KEY] = None


def set_translation(result: TranslationResult) -> None:
    st.session_state[LAST_TRANSLATION_KEY] = result


def get_translation() -> Optional[TranslationResult]:
    return st.session_state.get(LAST_TRANSLATION_KEY)


def set_synthesis(result: SynthesisResult) -> None:
    st.session_state[LAST_SYNTHESIS_KEY] = result
    if result.ok:
        st.session_state[SYNTHESIS_COUNT_KEY] = synthesis_count() + 1


def get_synthesis() -> Optional[SynthesisResult]:
    return st.session_state.get(LAST_SYNTHESIS_KEY)


def synthesis_count() -> int:
    """Return how many clips were synthesized in this browser session."""

    return int(st.session_state.get(SYNTHESIS_COUNT_KEY, 0))
