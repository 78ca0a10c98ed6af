import streamlit as st

from scopestyle.adapters.streamlit_sheet import StreamlitStyleSheet
from scopestyle.application.registry import StyleRegistry
from scopestyle.config import StyleConfig


def session_registry() -> StyleRegistry:
    """
    One registry per browser session, kept in st.session_state.
    Its stylesheet lives as long as the session, like a page's <style> element.
    """
    key = StyleConfig.SESSION_REGISTRY_KEY
    if key not in st.session_state:
        st.session_state[key] = StyleRegistry(sheet_factory=StreamlitStyleSheet)
    return st.session_state[key]


def flush_session_styles() -> bool:
    """Re-emits the session's rules. Call once per script run."""
    sheet = session_registry().sheet
    if isinstance(sheet, StreamlitStyleSheet):
        return sheet.flush()
    return False
