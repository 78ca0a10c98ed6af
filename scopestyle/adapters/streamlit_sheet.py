import html

import streamlit as st

from scopestyle.adapters.memory_sheet import InMemoryStyleSheet
from scopestyle.config import StyleConfig


class StreamlitStyleSheet(InMemoryStyleSheet):
    """
    Stylesheet for a Streamlit session.

    Streamlit rebuilds the page on every script run, so the accumulated rules
    are re-emitted as a single <style> element by ``flush()`` once per run.
    Keep one instance per session (see ``session_registry``).
    """

    def __init__(self, element_id: str = StyleConfig.STYLE_ELEMENT_ID) -> None:
        super().__init__()
        self.element_id = element_id

    def to_html(self) -> str:
        if not len(self):
            return ""
        body = "".join(self.css_rules)
        return f'<style id="{html.escape(self.element_id)}">{body}</style>'

    def flush(self) -> bool:
        """Writes the <style> element into the page. Returns False if empty."""
        markup = self.to_html()
        if not markup:
            return False
        st.markdown(markup, unsafe_allow_html=True)
        return True
