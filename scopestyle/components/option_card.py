import html

import streamlit as st

from scopestyle.application.registry import StyleRegistry
from scopestyle.components.shared import SHARED_STYLE
from scopestyle.domain.builder import style
from scopestyle.domain.style import Style
from scopestyle.presentation.styled import Styled

OPTION_STYLE = style(
    {
        "@import": SHARED_STYLE,
        ".option-card": {
            "display": "flex",
            "align-items": "flex-start",
            "width": "100%",
            "background": "#ffffff",
            "border": "1px solid #e0e0e0",
            "border-radius": "4px",
            "padding": "12px",
            "text-align": "left",
            "color": "#31333F",
        },
        ".option-card:active": {
            "background-color": "#f0f2f6",
            "border-color": "#808495",
            "transform": "scale(0.99)",
        },
        # Same local name as CategoryButton's label; the scopes keep them apart
        ".label": {
            "background": "#f0f2f6",
            "font-weight": 700,
            "font-size": "13px",
            "padding": "2px 8px",
            "border-radius": "4px",
            "margin-right": "12px",
            "flex-shrink": 0,
        },
        ".text": {
            "font-size": "15px",
            "line-height": 1.4,
            "word-wrap": "break-word",
        },
    }
)


class OptionCard(Styled):
    """An answer option: a letter badge followed by the option text."""

    # No explicit kind: scoped by the class's qualified name.

    @classmethod
    def style(cls) -> Style:
        return OPTION_STYLE

    @classmethod
    def html(cls, key_char: str, text: str) -> str:
        c = cls.class_name
        return (
            f'<div class="{c("root")}">'
            f'<div class="{c("option-card")}">'
            f'<div class="{c("label")}">{html.escape(key_char)}</div>'
            f'<div class="{c("text")}">{html.escape(text)}</div>'
            "</div>"
            "</div>"
        )


def option_card(key_char: str, text: str, registry: StyleRegistry | None = None) -> str:
    """Renders an option card. Returns the markup written to the page."""
    markup = OptionCard.styled(OptionCard.html(key_char, text), registry)
    st.markdown(markup, unsafe_allow_html=True)
    return markup
