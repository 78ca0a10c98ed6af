import html

import streamlit as st

from scopestyle.application.registry import StyleRegistry
from scopestyle.components.shared import SHARED_STYLE
from scopestyle.domain.builder import style
from scopestyle.domain.style import Style
from scopestyle.presentation.styled import Styled


class CategoryButton(Styled):
    """A card showing a category label, its icon and progress."""

    kind = "scopestyle.components.CategoryButton"

    @classmethod
    def style(cls) -> Style:
        return style(
            {
                "@import": SHARED_STYLE,
                ".card-button": {
                    "display": "flex",
                    "justify-content": "space-between",
                    "align-items": "center",
                    "width": "100%",
                    "padding": "0.75rem 1rem",
                    "margin-bottom": "0.2rem",
                    "background-color": "#ffffff",
                    "border": "1px solid #e0e0e0",
                    "border-radius": "8px",
                    "transition": "all 0.2s ease-in-out",
                    "color": "#31333F",
                },
                ".card-button:hover": {
                    "border-color": "#ff4b4b",
                    "background-color": "#fcfcfc",
                    "transform": "translateX(2px)",
                },
                ".card-button.active": {
                    "border-color": "#ff4b4b",
                    "background-color": "#fff5f5",
                    "font-weight": 600,
                },
                ".left-content": {
                    "display": "flex",
                    "align-items": "center",
                    "gap": "10px",
                    "flex": 1,
                    "min-width": 0,
                },
                ".label": {
                    "white-space": "nowrap",
                    "overflow": "hidden",
                    "text-overflow": "ellipsis",
                },
                ".right-content": {
                    "margin-left": "15px",
                    "color": "#808495",
                    "font-family": "monospace",
                },
                "@media (max-width: 640px)": {
                    ".card-button": {"padding": "0.5rem 0.75rem"},
                    ".right-content": {"margin-left": "8px"},
                },
            }
        )

    @classmethod
    def html(
        cls, label: str, progress: str = "0%", icon: str = "🔨", is_active: bool = False
    ) -> str:
        c = cls.class_name
        button_classes = c("card-button") + (f" {c('active')}" if is_active else "")
        return (
            f'<div class="{c("root")}">'
            f'<div class="{button_classes}">'
            f'<div class="{c("left-content")}">'
            f'<span class="{c("icon")}">{html.escape(icon)}</span>'
            f'<span class="{c("label")}">{html.escape(label)}</span>'
            "</div>"
            f'<div class="{c("right-content")}">'
            f'<span class="{c("progress")}">{html.escape(progress)}</span>'
            "</div>"
            "</div>"
            "</div>"
        )


def category_button(
    label: str,
    progress: str = "0%",
    icon: str = "🔨",
    is_active: bool = False,
    registry: StyleRegistry | None = None,
) -> str:
    """
    Renders a category card.
    Returns the markup that was written to the page.
    """
    markup = CategoryButton.styled(
        CategoryButton.html(label, progress, icon, is_active), registry
    )
    st.markdown(markup, unsafe_allow_html=True)
    return markup
