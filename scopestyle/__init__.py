"""Scoped CSS for components: one namespace and one injection per component kind."""

from scopestyle.application.registry import InjectionReport, StyleRegistry, default_registry
from scopestyle.domain.builder import style
from scopestyle.domain.identity import identity_of, prefix_of, scoped_class_name
from scopestyle.domain.ports import IStyleSheet, StyleSheetError
from scopestyle.domain.style import MediaBlock, Style
from scopestyle.presentation.styled import Styled

__version__ = "0.1.0"

__all__ = [
    "IStyleSheet",
    "InjectionReport",
    "MediaBlock",
    "Style",
    "StyleRegistry",
    "StyleSheetError",
    "Styled",
    "default_registry",
    "identity_of",
    "prefix_of",
    "scoped_class_name",
    "style",
]
