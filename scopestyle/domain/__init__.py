from .identity import identity_of, kind_name_of, prefix_of, scoped_class_name
from .ports import IStyleSheet, StyleSheetError
from .style import MediaBlock, Style

__all__ = [
    "IStyleSheet",
    "MediaBlock",
    "Style",
    "StyleSheetError",
    "identity_of",
    "kind_name_of",
    "prefix_of",
    "scoped_class_name",
]
