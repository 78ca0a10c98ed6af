# --- Component Facade ---
# Consumers import from `scopestyle.components` without knowing the
# internal file structure.
# ------------------------

from .category_button import CategoryButton, category_button
from .option_card import OptionCard, option_card

__all__ = [
    "CategoryButton",
    "category_button",
    "OptionCard",
    "option_card",
]
