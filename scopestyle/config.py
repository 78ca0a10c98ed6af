import logging
import os
from enum import Enum
from typing import Final


class SinkKind(Enum):
    # Enum Member = ("env value", "description")
    MEMORY = ("memory", "In-process rule list (tests, non-browser hosts)")
    STREAMLIT = ("streamlit", "One <style> block per Streamlit script run")

    def __init__(self, value_name: str, description: str):
        self.value_name = value_name
        self.description = description

    @classmethod
    def from_name(cls, name: str | None) -> "SinkKind":
        """Returns the sink for a given env value, or MEMORY as a default."""
        if name:
            for kind in cls:
                if kind.value_name == name.strip().lower():
                    return kind
        return cls.MEMORY  # Default fallback


class StyleConfig:
    # --- Scoped Class Names ---
    # Scoped names look like "_<PREFIX>__<local>"
    CLASS_PREFIX: Final[str] = "_"
    CLASS_SEPARATOR: Final[str] = "__"

    # --- Identity Hashing ---
    # 8 bytes -> an unsigned 64-bit identity, same width as the prefix it renders
    DIGEST_SIZE: Final[int] = 8

    # --- Debug Text ---
    INDENT_UNIT: Final[str] = "    "

    # --- Stylesheet ---
    STYLE_ELEMENT_ID = "scopestyle-sheet"
    SESSION_REGISTRY_KEY = "scopestyle_registry"

    # --- Environment Switches ---
    LOG_LEVEL_ENV = "SCOPESTYLE_LOG_LEVEL"
    SINK_ENV = "SCOPESTYLE_SINK"

    @staticmethod
    def get_log_level() -> int:
        """Returns the configured logging level, INFO when unset or unknown."""
        name = os.getenv(StyleConfig.LOG_LEVEL_ENV, "INFO").strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            return logging.INFO
        return level

    @staticmethod
    def get_sink_kind() -> SinkKind:
        return SinkKind.from_name(os.getenv(StyleConfig.SINK_ENV))
