from abc import ABC, abstractmethod


class StyleSheetError(Exception):
    """Raised by a stylesheet when it refuses a single rule."""

    def __init__(self, message: str, rule: str = "", index: int = -1) -> None:
        super().__init__(message)
        self.rule = rule
        self.index = index


class IStyleSheet(ABC):
    """
    The live stylesheet of a page: an ordered, append-only list of CSS rules.
    """

    @property
    @abstractmethod
    def css_rules(self) -> list[str]:
        pass

    @abstractmethod
    def insert_rule(self, rule: str, index: int) -> int:
        """
        Inserts ``rule`` at ``index`` and returns that index.
        Raises StyleSheetError if the rule or index is rejected.
        """
        pass
