from scopestyle.domain.ports import IStyleSheet, StyleSheetError


class InMemoryStyleSheet(IStyleSheet):
    """
    Stylesheet held in process memory.

    Rejects what a browser's ``insertRule`` would obviously reject: empty text,
    a rule without a block, unbalanced braces and out-of-range indexes.
    """

    def __init__(self) -> None:
        self._rules: list[str] = []

    @property
    def css_rules(self) -> list[str]:
        # Callers get a snapshot; the only mutation path is insert_rule
        return list(self._rules)

    def insert_rule(self, rule: str, index: int) -> int:
        if index < 0 or index > len(self._rules):
            raise StyleSheetError(
                f"Index {index} is outside 0..{len(self._rules)}", rule, index
            )
        self._validate(rule, index)
        self._rules.insert(index, rule)
        return index

    @staticmethod
    def _validate(rule: str, index: int) -> None:
        text = rule.strip()
        if not text:
            raise StyleSheetError("Empty rule", rule, index)

        open_at = text.find("{")
        if open_at <= 0 or not text.endswith("}"):
            raise StyleSheetError("Rule has no selector or block", rule, index)

        depth = 0
        for char in text:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth < 0:
                    break
        if depth != 0:
            raise StyleSheetError("Unbalanced braces", rule, index)

    def __len__(self) -> int:
        return len(self._rules)
