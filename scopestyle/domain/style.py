import copy
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from scopestyle.config import StyleConfig
from scopestyle.domain.selector import scope_selector

# Property values coming from the declarative builder may be numbers
Value = Union[str, int, float]


@dataclass
class MediaBlock:
    """
    A conditional group of rules, rendered as one ``@media`` rule.
    Blocks with the same query are kept apart, never merged.
    """

    query: str
    style: "Style"


class Style:
    """
    An ordered set of CSS declaration blocks plus nested media blocks.

    Order is significant on both axes: it becomes the emitted CSS order, which
    decides the cascade between rules of the same specificity.
    """

    def __init__(self) -> None:
        # selector -> {property: value}; dicts keep insertion order
        self._blocks: dict[str, dict[str, str]] = {}
        self._media: list[MediaBlock] = []

    # --- Construction ---

    def add(self, selector: str, property: str, value: Value) -> None:
        """
        Upserts one declaration.
        An existing selector+property keeps its position and takes the new value.
        """
        block = self._blocks.setdefault(str(selector), {})
        block[str(property)] = str(value)

    def add_media(self, query: str, style: "Style") -> None:
        """Appends a media block holding a copy of ``style``."""
        self._media.append(MediaBlock(str(query), style.copy()))

    def append(self, other: "Style") -> None:
        """
        Merges ``other`` into this style.
        Declarations replay through ``add`` (so ``other`` wins on conflicts);
        media blocks are always appended.
        """
        for selector, declarations in list(other._blocks.items()):
            for property, value in list(declarations.items()):
                self.add(selector, property, value)

        for media in list(other._media):
            self.add_media(media.query, media.style)

    def copy(self) -> "Style":
        return copy.deepcopy(self)

    # --- Read Access ---

    def is_empty(self) -> bool:
        return not self._blocks and not self._media

    def selectors(self) -> list[str]:
        return list(self._blocks)

    def declarations(self, selector: str) -> list[tuple[str, str]]:
        return list(self._blocks.get(selector, {}).items())

    @property
    def media(self) -> tuple[MediaBlock, ...]:
        return tuple(self._media)

    # --- Rendering ---

    def rules(self, scope_prefix: str) -> list[str]:
        """
        One CSS rule per declaration block, then one per media block.
        Class selectors are scoped with ``scope_prefix``, including those
        nested inside media blocks.
        """
        res: list[str] = []

        for selector, declarations in self._blocks.items():
            body = "".join(f"{prop}:{value};" for prop, value in declarations.items())
            res.append(f"{scope_selector(selector, scope_prefix)}{{{body}}}")

        for media in self._media:
            children = "".join(media.style.rules(scope_prefix))
            res.append(f"@media {media.query}{{{children}}}")

        return res

    def render(self, scope_prefix: str) -> str:
        return "".join(self.rules(scope_prefix))

    def _debug_lines(self) -> Iterator[str]:
        indent = StyleConfig.INDENT_UNIT

        for selector, declarations in self._blocks.items():
            yield f"{selector} {{"
            for prop, value in declarations.items():
                yield f"{indent}{prop}: {value};"
            yield "}"

        for media in self._media:
            yield f"@media {media.query} {{"
            for line in media.style._debug_lines():
                yield f"{indent}{line}"
            yield "}"

    def debug_text(self) -> str:
        """Human-readable, indented form. Stable for snapshot tests."""
        return "".join(f"{line}\n" for line in self._debug_lines())

    # --- Dunder ---

    def _ordered(self) -> list[tuple[str, list[tuple[str, str]]]]:
        # dict equality ignores order; compare as lists instead
        return [(sel, list(decls.items())) for sel, decls in self._blocks.items()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._ordered() == other._ordered() and self._media == other._media

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.debug_text()

    def __repr__(self) -> str:
        return f"Style(selectors={len(self._blocks)}, media={len(self._media)})"
