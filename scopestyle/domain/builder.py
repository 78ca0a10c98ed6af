from collections.abc import Iterable, Mapping
from typing import Any

from scopestyle.domain.style import Style

IMPORT_KEY = "@import"
MEDIA_PREFIX = "@media"


def _imports(value: Any) -> Iterable[Style]:
    if isinstance(value, Style):
        return [value]
    return value


def style(definition: Mapping[str, Any] | None = None) -> Style:
    """
    Builds a Style from a nested mapping literal:

        style({
            "@import": [BASE_STYLE],
            ".card": {"display": "flex", "padding": "12px"},
            "@media (max-width: 600px)": {
                ".card": {"padding": "4px"},
            },
        })

    ``@import`` styles are appended first, so local declarations win over
    imported ones. Selector blocks then become ``add`` calls and ``@media``
    entries become ``add_media`` calls, both in mapping order.

    Mapping keys are unique, so two blocks with the same query need the bare
    ``"@media"`` key holding a list of ``(query, mapping)`` pairs:

        style({"@media": [("print", {...}), ("print", {...})]})
    """
    result = Style()
    if not definition:
        return result

    if IMPORT_KEY in definition:
        for imported in _imports(definition[IMPORT_KEY]):
            result.append(imported)

    for key, body in definition.items():
        if key == IMPORT_KEY:
            continue
        if key == MEDIA_PREFIX:
            for query, nested in body:
                result.add_media(query, style(nested))
            continue
        if key.startswith(MEDIA_PREFIX):
            query = key[len(MEDIA_PREFIX) :].strip()
            result.add_media(query, style(body))
            continue
        for property, value in body.items():
            result.add(key, property, value)

    return result
