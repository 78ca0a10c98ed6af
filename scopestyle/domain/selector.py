from scopestyle.config import StyleConfig

_QUOTES = "\"'"


def _is_ident_start(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_ident_char(char: str) -> bool:
    return _is_ident_start(char) or ("0" <= char <= "9") or char in "-_"


def _skip_string(selector: str, start: int) -> int:
    """Returns the index just past the quoted string opening at ``start``."""
    quote = selector[start]
    i = start + 1
    while i < len(selector):
        char = selector[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        i += 1
    # Unterminated string: leave the rest of the selector as-is
    return len(selector)


def scope_selector(selector: str, scope_prefix: str) -> str:
    """
    Rewrites every class token (``.`` followed by ``[a-zA-Z][a-zA-Z0-9_-]*``)
    to ``._<scope_prefix>__<token>``.

    Tags, combinators, pseudo-classes and attribute selectors are left
    untouched. Quoted strings (e.g. ``[href$=".pdf"]``) are copied verbatim.
    """
    replacement = f".{StyleConfig.CLASS_PREFIX}{scope_prefix}{StyleConfig.CLASS_SEPARATOR}"
    out: list[str] = []
    i = 0
    length = len(selector)

    while i < length:
        char = selector[i]

        if char in _QUOTES:
            end = _skip_string(selector, i)
            out.append(selector[i:end])
            i = end
            continue

        if char == "." and i + 1 < length and _is_ident_start(selector[i + 1]):
            end = i + 2
            while end < length and _is_ident_char(selector[end]):
                end += 1
            out.append(replacement)
            out.append(selector[i + 1 : end])
            i = end
            continue

        out.append(char)
        i += 1

    return "".join(out)
