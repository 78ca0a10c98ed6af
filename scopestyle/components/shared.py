# Shared base rules for the example components.
# Components pull these in with "@import", so every kind gets its own
# scoped copy and local declarations override them.

from scopestyle.domain.builder import style

FONT_STACK = '"Inter", -apple-system, BlinkMacSystemFont, Roboto, sans-serif'

SHARED_STYLE = style(
    {
        ".root": {
            "display": "block",
            "width": "100%",
            "font-family": FONT_STACK,
            "box-sizing": "border-box",
            # Optimized for mobile readability
            "font-size": "16px",
            "line-height": 1.5,
            "letter-spacing": "-0.011em",
            "color": "#111827",
            "-webkit-font-smoothing": "antialiased",
        },
        ".root *": {
            "box-sizing": "border-box",
            "-webkit-tap-highlight-color": "transparent",
        },
        "@media (prefers-color-scheme: dark)": {
            ".root": {"color": "#fafaf9"},
        },
    }
)
