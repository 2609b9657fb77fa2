"""HTML attribute escaping shared by the generator and validator suggestions."""

from __future__ import annotations

# Ampersand must come first so entities introduced later are not re-escaped.
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: str) -> str:
    """Escape the five reserved characters for safe attribute embedding."""
    for char, entity in _REPLACEMENTS:
        text = text.replace(char, entity)
    return text
