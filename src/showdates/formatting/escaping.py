from __future__ import annotations

# "&" and "\\" must stay first so inserted entities/escapes are not re-escaped.
_HTML_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_JSON_REPLACEMENTS = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_html(text: str | None) -> str:
    if not text:
        return ""
    for raw, entity in _HTML_REPLACEMENTS:
        text = text.replace(raw, entity)
    return text


def escape_json(text: str | None) -> str:
    """Escape text for use between double quotes in a JSON document.

    Control characters without a short escape become ``\\u00XX``.
    """
    if not text:
        return ""
    for raw, escaped in _JSON_REPLACEMENTS:
        text = text.replace(raw, escaped)
    return "".join(
        f"\\u{ord(char):04x}" if ord(char) < 0x20 else char
        for char in text
    )
