"""Text escaping and whitespace helpers used by the renderer."""

from __future__ import annotations

import re

_ESCAPES = {
    "&": "&amp;",
    # "&#39;" is shorter than "&apos;" and apos was not in HTML until HTML5
    "'": "&#39;",
    "<": "&lt;",
    ">": "&gt;",
    # "&#34;" is shorter than "&quot;"
    '"': "&#34;",
    "\r": "&#13;",
}
_ESCAPE_RE = re.compile("[&'<>\"\r]")
_STYLE_STRIP_RE = re.compile("[\r\n\t]")


def escape(text: str) -> str:
    """Replace the six HTML-special characters with entity references.

    Newlines, tabs and non-ASCII text are left alone. Already-escaped input
    is escaped again (``&amp;`` becomes ``&amp;amp;``).
    """
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


def is_whitespace(text: str) -> bool:
    """True if every character in text is whitespace. Empty text counts."""
    return not text or text.isspace()


def clean_style(text: str) -> str:
    """Strip CR, LF and tab so a style block fits in an inline attribute."""
    return _STYLE_STRIP_RE.sub("", text)
