"""Whitespace and glyph cleanup applied to every extracted document.

normalize_text is idempotent: running it on its own output changes nothing.
"""

import re
import unicodedata

BULLET_MARKER = "-"

_BREAKING_WHITESPACE_RE = re.compile(r"[\t\r\f\v]+")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0e-\x1f\x7f-\x9f]")
_NBSP_RE = re.compile("[\u00a0\u2007\u202f]")
# Round bullets, squares, triangles and the private-use glyphs Word's
# Symbol/Wingdings fonts leave behind in exported PDFs.
_BULLETS_RE = re.compile(
    "[\u2022\u2023\u2043\u2219\u25aa\u25ab\u25a0\u25a1\u25b8\u25ba"
    "\u25c6\u25cb\u25cf\u25e6\u27a2\u2794\uf0a7\uf0b7\uf0d8\uf076]"
)
_SPACES_RE = re.compile(r" {2,}")
_SPACES_AROUND_NEWLINE_RE = re.compile(r" *\n *")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Return *text* with control characters, extra whitespace and bullet variants cleaned up."""
    if not text:
        return ""
    cleaned = _BREAKING_WHITESPACE_RE.sub(" ", text)
    cleaned = _CONTROL_CHARS_RE.sub("", cleaned)
    cleaned = unicodedata.normalize("NFKC", cleaned)
    cleaned = _NBSP_RE.sub(" ", cleaned)
    cleaned = _BULLETS_RE.sub(BULLET_MARKER, cleaned)
    cleaned = _SPACES_RE.sub(" ", cleaned)
    cleaned = _SPACES_AROUND_NEWLINE_RE.sub("\n", cleaned)
    cleaned = _EXCESS_NEWLINES_RE.sub("\n\n", cleaned)
    return cleaned.strip()
