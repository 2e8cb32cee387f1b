"""Text utility helpers."""

from __future__ import annotations

import re

from ..constants import SUPERSCRIPT_DIGITS

_STRIP_RE = re.compile(r"[\s\-.]")
_FOOTNOTE_REF_RE = re.compile(r"#(\d+)")
_SUPERSCRIPT_TABLE = str.maketrans("0123456789", SUPERSCRIPT_DIGITS)


def normalize(value: object) -> str:
    """Drop whitespace, hyphens and periods, then lowercase; non-strings become ''."""
    if not isinstance(value, str):
        return ""
    return _STRIP_RE.sub("", value).lower()


def superscript(number: str | int) -> str:
    """Render the digits of a footnote number as superscript numerals."""
    return str(number).translate(_SUPERSCRIPT_TABLE)


def footnote_refs(code: str) -> list[str]:
    """Extract footnote numbers like 1 and 4 from a support code such as 'a #1 #4'."""
    return _FOOTNOTE_REF_RE.findall(code)


def ellipsize(value: str, width: int) -> str:
    """Shorten long strings while preserving suffix visibility."""
    if width <= 0:
        return ""
    if len(value) <= width:
        return value
    if width <= 1:
        return "…"
    return f"{value[: width - 1]}…"
