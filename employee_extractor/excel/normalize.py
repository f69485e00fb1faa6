from __future__ import annotations

import math
import re
import unicodedata
from typing import Any

"""Text normalization for header matching.

Japanese spreadsheet exports mix half-width and full-width forms of the same
label (ｺｰﾄﾞ / コード, ＩＤ / ID) and pad labels with full-width spaces. NFKC
folds both, then all whitespace is removed and the result lower-cased.
"""

__all__ = [
    "normalize",
    "headers_match",
    "matches_any",
    "cell_text",
]

_WHITESPACE_RE = re.compile(r"\s+")


def _is_missing(value: Any) -> bool:
    # pandas の NaN も空扱い
    return value is None or (isinstance(value, float) and math.isnan(value))


def normalize(value: Any) -> str:
    """Return the canonical matching key of a cell value.

    Steps: None -> ""; str(); strip; NFKC; remove every whitespace character
    anywhere in the string; lower-case.

    >>> normalize("　担当者 コード ")
    '担当者コード'
    >>> normalize("ﾅｶﾑﾗ") == normalize("ナカムラ")
    True
    """
    if _is_missing(value):
        return ""
    text = str(value).strip()
    text = unicodedata.normalize("NFKC", text)
    text = _WHITESPACE_RE.sub("", text)
    return text.lower()


def matches_any(normalized: str, normalized_keywords: tuple[str, ...]) -> bool:
    """Substring match in either direction against pre-normalized keywords."""
    if not normalized:
        return False
    for keyword in normalized_keywords:
        if not keyword:
            continue
        if normalized == keyword or keyword in normalized or normalized in keyword:
            return True
    return False


def headers_match(left: Any, right: Any) -> bool:
    """True when two header labels are equivalent after normalization.

    Equivalent means equal, or one normalized form contains the other
    (e.g. "担当者コード（必須）" matches "担当者コード"). Empty labels never match.
    """
    return matches_any(normalize(left), (normalize(right),))


def cell_text(value: Any) -> str:
    """Display text of a data cell: str() and strip, missing -> ""."""
    if _is_missing(value):
        return ""
    return str(value).strip()
