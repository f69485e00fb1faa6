from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.config_models import HeaderSynonyms
from ..models.header_mapping import FALLBACK_MAPPING, FIELD_ORDER, UNSET, HeaderMapping
from .normalize import matches_any, normalize

"""Header-row detection and column -> field mapping.

The scan is greedy: the first row (top-down, within the scan limit) whose
cells resolve at least two distinct fields is the header. No best-of-N
ranking is done across rows.
"""

__all__ = [
    "HEADER_SCAN_LIMIT",
    "MIN_HEADER_MATCHES",
    "match_header_row",
    "locate_header",
]

HEADER_SCAN_LIMIT = 50
MIN_HEADER_MATCHES = 2


def _normalized_keywords(synonyms: HeaderSynonyms) -> dict[str, tuple[str, ...]]:
    return {f: tuple(normalize(k) for k in synonyms.for_field(f)) for f in FIELD_ORDER}


def _match_row(row: Sequence[Any], keywords: dict[str, tuple[str, ...]]) -> HeaderMapping:
    slots = dict.fromkeys(FIELD_ORDER, UNSET)
    for idx, cell in enumerate(row):
        normalized = normalize(cell)
        if not normalized:
            continue
        for field_name in FIELD_ORDER:
            # 同じ行で既に埋まった項目は上書きしない (左から最初の一致が勝つ)
            if slots[field_name] != UNSET:
                continue
            if not matches_any(normalized, keywords[field_name]):
                continue
            # メールアドレスを含む見出しは氏名列にしない (セルは消費される)
            if field_name == "name" and "@" in normalized:
                break
            slots[field_name] = idx
            break
    return HeaderMapping(**slots)


def match_header_row(row: Sequence[Any], synonyms: HeaderSynonyms | None = None) -> HeaderMapping:
    """Map the cells of one candidate row to canonical fields."""
    return _match_row(row, _normalized_keywords(synonyms or HeaderSynonyms()))


def locate_header(
    grid: Sequence[Sequence[Any]],
    synonyms: HeaderSynonyms | None = None,
    scan_limit: int = HEADER_SCAN_LIMIT,
    min_matches: int = MIN_HEADER_MATCHES,
) -> tuple[int, HeaderMapping]:
    """Find the header row and its field mapping.

    Rows with fewer than two cells are never candidates. When no row within
    `scan_limit` qualifies, row 0 is assumed to be the header with the
    positional mapping code=0, name=1, department=2, role=3.
    """
    keywords = _normalized_keywords(synonyms or HeaderSynonyms())
    for index, row in enumerate(grid[:scan_limit]):
        if not row or len(row) < 2:
            continue
        mapping = _match_row(row, keywords)
        if mapping.matched_fields >= min_matches:
            return index, mapping
    return 0, FALLBACK_MAPPING
