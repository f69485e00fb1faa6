from __future__ import annotations

from dataclasses import dataclass

"""HeaderMapping model: which column holds which canonical field."""

__all__ = [
    "UNSET",
    "FIELD_ORDER",
    "HeaderMapping",
    "FALLBACK_MAPPING",
]

UNSET = -1  # 列未検出

# 判定の優先順位。この順でヘッダセルを照合する
FIELD_ORDER: tuple[str, ...] = ("code", "name", "department", "role")


@dataclass(frozen=True)
class HeaderMapping:
    """Column indices of the four canonical fields within a header row.

    Each index is either a position in the row or UNSET (-1) when no header
    cell matched that field.
    """
    code: int = UNSET
    name: int = UNSET
    department: int = UNSET
    role: int = UNSET

    @property
    def dept(self) -> int:
        return self.department

    @property
    def matched_fields(self) -> int:
        """Number of fields that resolved to a column."""
        return sum(1 for f in FIELD_ORDER if self.index_of(f) != UNSET)

    def index_of(self, field_name: str) -> int:
        return getattr(self, field_name)

    def as_dict(self) -> dict[str, int]:
        return {f: self.index_of(f) for f in FIELD_ORDER}


# ヘッダ行が見つからない場合の位置決め打ち (1行目をヘッダとみなす)
FALLBACK_MAPPING = HeaderMapping(code=0, name=1, department=2, role=3)
