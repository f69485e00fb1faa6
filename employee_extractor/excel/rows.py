from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.config_models import ExtractorSettings
from ..models.employee import EmployeeRecord
from ..models.header_mapping import UNSET, HeaderMapping
from .normalize import cell_text

"""Row extraction: data rows after the header -> EmployeeRecord list.

Rows without a usable name are dropped silently; nothing is logged or
counted per row.
"""

__all__ = [
    "cell_at",
    "is_valid_row",
    "build_raw_info",
    "extract_rows",
]


def cell_at(row: Sequence[Any], index: int) -> str:
    """Trimmed text of row[index]; UNSET or out-of-range reads as ""."""
    if index == UNSET or index < 0 or index >= len(row):
        return ""
    return cell_text(row[index])


def is_valid_row(row: Sequence[Any], mapping: HeaderMapping) -> bool:
    """A data row is kept only if it has cells and a non-email name."""
    if not row:
        return False
    name = cell_at(row, mapping.name)
    return bool(name) and "@" not in name


def build_raw_info(
    header_row: Sequence[Any], row: Sequence[Any], settings: ExtractorSettings | None = None
) -> str:
    """Restate every non-empty cell as "label: value", joined by ", ".

    Iterates all columns of the header row, not only the mapped ones. Empty
    header labels are replaced by a synthesized "field{index}" label.
    """
    settings = settings or ExtractorSettings()
    parts: list[str] = []
    for idx, label in enumerate(header_row):
        value = cell_at(row, idx)
        if not value:
            continue
        label_text = cell_text(label) or settings.field_label(idx)
        parts.append(f"{label_text}: {value}")
    return ", ".join(parts)


def extract_rows(
    grid: Sequence[Sequence[Any]],
    header_index: int,
    mapping: HeaderMapping,
    settings: ExtractorSettings | None = None,
) -> list[EmployeeRecord]:
    """Emit one EmployeeRecord per valid row strictly after the header, in order."""
    settings = settings or ExtractorSettings()
    header_row = grid[header_index] if 0 <= header_index < len(grid) else []
    records: list[EmployeeRecord] = []
    for index in range(header_index + 1, len(grid)):
        row = grid[index]
        if not is_valid_row(row, mapping):
            continue
        records.append(
            EmployeeRecord(
                code=cell_at(row, mapping.code) or str(index),
                name=cell_at(row, mapping.name),
                department=cell_at(row, mapping.department) or settings.department_sentinel,
                role=cell_at(row, mapping.role) or settings.role_sentinel,
                raw_info=build_raw_info(header_row, row, settings),
            )
        )
    return records
