from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..excel.header import locate_header
from ..excel.reader import DecodeFailure, candidate_encodings, decode
from ..excel.rows import extract_rows
from ..models.config_models import ExtractorSettings
from ..models.employee import EmployeeRecord

"""Extraction pipeline: decode -> reshape -> locate-header -> extract-rows.

Encoding attempts run sequentially; an attempt that fails to decode or
yields zero records falls through to the next one. Only total failure is
surfaced, as ExtractionEmptyError.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "ExtractionEmptyError",
    "EMPTY_EXTRACTION_MESSAGE",
    "ExtractionOutcome",
    "extract_from_grid",
    "extract_with_encoding",
    "extract_employees",
    "extract_employees_from_path",
]

EMPTY_EXTRACTION_MESSAGE = (
    "no employee records found: check that the header row contains a recognizable label "
    "such as '担当者名' or '氏名', and that the file uses the expected delimiter (comma or tab)"
)


class ExtractionEmptyError(Exception):
    """Raised when every decode attempt produced zero employee records."""


@dataclass(frozen=True)
class ExtractionOutcome:
    """Records plus the encoding attempt that produced them."""
    records: list[EmployeeRecord]
    encoding: str | None  # None はスプレッドシート直接読み込み


def extract_from_grid(
    grid: Sequence[Sequence[Any]], settings: ExtractorSettings | None = None
) -> list[EmployeeRecord]:
    """Run header detection and row extraction over an already decoded grid."""
    settings = settings or ExtractorSettings()
    header_index, mapping = locate_header(
        grid,
        settings.synonyms,
        scan_limit=settings.header_scan_limit,
        min_matches=settings.min_header_matches,
    )
    return extract_rows(grid, header_index, mapping, settings)


def extract_with_encoding(
    file_bytes: bytes, file_name: str, settings: ExtractorSettings | None = None
) -> ExtractionOutcome:
    """Try each candidate encoding in order and keep the first non-empty result.

    Raises ExtractionEmptyError when no attempt yields a record.
    """
    settings = settings or ExtractorSettings()
    attempts = candidate_encodings(
        file_name, csv_encoding=settings.csv_encoding, default_encoding=settings.default_encoding
    )
    for encoding in attempts:
        label = encoding or "native"
        try:
            grid = decode(file_bytes, file_name, encoding=encoding)
        except DecodeFailure as e:
            logger.debug(f"{file_name}: decode attempt {label} failed: {e}")
            continue
        records = extract_from_grid(grid, settings)
        if records:
            logger.debug(f"{file_name}: {len(records)} records via {label}")
            return ExtractionOutcome(records, encoding)
        logger.debug(f"{file_name}: attempt {label} yielded no records")
    raise ExtractionEmptyError(EMPTY_EXTRACTION_MESSAGE)


def extract_employees(
    file_bytes: bytes, file_name: str, settings: ExtractorSettings | None = None
) -> list[EmployeeRecord]:
    """Extract normalized employee records from a roster file's bytes.

    Args:
        file_bytes: full file content, already buffered
        file_name: file name; only its extension is used (codepage choice)
        settings: optional overrides for synonyms, sentinels and limits

    Raises:
        ExtractionEmptyError: no records after all encoding attempts
    """
    return extract_with_encoding(file_bytes, file_name, settings).records


def extract_employees_from_path(
    path: Path, settings: ExtractorSettings | None = None
) -> list[EmployeeRecord]:
    return extract_employees(Path(path).read_bytes(), Path(path).name, settings)
