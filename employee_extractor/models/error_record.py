from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the file-level error log.

Each failed roster file in a batch run becomes one JSON Lines entry with a
fixed key set. Row-level problems are never logged (malformed rows are
dropped silently), so `row` is -1 for every record the batch driver writes;
the field stays in the schema for callers that instrument row handling.
"""

__all__ = [
    "ErrorRecord",
    "EXTRACTION_EMPTY",
    "READ_ERROR",
]

EXTRACTION_EMPTY = "EXTRACTION_EMPTY"
READ_ERROR = "READ_ERROR"


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error entry.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: roster file name
        row: 0-based grid row, or -1 when the error concerns the whole file
        error_type: UPPER_SNAKE_CASE classification
        message: human-readable diagnostic
    """
    timestamp: str
    file: str
    row: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, error_type: str, message: str, row: int = -1) -> ErrorRecord:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(timestamp=ts, file=file, row=row, error_type=error_type, message=message)

    def to_json_line(self) -> str:
        # 追加キー禁止: dataclass のフィールドのみ出力
        return json.dumps(asdict(self), ensure_ascii=False)
