from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

"""SourceFile domain model and FileStatus enum.

Tracks one roster file through a batch run:
pending -> processing -> (success | failed).
"""


class FileStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """Processing context for a single roster file."""
    path: Path
    name: str
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: FileStatus = FileStatus.PENDING
    records: int = 0
    encoding: str | None = None
    error: str | None = None  # 失敗理由
