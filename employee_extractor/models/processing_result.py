from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .employee import EmployeeRecord

"""Batch processing result models.

ProcessingResult feeds the SUMMARY line and the CLI exit code; FileStat holds
the per-file breakdown.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file statistics for one roster file."""
    file_name: str
    status: str  # success/failed
    records: int  # 抽出件数
    elapsed_seconds: float
    encoding: str | None = None  # 成功した試行のエンコーディング (xlsx は None)


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a batch run."""
    success_files: int
    failed_files: int
    total_records: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_records_per_sec: float  # total_records / elapsed
    file_stats: list[FileStat] | None = None
    # ファイル名 -> 抽出レコード (成功ファイルのみ)
    records: dict[str, list[EmployeeRecord]] = field(default_factory=dict)
