from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ExtractConfig
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import ExtractorSettings
from ..models.employee import EmployeeRecord
from ..models.error_record import EXTRACTION_EMPTY, READ_ERROR, ErrorRecord
from ..models.processing_result import FileStat, ProcessingResult
from ..models.source_file import FileStatus, SourceFile
from .extractor import ExtractionEmptyError, extract_with_encoding
from .progress import ProgressTracker

"""Batch orchestration: scan the source directory, extract every roster file,
aggregate a ProcessingResult.

A failing file never aborts the run: it is logged at ERROR, buffered as an
ErrorRecord and counted in failed_files. Only an unusable source directory
is fatal (ProcessingError).
"""

logger = logging.getLogger(__name__)

ROSTER_SUFFIXES = frozenset({".csv", ".tsv", ".txt", ".xlsx", ".xlsm"})


class ProcessingError(Exception):
    """Fatal batch error (source directory missing or unreadable)."""


def scan_roster_files(directory: Path) -> list[Path]:
    """List roster files in directory (non-recursive, sorted by name).

    Raises:
        ProcessingError: directory missing, not a directory, or unreadable
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")
    try:
        return sorted(
            p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in ROSTER_SUFFIXES
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def _process_single_file(
    path: Path, settings: ExtractorSettings, error_log: ErrorLogBuffer
) -> tuple[SourceFile, list[EmployeeRecord]]:
    source = SourceFile(path=path, name=path.name, start_time=datetime.now(UTC), status=FileStatus.PROCESSING)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"{path.name}: read failed: {e}")
        error_log.append(ErrorRecord.create(path.name, READ_ERROR, str(e)))
        return replace(source, status=FileStatus.FAILED, end_time=datetime.now(UTC), error=str(e)), []
    try:
        outcome = extract_with_encoding(data, path.name, settings)
    except ExtractionEmptyError as e:
        logger.error(f"{path.name}: {e}")
        error_log.append(ErrorRecord.create(path.name, EXTRACTION_EMPTY, str(e)))
        return replace(source, status=FileStatus.FAILED, end_time=datetime.now(UTC), error=str(e)), []

    logger.info(f"{path.name}: extracted {len(outcome.records)} records")
    done = replace(
        source,
        status=FileStatus.SUCCESS,
        end_time=datetime.now(UTC),
        records=len(outcome.records),
        encoding=outcome.encoding,
    )
    return done, outcome.records


def process_all(config: ExtractConfig, error_log: ErrorLogBuffer | None = None) -> ProcessingResult:
    """Extract every roster file in config.source_directory.

    Args:
        config: loaded configuration (source directory + extractor settings)
        error_log: buffer for file-level failures; a fresh one if omitted.
            Flushed before returning.

    Raises:
        ProcessingError: source directory problems
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    file_paths = scan_roster_files(Path(config.source_directory))

    file_stats: list[FileStat] = []
    records_by_file: dict[str, list[EmployeeRecord]] = {}
    success_count = 0
    failed_count = 0
    total_records = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            source, records = _process_single_file(file_path, config.settings, error_log)
            if source.status == FileStatus.SUCCESS:
                success_count += 1
                total_records += source.records
                records_by_file[source.name] = records
            else:
                failed_count += 1
            progress.finish_file(success=success_count, failed=failed_count, records=total_records)

            elapsed = (source.end_time - source.start_time).total_seconds()
            file_stats.append(
                FileStat(
                    file_name=source.name,
                    status=source.status.value,
                    records=source.records,
                    elapsed_seconds=elapsed,
                    encoding=source.encoding,
                )
            )

    log_path = error_log.flush()
    if log_path is not None:
        logger.warning(f"error log written: {log_path}")

    end_time = datetime.now(UTC)
    elapsed_total = (end_time - start_time).total_seconds()
    throughput = total_records / elapsed_total if elapsed_total > 0 else 0.0
    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_records=total_records,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_total,
        throughput_records_per_sec=throughput,
        file_stats=file_stats,
        records=records_by_file,
    )
