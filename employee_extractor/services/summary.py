from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs.

Format:
SUMMARY files={n}/{n} success={s} failed={f} records={r} elapsed_sec={e} throughput_rps={t}
"""


def _format_number(value: float) -> str:
    # 整数値は小数点なし、極小値は指数表記を避ける
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(total_files: int, result: ProcessingResult) -> str:
    """Render the SUMMARY line for a ProcessingResult.

    >>> from datetime import datetime, timezone
    >>> t = datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> r = ProcessingResult(1, 0, 40, t, t, 2.0, 20.0)
    >>> render_summary_line(1, r)
    'SUMMARY files=1/1 success=1 failed=0 records=40 elapsed_sec=2 throughput_rps=20'
    """
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"records={result.total_records} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_records_per_sec)}"
    )
