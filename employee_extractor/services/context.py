from __future__ import annotations

from collections.abc import Iterable

from ..models.employee import EmployeeRecord

"""Render extracted records as the text block passed to the answer service."""

NO_EMPLOYEES = "EMPLOYEES_NOT_FOUND"


def render_employee_line(record: EmployeeRecord) -> str:
    line = f"{record.code} / {record.name} / {record.department} / {record.role}"
    if record.raw_info:
        line += f" | {record.raw_info}"
    return line


def render_employee_context(records: Iterable[EmployeeRecord], source_name: str | None = None) -> str:
    """One line per record, prefixed by "FILE:<name>" when a source is given.

    >>> rec = EmployeeRecord("7", "佐藤", "営業", "general", "ID: 7, 氏名: 佐藤")
    >>> render_employee_context([rec], "roster.csv")
    'FILE:roster.csv\\n7 / 佐藤 / 営業 / general | ID: 7, 氏名: 佐藤'
    """
    lines = [render_employee_line(r) for r in records]
    if not lines:
        lines = [NO_EMPLOYEES]
    if source_name:
        lines.insert(0, f"FILE:{source_name}")
    return "\n".join(lines)
