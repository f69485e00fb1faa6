from __future__ import annotations

from employee_extractor.models.employee import EmployeeRecord
from employee_extractor.services.context import NO_EMPLOYEES, render_employee_context, render_employee_line


def test_render_line_with_raw_info():
    rec = EmployeeRecord("7", "佐藤", "営業", "general", "ID: 7, 氏名: 佐藤")
    assert render_employee_line(rec) == "7 / 佐藤 / 営業 / general | ID: 7, 氏名: 佐藤"


def test_render_line_without_raw_info():
    rec = EmployeeRecord("7", "佐藤", "営業", "general", "")
    assert render_employee_line(rec) == "7 / 佐藤 / 営業 / general"


def test_render_context_keeps_record_order_and_file_prefix():
    recs = [
        EmployeeRecord("1", "山田", "総務", "課長", "氏名: 山田"),
        EmployeeRecord("2", "鈴木", "開発", "general", "氏名: 鈴木"),
    ]
    text = render_employee_context(recs, source_name="社員.csv")
    assert text.splitlines() == [
        "FILE:社員.csv",
        "1 / 山田 / 総務 / 課長 | 氏名: 山田",
        "2 / 鈴木 / 開発 / general | 氏名: 鈴木",
    ]


def test_render_context_empty():
    assert render_employee_context([]) == NO_EMPLOYEES
    assert render_employee_context([], "a.csv") == f"FILE:a.csv\n{NO_EMPLOYEES}"
