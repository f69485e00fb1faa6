from __future__ import annotations

from employee_extractor.excel.header import locate_header
from employee_extractor.excel.rows import build_raw_info, cell_at, extract_rows, is_valid_row
from employee_extractor.models.config_models import ExtractorSettings
from employee_extractor.models.employee import EmployeeRecord
from employee_extractor.models.header_mapping import FALLBACK_MAPPING, UNSET, HeaderMapping


def test_extract_rows_basic_example():
    grid = [["ID", "氏名", "部署"], ["1", "田中太郎", "営業"], ["2", "", "開発"]]
    index, mapping = locate_header(grid)
    records = extract_rows(grid, index, mapping)
    assert records == [
        EmployeeRecord(
            code="1",
            name="田中太郎",
            department="営業",
            role="general",
            raw_info="ID: 1, 氏名: 田中太郎, 部署: 営業",
        )
    ]


def test_raw_info_preserves_order_and_omits_empty_cells():
    assert build_raw_info(["ID", "氏名"], ["7", "佐藤"]) == "ID: 7, 氏名: 佐藤"
    assert build_raw_info(["ID", "氏名", "メモ"], ["7", "", " 備考 "]) == "ID: 7, メモ: 備考"


def test_raw_info_synthesizes_label_for_empty_header_cell():
    assert build_raw_info(["ID", "", "氏名"], ["7", "内線123", "佐藤"]) == "ID: 7, field1: 内線123, 氏名: 佐藤"


def test_raw_info_covers_only_header_columns():
    assert build_raw_info(["ID", "氏名"], ["7", "佐藤", "余分"]) == "ID: 7, 氏名: 佐藤"


def test_raw_info_custom_label_template():
    settings = ExtractorSettings(field_label_template="項目{index}")
    assert build_raw_info(["", "氏名"], ["x", "佐藤"], settings) == "項目0: x, 氏名: 佐藤"


def test_code_falls_back_to_row_ordinal():
    grid = [
        ["タイトル", ""],
        ["氏名", "部署"],
        ["山田", "営業"],
        ["鈴木", "開発"],
    ]
    index, mapping = locate_header(grid)
    assert index == 1
    assert mapping.code == UNSET
    records = extract_rows(grid, index, mapping)
    assert [r.code for r in records] == ["2", "3"]


def test_blank_code_cell_falls_back_to_row_ordinal():
    grid = [["ID", "氏名"], ["", "山田"], ["  ", "鈴木"], ["E9", "佐藤"]]
    records = extract_rows(grid, 0, HeaderMapping(code=0, name=1))
    assert [r.code for r in records] == ["1", "2", "E9"]


def test_sentinels_for_missing_department_and_role():
    grid = [["ID", "氏名", "部署", "役職"], ["1", "山田", " ", ""]]
    (record,) = extract_rows(grid, 0, HeaderMapping(0, 1, 2, 3))
    assert record.department == "department unknown"
    assert record.role == "general"


def test_custom_sentinels():
    settings = ExtractorSettings(department_sentinel="部署不明", role_sentinel="一般")
    grid = [["ID", "氏名"], ["1", "山田"]]
    (record,) = extract_rows(grid, 0, HeaderMapping(code=0, name=1), settings)
    assert (record.department, record.role) == ("部署不明", "一般")


def test_rows_without_valid_name_are_skipped_silently():
    grid = [
        ["ID", "氏名", "部署"],
        [],
        ["1", "yamada@example.com", "営業"],
        ["2", "   ", "営業"],
        ["3"],
        ["4", " 鈴木 ", "開発"],
    ]
    records = extract_rows(grid, 0, HeaderMapping(code=0, name=1, department=2))
    assert [(r.code, r.name) for r in records] == [("4", "鈴木")]


def test_rows_before_header_are_ignored_and_order_kept():
    grid = [
        ["前置き", "山田"],
        ["ID", "氏名"],
        ["1", "佐藤"],
        ["2", "田中"],
        ["3", "伊藤"],
    ]
    records = extract_rows(grid, 1, HeaderMapping(code=0, name=1))
    assert [r.name for r in records] == ["佐藤", "田中", "伊藤"]


def test_fallback_mapping_extracts_positional_columns():
    grid = [["foo", "bar", "baz", "qux"], ["E1", "Alice", "Sales", "Manager"]]
    records = extract_rows(grid, 0, FALLBACK_MAPPING)
    assert records == [
        EmployeeRecord("E1", "Alice", "Sales", "Manager", "foo: E1, bar: Alice, baz: Sales, qux: Manager")
    ]


def test_unset_index_never_reads_last_column():
    row = ["1", "山田", "最終列"]
    assert cell_at(row, UNSET) == ""
    assert cell_at(row, 5) == ""
    assert cell_at(row, 2) == "最終列"


def test_is_valid_row():
    mapping = HeaderMapping(code=0, name=1)
    assert is_valid_row(["1", "山田"], mapping)
    assert not is_valid_row([], mapping)
    assert not is_valid_row(["1"], mapping)
    assert not is_valid_row(["1", "a@b.jp"], mapping)
    assert not is_valid_row(["1", "山田"], HeaderMapping(code=0))


def test_extract_rows_header_index_past_end():
    assert extract_rows([["ID", "氏名"]], 0, HeaderMapping(code=0, name=1)) == []


def test_field_label_template_ignores_other_braces():
    settings = ExtractorSettings(field_label_template="項目{index}{x}")
    assert settings.field_label(2) == "項目2{x}"
    assert build_raw_info(["", "氏名"], ["x", "佐藤"], settings) == "項目0{x}: x, 氏名: 佐藤"
