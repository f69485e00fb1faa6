from __future__ import annotations

import math

import pytest

from employee_extractor.excel.normalize import cell_text, headers_match, matches_any, normalize


def test_normalize_full_width_space_folds():
    assert normalize("　担当者コード") == normalize("担当者コード")


def test_normalize_half_width_katakana_folds_to_full_width():
    assert normalize("ﾅｶﾑﾗ") == normalize("ナカムラ")
    assert normalize("担当者ｺｰﾄﾞ") == "担当者コード"


def test_normalize_full_width_alphanumerics_and_case():
    assert normalize("ＩＤ") == "id"
    assert normalize("社員ＣＤ") == "社員cd"


def test_normalize_strips_inner_whitespace_tabs_newlines():
    assert normalize(" 担当\t者\n名 ") == "担当者名"
    assert normalize("部　署") == "部署"


@pytest.mark.parametrize("value", [None, float("nan"), "", "   ", "\t\n"])
def test_normalize_missing_or_blank_is_empty(value):
    assert normalize(value) == ""


def test_normalize_coerces_numbers():
    assert normalize(1001) == "1001"


def test_headers_match_equal_and_substring_both_directions():
    assert headers_match("担当者コード（必須）", "担当者コード")
    assert headers_match("担当者コード", "担当者コード（必須）")
    assert headers_match("ＩＤ", "id")
    assert not headers_match("氏名", "部署")


def test_headers_match_empty_never_matches():
    assert not headers_match("", "氏名")
    assert not headers_match("氏名", "  ")


def test_matches_any_uses_prenormalized_keywords():
    assert matches_any("所属部署", ("部署",))
    assert not matches_any("", ("部署",))
    assert not matches_any("メール", ("部署", "課"))


def test_cell_text_trims_and_handles_missing():
    assert cell_text("  山田 ") == "山田"
    assert cell_text(None) == ""
    assert cell_text(math.nan) == ""
    assert cell_text(7) == "7"
