from __future__ import annotations

import csv
import io
from datetime import date, datetime
from typing import Any

import pandas as pd

"""Roster decoding: file bytes -> RawGrid (list of rows of cell text).

- .csv は Shift-JIS (cp932) を先に試し、抽出 0 件なら既定 (UTF-8) で再試行
  (再試行の判断は services.extractor 側。ここは 1 回分のデコードのみ)
- .xlsx / .xlsm は pandas (openpyxl) で先頭シートをそのまま読む (コードページ曖昧性なし)
  旧形式 .xls は対象外
- 全行が 1 セル以下ならデリミタ誤検出とみなし、タブ/カンマで再分割
"""

__all__ = [
    "RawGrid",
    "DecodeFailure",
    "SPREADSHEET_SUFFIXES",
    "file_suffix",
    "is_comma_delimited",
    "is_spreadsheet",
    "candidate_encodings",
    "decode",
    "read_text_grid",
    "read_spreadsheet_grid",
    "recover_joined_cells",
]

RawGrid = list[list[str]]

SPREADSHEET_SUFFIXES = frozenset({".xlsx", ".xlsm"})
COMMA_DELIMITED_SUFFIXES = frozenset({".csv"})
TAB_DELIMITED_SUFFIXES = frozenset({".tsv"})


class DecodeFailure(Exception):
    """Raised when bytes cannot be read as a grid under the attempted encoding."""


def file_suffix(file_name: str) -> str:
    """Lower-cased extension with leading dot.

    Accepts a file name ("roster.CSV"), a suffix (".csv") or a bare extension ("csv").
    """
    name = str(file_name).strip().lower()
    if "." not in name:
        return f".{name}" if name else ""
    return name[name.rfind("."):]


def is_comma_delimited(file_name: str) -> bool:
    return file_suffix(file_name) in COMMA_DELIMITED_SUFFIXES


def is_spreadsheet(file_name: str) -> bool:
    return file_suffix(file_name) in SPREADSHEET_SUFFIXES


def candidate_encodings(
    file_name: str, csv_encoding: str = "cp932", default_encoding: str = "utf-8-sig"
) -> list[str | None]:
    """Encodings to try, in order. None means native spreadsheet decoding."""
    if is_spreadsheet(file_name):
        return [None]
    if is_comma_delimited(file_name):
        return [csv_encoding, default_encoding]
    return [default_encoding]


def _spreadsheet_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        # Excel の数値は float で来る。整数値は "1001.0" ではなく "1001" に
        if value.is_integer():
            return str(int(value))
        return str(value)
    if value is pd.NaT:
        return ""
    if isinstance(value, datetime):
        if value.hour == value.minute == value.second == 0 and value.microsecond == 0:
            return value.strftime("%Y-%m-%d")
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def read_spreadsheet_grid(file_bytes: bytes) -> RawGrid:
    """Read the first sheet of a workbook as a grid of cell text.

    Rows keep the sheet's full width; a row with no non-blank cell becomes [].
    """
    try:
        frame = pd.read_excel(
            io.BytesIO(file_bytes), sheet_name=0, header=None, dtype=object, na_filter=False
        )
    except Exception as e:  # openpyxl はファイル破損時に様々な例外を投げる
        raise DecodeFailure(f"unreadable workbook: {e}") from e
    grid: RawGrid = []
    for values in frame.itertuples(index=False, name=None):
        row = [_spreadsheet_cell(v) for v in values]
        grid.append(row if any(c.strip() for c in row) else [])
    return grid


def read_text_grid(file_bytes: bytes, encoding: str, delimiter: str = ",") -> RawGrid:
    """Decode delimited text under one encoding and split it into rows."""
    try:
        text = file_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise DecodeFailure(f"cannot decode as {encoding}: {e}") from e
    try:
        return [list(row) for row in csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)]
    except csv.Error as e:
        raise DecodeFailure(f"malformed delimited text ({encoding}): {e}") from e


def recover_joined_cells(grid: RawGrid) -> RawGrid:
    """Resplit rows that collapsed into a single cell.

    Applies only when every row has at most one cell. Each row's first cell
    is split on tab if it contains one, otherwise on comma if it contains
    one; other rows are left untouched.
    """
    if not grid or any(len(row) > 1 for row in grid):
        return grid
    recovered: RawGrid = []
    for row in grid:
        cell = str(row[0]) if row and row[0] is not None else ""
        if "\t" in cell:
            recovered.append(cell.split("\t"))
        elif "," in cell:
            recovered.append(cell.split(","))
        else:
            recovered.append(list(row))
    return recovered


def decode(file_bytes: bytes, file_name: str, encoding: str | None = None) -> RawGrid:
    """Decode file bytes into a RawGrid for one encoding attempt.

    Parameters
    ----------
    file_bytes: ファイル全体のバイト列
    file_name: ファイル名または拡張子 (分岐にのみ使用)
    encoding: テキスト形式のエンコーディング。None なら拡張子ごとの第一候補
        (.csv は cp932、その他は UTF-8 BOM 許容)。スプレッドシート形式では無視される。

    Raises DecodeFailure when the bytes cannot be read under this attempt.
    """
    suffix = file_suffix(file_name)
    if suffix in SPREADSHEET_SUFFIXES:
        grid = read_spreadsheet_grid(file_bytes)
    else:
        delimiter = "\t" if suffix in TAB_DELIMITED_SUFFIXES else ","
        grid = read_text_grid(file_bytes, encoding or candidate_encodings(suffix)[0], delimiter=delimiter)
    return recover_joined_cells(grid)
