# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from employee_extractor.logging.init import reset_logging
from tests.helpers import make_csv, make_xlsx


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        # 空文字なら既定パスを使う (.env による上書きもテスト後に戻る)
        monkeypatch.setenv("EXTRACTOR_CONFIG", "")
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
sentinels:
  department: department unknown
  role: general
header_scan_limit: 50
csv_encoding: cp932
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "extract.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def xlsx_factory(temp_workdir: Path) -> Callable[..., Path]:
    def _factory(name: str, rows: list[list[object]]) -> Path:
        return make_xlsx(temp_workdir / "data" / name, rows)
    return _factory


@pytest.fixture()
def csv_factory(temp_workdir: Path) -> Callable[..., Path]:
    def _factory(name: str, rows: list[list[str]], encoding: str = "cp932", delimiter: str = ",") -> Path:
        return make_csv(temp_workdir / "data" / name, rows, encoding=encoding, delimiter=delimiter)
    return _factory


@pytest.fixture()
def roster_rows() -> list[list[str]]:
    return [
        ["社員名簿", ""],
        ["担当者コード", "担当者名", "所属名", "役職", "メール"],
        ["A001", "山田太郎", "営業部", "課長", "yamada@example.com"],
        ["A002", "鈴木花子", "", "", "suzuki@example.com"],
        ["", "佐藤次郎", "開発部", "主任", ""],
        ["A004", "", "開発部", "一般", ""],
    ]
