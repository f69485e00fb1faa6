from __future__ import annotations

from pathlib import Path

import pandas as pd

"""File builders shared by tests (real workbooks / encoded CSV bytes)."""


def make_xlsx(path: Path, rows: list[list[object]], sheet_name: str = "名簿") -> Path:
    """Write rows to the first sheet of a real workbook (no header/index)."""
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return path


def make_csv(path: Path, rows: list[list[str]], encoding: str = "cp932", delimiter: str = ",") -> Path:
    text = "".join(delimiter.join(r) + "\r\n" for r in rows)
    path.write_bytes(text.encode(encoding))
    return path
