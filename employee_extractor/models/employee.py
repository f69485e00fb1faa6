from __future__ import annotations

import json
from dataclasses import asdict, dataclass

"""EmployeeRecord model: one normalized roster row.

`raw_info` restates every non-empty cell of the source row labelled by the
header row. It is the field handed to the answer service as context; code,
name, department and role are lossy projections of the same row.
"""

__all__ = [
    "EmployeeRecord",
]


@dataclass(frozen=True)
class EmployeeRecord:
    code: str  # コード列が無い/空なら行番号 (0 始まり)
    name: str  # 必須。メールアドレスは不可
    department: str
    role: str
    raw_info: str  # "見出し: 値, 見出し: 値, ..."

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
