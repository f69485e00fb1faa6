from __future__ import annotations

from dataclasses import dataclass, field

"""Settings dataclasses for the roster extractor.

These are the domain-level knobs the extraction pipeline reads. They are
separate from the YAML loader in employee_extractor/config/loader.py so that the
core functions can be called with plain defaults and no config file at all.
"""

__all__ = [
    "DEFAULT_CODE_HEADERS",
    "DEFAULT_NAME_HEADERS",
    "DEFAULT_DEPARTMENT_HEADERS",
    "DEFAULT_ROLE_HEADERS",
    "HeaderSynonyms",
    "ExtractorSettings",
]

# ヘッダ判定用キーワード (表記ゆれは normalize() 側で吸収)
DEFAULT_CODE_HEADERS: tuple[str, ...] = (
    "担当者コード", "担当者ｺｰﾄﾞ", "コード", "社員番号", "社員CD", "CD", "ID", "NO",
)
DEFAULT_NAME_HEADERS: tuple[str, ...] = ("担当者名", "氏名", "名前", "従業員名")
DEFAULT_DEPARTMENT_HEADERS: tuple[str, ...] = ("所属名", "部署", "所属", "部署名", "課", "グループ")
DEFAULT_ROLE_HEADERS: tuple[str, ...] = ("役職", "雇用", "区分", "役割", "職種", "形態")


@dataclass(frozen=True)
class HeaderSynonyms:
    """Hand-curated header labels per canonical field.

    Matching order is fixed: code, name, department, role. The first list
    that matches a header cell claims it.
    """
    code: tuple[str, ...] = DEFAULT_CODE_HEADERS
    name: tuple[str, ...] = DEFAULT_NAME_HEADERS
    department: tuple[str, ...] = DEFAULT_DEPARTMENT_HEADERS
    role: tuple[str, ...] = DEFAULT_ROLE_HEADERS

    def for_field(self, field_name: str) -> tuple[str, ...]:
        return getattr(self, field_name)


@dataclass(frozen=True)
class ExtractorSettings:
    """Tunable behaviour of the extraction pipeline.

    Defaults reproduce the stock behaviour: 50-row header scan, two matched
    fields to accept a header row, Shift-JIS (cp932) first for CSV.
    """
    synonyms: HeaderSynonyms = field(default_factory=HeaderSynonyms)
    department_sentinel: str = "department unknown"  # 所属が空のとき
    role_sentinel: str = "general"  # 役職が空のとき
    field_label_template: str = "field{index}"  # ヘッダ名が空の列ラベル
    header_scan_limit: int = 50
    min_header_matches: int = 2
    csv_encoding: str = "cp932"
    default_encoding: str = "utf-8-sig"

    def field_label(self, index: int) -> str:
        return self.field_label_template.replace("{index}", str(index))
