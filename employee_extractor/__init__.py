"""Heuristic employee roster extraction from messy CSV / Excel exports.

Pipeline: decode -> reshape (joined-cell recovery) -> locate-header -> extract-rows.
"""

from .excel.header import locate_header
from .excel.normalize import headers_match, normalize
from .excel.reader import decode, recover_joined_cells
from .excel.rows import extract_rows, is_valid_row
from .models import EmployeeRecord, ExtractorSettings, HeaderMapping, HeaderSynonyms
from .services.context import render_employee_context
from .services.extractor import ExtractionEmptyError, extract_employees, extract_employees_from_path

__version__ = "0.1.0"

__all__ = [
    "decode",
    "recover_joined_cells",
    "normalize",
    "headers_match",
    "locate_header",
    "extract_rows",
    "is_valid_row",
    "extract_employees",
    "extract_employees_from_path",
    "ExtractionEmptyError",
    "EmployeeRecord",
    "ExtractorSettings",
    "HeaderMapping",
    "HeaderSynonyms",
    "render_employee_context",
]
