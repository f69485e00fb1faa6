"""Domain models for the employee roster extractor.

Pipeline artifacts (HeaderMapping, EmployeeRecord), settings, and the batch
bookkeeping models used by the orchestrator and CLI.
"""

from .config_models import ExtractorSettings, HeaderSynonyms
from .employee import EmployeeRecord
from .error_record import ErrorRecord
from .header_mapping import FALLBACK_MAPPING, UNSET, HeaderMapping
from .processing_result import FileStat, ProcessingResult
from .source_file import FileStatus, SourceFile

__all__ = [
    # Settings
    "ExtractorSettings",
    "HeaderSynonyms",
    # Pipeline models
    "EmployeeRecord",
    "HeaderMapping",
    "FALLBACK_MAPPING",
    "UNSET",
    # Batch models
    "ErrorRecord",
    "FileStat",
    "FileStatus",
    "ProcessingResult",
    "SourceFile",
]
