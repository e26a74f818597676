"""Application ports - Interfaces for external adapters."""

from .directory_reader import DirectoryReader
from .report_sink import ReportSink

__all__ = [
    "DirectoryReader",
    "ReportSink",
]
