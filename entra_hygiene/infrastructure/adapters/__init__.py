"""Infrastructure adapters - Implementations of application ports."""

from .console import ConsoleReportSink
from .entra_id import EntraIdDirectoryRepository

__all__ = [
    "ConsoleReportSink",
    "EntraIdDirectoryRepository",
]
