"""Console adapter - Report sink writing to the terminal."""

from .sink import ConsoleReportSink

__all__ = ["ConsoleReportSink"]
