"""
Security Log Analyzer

Scans a directory of text logs for failed logins, successful logins and
password changes, and writes a plain-text summary report.
"""

from .analyzer import SecurityLogAnalyzer
from .classifier import build_record, classify, extract_timestamp
from .events import UNKNOWN, CategorySnapshot, EventCategory, EventRecord, EventStore
from .exceptions import (
    LogReadError,
    ReportWriteError,
    SecurityAnalysisError,
    UsageError,
)
from .patterns import EVENT_RULES, TIMESTAMP_PATTERN, PatternRule
from .report import RECENT_EVENT_LIMIT, format_generated_at, recent_events, render_report

__all__ = [
    # Main analyzer
    "SecurityLogAnalyzer",
    # Classification
    "extract_timestamp",
    "classify",
    "build_record",
    # Event classes
    "EventCategory",
    "EventRecord",
    "EventStore",
    "CategorySnapshot",
    "UNKNOWN",
    # Exceptions
    "SecurityAnalysisError",
    "UsageError",
    "LogReadError",
    "ReportWriteError",
    # Patterns
    "TIMESTAMP_PATTERN",
    "EVENT_RULES",
    "PatternRule",
    # Report
    "RECENT_EVENT_LIMIT",
    "format_generated_at",
    "recent_events",
    "render_report",
]

__version__ = "1.0.0"
