"""
Custom exceptions for security log analysis.

Every failure the analyzer reports to its caller derives from
SecurityAnalysisError. Lines that match no rule are not failures and never
raise.
"""

from typing import Optional


class SecurityAnalysisError(Exception):
    """Base exception for all security log analysis errors."""

    pass


class UsageError(SecurityAnalysisError):
    """Raised when the command line is missing required arguments."""

    pass


class LogReadError(SecurityAnalysisError):
    """Raised when the log directory or one of its files cannot be read.

    A single unreadable file aborts the whole run.

    Attributes:
        file_path: Path to the directory or file that failed.
        line_number: Last line read successfully before the failure (if any).
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.file_path = file_path
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path and self.line_number:
            return f"{base} (file: {self.file_path}, line: {self.line_number})"
        elif self.file_path:
            return f"{base} (file: {self.file_path})"
        return base


class ReportWriteError(SecurityAnalysisError):
    """Raised when the report file cannot be written.

    Attributes:
        file_path: Destination path of the report.
    """

    def __init__(self, message: str, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path:
            return f"{base} (file: {self.file_path})"
        return base
