"""Tests for custom exception classes."""

import pytest

from security_log_analyzer.exceptions import (
    LogReadError,
    ReportWriteError,
    SecurityAnalysisError,
    UsageError,
)


class TestExceptionHierarchy:
    """Test exception inheritance hierarchy."""

    def test_all_exceptions_inherit_from_base(self):
        """All custom exceptions should inherit from SecurityAnalysisError."""
        assert issubclass(UsageError, SecurityAnalysisError)
        assert issubclass(LogReadError, SecurityAnalysisError)
        assert issubclass(ReportWriteError, SecurityAnalysisError)

    def test_base_inherits_from_exception(self):
        """Base exception should inherit from Exception."""
        assert issubclass(SecurityAnalysisError, Exception)


class TestLogReadError:
    """Test LogReadError attributes and formatting."""

    def test_basic_message(self):
        """Test basic error message."""
        exc = LogReadError("Read failed")
        assert str(exc) == "Read failed"

    def test_with_file_path(self):
        """Test error with file path."""
        exc = LogReadError("Read failed", file_path="/var/log/auth.log")
        assert exc.file_path == "/var/log/auth.log"
        assert exc.line_number is None
        assert "file: /var/log/auth.log" in str(exc)

    def test_with_line_number(self):
        """Test error with file path and line number."""
        exc = LogReadError("Read failed", file_path="/var/log/auth.log", line_number=42)
        assert exc.line_number == 42
        assert "file: /var/log/auth.log" in str(exc)
        assert "line: 42" in str(exc)

    def test_can_be_raised_and_caught(self):
        """Test exception can be raised and caught as the base class."""
        with pytest.raises(SecurityAnalysisError) as exc_info:
            raise LogReadError("Test error", file_path="/test.log", line_number=10)
        assert exc_info.value.file_path == "/test.log"


class TestReportWriteError:
    """Test ReportWriteError attributes and formatting."""

    def test_basic_message(self):
        """Test basic error message."""
        assert str(ReportWriteError("Write failed")) == "Write failed"

    def test_with_file_path(self):
        """Test error with destination path."""
        exc = ReportWriteError("Write failed", file_path="/tmp/report.txt")
        assert exc.file_path == "/tmp/report.txt"
        assert str(exc) == "Write failed (file: /tmp/report.txt)"


class TestExceptionImports:
    """Test that exceptions are properly exported from package."""

    def test_import_from_package(self):
        """Test exceptions can be imported from main package."""
        from security_log_analyzer import LogReadError as PackageLogReadError
        from security_log_analyzer import SecurityAnalysisError as PackageBase

        assert PackageLogReadError is LogReadError
        assert PackageBase is SecurityAnalysisError
