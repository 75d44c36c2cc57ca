"""
Main SecurityLogAnalyzer class: reads a log directory, classifies each line
and writes the summary report.
"""

import os
from datetime import datetime
from typing import List, Optional

from .classifier import build_record
from .events import EventStore
from .exceptions import LogReadError, ReportWriteError
from .logging_config import get_logger
from .report import render_report

logger = get_logger(__name__)

# utf-8-sig drops a leading byte order mark so line 1 keeps its timestamp.
LOG_ENCODING = "utf-8-sig"


def display_name(path: str) -> str:
    """Base name of a path as printable text.

    Bytes that are not valid UTF-8 in the file name become U+FFFD.
    """
    return os.fsencode(os.path.basename(path)).decode("utf-8", "replace")


class SecurityLogAnalyzer:
    """Runs one analysis over a directory of log files.

    Files are processed one at a time in sorted order. Any read failure
    aborts the run with LogReadError; events gathered so far are not reported.
    """

    def __init__(self, store: Optional[EventStore] = None):
        self.store = store if store is not None else EventStore()
        self.files_processed = 0
        self.lines_processed = 0

    def process_line(self, line: str, source: str) -> bool:
        """Classify one line and record it if it is a security event.

        Returns:
            True if the line produced an event.
        """
        result = build_record(line, source)
        if result is None:
            return False
        category, record = result
        self.store.record(category, record)
        return True

    @property
    def events_matched(self) -> int:
        """Number of lines recorded as security events so far."""
        return self.store.total

    def process_log_file(self, log_path: str) -> int:
        """Stream a single log file through the classifier.

        Args:
            log_path: Path of the file to read.

        Returns:
            Number of events recorded from this file.

        Raises:
            LogReadError: If the file cannot be opened or read to the end.
        """
        filename = display_name(log_path)
        logger.info("Processing %s...", filename)

        line_number = 0
        matched = 0
        try:
            with open(log_path, encoding=LOG_ENCODING, errors="replace", newline=None) as f:
                for line in f:
                    line_number += 1
                    if self.process_line(line.rstrip("\r\n"), filename):
                        matched += 1
        except OSError as e:
            raise LogReadError(
                f"Cannot read log file: {e.strerror or e}",
                file_path=log_path,
                line_number=line_number or None,
            ) from e

        self.files_processed += 1
        self.lines_processed += line_number
        logger.debug("  %s: %d lines, %d events", filename, line_number, matched)
        return matched

    def list_log_files(self, dir_path: str) -> List[str]:
        """List the files to analyze in a directory, sorted by name.

        Subdirectories are skipped.

        Raises:
            LogReadError: If the directory cannot be listed.
        """
        try:
            entries = sorted(os.listdir(dir_path))
        except OSError as e:
            raise LogReadError(
                f"Cannot read log directory: {e.strerror or e}", file_path=dir_path
            ) from e

        log_files = []
        for name in entries:
            path = os.path.join(dir_path, name)
            if os.path.isdir(path):
                logger.debug("  Skipping directory %s", display_name(path))
                continue
            log_files.append(path)
        return log_files

    def process_log_directory(self, dir_path: str) -> None:
        """Process every file in a directory, in sorted order."""
        log_files = self.list_log_files(dir_path)
        logger.debug("Found %d log files in %s", len(log_files), dir_path)

        for log_file in log_files:
            self.process_log_file(log_file)

        logger.debug(
            "Processed %d files, %s lines, %d events",
            self.files_processed,
            f"{self.lines_processed:,}",
            self.events_matched,
        )

    def generate_report(self, generated_at: Optional[datetime] = None) -> str:
        """Render the report for everything recorded so far."""
        if generated_at is None:
            generated_at = datetime.now()
        return render_report(self.store.snapshot(), generated_at)

    def write_report(self, report_path: str, report: str) -> None:
        """Write the report text to disk.

        The text goes to a temporary sibling file that then replaces
        report_path, so a failed write leaves no partial report behind.

        Raises:
            ReportWriteError: If the file cannot be written.
        """
        tmp_path = report_path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(report)
            os.replace(tmp_path, report_path)
        except OSError as e:
            if os.path.isfile(tmp_path):
                os.remove(tmp_path)
            raise ReportWriteError(
                f"Cannot write report: {e.strerror or e}", file_path=report_path
            ) from e
        logger.info("Report saved to %s", report_path)

    def analyze(
        self,
        log_directory: str,
        report_file: str,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Process a log directory and write the report.

        Args:
            log_directory: Directory holding the log files.
            report_file: Destination of the report.
            generated_at: Time shown in the report (default: now).

        Returns:
            The report text that was written.
        """
        self.process_log_directory(log_directory)
        report = self.generate_report(generated_at)
        self.write_report(report_file, report)
        return report
