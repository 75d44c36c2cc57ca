"""
Pytest configuration and shared fixtures for security log analysis tests.
"""

import logging
import pytest
import sys
import os
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Undo any configure_logging() call a test made."""
    yield
    package_logger = logging.getLogger("security_log_analyzer")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


# =============================================================================
# SAMPLE LOG DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_log_lines():
    """Sample auth log lines covering every rule plus noise."""
    return [
        "Jan 5 10:22:31 host sshd[812]: Failed password for invalid user admin from 10.0.0.5 port 22 ssh2",
        "Jan 5 10:22:40 host sshd[812]: Failed password for root from 10.0.0.5 port 22 ssh2",
        "Jan  5 10:23:02 host sshd[900]: pam_unix(sshd:auth): authentication failure; logname= uid=0 euid=0 rhost=10.0.0.9 user=bob",
        "2024-03-01 07:59:58 webapp: Failed login attempt for user 'carol'",
        "Jan 5 10:24:11 host sshd[915]: Accepted password for dave from 10.0.0.7 port 51122 ssh2",
        "2024-03-01T08:00:00 session opened for user alice",
        "2024-03-01 08:01:00 api: Successfully authenticated user erin",
        "Jan 5 11:00:00 host passwd[1200]: password changed for frank",
        "2024-03-01T09:00:00 admin: password for grace changed by root",
        "2024-03-01T09:05:00 audit: user heidi changed password",
        "random unrelated log text",
        "",
    ]


@pytest.fixture
def expected_classifications():
    """(category value, username) expected for each line of sample_log_lines."""
    return [
        ("failed_login", "admin"),
        ("failed_login", "root"),
        ("failed_login", "bob"),
        ("failed_login", "carol"),
        ("successful_login", "dave"),
        ("successful_login", "alice"),
        ("successful_login", "erin"),
        ("password_change", "frank"),
        ("password_change", "grace"),
        ("password_change", "heidi"),
        None,
        None,
    ]


@pytest.fixture
def generated_at():
    """Fixed report generation time (a Friday afternoon)."""
    return datetime(2024, 3, 1, 15, 4, 5)


# =============================================================================
# ANALYZER FIXTURES
# =============================================================================

@pytest.fixture
def security_analyzer():
    """Create a SecurityLogAnalyzer instance for testing."""
    from security_log_analyzer import SecurityLogAnalyzer
    return SecurityLogAnalyzer()


@pytest.fixture
def event_store():
    """Create an empty EventStore."""
    from security_log_analyzer import EventStore
    return EventStore()


# =============================================================================
# TEMPORARY FILE FIXTURES
# =============================================================================

@pytest.fixture
def temp_log_file(tmp_path, sample_log_lines):
    """Create a temporary log file for testing."""
    log_file = tmp_path / "auth.log"
    log_file.write_text("\n".join(sample_log_lines))
    return log_file


@pytest.fixture
def temp_log_directory(tmp_path):
    """Create a temporary directory with two log files."""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()

    (log_dir / "a_auth.log").write_text(
        "Jan 5 10:22:31 host sshd: Failed password for invalid user admin from 10.0.0.5\n"
        "Jan 5 10:22:35 host sshd: Accepted password for alice from 10.0.0.6\n"
        "nothing to see here\n"
    )
    (log_dir / "b_app.log").write_text(
        "2024-03-01T08:00:00 session opened for user bob\r\n"
        "2024-03-01 08:10:00 password changed for bob\r\n"
    )
    return log_dir
