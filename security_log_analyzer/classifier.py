"""
Line classification: timestamp extraction and ordered rule matching.
"""

from typing import Optional, Sequence, Tuple

from .events import UNKNOWN, EventCategory, EventRecord
from .patterns import EVENT_RULES, TIMESTAMP_PATTERN, PatternRule


def extract_timestamp(line: str) -> str:
    """Return the timestamp at the start of the line, or "unknown"."""
    match = TIMESTAMP_PATTERN.match(line)
    return match.group(0) if match else UNKNOWN


def _extract_username(match, user_groups: Sequence[str]) -> str:
    for name in user_groups:
        value = match.group(name)
        if value:
            return value
    return UNKNOWN


def classify(
    line: str, rules: Sequence[PatternRule] = EVENT_RULES
) -> Optional[Tuple[EventCategory, str]]:
    """Classify a log line.

    Rules are tried in order and the first one that matches decides the
    outcome; no later rule or category is consulted.

    Args:
        line: Raw log line.
        rules: Ordered rule table (defaults to the built-in table).

    Returns:
        Tuple of (category, username), or None if no rule matches.
    """
    for rule in rules:
        match = rule.pattern.search(line)
        if match:
            return rule.category, _extract_username(match, rule.user_groups)
    return None


def build_record(line: str, source: str) -> Optional[Tuple[EventCategory, EventRecord]]:
    """Classify a line and build its event record.

    Args:
        line: Raw log line.
        source: Base name of the file the line came from.

    Returns:
        Tuple of (category, record), or None if the line is not a security event.
    """
    result = classify(line)
    if result is None:
        return None
    category, username = result
    return category, EventRecord(
        timestamp=extract_timestamp(line), username=username, source=source
    )
