"""
Regex patterns and ordered rule tables for security log parsing.
"""

import re
from typing import NamedTuple, Tuple

from .events import EventCategory

# =============================================================================
# TIMESTAMP PATTERN
# =============================================================================

# One combined pattern, alternatives tried in order at the start of the line:
#   Jan  5 10:22:31          (syslog)
#   2024-03-01T08:00:00      (ISO 8601, T separator)
#   2024-03-01 08:00:00      (ISO 8601, space separator)
TIMESTAMP_PATTERN = re.compile(
    r"^(?:[A-Za-z]{3}\s+\d{1,2}\s+\d{2}:\d{2}:\d{2}"
    r"|\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"
    r"|\d{4}-\d{2}-\d{2}\s+\d{2}:\d{2}:\d{2})"
)


# =============================================================================
# EVENT RULES
# =============================================================================


class PatternRule(NamedTuple):
    """A single matching rule.

    Attributes:
        category: Category the rule reports when it matches.
        pattern: Compiled, case-insensitive regex searched anywhere in the line.
        user_groups: Capture group names tried in order for the username.
    """

    category: EventCategory
    pattern: re.Pattern
    user_groups: Tuple[str, ...] = ("user",)


def _rule(category: EventCategory, regex: str, *user_groups: str) -> PatternRule:
    return PatternRule(category, re.compile(regex, re.I), user_groups or ("user",))


FAILED_LOGIN_RULES = (
    _rule(
        EventCategory.FAILED_LOGIN,
        r"Failed password for (?P<invalid>invalid user )?(?P<user>\S+) from (?P<host>\S+)",
        "user",
        "invalid",
    ),
    _rule(EventCategory.FAILED_LOGIN, r"authentication failure.*user=(?P<user>\S+)"),
    _rule(EventCategory.FAILED_LOGIN, r"Failed login attempt for user '(?P<user>\S+)'"),
)

SUCCESSFUL_LOGIN_RULES = (
    _rule(EventCategory.SUCCESSFUL_LOGIN, r"Accepted password for (?P<user>\S+) from (?P<host>\S+)"),
    _rule(EventCategory.SUCCESSFUL_LOGIN, r"session opened for user (?P<user>\S+)"),
    _rule(EventCategory.SUCCESSFUL_LOGIN, r"Successfully authenticated user (?P<user>\S+)"),
)

PASSWORD_CHANGE_RULES = (
    _rule(EventCategory.PASSWORD_CHANGE, r"password changed for (?P<user>\S+)"),
    _rule(EventCategory.PASSWORD_CHANGE, r"password for (?P<user>\S+) changed by"),
    _rule(EventCategory.PASSWORD_CHANGE, r"user (?P<user>\S+) changed password"),
)

# Traversal order matters: the first matching rule decides the category.
EVENT_RULES: Tuple[PatternRule, ...] = (
    FAILED_LOGIN_RULES + SUCCESSFUL_LOGIN_RULES + PASSWORD_CHANGE_RULES
)
