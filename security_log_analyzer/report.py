"""
Plain-text report rendering.
"""

from datetime import datetime
from typing import Dict, List, Sequence

from .events import CategorySnapshot, EventCategory, EventRecord

# Number of records listed per category, most recent first.
RECENT_EVENT_LIMIT = 10

# English names, independent of the process locale.
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# (category, summary label, section title, underline, empty-section line)
SECTIONS = (
    (
        EventCategory.FAILED_LOGIN,
        "Failed logins",
        "RECENT FAILED LOGINS",
        "-" * 19,
        "No failed logins recorded.",
    ),
    (
        EventCategory.SUCCESSFUL_LOGIN,
        "Successful logins",
        "RECENT SUCCESSFUL LOGINS",
        "-" * 24,
        "No successful logins recorded.",
    ),
    (
        EventCategory.PASSWORD_CHANGE,
        "Password changes",
        "RECENT PASSWORD CHANGES",
        "-" * 23,
        "No password changes recorded.",
    ),
)


def format_generated_at(generated_at: datetime) -> str:
    """Format a datetime like "Friday, March 1, 2024 at 8:05:09 PM"."""
    hour = generated_at.hour % 12 or 12
    meridiem = "AM" if generated_at.hour < 12 else "PM"
    return (
        f"{WEEKDAYS[generated_at.weekday()]}, {MONTHS[generated_at.month - 1]} "
        f"{generated_at.day}, {generated_at.year} at "
        f"{hour}:{generated_at.minute:02d}:{generated_at.second:02d} {meridiem}"
    )


def recent_events(
    details: Sequence[EventRecord], limit: int = RECENT_EVENT_LIMIT
) -> List[EventRecord]:
    """Return the last ``limit`` records, most recently recorded first."""
    if limit <= 0:
        return []
    return list(reversed(details[-limit:]))


def format_event(event: EventRecord) -> str:
    return f"[{event.timestamp}] User: {event.username}, Source: {event.source}"


def render_report(
    snapshot: Dict[EventCategory, CategorySnapshot], generated_at: datetime
) -> str:
    """Render the security report.

    Args:
        snapshot: Store state as returned by EventStore.snapshot().
        generated_at: Time shown in the report header.

    Returns:
        Report text, lines joined with "\\n" and no trailing newline.
    """
    lines = [
        "SECURITY LOG ANALYSIS REPORT",
        "============================",
        f"Generated: {format_generated_at(generated_at)}",
        "",
        "EVENT SUMMARY",
        "--------------",
    ]
    for category, label, _title, _rule, _empty in SECTIONS:
        lines.append(f"{label}: {snapshot[category].count}")

    for category, _label, title, underline, empty in SECTIONS:
        lines.append("")
        lines.append(title)
        lines.append(underline)

        recent = recent_events(snapshot[category].details)
        if not recent:
            lines.append(empty)
        else:
            lines.extend(format_event(event) for event in recent)

    return "\n".join(lines)
