"""
Event data classes and the in-memory event store.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple

UNKNOWN = "unknown"


class EventCategory(Enum):
    """The security event kinds the analyzer recognizes, in check order."""

    FAILED_LOGIN = "failed_login"
    SUCCESSFUL_LOGIN = "successful_login"
    PASSWORD_CHANGE = "password_change"


@dataclass(frozen=True)
class EventRecord:
    """One observed security event.

    Attributes:
        timestamp: Timestamp text taken from the line, or "unknown".
        username: User named by the matching rule, or "unknown".
        source: Base name of the file the line came from.
    """

    timestamp: str = UNKNOWN
    username: str = UNKNOWN
    source: str = ""


class CategorySnapshot(NamedTuple):
    """Read-only view of one category: its count and records in insertion order."""

    count: int
    details: Tuple[EventRecord, ...]


class _CategoryTotals:
    __slots__ = ("count", "details")

    count: int
    details: List[EventRecord]

    def __init__(self) -> None:
        self.count = 0
        self.details = []


class EventStore:
    """Accumulates event records per category for a single run.

    Records are only ever appended; ``count`` always equals the number of
    stored records for its category.
    """

    __slots__ = ("_totals",)

    def __init__(self) -> None:
        self._totals: Dict[EventCategory, _CategoryTotals] = {
            category: _CategoryTotals() for category in EventCategory
        }

    def record(self, category: EventCategory, event: EventRecord) -> None:
        """Append an event to its category and bump the category count.

        Args:
            category: Category the event belongs to.
            event: The record to store.
        """
        totals = self._totals[category]
        totals.details.append(event)
        totals.count += 1

    def count(self, category: EventCategory) -> int:
        return self._totals[category].count

    @property
    def total(self) -> int:
        """Number of events recorded across all categories."""
        return sum(t.count for t in self._totals.values())

    def __len__(self) -> int:
        return self.total

    def snapshot(self) -> Dict[EventCategory, CategorySnapshot]:
        """Get the current state of every category.

        Returns:
            Mapping of each category (empty ones included) to a CategorySnapshot.
            Later calls to record() do not alter a snapshot already taken.
        """
        return {
            category: CategorySnapshot(totals.count, tuple(totals.details))
            for category, totals in self._totals.items()
        }
