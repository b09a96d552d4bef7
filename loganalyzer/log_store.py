#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
In-memory log store.

Holds one immutable collection of log records per category. The sample
data is the fixture the TUI starts with.
"""

from typing import Dict, Iterable, Mapping, Optional, Tuple

from loganalyzer.models import Category, LogRecord


SAMPLE_LOGS: Dict[Category, Tuple[LogRecord, ...]] = {
    Category.ERRORS: (
        LogRecord("2024-10-01", "authentication failure"),
        LogRecord("2024-10-05", "out of memory"),
    ),
    Category.WARNINGS: (
        LogRecord("2024-10-02", "disk usage high"),
        LogRecord("2024-10-06", "CPU usage high"),
    ),
    Category.INFORMATION: (
        LogRecord("2024-10-01", "service started"),
        LogRecord("2024-10-04", "configuration loaded"),
    ),
}


class LogStore:
    """Categorized, read-only collections of log records."""

    def __init__(
        self, collections: Optional[Mapping[Category, Iterable[LogRecord]]] = None
    ) -> None:
        collections = collections or {}
        # Every category gets a collection, possibly empty
        self._collections: Dict[Category, Tuple[LogRecord, ...]] = {
            category: tuple(collections.get(category, ())) for category in Category
        }

    @classmethod
    def sample(cls) -> "LogStore":
        """Create a store holding the built-in sample records."""
        return cls(SAMPLE_LOGS)

    def records(self, category: Category) -> Tuple[LogRecord, ...]:
        """Return all records for a category, in insertion order."""
        return self._collections[category]

    def count(self, category: Category) -> int:
        return len(self._collections[category])

    def __len__(self) -> int:
        return sum(len(records) for records in self._collections.values())
