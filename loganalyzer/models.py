#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Data models for the log analyzer.

Contains the log record type and the enums shared by the filter engine,
the focus controller and the TUI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Enums
# =============================================================================


class Category(str, Enum):
    """Severity category; each has its own tab and log collection."""
    ERRORS = "errors"
    WARNINGS = "warnings"
    INFORMATION = "information"

    @property
    def label(self) -> str:
        """Display name used in the tab bar."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["Category"]:
        """Look up a category by value or label, case-insensitively.

        Returns None for empty or unknown names.
        """
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


class FocusTarget(str, Enum):
    """Interactive element that currently owns keyboard input."""
    LOG_TABLE = "log_table"
    SEARCH_BOX = "search_box"
    START_DATE_BOX = "start_date_box"
    END_DATE_BOX = "end_date_box"

    @property
    def is_input(self) -> bool:
        return self is not FocusTarget.LOG_TABLE


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class LogRecord:
    """A timestamped message. Timestamps are sortable strings (YYYY-MM-DD)."""

    timestamp: str
    message: str


@dataclass
class FilterCriteria:
    """Text query and date bounds; empty fields are unconstrained."""

    query: str = ""
    start_date: str = ""
    end_date: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.query or self.start_date or self.end_date)
