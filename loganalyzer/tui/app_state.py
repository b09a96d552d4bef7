# SPDX-License-Identifier: MIT
"""State management dataclasses for the TUI app.

This module provides the structured state containers owned by the
ViewModel. The dataclasses group related state together semantically:

- InputState: Value, placeholder and focus flag for one filter input
- Column / TableState: Columns, rows and cursor of the log table
- ViewState: Top-level container for all view state
"""
from dataclasses import dataclass, field
from typing import Dict, List

from loganalyzer.models import Category, FocusTarget, LogRecord

TIMESTAMP_COLUMN_WIDTH = 20
# Timestamp column plus cell padding
MESSAGE_COLUMN_MARGIN = 22
MIN_MESSAGE_COLUMN_WIDTH = 10
TABLE_HEIGHT = 10

INPUT_TARGETS = (
    FocusTarget.SEARCH_BOX,
    FocusTarget.START_DATE_BOX,
    FocusTarget.END_DATE_BOX,
)


@dataclass
class InputState:
    """State of a single filter input field."""

    value: str = ""
    placeholder: str = ""
    width: int = 12
    focused: bool = False


@dataclass(frozen=True)
class Column:
    key: str
    title: str
    width: int


@dataclass
class TableState:
    """Log table contents.

    Rebuilt from scratch whenever the tab, the committed filters or the
    terminal width change, which also resets the cursor.
    """

    columns: List[Column] = field(default_factory=list)
    rows: List[LogRecord] = field(default_factory=list)
    cursor_row: int = 0
    focused: bool = True
    height: int = TABLE_HEIGHT


def table_columns(width: int) -> List[Column]:
    """Compute table columns for a terminal width.

    The message column takes the remaining width and never drops below
    MIN_MESSAGE_COLUMN_WIDTH, so an unsized terminal (width 0) still works.
    """
    message_width = max(width - MESSAGE_COLUMN_MARGIN, MIN_MESSAGE_COLUMN_WIDTH)
    return [
        Column("timestamp", "Timestamp", TIMESTAMP_COLUMN_WIDTH),
        Column("message", "Message", message_width),
    ]


def default_inputs() -> Dict[FocusTarget, InputState]:
    return {
        FocusTarget.SEARCH_BOX: InputState(placeholder="Enter keyword", width=30),
        FocusTarget.START_DATE_BOX: InputState(placeholder="YYYY-MM-DD", width=12),
        FocusTarget.END_DATE_BOX: InputState(placeholder="YYYY-MM-DD", width=12),
    }


@dataclass
class ViewState:
    """Top-level view state container.

    Mutated only through the ViewModel, which keeps filtered_rows and
    table in step with active_tab and the input values.
    """

    active_tab: Category = Category.ERRORS
    focus: FocusTarget = FocusTarget.LOG_TABLE
    filtered_rows: List[LogRecord] = field(default_factory=list)
    width: int = 0
    height: int = 0
    table: TableState = field(default_factory=TableState)
    inputs: Dict[FocusTarget, InputState] = field(default_factory=default_inputs)
