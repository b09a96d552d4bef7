#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
View model for the log analyzer TUI.

Owns the ViewState and keeps derived state consistent: every change to
the active tab or a committed filter recomputes filtered_rows and rebuilds
the table state before returning, so a render never sees stale rows.
The Textual app forwards keys here and mirrors the resulting state into
its widgets.
"""

from dataclasses import dataclass
from typing import Optional

from loganalyzer.debug_logger import get_logger
from loganalyzer.filtering import apply_criteria
from loganalyzer.log_store import LogStore
from loganalyzer.models import Category, FilterCriteria, FocusTarget
from loganalyzer.tui.app_state import INPUT_TARGETS, TableState, ViewState, table_columns
from loganalyzer.tui.focus import (
    Effect,
    KeyRoute,
    Transition,
    next_transition,
    normalize_key,
    route_key,
)
from loganalyzer.tui.tabs import cycle_tab


@dataclass(frozen=True)
class KeyOutcome:
    """Result of dispatching a key: its route and any transition taken."""

    route: KeyRoute
    transition: Optional[Transition] = None

    @property
    def quit(self) -> bool:
        return self.route is KeyRoute.QUIT


class ViewModel:
    """State machine behind the TUI: tabs, focus, filters and the table."""

    def __init__(
        self,
        store: LogStore,
        width: int = 0,
        height: int = 0,
        initial_tab: Category = Category.ERRORS,
        criteria: Optional[FilterCriteria] = None,
    ) -> None:
        self.store = store
        self.state = ViewState(active_tab=initial_tab, width=width, height=height)
        if criteria is not None:
            self.state.inputs[FocusTarget.SEARCH_BOX].value = criteria.query
            self.state.inputs[FocusTarget.START_DATE_BOX].value = criteria.start_date
            self.state.inputs[FocusTarget.END_DATE_BOX].value = criteria.end_date
        self._sync_focus_flags()
        self.apply_filters()

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def criteria(self) -> FilterCriteria:
        """Filter criteria built from the current input values."""
        inputs = self.state.inputs
        return FilterCriteria(
            query=inputs[FocusTarget.SEARCH_BOX].value,
            start_date=inputs[FocusTarget.START_DATE_BOX].value,
            end_date=inputs[FocusTarget.END_DATE_BOX].value,
        )

    @property
    def total_rows(self) -> int:
        """Number of records in the active tab before filtering."""
        return self.store.count(self.state.active_tab)

    def field_value(self, target: FocusTarget) -> str:
        return self.state.inputs[target].value

    def set_field_value(self, target: FocusTarget, value: str) -> None:
        """Store text typed into an input; filters apply on commit, not here."""
        if target not in self.state.inputs:
            raise ValueError(f"{target.value} is not an input field")
        self.state.inputs[target].value = value

    # -------------------------------------------------------------------------
    # Key dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, key: str) -> KeyOutcome:
        """
        Route a key and apply whatever state change it causes.

        Keys routed to TABLE or INPUT are left to the focused widget; the
        caller is responsible for delivering them. QUIT is reported back
        without changing state.

        Args:
            key: Textual key name (aliases like "/" and "esc" accepted)

        Returns:
            KeyOutcome describing the route and any focus transition
        """
        route = route_key(self.state.focus, key)

        if route is KeyRoute.NEXT_TAB:
            self.next_tab()
        elif route is KeyRoute.PREVIOUS_TAB:
            self.previous_tab()
        elif route is KeyRoute.TRANSITION:
            transition = next_transition(self.state.focus, key)
            self._apply_transition(transition, normalize_key(key))
            return KeyOutcome(route, transition)

        return KeyOutcome(route)

    def _apply_transition(self, transition: Transition, key: str) -> None:
        previous = self.state.focus

        if Effect.CLEAR_FIELD in transition.effects and previous.is_input:
            self.state.inputs[previous].value = ""

        self.state.focus = transition.target
        self._sync_focus_flags()
        get_logger().focus_changed(previous.value, transition.target.value, key)

        if Effect.APPLY_FILTERS in transition.effects:
            self.apply_filters()

    def _sync_focus_flags(self) -> None:
        for target in INPUT_TARGETS:
            self.state.inputs[target].focused = target is self.state.focus
        self.state.table.focused = self.state.focus is FocusTarget.LOG_TABLE

    # -------------------------------------------------------------------------
    # Tabs
    # -------------------------------------------------------------------------

    def next_tab(self) -> None:
        self.set_tab(cycle_tab(self.state.active_tab, 1))

    def previous_tab(self) -> None:
        self.set_tab(cycle_tab(self.state.active_tab, -1))

    def set_tab(self, category: Category) -> None:
        """Switch tabs and re-filter against the new tab's records."""
        previous = self.state.active_tab
        self.state.active_tab = category
        get_logger().tab_changed(previous.value, category.value)
        self.apply_filters()

    # -------------------------------------------------------------------------
    # Filtering, table and size
    # -------------------------------------------------------------------------

    def apply_filters(self) -> None:
        """Recompute filtered rows for the active tab and rebuild the table."""
        criteria = self.criteria
        records = self.store.records(self.state.active_tab)
        self.state.filtered_rows = apply_criteria(records, criteria)
        self._reinit_table()

        get_logger().filters_applied(
            tab=self.state.active_tab.value,
            query=criteria.query,
            start_date=criteria.start_date,
            end_date=criteria.end_date,
            matched=len(self.state.filtered_rows),
            total=len(records),
        )

    def resize(self, width: int, height: int) -> None:
        """Record new terminal dimensions; focus and filters are untouched."""
        self.state.width = width
        self.state.height = height
        self._reinit_table()

    def set_cursor(self, row: int) -> None:
        """Track the table cursor, clamped to the visible rows."""
        last = len(self.state.table.rows) - 1
        self.state.table.cursor_row = max(0, min(row, last))

    def _reinit_table(self) -> None:
        self.state.table = TableState(
            columns=table_columns(self.state.width),
            rows=list(self.state.filtered_rows),
            cursor_row=0,
            focused=self.state.focus is FocusTarget.LOG_TABLE,
        )
