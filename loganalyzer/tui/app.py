#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Main TUI application for the system log analyzer.

Browses categorized log records with:
- Errors / Warnings / Information tabs (Tab, Shift+Tab)
- Text search and start/end date filters (/, f, e; Enter applies, Esc clears)
- A log table with row navigation
- A help footer wrapped to the terminal width

All decisions about focus, tabs and filtering are made by the ViewModel;
this module only forwards keys to it and mirrors its state into widgets.
"""

from typing import Dict, Optional, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import DataTable, Input, Static

from loganalyzer.debug_logger import get_logger
from loganalyzer.log_store import LogStore
from loganalyzer.models import Category, FilterCriteria, FocusTarget
from loganalyzer.tui.app_state import INPUT_TARGETS
from loganalyzer.tui.formatting import Theme
from loganalyzer.tui.renderer import (
    APP_TITLE,
    FILTER_LABELS,
    render_help_footer,
    render_row_count,
    render_tab_bar,
    render_title,
)
from loganalyzer.tui.view_model import ViewModel

INPUT_IDS: Dict[FocusTarget, str] = {
    FocusTarget.SEARCH_BOX: "search-input",
    FocusTarget.START_DATE_BOX: "start-date-input",
    FocusTarget.END_DATE_BOX: "end-date-input",
}

# Actions that move focus out of the table
TABLE_ONLY_ACTIONS = {"quit", "focus_search", "focus_start_date", "focus_end_date"}
# Actions that commit or cancel an input
INPUT_ONLY_ACTIONS = {"cancel_filter", "apply_filter"}


class LogAnalyzerApp(App):
    """
    Textual application for browsing categorized logs.

    Displays a title, tab bar, three filter inputs, the log table and a
    help footer in a single screen.
    """

    TITLE = APP_TITLE
    CSS_PATH = "styles/app.tcss"
    # The palette offers Quit regardless of focus
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("slash", "focus_search", "Search"),
        Binding("f", "focus_start_date", "Start Date"),
        Binding("e", "focus_end_date", "End Date"),
        Binding("tab", "next_tab", "Switch Tab", priority=True),
        Binding("shift+tab", "previous_tab", "Previous Tab", priority=True),
        Binding("escape", "cancel_filter", "Clear", priority=True),
        Binding("enter", "apply_filter", "Apply", priority=True),
    ]

    def __init__(
        self,
        store: Optional[LogStore] = None,
        initial_tab: Category = Category.ERRORS,
        theme: Optional[Theme] = None,
        criteria: Optional[FilterCriteria] = None,
    ) -> None:
        """
        Initialize the app.

        Args:
            store: Log records to browse (defaults to the sample store)
            initial_tab: Tab shown at startup
            theme: Colors for the rendered title, tabs and footer
            criteria: Filter values pre-filled into the inputs (optional)
        """
        super().__init__()
        self.style_theme = theme or Theme()
        self.model = ViewModel(
            store or LogStore.sample(),
            initial_tab=initial_tab,
            criteria=criteria,
        )
        self._view_ready = False

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        inputs = self.model.state.inputs
        yield Static(id="title")
        yield Static(id="tab-bar")
        with Vertical(id="filters"):
            for target in INPUT_TARGETS:
                with Horizontal(classes="filter-row"):
                    yield Static(FILTER_LABELS[target], classes="filter-label")
                    yield Input(
                        value=inputs[target].value,
                        placeholder=inputs[target].placeholder,
                        id=INPUT_IDS[target],
                        disabled=True,
                    )
        yield Static("Logs:", id="logs-label", classes="section-title")
        yield DataTable(id="log-table", cursor_type="row", zebra_stripes=True)
        yield Static("Help:", classes="section-title")
        yield Static(id="help-footer")

    def on_mount(self) -> None:
        """Size the model to the terminal and draw the first frame."""
        self.model.resize(self.size.width, self.size.height)
        get_logger().app_start(
            initial_tab=self.model.state.active_tab.value,
            width=self.size.width,
            height=self.size.height,
        )
        self._view_ready = True
        self._refresh_view()
        self._sync_focus()

    def on_resize(self, event: events.Resize) -> None:
        """Rebuild the table for the new width; focus is left as is."""
        self.model.resize(event.size.width, event.size.height)
        if self._view_ready:
            self._refresh_view()

    # -------------------------------------------------------------------------
    # Key routing
    # -------------------------------------------------------------------------

    def check_action(self, action: str, parameters: Tuple[object, ...]) -> Optional[bool]:
        """Enable bindings only in the focus state where they apply."""
        if action in TABLE_ONLY_ACTIONS:
            return self.model.state.focus is FocusTarget.LOG_TABLE
        if action in INPUT_ONLY_ACTIONS:
            return self.model.state.focus.is_input
        return True

    def _dispatch(self, key: str) -> None:
        self._capture_focused_input()
        self.model.dispatch(key)
        self._refresh_view()
        self._sync_focus()

    def _capture_focused_input(self) -> None:
        """Copy the focused input's text into the model before a transition."""
        target = self.model.state.focus
        if target.is_input:
            widget = self.query_one(f"#{INPUT_IDS[target]}", Input)
            self.model.set_field_value(target, widget.value)

    async def action_quit(self) -> None:
        get_logger().app_exit(0)
        self.exit(0)

    def action_focus_search(self) -> None:
        self._dispatch("slash")

    def action_focus_start_date(self) -> None:
        self._dispatch("f")

    def action_focus_end_date(self) -> None:
        self._dispatch("e")

    def action_cancel_filter(self) -> None:
        self._dispatch("escape")

    def action_apply_filter(self) -> None:
        self._dispatch("enter")

    def action_next_tab(self) -> None:
        self._dispatch("tab")

    def action_previous_tab(self) -> None:
        self._dispatch("shift+tab")

    def on_input_changed(self, event: Input.Changed) -> None:
        """Track typed text; filtering waits for Enter or a tab change."""
        for target, input_id in INPUT_IDS.items():
            if event.input.id == input_id:
                self.model.set_field_value(target, event.value)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Follow arrow key navigation in the log table."""
        if event.data_table.id == "log-table":
            self.model.set_cursor(event.cursor_row)

    # -------------------------------------------------------------------------
    # Mirroring model state into widgets
    # -------------------------------------------------------------------------

    def _refresh_view(self) -> None:
        state = self.model.state
        theme = self.style_theme

        self.query_one("#title", Static).update(render_title(state.width, theme))
        self.query_one("#tab-bar", Static).update(render_tab_bar(state.active_tab, theme))
        self.query_one("#help-footer", Static).update(render_help_footer(state.width, theme))
        self.query_one("#logs-label", Static).update(
            f"Logs: [dim]{render_row_count(len(state.filtered_rows), self.model.total_rows)}[/dim]"
        )

        for target, input_id in INPUT_IDS.items():
            widget = self.query_one(f"#{input_id}", Input)
            value = state.inputs[target].value
            if widget.value != value:
                widget.value = value

        self._rebuild_table()

    def _rebuild_table(self) -> None:
        table_state = self.model.state.table
        table = self.query_one("#log-table", DataTable)
        table.clear(columns=True)
        for column in table_state.columns:
            table.add_column(column.title, width=column.width, key=column.key)
        for index, record in enumerate(table_state.rows):
            table.add_row(Text(record.timestamp), Text(record.message), key=str(index))

    def _sync_focus(self) -> None:
        """Give keyboard focus to the model's focus target and lock the other widgets."""
        focus = self.model.state.focus
        table = self.query_one("#log-table", DataTable)
        table.can_focus = focus is FocusTarget.LOG_TABLE
        if focus.is_input:
            target_widget = self.query_one(f"#{INPUT_IDS[focus]}", Input)
            target_widget.disabled = False
        else:
            target_widget = table
        target_widget.focus()

        for target, input_id in INPUT_IDS.items():
            if target is not focus:
                self.query_one(f"#{input_id}", Input).disabled = True


def run_app(
    store: Optional[LogStore] = None,
    initial_tab: Category = Category.ERRORS,
    theme: Optional[Theme] = None,
    criteria: Optional[FilterCriteria] = None,
) -> Optional[int]:
    """
    Run the TUI application.

    Returns:
        The app's return code (0 on a clean quit)
    """
    app = LogAnalyzerApp(store=store, initial_tab=initial_tab, theme=theme, criteria=criteria)
    app.run()
    return app.return_code


if __name__ == "__main__":
    run_app()
