#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Text rendering for the log analyzer.

Pure functions turning view state into Rich-markup strings. The Textual
app feeds the pieces into Static widgets; render_frame composes the whole
screen for one-shot output. Nothing here touches the terminal, and the
same inputs always give the same text.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from rich.cells import cell_len, set_cell_size
from rich.markup import escape
from rich.text import Text

from loganalyzer.models import Category, FocusTarget
from loganalyzer.tui.app_state import INPUT_TARGETS, InputState, TableState, ViewState
from loganalyzer.tui.formatting import Theme, styled
from loganalyzer.tui.tabs import TAB_ORDER

APP_TITLE = "System Log Analyzer"
FALLBACK_WIDTH = 80
COLUMN_GAP = 2

FILTER_LABELS: Dict[FocusTarget, str] = {
    FocusTarget.SEARCH_BOX: "Search:",
    FocusTarget.START_DATE_BOX: "Start Date (YYYY-MM-DD):",
    FocusTarget.END_DATE_BOX: "End Date (YYYY-MM-DD):",
}

HELP_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("q", "Quit"),
    ("Tab", "Switch Tab"),
    ("Shift+Tab", "Previous Tab"),
    ("/", "Search"),
    ("f", "Start Date"),
    ("e", "End Date"),
    ("Esc", "Clear"),
    ("Enter", "Apply"),
)

HELP_SEPARATOR = " | "
HELP_INDENT = "  "


def _effective_width(width: int) -> int:
    return width if width > 0 else FALLBACK_WIDTH


def _fit(text: str, width: int) -> str:
    """Truncate with an ellipsis or pad so text occupies exactly width cells."""
    if width <= 0:
        return ""
    if cell_len(text) > width:
        return set_cell_size(text, width - 1) + "…"
    return set_cell_size(text, width)


def _box(inner: str, inner_len: int, border_style: str) -> List[str]:
    """Draw a single-line box around already-styled inner text."""
    edge = "─" * inner_len
    return [
        styled(f"┌{edge}┐", border_style),
        styled("│", border_style) + inner + styled("│", border_style),
        styled(f"└{edge}┘", border_style),
    ]


def render_title(width: int, theme: Theme) -> str:
    """Boxed application title centered in the given width."""
    inner = f" {APP_TITLE} "
    lines = _box(styled(escape(inner), f"bold {theme.title}"), len(inner), theme.title)
    pad = " " * max((_effective_width(width) - (len(inner) + 2)) // 2, 0)
    return "\n".join(pad + line for line in lines)


def render_tab_bar(active_tab: Category, theme: Theme) -> str:
    """Boxed tab labels side by side; the active tab is bold and underlined."""
    rows: List[str] = ["", "", ""]
    for category in TAB_ORDER:
        inner = f" {category.label} "
        if category is active_tab:
            label = styled(inner, f"bold underline {theme.tab_active}")
        else:
            label = styled(inner, theme.tab_inactive)
        for index, line in enumerate(_box(label, len(inner), theme.tab_border)):
            rows[index] += line
    return "\n".join(rows)


def render_input(label: str, field: InputState, theme: Theme) -> str:
    """One labelled filter field; the focused one gets a colored prompt and cursor."""
    if field.value:
        text = escape(field.value)
    else:
        text = styled(escape(field.placeholder), theme.placeholder)

    if field.focused:
        prompt = styled("> ", f"bold {theme.focus_marker}")
        cursor = styled("█", theme.focus_marker)
    else:
        prompt = "> "
        cursor = ""
    return f"{styled(escape(label), theme.label)} {prompt}{text}{cursor}"


def render_filter_lines(inputs: Dict[FocusTarget, InputState], theme: Theme) -> str:
    """Search box, then the two date boxes."""
    search, start, end = (
        render_input(FILTER_LABELS[target], inputs[target], theme) for target in INPUT_TARGETS
    )
    return "\n".join([search, "", start, end])


def _visible_window(table: TableState) -> Tuple[int, int]:
    """Row range [first, last) that keeps the cursor on screen."""
    first = max(0, table.cursor_row - table.height + 1)
    return first, min(len(table.rows), first + table.height)


def render_table(table: TableState, theme: Theme) -> str:
    """Fixed-width text table of the visible rows with the cursor highlighted."""
    gap = " " * COLUMN_GAP
    header = gap.join(_fit(column.title, column.width) for column in table.columns)
    lines = [styled(escape(header), "bold"), styled("─" * cell_len(header), theme.tab_border)]

    if not table.rows:
        lines.append(styled("(no matching logs)", "dim"))
        return "\n".join(lines)

    first, last = _visible_window(table)
    for index in range(first, last):
        record = table.rows[index]
        values = {"timestamp": record.timestamp, "message": record.message}
        line = escape(gap.join(_fit(values[column.key], column.width) for column in table.columns))
        if index == table.cursor_row and table.focused:
            line = styled(line, f"reverse {theme.title}")
        elif index == table.cursor_row:
            line = styled(line, "bold")
        lines.append(line)
    return "\n".join(lines)


def _wrap_help_items(items: Sequence[Tuple[str, str]], width: int) -> List[List[Tuple[str, str]]]:
    """Group help items into lines that fit within width cells."""
    lines: List[List[Tuple[str, str]]] = [[]]
    used = len(HELP_INDENT)
    for key, description in items:
        item_len = len(key) + 1 + len(description)
        needed = item_len if not lines[-1] else item_len + len(HELP_SEPARATOR)
        if lines[-1] and used + needed > width:
            lines.append([])
            used = len(HELP_INDENT)
            needed = item_len
        lines[-1].append((key, description))
        used += needed
    return lines


def render_help_footer(width: int, theme: Theme) -> str:
    """Key binding help, word-wrapped to width and padded with the footer background."""
    width = _effective_width(width)
    text_style = f"{theme.help_text} on {theme.help_background}"
    key_style = f"bold {theme.help_key} on {theme.help_background}"
    separator_style = f"{theme.help_separator} on {theme.help_background}"

    rendered = []
    for items in _wrap_help_items(HELP_ITEMS, width):
        parts = [styled(HELP_INDENT, text_style)]
        length = len(HELP_INDENT)
        for index, (key, description) in enumerate(items):
            if index:
                parts.append(styled(HELP_SEPARATOR, separator_style))
                length += len(HELP_SEPARATOR)
            parts.append(styled(escape(key), key_style))
            parts.append(styled(f" {description}", text_style))
            length += len(key) + 1 + len(description)
        if length < width:
            parts.append(styled(" " * (width - length), text_style))
        rendered.append("".join(parts))
    return "\n".join(rendered)


def render_row_count(matched: int, total: Optional[int]) -> str:
    if total is None:
        return f"{matched} shown"
    return f"{matched} of {total} shown"


def render_frame(state: ViewState, theme: Theme, total: Optional[int] = None) -> str:
    """
    Compose a full screen from view state.

    Args:
        state: Current view state
        theme: Colors to render with
        total: Unfiltered record count for the active tab (optional)

    Returns:
        Rich-markup text of the whole frame
    """
    sections = [
        render_title(state.width, theme),
        "",
        render_tab_bar(state.active_tab, theme),
        "",
        render_filter_lines(state.inputs, theme),
        "",
        f"Logs: {styled(render_row_count(len(state.filtered_rows), total), 'dim')}",
        render_table(state.table, theme),
        "",
        "Help:",
        render_help_footer(state.width, theme),
    ]
    return "\n".join(sections)


def render_plain_frame(state: ViewState, theme: Theme, total: Optional[int] = None) -> str:
    """render_frame with all markup stripped, for non-interactive output."""
    return Text.from_markup(render_frame(state, theme, total)).plain
