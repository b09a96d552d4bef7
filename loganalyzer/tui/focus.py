#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Focus controller for the log analyzer TUI.

Decides which element receives each key. Focus changes are described by
an explicit transition table keyed on (current focus, key); everything
else is routed to the tab controller, the quit action, or the focused
widget.

Key names follow Textual's naming ("slash", "escape", "shift+tab").
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from loganalyzer.models import FocusTarget


class Effect(str, Enum):
    """Side effect applied by the view model after a focus transition."""
    CLEAR_FIELD = "clear_field"
    APPLY_FILTERS = "apply_filters"


class KeyRoute(str, Enum):
    """Where a key ends up."""
    QUIT = "quit"
    NEXT_TAB = "next_tab"
    PREVIOUS_TAB = "previous_tab"
    TRANSITION = "transition"
    TABLE = "table"
    INPUT = "input"


@dataclass(frozen=True)
class Transition:
    target: FocusTarget
    effects: Tuple[Effect, ...] = ()


_LEAVE_CANCEL = Transition(FocusTarget.LOG_TABLE, (Effect.CLEAR_FIELD, Effect.APPLY_FILTERS))
_LEAVE_APPLY = Transition(FocusTarget.LOG_TABLE, (Effect.APPLY_FILTERS,))

TRANSITIONS: Dict[Tuple[FocusTarget, str], Transition] = {
    (FocusTarget.LOG_TABLE, "slash"): Transition(FocusTarget.SEARCH_BOX),
    (FocusTarget.LOG_TABLE, "f"): Transition(FocusTarget.START_DATE_BOX),
    (FocusTarget.LOG_TABLE, "e"): Transition(FocusTarget.END_DATE_BOX),
    (FocusTarget.SEARCH_BOX, "escape"): _LEAVE_CANCEL,
    (FocusTarget.START_DATE_BOX, "escape"): _LEAVE_CANCEL,
    (FocusTarget.END_DATE_BOX, "escape"): _LEAVE_CANCEL,
    (FocusTarget.SEARCH_BOX, "enter"): _LEAVE_APPLY,
    (FocusTarget.START_DATE_BOX, "enter"): _LEAVE_APPLY,
    (FocusTarget.END_DATE_BOX, "enter"): _LEAVE_APPLY,
}

KEY_ALIASES = {
    "/": "slash",
    "esc": "escape",
    "return": "enter",
    "ctrl+m": "enter",
    "backtab": "shift+tab",
}

TAB_KEYS = {
    "tab": KeyRoute.NEXT_TAB,
    "shift+tab": KeyRoute.PREVIOUS_TAB,
}

QUIT_KEY = "q"


def normalize_key(key: str) -> str:
    """Map character and legacy key names onto Textual key names."""
    return KEY_ALIASES.get(key, key)


def next_transition(focus: FocusTarget, key: str) -> Optional[Transition]:
    """Look up the focus transition for a key, or None if there is none."""
    return TRANSITIONS.get((focus, normalize_key(key)))


def route_key(focus: FocusTarget, key: str) -> KeyRoute:
    """
    Decide where a key goes given the current focus.

    Tab keys switch tabs from anywhere. Quit only works from the table,
    so typing "q" into a filter inserts the character instead.

    Args:
        focus: Element that currently owns keyboard input
        key: Textual key name (aliases accepted)

    Returns:
        The KeyRoute for this key
    """
    key = normalize_key(key)

    if key in TAB_KEYS:
        return TAB_KEYS[key]
    if (focus, key) in TRANSITIONS:
        return KeyRoute.TRANSITION
    if focus is FocusTarget.LOG_TABLE:
        if key == QUIT_KEY:
            return KeyRoute.QUIT
        return KeyRoute.TABLE
    return KeyRoute.INPUT
