#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
TUI module for the system log analyzer.

Provides the filter-and-view state machine and its Textual front end:
- ViewModel: tabs, focus routing and filtering over a LogStore
- Renderer: pure text rendering of the view state
- LogAnalyzerApp: interactive Textual application

Usage:
    from loganalyzer.tui import run_app
    run_app()  # Launch TUI
"""

from .app_state import ViewState
from .focus import KeyRoute, route_key
from .formatting import Theme
from .renderer import render_frame, render_plain_frame
from .view_model import KeyOutcome, ViewModel


# Defer app import to avoid textual dependency at module load time
# Snapshot output only needs the renderer
def _get_app():
    """Lazy import of app module to avoid textual import at module load."""
    from .app import LogAnalyzerApp, run_app
    return LogAnalyzerApp, run_app


def run_app(*args, **kwargs):
    """Run the TUI application. See app.run_app for details."""
    _, _run_app = _get_app()
    return _run_app(*args, **kwargs)


__all__ = [
    "KeyOutcome",
    "KeyRoute",
    "Theme",
    "ViewModel",
    "ViewState",
    "render_frame",
    "render_plain_frame",
    "route_key",
    "run_app",
]
