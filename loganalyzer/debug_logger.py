#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Debug logger for the log analyzer.

Appends one JSON object per line to <state dir>/debug.log. Every event
carries the same envelope (event, level, timestamp, session_id, pid) so
the log can be grepped or loaded with any JSON-lines tool.

Debug levels:
    0 - disabled
    1 - lifecycle and errors (app_start, app_exit, error)
    2 - everything, including tab/focus changes and filter runs
"""

import json
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from loganalyzer.config import get_int_setting
from loganalyzer.paths import PathResolver

DEFAULT_DEBUG_LEVEL = 1


def _resolve_debug_level() -> int:
    """Read the debug level from LOG_ANALYZER_DEBUG, then settings."""
    env_level = os.environ.get("LOG_ANALYZER_DEBUG")
    if env_level is not None:
        try:
            return int(env_level)
        except ValueError:
            return DEFAULT_DEBUG_LEVEL
    return get_int_setting("logAnalyzer.debugLevel", DEFAULT_DEBUG_LEVEL)


class DebugLogger:
    """Structured JSON-lines event logger."""

    def __init__(self, log_path: Optional[Path] = None, level: Optional[int] = None) -> None:
        self.log_path = log_path or PathResolver.debug_log_path()
        self.level = _resolve_debug_level() if level is None else level
        self.session_id = uuid.uuid4().hex[:12]

    @property
    def enabled(self) -> bool:
        return self.level > 0

    def _write(self, event: str, level: str, min_level: int, **fields: Any) -> None:
        if self.level < min_level:
            return

        entry: Dict[str, Any] = {
            "event": event,
            "level": level,
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "session_id": self.session_id,
            "pid": os.getpid(),
        }
        entry.update(fields)

        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, "a") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError:
            # Logging never interrupts the UI
            pass

    # -------------------------------------------------------------------------
    # Lifecycle (level 1)
    # -------------------------------------------------------------------------

    def app_start(self, initial_tab: str, width: int, height: int) -> None:
        self._write("app_start", "info", 1, initial_tab=initial_tab, width=width, height=height)

    def app_exit(self, return_code: Optional[int]) -> None:
        self._write("app_exit", "info", 1, return_code=return_code)

    def error(self, op: str, err: str) -> None:
        """Record a failure; op names the operation that failed."""
        self._write("error", "error", 1, op=op, err=err)

    # -------------------------------------------------------------------------
    # State changes (level 2)
    # -------------------------------------------------------------------------

    def tab_changed(self, from_tab: str, to_tab: str) -> None:
        self._write("tab_changed", "debug", 2, from_tab=from_tab, to_tab=to_tab)

    def focus_changed(self, from_target: str, to_target: str, key: str) -> None:
        self._write("focus_changed", "debug", 2, from_target=from_target, to_target=to_target, key=key)

    def filters_applied(
        self,
        tab: str,
        query: str,
        start_date: str,
        end_date: str,
        matched: int,
        total: int,
    ) -> None:
        self._write(
            "filters_applied",
            "debug",
            2,
            tab=tab,
            query=query,
            start_date=start_date,
            end_date=end_date,
            matched=matched,
            total=total,
        )


_logger: Optional[DebugLogger] = None


def get_logger() -> DebugLogger:
    """Return the process-wide logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = DebugLogger()
    return _logger


def reset_logger() -> None:
    """Drop the cached logger so the next get_logger() re-reads env/settings."""
    global _logger
    _logger = None
