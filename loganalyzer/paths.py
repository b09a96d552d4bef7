# SPDX-License-Identifier: MIT
"""Centralized path resolution for the log analyzer.

All path resolution should go through this module to ensure consistency.
"""
import os
from pathlib import Path


class PathResolver:
    """Resolves paths for log analyzer components."""

    @staticmethod
    def config_dir() -> Path:
        """Get the directory holding settings.json.

        Resolution order:
        1. XDG_CONFIG_HOME/log-analyzer
        2. ~/.config/log-analyzer
        """
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "log-analyzer"
        return Path.home() / ".config" / "log-analyzer"

    @staticmethod
    def state_dir() -> Path:
        """Get the state directory for mutable data (debug log).

        Resolution order:
        1. LOG_ANALYZER_STATE env var
        2. XDG_STATE_HOME/log-analyzer
        3. ~/.local/state/log-analyzer
        """
        state = os.environ.get("LOG_ANALYZER_STATE")
        if state:
            return Path(state)
        xdg_state = os.environ.get("XDG_STATE_HOME")
        if xdg_state:
            return Path(xdg_state) / "log-analyzer"
        return Path.home() / ".local" / "state" / "log-analyzer"

    @staticmethod
    def debug_log_path() -> Path:
        """Get the path of the JSON-lines debug log."""
        return PathResolver.state_dir() / "debug.log"
