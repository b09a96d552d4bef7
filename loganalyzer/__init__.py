# SPDX-License-Identifier: MIT
"""
System Log Analyzer - browse categorized log entries in the terminal.

Usage:
    from loganalyzer import LogStore, filter_logs
    store = LogStore.sample()
    filter_logs(store.records(Category.ERRORS), query="memory")
"""

from ._version import __version__
from .filtering import apply_criteria, filter_logs
from .log_store import LogStore
from .models import Category, FilterCriteria, FocusTarget, LogRecord

__all__ = [
    "__version__",
    "Category",
    "FilterCriteria",
    "FocusTarget",
    "LogRecord",
    "LogStore",
    "apply_criteria",
    "filter_logs",
]
