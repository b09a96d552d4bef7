#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Shared styling configuration for TUI rendering.

All colors live in one immutable Theme that is handed to the renderer.
Any color can be overridden from settings.json under "logAnalyzer.theme".
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from loganalyzer.config import get_setting, get_str_setting
from loganalyzer.models import Category


@dataclass(frozen=True)
class Theme:
    """Colors used by the renderer (Rich color names or hex values)."""

    title: str = "#FF7CCB"
    tab_border: str = "#7D5674"
    tab_inactive: str = "#777777"
    tab_active: str = "#FFFFFF"
    label: str = "#FFFFFF"
    focus_marker: str = "#FF7CCB"
    placeholder: str = "#777777"
    help_background: str = "#444444"
    help_text: str = "#FFFFFF"
    help_key: str = "#00FF00"
    help_separator: str = "#888888"

    @classmethod
    def from_settings(cls) -> "Theme":
        """Build a theme, applying string overrides from logAnalyzer.theme.*."""
        overrides = get_setting("logAnalyzer.theme", {})
        if not isinstance(overrides, dict):
            return cls()
        known = {f.name for f in fields(cls)}
        valid = {
            name: value
            for name, value in overrides.items()
            if name in known and isinstance(value, str) and value
        }
        return replace(cls(), **valid)


def initial_tab_from_settings(default: Category = Category.ERRORS) -> Category:
    """Read logAnalyzer.initialTab; unknown names fall back to default."""
    return Category.parse(get_str_setting("logAnalyzer.initialTab")) or default


def styled(text: str, style: Optional[str]) -> str:
    """Wrap already-escaped text in Rich markup for a style."""
    if not style:
        return text
    return f"[{style}]{text}[/]"
