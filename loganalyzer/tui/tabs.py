# SPDX-License-Identifier: MIT
"""Tab order and cycling for the category tabs."""

from typing import Tuple

from loganalyzer.models import Category

TAB_ORDER: Tuple[Category, ...] = (
    Category.ERRORS,
    Category.WARNINGS,
    Category.INFORMATION,
)


def cycle_tab(current: Category, step: int = 1) -> Category:
    """Move forward (step > 0) or backward (step < 0) through the tabs, wrapping."""
    index = TAB_ORDER.index(current)
    return TAB_ORDER[(index + step) % len(TAB_ORDER)]
