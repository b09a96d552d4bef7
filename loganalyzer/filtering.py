#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Filter engine for log records.

Text queries match message substrings case-insensitively. Date bounds are
compared as plain strings, which orders ISO dates (YYYY-MM-DD) correctly.
Malformed dates are not rejected; they compare lexicographically like any
other string.
"""

from typing import Iterable, List

from loganalyzer.models import FilterCriteria, LogRecord


def filter_logs(
    records: Iterable[LogRecord],
    query: str = "",
    start: str = "",
    end: str = "",
) -> List[LogRecord]:
    """
    Filter records by text query and inclusive date range.

    Args:
        records: Records to filter
        query: Substring to look for in the message (empty matches all)
        start: Lowest allowed timestamp (empty = no lower bound)
        end: Highest allowed timestamp (empty = no upper bound)

    Returns:
        Matching records in their original order
    """
    needle = query.lower()
    result = []
    for record in records:
        if needle and needle not in record.message.lower():
            continue
        if start and record.timestamp < start:
            continue
        if end and record.timestamp > end:
            continue
        result.append(record)
    return result


def apply_criteria(records: Iterable[LogRecord], criteria: FilterCriteria) -> List[LogRecord]:
    """Filter records using a FilterCriteria bundle."""
    return filter_logs(records, criteria.query, criteria.start_date, criteria.end_date)
