# SPDX-License-Identifier: MIT
"""Tests for the filter engine."""

import pytest

from loganalyzer.filtering import apply_criteria, filter_logs
from loganalyzer.log_store import LogStore
from loganalyzer.models import Category, FilterCriteria, LogRecord


@pytest.fixture
def error_records():
    return LogStore.sample().records(Category.ERRORS)


@pytest.fixture
def mixed_records():
    return [
        LogRecord("2024-09-30", "Disk FULL on /var"),
        LogRecord("2024-10-01", "authentication failure"),
        LogRecord("2024-10-03", "disk quota exceeded"),
        LogRecord("2024-10-05", "out of memory"),
        LogRecord("2024-10-09", "Memory pressure"),
    ]


class TestTextQuery:
    def test_query_matches_message_substring(self, error_records):
        result = filter_logs(error_records, "memory")
        assert result == [LogRecord("2024-10-05", "out of memory")]

    def test_query_is_case_insensitive(self, mixed_records):
        result = filter_logs(mixed_records, "DISK")
        assert [r.message for r in result] == ["Disk FULL on /var", "disk quota exceeded"]

    def test_empty_query_matches_all(self, mixed_records):
        assert filter_logs(mixed_records) == mixed_records

    def test_no_match_returns_empty_list(self, error_records):
        assert filter_logs(error_records, "kernel panic") == []

    def test_query_does_not_match_timestamp(self, error_records):
        assert filter_logs(error_records, "2024") == []

    def test_query_result_is_exact_subset(self, mixed_records):
        query = "mem"
        expected = [r for r in mixed_records if query in r.message.lower()]
        assert filter_logs(mixed_records, query, "", "") == expected


class TestDateRange:
    def test_start_only(self, error_records):
        result = filter_logs(error_records, start="2024-10-03")
        assert result == [LogRecord("2024-10-05", "out of memory")]

    def test_end_only(self, error_records):
        result = filter_logs(error_records, end="2024-10-03")
        assert result == [LogRecord("2024-10-01", "authentication failure")]

    def test_bounds_are_inclusive(self, mixed_records):
        result = filter_logs(mixed_records, start="2024-10-01", end="2024-10-05")
        assert [r.timestamp for r in result] == ["2024-10-01", "2024-10-03", "2024-10-05"]

    def test_range_result_matches_definition(self, mixed_records):
        start, end = "2024-10-02", "2024-10-09"
        expected = [r for r in mixed_records if start <= r.timestamp <= end]
        assert filter_logs(mixed_records, "", start, end) == expected

    def test_inverted_range_matches_nothing(self, mixed_records):
        assert filter_logs(mixed_records, start="2024-10-09", end="2024-10-01") == []

    def test_malformed_date_compares_lexicographically(self, mixed_records):
        # "2024-1" sorts before every "2024-10-xx" string but after "2024-09-30"
        result = filter_logs(mixed_records, start="2024-1")
        assert [r.timestamp for r in result] == [
            "2024-10-01",
            "2024-10-03",
            "2024-10-05",
            "2024-10-09",
        ]


class TestCombined:
    def test_query_and_range(self, mixed_records):
        result = filter_logs(mixed_records, "disk", start="2024-10-01")
        assert result == [LogRecord("2024-10-03", "disk quota exceeded")]

    def test_order_is_preserved(self):
        records = [
            LogRecord("2024-10-09", "b memory"),
            LogRecord("2024-10-01", "a memory"),
            LogRecord("2024-10-05", "c memory"),
        ]
        assert filter_logs(records, "memory") == records

    def test_filtering_twice_is_idempotent(self, mixed_records):
        once = filter_logs(mixed_records, "disk", "2024-09-01", "2024-10-31")
        twice = filter_logs(once, "disk", "2024-09-01", "2024-10-31")
        assert once == twice

    def test_input_is_not_mutated(self, mixed_records):
        before = list(mixed_records)
        filter_logs(mixed_records, "memory", "2024-10-01", "2024-10-05")
        assert mixed_records == before

    def test_accepts_any_iterable(self, mixed_records):
        assert filter_logs(iter(mixed_records), "memory") == filter_logs(mixed_records, "memory")


class TestApplyCriteria:
    def test_uses_all_fields(self, mixed_records):
        criteria = FilterCriteria(query="memory", start_date="2024-10-06", end_date="2024-10-31")
        assert apply_criteria(mixed_records, criteria) == [LogRecord("2024-10-09", "Memory pressure")]

    def test_empty_criteria_returns_everything(self, mixed_records):
        assert apply_criteria(mixed_records, FilterCriteria()) == mixed_records
