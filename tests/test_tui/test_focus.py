# SPDX-License-Identifier: MIT
"""Tests for the focus transition table, key routing and tab cycling."""

import pytest

from loganalyzer.models import Category, FocusTarget
from loganalyzer.tui.focus import (
    TRANSITIONS,
    Effect,
    KeyRoute,
    next_transition,
    normalize_key,
    route_key,
)
from loganalyzer.tui.tabs import TAB_ORDER, cycle_tab

INPUTS = [FocusTarget.SEARCH_BOX, FocusTarget.START_DATE_BOX, FocusTarget.END_DATE_BOX]


class TestTransitionTable:
    @pytest.mark.parametrize(
        "key,target",
        [
            ("slash", FocusTarget.SEARCH_BOX),
            ("f", FocusTarget.START_DATE_BOX),
            ("e", FocusTarget.END_DATE_BOX),
        ],
    )
    def test_enter_input_from_table(self, key, target):
        transition = next_transition(FocusTarget.LOG_TABLE, key)
        assert transition.target is target
        assert transition.effects == ()

    @pytest.mark.parametrize("focus", INPUTS)
    def test_escape_clears_and_returns(self, focus):
        transition = next_transition(focus, "escape")
        assert transition.target is FocusTarget.LOG_TABLE
        assert transition.effects == (Effect.CLEAR_FIELD, Effect.APPLY_FILTERS)

    @pytest.mark.parametrize("focus", INPUTS)
    def test_enter_applies_and_returns(self, focus):
        transition = next_transition(focus, "enter")
        assert transition.target is FocusTarget.LOG_TABLE
        assert transition.effects == (Effect.APPLY_FILTERS,)

    @pytest.mark.parametrize("focus", INPUTS)
    @pytest.mark.parametrize("key", ["slash", "f", "e"])
    def test_no_input_to_input_transitions(self, focus, key):
        assert next_transition(focus, key) is None

    @pytest.mark.parametrize("key", ["escape", "enter"])
    def test_table_has_no_commit_transitions(self, key):
        assert next_transition(FocusTarget.LOG_TABLE, key) is None

    def test_every_transition_leaves_or_enters_table(self):
        for (source, _key), transition in TRANSITIONS.items():
            assert FocusTarget.LOG_TABLE in (source, transition.target)


class TestKeyRouting:
    def test_q_quits_from_table(self):
        assert route_key(FocusTarget.LOG_TABLE, "q") is KeyRoute.QUIT

    @pytest.mark.parametrize("focus", INPUTS)
    @pytest.mark.parametrize("key", ["q", "slash", "f", "e", "a", "backspace", "left"])
    def test_input_keys_go_to_input(self, focus, key):
        assert route_key(focus, key) is KeyRoute.INPUT

    @pytest.mark.parametrize("key", ["up", "down", "pageup", "home", "x"])
    def test_other_table_keys_go_to_table(self, key):
        assert route_key(FocusTarget.LOG_TABLE, key) is KeyRoute.TABLE

    @pytest.mark.parametrize("focus", [FocusTarget.LOG_TABLE] + INPUTS)
    def test_tab_keys_work_everywhere(self, focus):
        assert route_key(focus, "tab") is KeyRoute.NEXT_TAB
        assert route_key(focus, "shift+tab") is KeyRoute.PREVIOUS_TAB

    def test_transition_keys(self):
        assert route_key(FocusTarget.LOG_TABLE, "slash") is KeyRoute.TRANSITION
        assert route_key(FocusTarget.SEARCH_BOX, "escape") is KeyRoute.TRANSITION
        assert route_key(FocusTarget.END_DATE_BOX, "enter") is KeyRoute.TRANSITION

    @pytest.mark.parametrize("alias,name", [("/", "slash"), ("esc", "escape"), ("backtab", "shift+tab")])
    def test_aliases(self, alias, name):
        assert normalize_key(alias) == name

    def test_slash_character_opens_search(self):
        assert next_transition(FocusTarget.LOG_TABLE, "/").target is FocusTarget.SEARCH_BOX


class TestTabCycling:
    @pytest.mark.parametrize("start", list(Category))
    def test_three_forward_steps_return_home(self, start):
        tab = start
        for _ in range(3):
            tab = cycle_tab(tab, 1)
        assert tab is start

    @pytest.mark.parametrize("start", list(Category))
    def test_forward_then_backward_is_noop(self, start):
        assert cycle_tab(cycle_tab(start, 1), -1) is start

    def test_forward_order(self):
        assert cycle_tab(Category.ERRORS) is Category.WARNINGS
        assert cycle_tab(Category.WARNINGS) is Category.INFORMATION
        assert cycle_tab(Category.INFORMATION) is Category.ERRORS

    def test_backward_wraps(self):
        assert cycle_tab(Category.ERRORS, -1) is Category.INFORMATION

    def test_cycling_is_a_bijection(self):
        assert sorted(cycle_tab(tab) for tab in TAB_ORDER) == sorted(TAB_ORDER)
