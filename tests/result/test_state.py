"""Tests for result states."""

import pytest

from wphelpers.errors import InvalidArgument
from wphelpers.result import (
    DEFAULT_FAILURE_CODE,
    FAILED,
    PASSED,
    UNDEFINED,
    Failed,
    Passed,
    Undefined,
    coerce_state,
)


class TestStates:
    """Tests for Undefined, Passed and Failed."""

    def test_labels(self):
        assert UNDEFINED.label is None
        assert PASSED.label == "passed"
        assert FAILED.label == DEFAULT_FAILURE_CODE
        assert Failed("timeout").label == "timeout"

    def test_equality(self):
        assert Undefined() == UNDEFINED
        assert Passed() == PASSED
        assert Failed() == FAILED
        assert Failed("a") != Failed("b")

    @pytest.mark.parametrize("code", ["", "   ", "passed", "undefined", None])
    def test_failed_rejects_invalid_codes(self, code):
        with pytest.raises(InvalidArgument):
            Failed(code)

    def test_str(self):
        assert str(UNDEFINED) == "undefined"
        assert str(PASSED) == "passed"
        assert str(Failed("x")) == "x"


class TestCoerceState:
    """Tests for coerce_state()."""

    def test_none_is_undefined(self):
        assert coerce_state(None) is UNDEFINED

    def test_state_passes_through(self):
        state = Failed("x")
        assert coerce_state(state) is state

    def test_any_other_string_is_a_failure_code(self):
        assert coerce_state("invalidType") == Failed("invalidType")

    @pytest.mark.parametrize("value", ["", " \t", 0, [], object()])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(InvalidArgument):
            coerce_state(value)
