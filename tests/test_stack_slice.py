"""Tests for stack capture."""

import os
from unittest.mock import patch

from richerr.pruntime import (
    CodeLocation,
    StackSlice,
    new_panic_stack,
    new_stack_slice,
    traceback_locations,
)


def _capture_for_caller() -> StackSlice:
    return new_stack_slice(1)


def _raise_value_error() -> None:
    raise ValueError("boom")


def _frames(n: int) -> StackSlice:
    return StackSlice(
        CodeLocation(function=f"pkg.mod.f{i}", module="pkg.mod", file="/src/pkg/mod.py", line=10 + i)
        for i in range(n)
    )


class TestStackSliceForms:
    """Test rendering a captured stack."""

    def test_short_uses_top_frame(self):
        assert _frames(2).short() == " at mod.f0-mod.py:10"

    def test_long_lists_every_frame(self):
        assert _frames(2).long() == "\npkg.mod.f0\n  /src/pkg/mod.py:10\npkg.mod.f1\n  /src/pkg/mod.py:11"
        assert str(_frames(1)) == "\npkg.mod.f0\n  /src/pkg/mod.py:10"

    def test_empty(self):
        assert StackSlice().short() == ""
        assert StackSlice().long() == ""

    def test_clone_is_a_copy(self):
        stack = _frames(3)
        clone = stack.clone()
        assert clone == stack
        assert clone is not stack
        assert isinstance(clone, StackSlice)


class TestNewStackSlice:
    """Test capturing the live stack."""

    def test_first_frame_is_caller(self):
        stack = new_stack_slice()
        assert stack[0].name() == "test_first_frame_is_caller"
        assert os.path.basename(stack[0].file) == "test_stack_slice.py"
        assert len(stack) > 1

    def test_skip_hides_wrapper(self):
        stack = _capture_for_caller()
        assert stack[0].name() == "test_skip_hides_wrapper"

    def test_depth(self):
        assert len(new_stack_slice(depth=1)) == 1

    def test_depth_from_settings(self, fresh_settings):
        with patch.dict(os.environ, {"RICHERR_STACK_DEPTH": "2"}):
            assert len(new_stack_slice()) == 2

    def test_skip_past_top(self):
        assert new_stack_slice(100_000) == StackSlice()


class TestTracebackLocations:
    """Test converting tracebacks."""

    def test_deepest_frame_first(self):
        try:
            _raise_value_error()
        except ValueError as exc:
            locations = traceback_locations(exc.__traceback__)

        assert [loc.name() for loc in locations] == ["_raise_value_error", "test_deepest_frame_first"]
        assert locations[0].line == _raise_value_error.__code__.co_firstlineno + 1

    def test_none(self):
        assert traceback_locations(None) == []


class TestNewPanicStack:
    """Test the layout of a recovered exception's stack."""

    def test_layout(self):
        try:
            _raise_value_error()
        except ValueError as exc:
            stack = new_panic_stack(exc.__traceback__)

        names = [loc.name() for loc in stack]
        assert names[0] == "test_layout"
        assert names[1] == "new_panic_stack"
        assert names[2] == "_raise_value_error"
        # the recovering frame is not repeated among the outer frames
        assert names[3:].count("test_layout") == 1

    def test_without_traceback(self):
        stack = new_panic_stack(None)
        assert [loc.name() for loc in stack[:3]] == ["test_without_traceback", "new_panic_stack", "test_without_traceback"]

    def test_depth_caps_whole_stack(self):
        try:
            _raise_value_error()
        except ValueError as exc:
            stack = new_panic_stack(exc.__traceback__, depth=3)

        assert [loc.name() for loc in stack] == ["test_depth_caps_whole_stack", "new_panic_stack", "_raise_value_error"]

    def test_panic_stack_depth_from_settings(self, fresh_settings):
        with patch.dict(os.environ, {"RICHERR_STACK_DEPTH": "4"}):
            try:
                _raise_value_error()
            except ValueError as exc:
                stack = new_panic_stack(exc.__traceback__)
        assert len(stack) == 4
