"""Tests for the error factories and accessors."""

import sys

from richerr.errorglue import (
    CSFormat,
    ErrorStack,
    RelatedError,
    dump_chain,
    extract_data,
    find_type,
    get_stack_trace,
    get_stacks,
    has_stack,
    is_warning,
    related_errors,
)
from richerr.perrors import (
    add_key_value,
    append_error,
    errorf,
    long,
    new,
    pack_func,
    pack_func_n,
    short,
    stack,
    stackn,
    warning,
)

PKG = __name__.rpartition(".")[2]


def _wrap_skipping_self(err):
    return stackn(err, 1)


def _caller_pack_func():
    return pack_func_n(1)


class TestNew:
    """Test creating errors."""

    def test_message_and_single_stack(self):
        err = new("msg")
        assert "msg" in str(err)
        assert len(get_stacks(err)) == 1

    def test_short_with_location(self):
        line = sys._getframe().f_lineno + 1
        err = new("an error")
        assert short(err) == f"an error at {PKG}.TestNew.test_short_with_location-test_factories.py:{line}"

    def test_empty_message(self):
        assert str(new()) == f"StackNew from {PKG}.test_empty_message"

    def test_long(self):
        err = new("an error")
        lines = long(err).split("\n")
        assert lines[0] == "an error"
        assert lines[1] == f"{__name__}.TestNew.test_long"


class TestStack:
    """Test adding stack traces."""

    def test_no_duplication(self):
        err = new("x")
        err2 = stack(err)
        assert err2 is err
        assert dump_chain(err2) == "ErrorStack Exception"

    def test_wraps_plain_error(self):
        err = stack(ValueError("x"))
        assert isinstance(err, ErrorStack)
        assert get_stack_trace(err)[0].name() == "test_wraps_plain_error"

    def test_stackn_always_adds(self):
        err = stackn(new("x"))
        assert len(get_stacks(err)) == 2
        assert dump_chain(err) == "ErrorStack ErrorStack Exception"

    def test_stackn_skips_frames(self):
        err = _wrap_skipping_self(ValueError("x"))
        assert get_stack_trace(err)[0].name() == "test_stackn_skips_frames"

    def test_none(self):
        assert stack(None) is None
        assert stackn(None) is None


class TestErrorf:
    """Test printf-style creation."""

    def test_formats_arguments(self):
        err = errorf("job %s failed %d times", "sync", 3)
        assert str(err) == "job sync failed 3 times"
        assert has_stack(err)

    def test_mapping(self):
        assert str(errorf("%(name)s failed", {"name": "job"})) == "job failed"

    def test_percent_literal(self):
        assert str(errorf("%d%% done", 100)) == "100% done"

    def test_without_arguments_message_is_verbatim(self):
        err = errorf("disk 100% full")
        assert str(err) == "disk 100% full"
        assert has_stack(err)

    def test_wrap_keeps_existing_stack(self):
        inner = new("inner")
        err = errorf("wrap: %w", inner)
        assert str(err) == "wrap: inner"
        assert err.__cause__ is inner
        assert dump_chain(err) == "Exception ErrorStack Exception"
        assert short(err) == "wrap: inner at " + inner.chain_string(CSFormat.SHORT_SUFFIX)

    def test_wrap_plain_error_adds_stack(self):
        inner = ValueError("inner")
        err = errorf("wrap: %w", inner)
        assert dump_chain(err) == "ErrorStack Exception ValueError"

    def test_several_wrapped(self):
        a, b = ValueError("a"), ValueError("b")
        err = errorf("%w and %w", a, b)
        assert str(err) == "a and b"
        assert isinstance(err, RelatedError)
        assert find_type(err, ErrorStack).unwrap().__cause__ is a
        assert related_errors(err)[1:] == [b]


class TestAddKeyValue:
    """Test attaching data."""

    def test_data_association(self):
        err = add_key_value(add_key_value(ValueError("m"), "k1", "v1"), "k2", "v2")
        lines = long(err).split("\n")
        assert "k1: v1" in lines
        assert "k2: v2" in lines
        assert extract_data(err)[1] == {"k1": "v1", "k2": "v2"}

    def test_single_stack(self):
        err = add_key_value(add_key_value(ValueError("m"), "a", "1"), "b", "2")
        assert len(get_stacks(err)) == 1

    def test_none(self):
        assert add_key_value(None, "k", "v") is None


class TestAppendError:
    """Test associating errors."""

    def test_none_either_side(self):
        err = ValueError("x")
        assert append_error(err, None) is err
        assert append_error(None, err) is err
        assert append_error(None, None) is None

    def test_related_contains_appended(self):
        b = ValueError("b")
        assert b in related_errors(append_error(ValueError("a"), b))

    def test_sibling_aggregation(self):
        a, b, c = new("a"), new("b"), new("c")
        err = append_error(append_error(a, b), c)
        related = related_errors(err)
        assert len(related) == 3
        assert str(related[0]) == "a"
        assert related[1] is b
        assert related[2] is c


class TestWarning:
    """Test warnings."""

    def test_warning_classification(self):
        w = warning(new("oops"))
        assert is_warning(w)
        assert str(w).startswith("warning: oops")
        assert has_stack(w)

    def test_plain_error_gets_stack(self):
        w = warning(ValueError("oops"))
        assert has_stack(w)
        assert str(w) == "warning: oops"

    def test_none(self):
        assert warning(None) is None


class TestPackFunc:
    """Test package and function names of callers."""

    def test_pack_func(self):
        assert pack_func() == f"{PKG}.test_pack_func"

    def test_pack_func_n(self):
        assert _caller_pack_func() == f"{PKG}.test_pack_func_n"
