"""Tests for walking error chains."""

from richerr.errorglue import (
    ErrorData,
    ErrorStack,
    RelatedError,
    dump_chain,
    dump_repr,
    error0,
    error_chain_slice,
    errors_with_stack,
    extract_data,
    find_type,
    first_panic_stack,
    get_inner_most_stack,
    get_stack_trace,
    get_stacks,
    has_stack,
    is_warning,
    iter_chain,
    related_errors,
)
from richerr.perrors import add_key_value, append_error, new, stack, stackn, warning
from richerr.pruntime import StackSlice


def _cycle() -> tuple[ValueError, ValueError]:
    a = ValueError("a")
    b = ValueError("b")
    a.__cause__ = b
    b.__cause__ = a
    return a, b


class TestPrimaryChain:
    """Test walking the unwrap edge."""

    def test_error_chain_slice(self):
        inner = ValueError("x")
        err = add_key_value(inner, "k", "v")
        chain = error_chain_slice(err)
        assert chain[0] is err
        assert chain[-1] is inner
        assert [type(e).__name__ for e in chain] == ["ErrorData", "ErrorStack", "ValueError"]

    def test_error0(self):
        inner = ValueError("x")
        assert error0(warning(inner)) is inner
        assert error0(None) is None

    def test_none(self):
        assert error_chain_slice(None) == []
        assert dump_chain(None) == ""

    def test_cycle_terminates(self):
        a, b = _cycle()
        assert error_chain_slice(a) == [a, b]
        assert not has_stack(a)
        assert dump_chain(a) == "ValueError ValueError"

    def test_dump_repr(self):
        err = new("x")
        assert dump_repr(err) == "ErrorStack x\nException x"

    def test_find_type(self):
        err = warning(add_key_value(ValueError("x"), "k", "v"))
        assert isinstance(find_type(err, ErrorData), ErrorData)
        assert find_type(err, ValueError).args == ("x",)
        assert find_type(err, RelatedError) is None


class TestStacks:
    """Test locating stack traces."""

    def test_order(self):
        inner = new("x")
        outer = stackn(inner)
        assert errors_with_stack(outer) == [inner, outer]
        assert get_stacks(outer) == [inner.stack_trace(), outer.stack_trace()]
        assert get_stack_trace(outer) == outer.stack_trace()
        assert get_inner_most_stack(outer) == inner.stack_trace()

    def test_no_stack(self):
        err = ValueError("x")
        assert errors_with_stack(err) == []
        assert get_stack_trace(err) is None
        assert get_inner_most_stack(err) is None
        assert not has_stack(err)

    def test_has_stack_through_cause(self):
        err = RuntimeError("outer")
        err.__cause__ = new("inner")
        assert has_stack(err)
        assert stack(err) is err

    def test_first_panic_stack_without_panic(self):
        err = new("x")
        is_panic, found, recovery_index, panic_index, count, with_stack = first_panic_stack(err)
        assert not is_panic
        assert found == err.stack_trace()
        assert (recovery_index, panic_index, count) == (0, 0, 1)
        assert with_stack is err

    def test_first_panic_stack_skips_empty_stack(self):
        outer = stackn(ErrorStack(ValueError("x"), StackSlice()))
        _, found, _, _, count, with_stack = first_panic_stack(outer)
        assert found == outer.stack_trace()
        assert with_stack is outer
        assert count == 2

    def test_first_panic_stack_empty(self):
        assert first_panic_stack(ValueError("x")) == (False, None, 0, 0, 0, None)


class TestIsWarning:
    """Test warning classification."""

    def test_nested(self):
        assert is_warning(add_key_value(warning(ValueError("x")), "k", "v"))

    def test_not_warning(self):
        assert not is_warning(new("x"))
        assert not is_warning(None)


class TestExtractData:
    """Test collecting key/value annotations."""

    def test_newest_key_wins(self):
        err = add_key_value(add_key_value(ValueError("m"), "k", "old"), "k", "new")
        assert extract_data(err) == ([], {"k": "new"})

    def test_list_values_oldest_first(self):
        err = add_key_value(add_key_value(ValueError("m"), "", "first"), "", "second")
        assert extract_data(err) == (["first", "second"], {})

    def test_none(self):
        assert extract_data(None) == ([], {})


class TestRelatedErrors:
    """Test collecting associated errors."""

    def test_err_first(self):
        a, b = ValueError("a"), ValueError("b")
        related = related_errors(append_error(a, b))
        assert related[1:] == [b]
        assert str(related[0]) == "a"

    def test_transitive(self):
        c = ValueError("c")
        b = append_error(ValueError("b"), c)
        err = append_error(ValueError("a"), b)
        related = related_errors(err)
        assert related[1] is b
        assert related[2] is c

    def test_each_error_once(self):
        b = ValueError("b")
        err = append_error(append_error(ValueError("a"), b), b)
        assert related_errors(err)[1:] == [b]

    def test_cycle_through_association(self):
        sibling = ValueError("sibling")
        err = RelatedError(ValueError("x"), sibling)
        sibling.__cause__ = err
        assert related_errors(err) == [err, sibling]

    def test_none(self):
        assert related_errors(None) == []

    def test_iter_chain_each_node_once(self):
        a, _ = _cycle()
        assert len(list(iter_chain(a))) == 2
        assert isinstance(error_chain_slice(new("x"))[0], ErrorStack)
