"""
Walking error chains.

The primary chain is followed by unwrap. RelatedError nodes add secondary
edges to sibling errors. Nothing prevents a caller from building a cycle,
so every walk keeps a set of visited node identities and drops back-edges.
"""

from __future__ import annotations

from typing import Iterator, TypeVar

from richerr.errorglue.rich_error import (
    AssociatedErrorer,
    ErrorCallStacker,
    ErrorHasData,
    unwrap,
)
from richerr.errorglue.severity import WarningType
from richerr.pruntime import StackSlice, indices

E = TypeVar("E", bound=BaseException)


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield err and each error it unwraps to, newest first, each once."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def error_chain_slice(err: BaseException | None) -> list[BaseException]:
    """err at index 0 followed by its primary chain; empty for None."""
    return list(iter_chain(err))


def error0(err: BaseException | None) -> BaseException | None:
    """The innermost error of the primary chain."""
    last = None
    for last in iter_chain(err):
        pass
    return last


def errors_with_stack(err: BaseException | None) -> list[BaseException]:
    """Errors in the primary chain carrying a stack trace, oldest first."""
    errs = [e for e in iter_chain(err) if isinstance(e, ErrorCallStacker)]
    errs.reverse()
    return errs


def get_stacks(err: BaseException | None) -> list[StackSlice]:
    """All stack traces of the primary chain, oldest first."""
    return [e.stack_trace() for e in errors_with_stack(err)]  # type: ignore[attr-defined]


def get_stack_trace(err: BaseException | None) -> StackSlice | None:
    """The newest stack trace in the primary chain."""
    for e in iter_chain(err):
        if isinstance(e, ErrorCallStacker):
            return e.stack_trace()
    return None


def get_inner_most_stack(err: BaseException | None) -> StackSlice | None:
    """The oldest stack trace in the primary chain."""
    stacks = get_stacks(err)
    if not stacks:
        return None
    return stacks[0]


def has_stack(err: BaseException | None) -> bool:
    """Whether the primary chain already contains a stack trace."""
    return any(isinstance(e, ErrorCallStacker) for e in iter_chain(err))


def is_warning(err: BaseException | None) -> bool:
    """Whether the primary chain was flagged as a warning."""
    return any(isinstance(e, WarningType) for e in iter_chain(err))


def find_type(err: BaseException | None, cls: type[E]) -> E | None:
    """The newest member of the primary chain that is an instance of cls."""
    for e in iter_chain(err):
        if isinstance(e, cls):
            return e
    return None


def dump_chain(err: BaseException | None) -> str:
    """Space-separated type names of the primary chain: ``ErrorStack Exception``."""
    return " ".join(type(e).__name__ for e in iter_chain(err))


def dump_repr(err: BaseException | None) -> str:
    """One line per chain member: type name and message."""
    return "\n".join(f"{type(e).__name__} {e}" for e in iter_chain(err))


def extract_data(err: BaseException | None) -> tuple[list[str], dict[str, str]]:
    """
    Values attached by ErrorData along the primary chain.

    list holds values with an empty key, oldest first.
    The dict holds keyed values; the newest value of a key wins.
    """
    values: list[str] = []
    key_values: dict[str, str] = {}
    for e in iter_chain(err):
        if not isinstance(e, ErrorHasData):
            continue
        key, value = e.key_value()
        if key == "":
            values.append(value)
        elif key not in key_values:
            key_values[key] = value
    values.reverse()
    return values, key_values


def related_errors(err: BaseException | None) -> list[BaseException]:
    """
    err followed by every associated error reachable from it.

    Associated errors of one primary chain are listed oldest first, then the
    associated errors of those errors, and so on. Each error appears once.
    """
    if err is None:
        return []
    errs = [err]
    seen = {id(err)}
    i = 0
    while i < len(errs):
        found = []
        for e in iter_chain(errs[i]):
            if not isinstance(e, AssociatedErrorer):
                continue
            associated = e.associated_error()
            if associated is not None and id(associated) not in seen:
                seen.add(id(associated))
                found.append(associated)
        found.reverse()
        errs.extend(found)
        i += 1
    return errs


def first_panic_stack(
    err: BaseException | None,
) -> tuple[bool, StackSlice | None, int, int, int, BaseException | None]:
    """
    Find the oldest stack in the primary chain that holds a panic.

    Returns (is_panic, stack, recovery_index, panic_index,
    number_of_stacks, error_with_stack).

    If no stack holds a panic, stack and error_with_stack are the oldest
    non-empty stack and its error, if any. number_of_stacks counts all
    stacks, empty ones included.
    """
    oldest_stack: StackSlice | None = None
    oldest_err: BaseException | None = None
    number_of_stacks = 0
    for e in errors_with_stack(err):
        stack = e.stack_trace()  # type: ignore[attr-defined]
        if oldest_stack is None and stack:
            oldest_stack = stack
            oldest_err = e
        number_of_stacks += 1
        is_panic, recovery_index, panic_index = indices(stack)
        if is_panic:
            return True, stack, recovery_index, panic_index, number_of_stacks, e
    return False, oldest_stack, 0, 0, number_of_stacks, oldest_err


def is_panic(err: BaseException | None) -> bool:
    """Whether any stack in the primary chain was recovered from a panic."""
    return first_panic_stack(err)[0]
