"""
Base node of an error chain and the capabilities chain walking relies on.

Every rich error wraps exactly one inner error. Library nodes expose it via
unwrap(); foreign exceptions are followed through explicit chaining
(``raise X from Y`` sets ``__cause__``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from richerr.errorglue.formats import CSFormat, printf_format

if TYPE_CHECKING:
    from richerr.pruntime import StackSlice


@runtime_checkable
class ChainStringer(Protocol):
    """An error that renders its own contribution to a chain string."""

    def chain_string(self, format: CSFormat) -> str: ...


@runtime_checkable
class ErrorCallStacker(Protocol):
    """An error carrying a stack trace."""

    def stack_trace(self) -> StackSlice: ...


@runtime_checkable
class ErrorHasData(Protocol):
    """An error carrying one key/value pair."""

    def key_value(self) -> tuple[str, str]: ...


@runtime_checkable
class AssociatedErrorer(Protocol):
    """An error carrying a sibling error outside its primary chain."""

    def associated_error(self) -> BaseException | None: ...


class ErrorChain(Exception):
    """
    Plain wrapper: holds an inner error and renders as that error.

    Richer nodes derive from ErrorChain so that they all unwrap the same way.
    Nodes are never modified after construction; changes are new wrappers.
    """

    def __init__(self, err: BaseException | None) -> None:
        super().__init__(err)
        self._err = err

    def unwrap(self) -> BaseException | None:
        return self._err

    def chain_string(self, format: CSFormat) -> str:
        if format in (CSFormat.SHORT_SUFFIX, CSFormat.LONG_SUFFIX):
            return ""
        return str(self)

    def __str__(self) -> str:
        if self._err is None:
            return ""
        return str(self._err)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._err!r})"

    def __format__(self, format_spec: str) -> str:
        # "+" long, "-" short, otherwise str(self)
        from richerr.errorglue.chain_string import chain_string

        return chain_string(self, printf_format(format_spec))


def unwrap(err: BaseException | None) -> BaseException | None:
    """Next error in the primary chain, or None at the terminus."""
    if err is None:
        return None
    if isinstance(err, ErrorChain):
        return err.unwrap()
    return err.__cause__
