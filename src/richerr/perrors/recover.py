"""Recovering exceptions as panic errors."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Callable

from richerr.errorglue import ErrorStack, PanicType
from richerr.logging_config import get_logger
from richerr.pruntime import new_panic_stack

logger = get_logger(__name__)


class Recover:
    """
    Context manager turning an exception escaping its block into a panic error.

    The error is PanicType(ErrorStack(exc, stack)) where stack runs from the
    recovering frame through the line that raised. It is stored on .err and
    passed to on_error if provided:

        store = ErrorStore()
        with Recover(store.add_error):
            work()

    KeyboardInterrupt, SystemExit and other non-Exception exceptions are
    not recovered.
    """

    def __init__(self, on_error: Callable[[BaseException], Any] | None = None) -> None:
        self._on_error = on_error
        self.err: BaseException | None = None

    def __enter__(self) -> Recover:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False

        # skip this frame: the with-block's frame recovered
        stack = new_panic_stack(tb, skip=1)
        self.err = PanicType(ErrorStack(exc, stack))
        logger.debug("panic_recovered", exc_type=type(exc).__name__, frames=len(stack))
        if self._on_error is not None:
            self._on_error(self.err)
        return True
