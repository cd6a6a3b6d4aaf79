"""Stack-trace node."""

from __future__ import annotations

from richerr.errorglue.formats import CSFormat
from richerr.errorglue.rich_error import ErrorChain
from richerr.pruntime import StackSlice, indices

_AT = " at "


class ErrorStack(ErrorChain):
    """Attaches exactly one captured stack trace to an inner error."""

    def __init__(self, err: BaseException | None, stack: StackSlice) -> None:
        super().__init__(err)
        self._stack = StackSlice(stack)
        self.args = (err, self._stack)

    def stack_trace(self) -> StackSlice:
        """A copy of the stack so callers cannot share the node's value."""
        return self._stack.clone()

    def chain_string(self, format: CSFormat) -> str:
        """
        This node's contribution to a chain string.

        - DEFAULT: "message"
        - SHORT, CODE_LOCATION: "message at pkg.func-file.py:12"
        - SHORT_SUFFIX: "pkg.func-file.py:12"
        - LONG: "message" followed by every frame
        - LONG_SUFFIX: every frame only
        """
        if format is CSFormat.DEFAULT:
            return str(self)
        if format in (CSFormat.SHORT, CSFormat.CODE_LOCATION):
            location = self.short_location()
            if not location:
                return str(self)
            return str(self) + _AT + location
        if format is CSFormat.SHORT_SUFFIX:
            return self.short_location()
        if format is CSFormat.LONG:
            return str(self) + self._stack.long()
        if format is CSFormat.LONG_SUFFIX:
            return self._stack.long()
        return ""

    def short_location(self) -> str:
        """
        The code location where the error occurred.

        For a stack recovered from a panic this is the line that raised,
        not the recovering frame.
        """
        if not self._stack:
            return ""
        is_panic, _, panic_index = indices(self._stack)
        if is_panic:
            return self._stack[panic_index].short()
        return self._stack[0].short()

    def __repr__(self) -> str:
        top = self._stack[0].func_line() if self._stack else ""
        return f"ErrorStack({self._err!r}, at={top!r})"
