"""Severity marks: warning and panic."""

from __future__ import annotations

from richerr.errorglue.rich_error import ErrorChain

WARNING_PREFIX = "warning: "
PANIC_PREFIX = "panic: "


class WarningType(ErrorChain):
    """Marks an error as a warning rather than a failure."""

    def __str__(self) -> str:
        if self._err is None:
            return ""
        return WARNING_PREFIX + str(self._err)


class PanicType(ErrorChain):
    """Marks an error as originating from a recovered panic."""

    def __str__(self) -> str:
        if self._err is None:
            return ""
        return PANIC_PREFIX + str(self._err)
