"""Classify a stack as belonging to a recovered exception."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from richerr.logging_config import get_logger
from richerr.pruntime.stack_slice import StackSlice, new_panic_stack

logger = get_logger(__name__)


class PanicDetector(BaseModel):
    """Marker function names identifying a recovery stack on this interpreter."""

    model_config = ConfigDict(frozen=True)

    # Function invoking recovery; the frame before it is the recovering frame
    defer_invoker: str
    # Panic dispatch; the first non-runtime frame after it raised the exception
    panic_function: str
    runtime_prefix: str


class _PanicProbe(Exception):
    pass


def _probe_panic() -> None:
    raise _PanicProbe("panic detector probe")


def _probe_recovery() -> StackSlice:
    try:
        _probe_panic()
    except _PanicProbe as exc:
        # the markers must fit whatever stack_depth is configured
        return new_panic_stack(exc.__traceback__, depth=8)
    return StackSlice()


@lru_cache(maxsize=1)
def get_panic_detector() -> PanicDetector | None:
    """
    Discover the marker names once by recovering a probe exception.

    Returns None if the probe stack does not have the expected shape, in
    which case no stack is ever classified as a panic.
    """
    stack = _probe_recovery()
    recovery_name = _probe_recovery.__qualname__
    panic_name = _probe_panic.__qualname__
    for i in range(1, len(stack) - 1):
        if stack[i - 1].name() == recovery_name and stack[i + 1].name() == panic_name:
            marker = stack[i]
            return PanicDetector(
                defer_invoker=marker.function,
                panic_function=marker.function,
                runtime_prefix=marker.module + ".",
            )
    logger.warning("panic_detector_unavailable", frames=len(stack))
    return None


def indices(stack: StackSlice) -> tuple[bool, int, int]:
    """
    Examine a stack for a recovered panic. Thread-safe.

    Returns (is_panic, recovery_index, panic_index):
    stack[recovery_index] is the frame that recovered,
    stack[panic_index] is the code line that raised.
    """
    detector = get_panic_detector()
    if detector is None:
        return False, 0, 0

    found = 0
    recovery_index = 0
    panic_index = 0
    length = len(stack)
    for i in range(length):
        function = stack[i].function
        if i > 0 and function == detector.defer_invoker:
            recovery_index = i - 1
            found += 1
            if found == 2:
                break
        if i + 1 < length and function == detector.panic_function:
            # skip frames belonging to the runtime itself
            panic_index = i + 1
            while panic_index + 1 < length and stack[panic_index].function.startswith(detector.runtime_prefix):
                panic_index += 1
            found += 1
            if found == 2:
                break

    if found != 2:
        return False, 0, 0
    return True, recovery_index, panic_index
