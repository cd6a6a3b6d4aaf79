"""Runtime introspection: code locations, stack capture and panic detection."""

from richerr.pruntime.code_location import CodeLocation, new_code_location
from richerr.pruntime.stack_slice import (
    StackSlice,
    new_panic_stack,
    new_stack_slice,
    traceback_locations,
)
from richerr.pruntime.panic_detector import PanicDetector, get_panic_detector, indices

__all__ = [
    "CodeLocation",
    "PanicDetector",
    "StackSlice",
    "get_panic_detector",
    "indices",
    "new_code_location",
    "new_panic_stack",
    "new_stack_slice",
    "traceback_locations",
]
