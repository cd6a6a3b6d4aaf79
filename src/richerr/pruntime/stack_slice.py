"""Stack capture as ordered code locations, innermost frame first."""

from __future__ import annotations

import sys
from types import FrameType, TracebackType
from typing import Iterable

from richerr.config import get_settings
from richerr.pruntime.code_location import CodeLocation

_AT = " at "


class StackSlice(tuple):
    """Immutable sequence of CodeLocation, innermost frame at index 0."""

    def __new__(cls, frames: Iterable[CodeLocation] = ()) -> StackSlice:
        return super().__new__(cls, tuple(frames))

    def short(self) -> str:
        """``" at <top frame short form>"``, empty for an empty stack."""
        if not self:
            return ""
        return _AT + self[0].short()

    def long(self) -> str:
        """Every frame in two-line form, each preceded by a newline."""
        return "".join("\n" + location.long() for location in self)

    def clone(self) -> StackSlice:
        return StackSlice(self)

    def __str__(self) -> str:
        return self.long()

    def __repr__(self) -> str:
        return f"StackSlice({list(self)!r})"


def _walk(frame: FrameType | None, depth: int) -> list[CodeLocation]:
    locations: list[CodeLocation] = []
    while frame is not None and len(locations) < depth:
        locations.append(CodeLocation.from_frame(frame))
        frame = frame.f_back
    return locations


def new_stack_slice(skip: int = 0, depth: int | None = None) -> StackSlice:
    """
    Capture the current call stack.

    With skip 0 the first frame is the caller of new_stack_slice. skip hides
    that many additional wrapper frames. depth defaults to the stack_depth
    setting.
    """
    if skip < 0:
        skip = 0
    if depth is None:
        depth = get_settings().stack_depth
    try:
        frame = sys._getframe(1 + skip)
    except ValueError:
        return StackSlice()
    return StackSlice(_walk(frame, depth))


def traceback_locations(tb: TracebackType | None) -> list[CodeLocation]:
    """Locations of a traceback, deepest (raising) frame first."""
    locations: list[CodeLocation] = []
    while tb is not None:
        locations.append(CodeLocation.from_frame(tb.tb_frame, tb.tb_lineno))
        tb = tb.tb_next
    locations.reverse()
    return locations


def new_panic_stack(tb: TracebackType | None, skip: int = 0, depth: int | None = None) -> StackSlice:
    """
    Build the stack of a recovered exception.

    Frames, innermost first:
      - the recovering frame, the caller of new_panic_stack after skip
      - new_panic_stack itself, the recovery and panic-dispatch marker
      - the traceback of the exception, raising frame first
      - frames outward from the recovering frame

    The traceback normally ends at the recovering frame so that frame is
    not repeated among the outer frames. At most depth frames are kept.
    """
    if skip < 0:
        skip = 0
    if depth is None:
        depth = get_settings().stack_depth
    marker_frame = sys._getframe(0)
    try:
        recovering = sys._getframe(1 + skip)
    except ValueError:
        return StackSlice()

    locations = [CodeLocation.from_frame(recovering), CodeLocation.from_frame(marker_frame)]
    locations.extend(traceback_locations(tb))
    outer = recovering.f_back
    if tb is None or tb.tb_frame is not recovering:
        outer = recovering
    locations.extend(_walk(outer, max(depth - len(locations), 0)))
    return StackSlice(locations[:depth])
