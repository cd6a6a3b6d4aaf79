"""Resolved stack frames."""

from __future__ import annotations

import os
import sys
from types import FrameType

from pydantic import BaseModel, ConfigDict, Field


class CodeLocation(BaseModel):
    """
    One captured stack frame reduced to plain values.

    function is the fully qualified name: module path, an optional class
    qualifier and the function name, e.g.
    ``richerr.services.error_store.ErrorStore.add_error``.
    """

    model_config = ConfigDict(frozen=True)

    function: str = ""
    # Module path of function, e.g. richerr.services.error_store
    module: str = ""
    file: str = ""
    # 1-based, 0 is unknown
    line: int = Field(default=0, ge=0)

    @classmethod
    def from_frame(cls, frame: FrameType, line: int | None = None) -> CodeLocation:
        """Build a location from a live frame, optionally overriding its line."""
        code = frame.f_code
        module = frame.f_globals.get("__name__") or ""
        qualname = getattr(code, "co_qualname", code.co_name)
        function = f"{module}.{qualname}" if module else qualname
        if line is None:
            line = frame.f_lineno
        return cls(function=function, module=module, file=code.co_filename, line=line or 0)

    def qualname(self) -> str:
        """Function name with its class qualifier: ``ErrorStore.add_error``."""
        prefix = self.module + "."
        if self.module and self.function.startswith(prefix):
            return self.function[len(prefix):]
        return self.function

    def name(self) -> str:
        """Bare function name: ``add_error``."""
        return self.qualname().rpartition(".")[2]

    def package(self) -> str:
        """Last component of the module path: ``error_store``."""
        return self.module.rpartition(".")[2]

    def pack_func(self) -> str:
        """Package and function: ``error_store.add_error``."""
        return f"{self.package()}.{self.name()}"

    def base(self) -> str:
        """Package, class qualifier and function: ``error_store.ErrorStore.add_error``."""
        package = self.package()
        if not package:
            return self.qualname()
        return f"{package}.{self.qualname()}"

    def func_line(self) -> str:
        return f"{self.function}:{self.line}"

    def short(self) -> str:
        """One-liner for annotations: ``error_store.ErrorStore.add_error-error_store.py:25``."""
        return f"{self.base()}-{os.path.basename(self.file)}:{self.line}"

    def long(self) -> str:
        """Two-line form used in stack dumps."""
        return f"{self.function}\n  {self.file}:{self.line}"

    def full(self) -> str:
        return f"{self.function}-{self.file}:{self.line}"

    def is_set(self) -> bool:
        return self.file != "" or self.function != ""

    def dump(self) -> str:
        return f"File: {self.file!r} Line: {self.line} FuncName: {self.function!r}"

    def __str__(self) -> str:
        return self.long()


def new_code_location(skip: int = 0) -> CodeLocation:
    """
    Get the location of a single stack frame.

    With skip 0 this is the immediate caller of new_code_location.
    A skip beyond the top of the stack returns an unset location.
    """
    if skip < 0:
        skip = 0
    try:
        frame = sys._getframe(1 + skip)
    except ValueError:
        return CodeLocation()
    return CodeLocation.from_frame(frame)
