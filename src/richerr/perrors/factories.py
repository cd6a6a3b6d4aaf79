"""
Error factories.

Every error produced here carries at least one stack trace. None in gives
None out, except New which always creates an error.
"""

from __future__ import annotations

import re
from typing import Any

from richerr.errorglue import ErrorData, ErrorStack, RelatedError, WarningType, has_stack
from richerr.pruntime import new_code_location, new_stack_slice

# printf conversion: optional mapping key, flags, width, precision, type
_CONVERSION = re.compile(r"%(?:\([^)]*\))?[-#0 +]*(\*|\d+)?(?:\.(\*|\d+))?([a-zA-Z%])")


def _stack(err: BaseException, skip: int) -> BaseException:
    # skip 0: stack begins with the caller of _stack
    if has_stack(err):
        return err
    return ErrorStack(err, new_stack_slice(1 + skip))


def stack(err: BaseException | None) -> BaseException | None:
    """
    Ensure err has a stack trace.

    If the primary chain already holds a stack, err is returned unchanged.
    Otherwise err is wrapped with a stack whose top frame is the caller.
    """
    if err is None:
        return None
    return _stack(err, 1)


def stackn(err: BaseException | None, frames: int = 0) -> BaseException | None:
    """Always add a stack trace, skipping frames extra frames above the caller."""
    if err is None:
        return None
    if frames < 0:
        frames = 0
    return ErrorStack(err, new_stack_slice(1 + frames))


def new(message: str = "") -> BaseException:
    """
    Create an error with a stack trace.

    An empty message becomes "StackNew from <package>.<function>" of the caller.
    """
    if not message:
        message = "StackNew from " + new_code_location(1).pack_func()
    return ErrorStack(Exception(message), new_stack_slice(1))


def errorf(format: str, *args: Any) -> BaseException:
    """
    Create an error from a printf-style format.

    A %w conversion renders like %s; its exception argument becomes the
    cause of the new error, so an existing stack trace is not duplicated.
    Further %w arguments are attached as associated errors.

    Without arguments format is the message as is, like logging.
    """
    message = format
    wrapped: list[BaseException] = []
    if args:
        format, wrapped = _wrap_conversions(format, args)
        values: Any = args
        if len(args) == 1 and isinstance(args[0], dict):
            values = args[0]
        message = format % values
    err: BaseException = Exception(message)
    if wrapped:
        err.__cause__ = wrapped[0]
    err = _stack(err, 1)
    for extra in wrapped[1:]:
        err = RelatedError(err, extra)
    return err


def _wrap_conversions(format: str, args: tuple[Any, ...]) -> tuple[str, list[BaseException]]:
    """Replace %w with %s, collecting the exception arguments of %w in order."""
    wrapped: list[BaseException] = []
    pieces: list[str] = []
    index = 0
    last = 0
    for match in _CONVERSION.finditer(format):
        width, precision, conversion = match.groups()
        if conversion == "%":
            continue
        # a * width or precision consumes an argument
        index += (width == "*") + (precision == "*")
        if conversion == "w":
            if index < len(args) and isinstance(args[index], BaseException):
                wrapped.append(args[index])
            pieces.append(format[last:match.end() - 1] + "s")
            last = match.end()
        index += 1
    pieces.append(format[last:])
    return "".join(pieces), wrapped


def add_key_value(err: BaseException | None, key: str, value: str) -> BaseException | None:
    """
    Attach a string value to err.

    An empty key appends value to the error's list values.
    """
    if err is None:
        return None
    return ErrorData(_stack(err, 1), key, value)


def append_error(err: BaseException | None, err2: BaseException | None) -> BaseException | None:
    """
    Associate err2 with err.

    If either is None the other is returned unchanged.
    """
    if err2 is None:
        return err
    if err is None:
        return err2
    return RelatedError(_stack(err, 1), err2)


def warning(err: BaseException | None) -> BaseException | None:
    """Flag err as a warning: its message becomes "warning: <message>"."""
    if err is None:
        return None
    return WarningType(_stack(err, 1))


def pack_func() -> str:
    """``<package>.<function>`` of the caller."""
    return new_code_location(1).pack_func()


def pack_func_n(skip: int) -> str:
    """``<package>.<function>`` skip frames above the caller."""
    if skip < 0:
        skip = 0
    return new_code_location(1 + skip).pack_func()
