"""Factories and accessors: the everyday surface of richerr."""

from richerr.perrors.factories import (
    add_key_value,
    append_error,
    errorf,
    new,
    pack_func,
    pack_func_n,
    stack,
    stackn,
    warning,
)
from richerr.perrors.accessors import long, long_short, short
from richerr.perrors.recover import Recover

__all__ = [
    "Recover",
    "add_key_value",
    "append_error",
    "errorf",
    "long",
    "long_short",
    "new",
    "pack_func",
    "pack_func_n",
    "short",
    "stack",
    "stackn",
    "warning",
]
