"""Rendering shortcuts for callers."""

from __future__ import annotations

from richerr.errorglue import CSFormat, chain_string, is_panic


def short(err: BaseException | None) -> str:
    """
    One-liner of the error message and where it occurred, plus associated
    errors:

        error-message at test_mod.TestA.test_b-test_mod.py:26
    """
    return chain_string(err, CSFormat.SHORT)


def long(err: BaseException | None) -> str:
    """
    Full dump: stack traces, values and associated errors with their chains.

        error-message
        tests.test_mod.TestA.test_b
          /src/tests/test_mod.py:26
    """
    return chain_string(err, CSFormat.LONG)


def long_short(err: BaseException | None) -> str:
    """Long format if the error holds a panic, otherwise short. "OK" for None."""
    if err is not None and is_panic(err):
        return chain_string(err, CSFormat.LONG)
    return chain_string(err, CSFormat.SHORT)
