"""Rendering formats for error chains."""

from enum import Enum


class CSFormat(str, Enum):
    """Chain string formats."""
    DEFAULT = "default"            # str(err), like format spec ""
    SHORT = "short"                # one line with code location, like format spec "-"
    LONG = "long"                  # stack traces, data and associated errors, like format spec "+"
    SHORT_SUFFIX = "short_suffix"  # location only, no message
    LONG_SUFFIX = "long_suffix"    # stack or data lines only, no message
    CODE_LOCATION = "code_location"  # message and location, no associated errors


def printf_format(format_spec: str) -> CSFormat:
    """
    Select a format from a format spec.

    - "+": LONG
    - "-": SHORT
    - anything else: DEFAULT
    """
    if "+" in format_spec:
        return CSFormat.LONG
    if "-" in format_spec:
        return CSFormat.SHORT
    return CSFormat.DEFAULT
