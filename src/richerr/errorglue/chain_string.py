"""
Rendering engine: linearize an error graph into text.

LONG output for an error with a stack, a keyed value and an associated
error:

    message
    tests.test_mod.test_fn
      /src/tests/test_mod.py:12
    key: value
    associated message
    tests.test_mod.test_fn
      /src/tests/test_mod.py:11
"""

from __future__ import annotations

from richerr.errorglue.formats import CSFormat
from richerr.errorglue.rich_error import AssociatedErrorer, ChainStringer
from richerr.errorglue.traversal import first_panic_stack, iter_chain, related_errors
from richerr.errors import FormatError

_AT = " at "
# chain string of no error
_NIL = "OK"


def chain_string(err: BaseException | None, format: CSFormat | str = CSFormat.DEFAULT) -> str:
    """
    Render err and its chain.

    - DEFAULT: str(err)
    - SHORT: "message at pkg.func-file.py:12" then associated errors " 2[a at …, b at …]"
    - CODE_LOCATION: SHORT without associated errors
    - SHORT_SUFFIX: location only
    - LONG, LONG_SUFFIX: stack traces, data and associated errors, one piece per line
    """
    format = _as_format(format)
    if err is None:
        return _NIL

    if format is CSFormat.DEFAULT:
        return str(err)
    if format is CSFormat.CODE_LOCATION:
        return short_format(err)
    if format is CSFormat.SHORT:
        s = short_format(err)
        related = related_errors(err)[1:]
        if related:
            s += f" {len(related)}[{', '.join(short_format(e) for e in related)}]"
        return s
    if format is CSFormat.SHORT_SUFFIX:
        return code_location(err)
    return _long_format(err, format)


def _as_format(format: CSFormat | str) -> CSFormat:
    if isinstance(format, CSFormat):
        return format
    try:
        return CSFormat(format)
    except ValueError:
        raise FormatError(f"bad format: {format!r}", format=str(format)) from None


def _long_format(err: BaseException, format: CSFormat) -> str:
    # ids of errors queued for printing and of nodes already rendered
    queued = {id(err)}
    rendered: set[int] = set()
    errors_to_print = [err]
    pieces: list[str] = []

    i = 0
    while i < len(errors_to_print):
        is_first = True
        for node in iter_chain(errors_to_print[i]):
            if id(node) in rendered:
                break
            rendered.add(id(node))

            if isinstance(node, AssociatedErrorer):
                associated = node.associated_error()
                if associated is not None and id(associated) not in queued:
                    queued.add(id(associated))
                    errors_to_print.append(associated)

            piece = ""
            if isinstance(node, ChainStringer):
                if not is_first and format is CSFormat.LONG:
                    piece = node.chain_string(CSFormat.LONG_SUFFIX)
                else:
                    piece = node.chain_string(format)
            elif is_first:
                # for plain errors only the first message of a chain is printed
                piece = str(node)

            # stack suffixes open with a newline; pieces are joined with one
            piece = piece.removeprefix("\n")
            if piece:
                pieces.append(piece)
            is_first = False
        i += 1

    return "\n".join(pieces)


def short_format(err: BaseException) -> str:
    """``"message at pkg.func-file.py:12"``, or just the message without a location."""
    location = code_location(err)
    if location:
        return str(err) + _AT + location
    return str(err)


def code_location(err: BaseException | None) -> str:
    """
    Where err occurred, without a leading " at ".

    - a panic anywhere in the primary chain: the line that raised the oldest panic
    - otherwise: the top frame of the oldest stack
    - no stack: empty string
    """
    is_panic, stack, _, panic_index, _, error_with_stack = first_panic_stack(err)
    if not stack:
        return ""
    if is_panic:
        return stack[panic_index].short()
    if isinstance(error_with_stack, ChainStringer):
        return error_with_stack.chain_string(CSFormat.SHORT_SUFFIX).removeprefix(_AT)
    return stack[0].short()
