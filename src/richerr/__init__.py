"""Rich errors: stack traces, key/value data, associated errors and a thread-safe error store."""

from richerr.errorglue import (
    CSFormat,
    ErrorChain,
    ErrorData,
    ErrorStack,
    PanicType,
    RelatedError,
    WarningType,
    chain_string,
    extract_data,
    has_stack,
    is_panic,
    is_warning,
    related_errors,
)
from richerr.errors import ChannelClosedError, ConfigurationError, FormatError, RichErrError
from richerr.perrors import (
    Recover,
    add_key_value,
    append_error,
    errorf,
    long,
    long_short,
    new,
    pack_func,
    short,
    stack,
    stackn,
    warning,
)
from richerr.pruntime import CodeLocation, StackSlice, indices, new_stack_slice
from richerr.services import ErrorChannel, ErrorStore

__all__ = [
    "CSFormat",
    "ChannelClosedError",
    "CodeLocation",
    "ConfigurationError",
    "ErrorChain",
    "ErrorChannel",
    "ErrorData",
    "ErrorStack",
    "ErrorStore",
    "FormatError",
    "PanicType",
    "Recover",
    "RelatedError",
    "RichErrError",
    "StackSlice",
    "WarningType",
    "add_key_value",
    "append_error",
    "chain_string",
    "errorf",
    "extract_data",
    "has_stack",
    "indices",
    "is_panic",
    "is_warning",
    "long",
    "long_short",
    "new",
    "new_stack_slice",
    "pack_func",
    "related_errors",
    "short",
    "stack",
    "stackn",
    "warning",
]
