"""Error nodes, chain traversal and the chain string rendering engine."""

from richerr.errorglue.formats import CSFormat, printf_format
from richerr.errorglue.rich_error import (
    AssociatedErrorer,
    ChainStringer,
    ErrorCallStacker,
    ErrorChain,
    ErrorHasData,
    unwrap,
)
from richerr.errorglue.error_stack import ErrorStack
from richerr.errorglue.error_data import ErrorData
from richerr.errorglue.related_error import RelatedError
from richerr.errorglue.severity import PANIC_PREFIX, WARNING_PREFIX, PanicType, WarningType
from richerr.errorglue.traversal import (
    dump_chain,
    dump_repr,
    error0,
    error_chain_slice,
    errors_with_stack,
    extract_data,
    find_type,
    first_panic_stack,
    get_inner_most_stack,
    get_stack_trace,
    get_stacks,
    has_stack,
    is_panic,
    is_warning,
    iter_chain,
    related_errors,
)
from richerr.errorglue.chain_string import chain_string, code_location, short_format

__all__ = [
    "AssociatedErrorer",
    "CSFormat",
    "ChainStringer",
    "ErrorCallStacker",
    "ErrorChain",
    "ErrorData",
    "ErrorHasData",
    "ErrorStack",
    "PANIC_PREFIX",
    "PanicType",
    "RelatedError",
    "WARNING_PREFIX",
    "WarningType",
    "chain_string",
    "code_location",
    "dump_chain",
    "dump_repr",
    "error0",
    "error_chain_slice",
    "errors_with_stack",
    "extract_data",
    "find_type",
    "first_panic_stack",
    "get_inner_most_stack",
    "get_stack_trace",
    "get_stacks",
    "has_stack",
    "is_panic",
    "is_warning",
    "iter_chain",
    "printf_format",
    "related_errors",
    "short_format",
    "unwrap",
]
