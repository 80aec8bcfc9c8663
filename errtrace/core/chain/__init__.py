# errtrace/core/chain/__init__.py
"""
Error chains.

This package defines the components responsible for:
- Representing a chain node (WrappedError) and its source Location
- Building chains (new_root, wrap, trace, ...)
- Inspecting chains (cause, unwrap, get_trace, details, is_, as_)

No side effects on import.
"""

from .node import Location, WrappedError, is_wrapped
from .fmt import safe_str, sprintf
from .caller import capture_caller
from .builder import new_root, new_rootf, wrap, wrapf, trace, tracef
from .inspection import (
    iter_chain,
    walk,
    cause,
    unwrap,
    format_line,
    get_trace,
    details,
    is_,
    as_,
)
from .context import wrap_errors

__all__ = [
    # Node
    "Location",
    "WrappedError",
    "is_wrapped",

    # Helpers
    "safe_str",
    "sprintf",
    "capture_caller",

    # Construction
    "new_root",
    "new_rootf",
    "wrap",
    "wrapf",
    "trace",
    "tracef",
    "wrap_errors",

    # Inspection
    "iter_chain",
    "walk",
    "cause",
    "unwrap",
    "format_line",
    "get_trace",
    "details",
    "is_",
    "as_",
]
