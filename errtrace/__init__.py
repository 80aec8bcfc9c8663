# errtrace/__init__.py
"""
errtrace - contextual error chains

Attach a message (and optionally the source location) to an exception
without losing it, then recover the original exception, a root-first trace
of every wrapping step, or the whole trace as one string for a log line.

Basic usage:

    >>> import errtrace
    >>> err = errtrace.new_root("connection refused")
    >>> err = errtrace.wrap(err, "fetching user 42")
    >>> str(err)
    'connection refused'
    >>> errtrace.get_trace(err)
    ['[error] connection refused', '[error] fetching user 42']

Foreign exceptions:

    >>> err = errtrace.wrapf(KeyError("id"), "parsing %s", "payload.json")
    >>> errtrace.cause(err)
    KeyError('id')

Source locations (off by default, set once at start-up):

    >>> errtrace.set_include_caller(True)

or ERRTRACE_INCLUDE_CALLER=1 in the environment.
"""

__version__ = "0.1.0"

from .config import (
    ChainConfig,
    ConfigIssue,
    get_config,
    load_config,
    set_config,
    set_include_caller,
)
from .core.chain import (
    Location,
    WrappedError,
    is_wrapped,
    new_root,
    new_rootf,
    wrap,
    wrapf,
    trace,
    tracef,
    wrap_errors,
    iter_chain,
    cause,
    unwrap,
    get_trace,
    details,
    is_,
    as_,
)

__all__ = [
    # Version
    "__version__",

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
    "cause",
    "unwrap",
    "get_trace",
    "details",
    "is_",
    "as_",

    # Types
    "Location",
    "WrappedError",
    "is_wrapped",

    # Configuration
    "ChainConfig",
    "ConfigIssue",
    "get_config",
    "load_config",
    "set_config",
    "set_include_caller",
]
