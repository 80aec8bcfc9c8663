# errtrace/core/chain/builder.py
"""
Helper functions to build error chains.

new_root/new_rootf start a chain, wrap/wrapf add context over an existing
error, trace/tracef add an annotation node that always records where it was
made. Wrapping None gives None: there is nothing to add context to.

Every constructor takes an optional ChainConfig; without one the process-wide
default is read at call time.
"""

from __future__ import annotations

from typing import Any, Optional

from errtrace.config import ChainConfig, get_config

from .caller import capture_caller
from .fmt import safe_str, sprintf
from .node import WrappedError


def _build(
    message: str,
    predecessor: Optional[BaseException],
    config: Optional[ChainConfig],
    *,
    always_capture: bool = False,
    skip: int = 0,
) -> WrappedError:
    """
    Build a node, capturing the location of whoever called the public
    constructor (skip adds frames between that constructor and _build).
    """
    if config is None:
        config = get_config()

    location = None
    if always_capture or config.include_caller:
        # 0 = _build, 1 = public constructor, 2 = its caller
        location = capture_caller(2 + skip)

    return WrappedError(message=safe_str(message), predecessor=predecessor, location=location)


def new_root(message: str, *, config: Optional[ChainConfig] = None) -> WrappedError:
    """Create the root of a new chain."""
    return _build(message, None, config)


def new_rootf(format: str, *args: Any, config: Optional[ChainConfig] = None) -> WrappedError:
    """Create the root of a new chain with a printf-style message."""
    return _build(sprintf(format, *args), None, config)


def wrap(
    err: Optional[BaseException],
    message: str,
    *,
    config: Optional[ChainConfig] = None,
) -> Optional[WrappedError]:
    """
    Add context to err.

    Returns None when err is None, otherwise a new node whose predecessor is
    err. err may be any exception, not only one built by this library.
    """
    if err is None:
        return None
    return _build(message, err, config)


def wrapf(
    err: Optional[BaseException],
    format: str,
    *args: Any,
    config: Optional[ChainConfig] = None,
) -> Optional[WrappedError]:
    """Add printf-style context to err; None when err is None."""
    if err is None:
        return None
    return _build(sprintf(format, *args), err, config)


def trace(
    err: Optional[BaseException],
    message: str = "",
    *,
    config: Optional[ChainConfig] = None,
) -> Optional[WrappedError]:
    """
    Mark that err passed through the calling code.

    The node records the caller's location even when include_caller is off;
    the message is optional. None when err is None.
    """
    if err is None:
        return None
    return _build(message, err, config, always_capture=True)


def tracef(
    err: Optional[BaseException],
    format: str,
    *args: Any,
    config: Optional[ChainConfig] = None,
) -> Optional[WrappedError]:
    """trace() with a printf-style message."""
    if err is None:
        return None
    return _build(sprintf(format, *args), err, config, always_capture=True)
