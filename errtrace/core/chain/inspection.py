# errtrace/core/chain/inspection.py
"""
Read side of error chains.

cause/unwrap/get_trace/details only follow links built by this library: a
foreign error ends the chain and is treated as opaque text. is_/as_ search
the wider exception tree (foreign __cause__ links and exception groups too),
the way generic exception walkers do.

None of these functions mutate the chain or raise, whatever they are given.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple, Type, Union
import logging

from .fmt import safe_str
from .node import WrappedError


logger = logging.getLogger(__name__)

ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Yield err and its predecessors, outermost (most recent wrap) first.

    Stops at a root node or at the first foreign error.
    """
    while err is not None:
        yield err
        if not isinstance(err, WrappedError):
            return
        err = err.predecessor


def cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    The original error at the end of the chain.

    A root node is its own cause; a foreign error (wrapped or passed
    directly) is returned as is.
    """
    while isinstance(err, WrappedError) and err.predecessor is not None:
        err = err.predecessor
    return err


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    One step down the chain.

    Returns the immediate predecessor of a wrapping node, and err itself for
    root nodes and foreign errors.
    """
    if err is None:
        return None
    if isinstance(err, WrappedError):
        return err.unwrap()
    return err


def format_line(err: BaseException) -> str:
    """Trace line for a single chain element."""
    if not isinstance(err, WrappedError):
        return safe_str(err)

    message = safe_str(err.message)
    line = f"[error] {message}"
    if err.location is not None:
        line = f"{err.location} {line}"
    if not message:
        line = line.rstrip()
    return line


def get_trace(err: Optional[BaseException]) -> List[str]:
    """
    One line per step of the chain, originating error first and most recent
    context last, the order a traceback reads in.

    Returns an empty list for None.
    """
    lines = [format_line(e) for e in iter_chain(err)]
    lines.reverse()
    return lines


def details(err: Optional[BaseException]) -> str:
    """get_trace() joined with newlines, ready for a log message."""
    return "\n".join(get_trace(err))


def _links(err: Any) -> List[Any]:
    if isinstance(err, WrappedError):
        return [err.predecessor]
    links: List[Any] = []
    if isinstance(err, BaseExceptionGroup):
        links.extend(err.exceptions)
    links.append(getattr(err, "__cause__", None))
    return links


def walk(err: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Depth-first, pre-order walk of the exception tree rooted at err.

    Each object is visited once, so a foreign error that chains to itself
    cannot make the walk loop.
    """
    seen = set()
    stack: List[Any] = [err]
    while stack:
        current = stack.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(_links(current)))


def _matches(err: Any, target: Any) -> bool:
    if err is target:
        return True
    try:
        return bool(err == target)
    except Exception:
        return False


def is_(err: Optional[BaseException], target: Optional[BaseException]) -> bool:
    """
    Report whether any error in err's tree is (or equals) target.

    Two None values match each other; None never matches an error.
    """
    if err is None or target is None:
        return err is target
    return any(_matches(e, target) for e in walk(err))


def as_(err: Optional[BaseException], target_type: ExceptionTypes) -> Optional[BaseException]:
    """
    First error in err's tree that is an instance of target_type.

    Returns None when nothing matches (or target_type is not a class), so the
    result can be used directly as a boolean.
    """
    if not _is_class_filter(target_type):
        logger.debug("as_() expects an exception class or tuple of classes, got %r", target_type)
        return None
    for e in walk(err):
        if isinstance(e, target_type):
            return e
    return None


def _is_class_filter(target_type: Any) -> bool:
    if isinstance(target_type, type):
        return True
    return isinstance(target_type, tuple) and all(isinstance(t, type) for t in target_type)
