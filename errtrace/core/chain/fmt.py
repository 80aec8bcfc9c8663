# errtrace/core/chain/fmt.py
"""
Message helpers that never raise.

Chain construction and inspection must not fail, whatever the caller passes
in: a broken format string or a foreign exception whose __str__ blows up still
has to produce some text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import logging


logger = logging.getLogger(__name__)

BAD_FORMAT_MARKER = "%!(BADFORMAT"


def safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return f"<unstringifiable {type(x).__name__}>"


def safe_repr(x: Any) -> str:
    try:
        return repr(x)
    except Exception:
        return f"<unrepresentable {type(x).__name__}>"


def sprintf(format: str, *args: Any) -> str:
    """
    printf-style formatting (``format % args``).

    Follows the stdlib logging convention: without args the format is returned
    as is, and a single non-empty mapping is used for ``%(name)s`` lookups.
    Malformed directives or mismatched args do not raise; the literal format is
    kept and the args are appended after a ``%!(BADFORMAT`` marker.
    """
    format = safe_str(format)
    if not args:
        return format

    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]

    try:
        return format % values
    except Exception as e:
        logger.debug("Cannot format %r with %d argument(s): %s", format, len(args), e)
        rendered = ", ".join(safe_repr(a) for a in args)
        return f"{format} {BAD_FORMAT_MARKER} {rendered})"
