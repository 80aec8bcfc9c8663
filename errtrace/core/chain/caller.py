# errtrace/core/chain/caller.py
"""
Caller location capture.

Reads the interpreter's frame stack, so it only costs anything when caller
capture is switched on.
"""

from __future__ import annotations

from types import FrameType
from typing import Optional
import inspect

from .node import Location


def capture_caller(depth: int = 0) -> Optional[Location]:
    """
    Location of a frame above the function calling capture_caller.

    Args:
        depth: 0 is the function that calls capture_caller, 1 its caller, ...

    Returns:
        Location, or None when frames are unavailable (some interpreters do
        not support them) or the stack is shallower than depth.
    """
    current = inspect.currentframe()
    if current is None:
        return None

    frame: Optional[FrameType] = current.f_back
    try:
        for _ in range(depth):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return Location(
            file=frame.f_code.co_filename,
            line=frame.f_lineno,
            function=frame.f_code.co_name,
        )
    finally:
        # Break the frame <-> local reference cycle
        del current, frame
