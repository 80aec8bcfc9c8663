# errtrace/core/chain/node.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .fmt import safe_str


# Set once in __init__, read-only afterwards
_SEALED_FIELDS = frozenset({"message", "predecessor", "location"})


@dataclass(frozen=True)
class Location:
    """Source position of the code that built a chain node."""
    file: str
    line: int
    function: str = ""

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(eq=False)
class WrappedError(Exception):
    """
    One step of an error chain.

    A node with no predecessor is a root: its message is the error text of
    the whole chain. A node over another error adds context to it; str() of
    any node returns the text of the chain's cause, so wrapping never changes
    what the error says, only what its trace shows.

    Nodes compare by identity and cannot be modified once built.
    """
    message: str = ""
    predecessor: Optional[BaseException] = field(default=None, repr=False)
    location: Optional[Location] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.predecessor is not None:
            # Python's traceback printer follows the chain too
            self.__cause__ = self.predecessor

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _SEALED_FIELDS and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        node = self
        while node.predecessor is not None:
            if not isinstance(node.predecessor, WrappedError):
                return safe_str(node.predecessor)
            node = node.predecessor
        return safe_str(node.message)

    def __reduce__(self) -> Tuple[Any, ...]:
        # Keep instance state such as __notes__ from add_note()
        state = {k: v for k, v in self.__dict__.items() if k not in _SEALED_FIELDS}
        return (type(self), (self.message, self.predecessor, self.location), state)

    @property
    def is_root(self) -> bool:
        return self.predecessor is None

    def unwrap(self) -> BaseException:
        """
        Immediate predecessor, or the node itself when it is a root.

        A root never unwraps to None, so ``while e is not None: e = e.unwrap()``
        does not stop on one. Stop when ``e.unwrap() is e``, or use
        iter_chain()/cause() instead.
        """
        if self.predecessor is None:
            return self
        return self.predecessor


def is_wrapped(err: Any) -> bool:
    """True if err is a node built by this library (as opposed to a foreign error)."""
    return isinstance(err, WrappedError)
