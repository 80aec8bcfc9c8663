# errtrace/core/chain/context.py
from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar
import functools

from errtrace.config import ChainConfig

from .builder import _build
from .fmt import sprintf
from .inspection import ExceptionTypes
from .node import WrappedError


F = TypeVar("F", bound=Callable[..., Any])


class wrap_errors:
    """
    Wrap exceptions escaping a block or function with a message.

    Usable as a context manager::

        with wrap_errors("loading %s", path):
            data = read(path)

    or as a decorator::

        @wrap_errors("syncing account")
        def sync(account): ...

    Exceptions matching ``catch`` (and WrappedError chains, which are
    Exceptions) are re-raised as a new node over the original, chained with
    ``from``. Anything else propagates untouched. The recorded location is
    the ``with`` statement or the call of the decorated function.
    """

    def __init__(
        self,
        format: str,
        *args: Any,
        catch: ExceptionTypes = Exception,
        config: Optional[ChainConfig] = None,
    ) -> None:
        self.format = format
        self.args = args
        self.catch = catch
        self.config = config

    def _wrap(self, exc: BaseException) -> WrappedError:
        # 0 = _build, 1 = _wrap, 2 = __exit__/wrapper, 3 = user code
        return _build(sprintf(self.format, *self.args), exc, self.config, skip=1)

    def __enter__(self) -> "wrap_errors":
        return self

    def __exit__(self, exc_type: Any, exc: Optional[BaseException], tb: Any) -> bool:
        if exc is None or not isinstance(exc, self.catch):
            return False
        raise self._wrap(exc) from exc

    def __call__(self, func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except self.catch as exc:
                raise self._wrap(exc) from exc

        return wrapper  # type: ignore[return-value]
