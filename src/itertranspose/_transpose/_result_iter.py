from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from operator import methodcaller

from .._core import CommonBase, get_config
from .._iter import Iter
from .._results import Err, Ok, Option, Result

_MISSING = object()


class ResultTransposedIter[T, E](CommonBase[Result[Iterator[T], E]]):
    """Iterator of `Result[T, E]` built from a `Result` of an iterable.

    See `Result.transpose_iter()`.

    - built from `Ok(v)`, it yields `Ok(x)` for each element `x` of `v`, then stops.
    - built from `Err(e)`, it yields `Err` forever.

    Each `Err` holds a duplicate of `e` made by `clone`. The default, `clone_error`, deep-copies plain values and shares exceptions as is, so they keep their `__traceback__`, `__cause__` and `__context__`; a `copy.deepcopy` clone would drop them.

    Args:
        data (Result[Iterable[T], E]): The fallible iterable to transpose.
        clone (Callable[[E], E] | None): How to duplicate the error. Defaults to `get_config().error_clone`.
    """

    __slots__ = ("_clone", "_spent")

    def __init__(
        self, data: Result[Iterable[T], E], clone: Callable[[E], E] | None = None
    ) -> None:
        self._inner = data.map(iter)
        self._clone = clone if clone is not None else get_config().error_clone
        self._spent = False

    def __iter__(self) -> ResultTransposedIter[T, E]:
        return self

    def __next__(self) -> Result[T, E]:
        match self._inner:
            case Ok(cursor):
                if self._spent:
                    raise StopIteration
                value = next(cursor, _MISSING)
                if value is _MISSING:
                    self._spent = True
                    raise StopIteration
                return Ok(value)  # type: ignore[arg-type]
            case Err(error):
                return Err(self._clone(error))
            case _:
                raise RuntimeError("unreachable")

    def __repr__(self) -> str:
        match self._inner:
            case Ok(cursor):
                state = "spent" if self._spent else f"<{type(cursor).__name__}>"
                return f"{self.__class__.__name__}(Ok({state}))"
            case _:
                return f"{self.__class__.__name__}({self._inner!r})"

    def next(self) -> Option[Result[T, E]]:
        """Produce the next item, or `NONE` once an `Ok` source is exhausted.

        Example:
        ```python
        >>> import itertranspose as it
        >>> items = it.Ok([1]).transpose_iter()
        >>> items.next(), items.next()
        (Some(value=Ok(value=1)), NONE)
        >>> it.Err("boom").transpose_iter().next()
        Some(value=Err(error='boom'))

        ```
        """
        return Option.from_(next(self, None))

    def is_engaged(self) -> bool:
        """Whether the iterator was built from `Ok`."""
        return self._inner.is_ok()

    def take_while_ok(self) -> Iter[Result[T, E]]:
        """Take items while they are `Ok`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Ok([1, 2]).transpose_iter().take_while_ok().collect()
        [Ok(value=1), Ok(value=2)]
        >>> it.Err("boom").transpose_iter().take_while_ok().collect()
        []

        ```
        """
        return Iter(self).take_while(methodcaller("is_ok"))

    def unwrap_while_ok(self) -> Iter[T]:
        """Take items while they are `Ok`, and unwrap them.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Ok([1, 2]).transpose_iter().unwrap_while_ok().collect()
        [1, 2]

        ```
        """
        return self.take_while_ok().map(methodcaller("unwrap"))

    def collect[C](self, factory: Callable[[Iterable[Result[T, E]]], C] = list) -> C:  # type: ignore[assignment]
        """Materialize the items up to the first `Err` into `factory`.

        Args:
            factory (Callable[[Iterable[Result[T, E]]], C]): The container constructor. Defaults to `list`.

        Returns:
            C: A finite container, empty if built from `Err`.
        """
        return self.take_while_ok().collect(factory)
