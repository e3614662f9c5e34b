from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from operator import methodcaller

from .._core import CommonBase
from .._iter import Iter
from .._results import NONE, Option, Some

_MISSING = object()


class OptionTransposedIter[T](CommonBase[Option[Iterator[T]]]):
    """Iterator of `Option[T]` built from an `Option` of an iterable.

    See `Option.transpose_iter()`.

    The iterator never ends:
    - built from `Some(v)`, it yields `Some(x)` for each element `x` of `v`, then `NONE` forever.
    - built from `NONE`, it yields `NONE` forever.

    Once the wrapped iterable is exhausted it is never advanced again.

    Args:
        data (Option[Iterable[T]]): The optional iterable to transpose.
    """

    __slots__ = ("_spent",)

    def __init__(self, data: Option[Iterable[T]]) -> None:
        self._inner = data.map(iter)
        self._spent = False

    def __iter__(self) -> OptionTransposedIter[T]:
        return self

    def __next__(self) -> Option[T]:
        match self._inner:
            case Some(cursor) if not self._spent:
                value = next(cursor, _MISSING)
                if value is not _MISSING:
                    return Some(value)  # type: ignore[arg-type]
                self._spent = True
                return NONE
            case _:
                return NONE

    def __repr__(self) -> str:
        match self._inner:
            case Some(cursor):
                state = "spent" if self._spent else f"<{type(cursor).__name__}>"
                return f"{self.__class__.__name__}(Some({state}))"
            case _:
                return f"{self.__class__.__name__}(NONE)"

    def next(self) -> Option[T]:
        """Produce the next item.

        Unlike `Iter.next()`, the item is returned as is: this iterator can't run out.

        Example:
        ```python
        >>> import itertranspose as it
        >>> items = it.Some([1]).transpose_iter()
        >>> items.next(), items.next(), items.next()
        (Some(value=1), NONE, NONE)

        ```
        """
        return self.__next__()

    def is_engaged(self) -> bool:
        """Whether the iterator was built from `Some`.

        It stays `True` after the wrapped iterable runs out.
        """
        return self._inner.is_some()

    def take_while_some(self) -> Iter[Option[T]]:
        """Take items while they are `Some`.

        Shorthand for `take_while(Option.is_some)`; the result is finite and has as many items as the wrapped iterable.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Some([1, 2]).transpose_iter().take_while_some().collect()
        [Some(value=1), Some(value=2)]
        >>> it.NONE.transpose_iter().take_while_some().collect()
        []

        ```
        """
        return Iter(self).take_while(methodcaller("is_some"))

    def unwrap_while_some(self) -> Iter[T]:
        """Take items while they are `Some`, and unwrap them.

        Iterating `Some(v)` this way is equivalent to iterating `v` itself.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Some(range(3)).transpose_iter().unwrap_while_some().collect()
        [0, 1, 2]

        ```
        """
        return self.take_while_some().map(methodcaller("unwrap"))

    def collect[C](self, factory: Callable[[Iterable[Option[T]]], C] = list) -> C:  # type: ignore[assignment]
        """Materialize the items up to the first `NONE` into `factory`.

        Args:
            factory (Callable[[Iterable[Option[T]]], C]): The container constructor. Defaults to `list`.

        Returns:
            C: A finite container, empty if built from `NONE`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Some("ab").transpose_iter().collect(tuple)
        (Some(value='a'), Some(value='b'))

        ```
        """
        return self.take_while_some().collect(factory)
