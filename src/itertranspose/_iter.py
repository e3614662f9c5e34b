from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase, get_config
from ._results import NONE, Option, Some

_MISSING = object()


class Iter[T](CommonBase[Iterator[T]]):
    """A thin, chainable wrapper around a Python `Iterator`.

    It is what the truncating combinators of the transposed iterators hand back.

    Like any iterator it is single-use: once exhausted, it cannot be reset.

    Args:
        data (Iterable[T]): The data to iterate over.
    """

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        head, self._inner = mit.spy(self._inner, get_config().max_repr_items + 1)
        return f"{self.__class__.__name__}({get_config().iter_repr(head)})"

    def next(self) -> Option[T]:
        """Return the next element, or `NONE` once exhausted.

        Example:
        ```python
        >>> import itertranspose as it
        >>> data = it.Iter([1])
        >>> data.next(), data.next()
        (Some(value=1), NONE)

        ```
        """
        value = next(self._inner, _MISSING)
        if value is _MISSING:
            return NONE
        return Some(value)  # type: ignore[arg-type]

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Lazily apply `func` to each element.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Iter([1, 2]).map(str).collect()
        ['1', '2']

        ```
        """
        return Iter(map(func, self._inner))

    def take(self, n: int) -> Iter[T]:
        """Lazily keep at most `n` elements.

        This is the way to bound an infinite transposed iterator.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Iter(it.NONE.transpose_iter()).take(2).collect()
        [NONE, NONE]

        ```
        """
        return Iter(cz.itertoolz.take(n, self._inner))

    def take_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Lazily yield elements while `predicate` holds, then stop for good."""
        return Iter(itertools.takewhile(predicate, self._inner))

    def zip[U](self, other: Iterable[U]) -> Iter[tuple[T, U]]:
        """Pair elements with those of `other`, stopping at the shortest.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Iter(["x", "y"]).zip(it.Some(["A"]).transpose_iter()).collect()
        [('x', Some(value='A')), ('y', NONE)]

        ```
        """
        return Iter(zip(self._inner, other))

    def count(self) -> int:
        """Consume the iterator and return how many elements it held."""
        return mit.ilen(self._inner)

    def collect[C](self, factory: Callable[[Iterable[T]], C] = list) -> C:  # type: ignore[assignment]
        """Consume the iterator into a container built by `factory`.

        Args:
            factory (Callable[[Iterable[T]], C]): The container constructor. Defaults to `list`.

        Returns:
            C: The materialized container.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Iter([3, 1, 3]).collect(sorted)
        [1, 3, 3]

        ```
        """
        return factory(self._inner)
