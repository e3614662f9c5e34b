from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never

from .._core import deprecated

if TYPE_CHECKING:
    from typing import TypeIs

    from .._transpose import OptionTransposedIter


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Presence wrapper: either `Some(value)` or `NONE`.

    Both variants support structural pattern matching.

    Example:
    ```python
    >>> import itertranspose as it
    >>> def describe(opt: it.Option[str]) -> str:
    ...     match opt:
    ...         case it.Some(value):
    ...             return value
    ...         case _:
    ...             return "nothing"
    >>> describe(it.Some("x")), describe(it.NONE)
    ('x', 'nothing')

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Wrap a plain Python optional, mapping `None` to `NONE`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `Some(value)` unless `value` is `None`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Option.from_([1, 2])
        Some(value=[1, 2])
        >>> it.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Some(2).is_some(), it.NONE.is_some()
        (True, False)

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.NONE.is_none(), it.Some(None).is_none()
        (True, False)

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Some("car").unwrap()
        'car'
        >>> it.NONE.unwrap()
        Traceback (most recent call last):
            ...
        itertranspose._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with `msg` if it is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or `default`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.NONE.unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes one with `f`."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Applies `f` to a contained value, leaving `NONE` untouched.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Some("abc").map(len)
        Some(value=3)
        >>> it.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def transpose_iter[V](self: Option[Iterable[V]]) -> OptionTransposedIter[V]:
        """Turn an `Option` of an iterable into an iterator of options.

        The resulting iterator is always **infinite**: `Some(v)` first yields the elements of `v` wrapped by `Some`, followed by `NONE` forever, while `NONE` yields `NONE` forever.

        Use `take_while_some()` or `unwrap_while_some()` to only produce as many items as the wrapped iterable holds.

        Nothing is pulled from the iterable until the first item is requested.

        Returns:
            OptionTransposedIter[V]: The lazy transposed iterator.

        Example:
        ```python
        >>> import itertranspose as it
        >>> ids = ["x", "y"]
        >>> list(zip(ids, it.Some(["A", "B"]).transpose_iter()))
        [('x', Some(value='A')), ('y', Some(value='B'))]
        >>> list(zip(ids, it.NONE.transpose_iter()))
        [('x', NONE), ('y', NONE)]

        ```
        """
        from .._transpose import OptionTransposedIter

        return OptionTransposedIter(self)

    @deprecated("`into_transposed_iter` was renamed, use `transpose_iter` instead.")
    def into_transposed_iter[V](self: Option[Iterable[V]]) -> OptionTransposedIter[V]:
        return self.transpose_iter()


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant holding a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than building new instances.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
