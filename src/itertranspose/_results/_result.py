from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Never, cast

from .._core import deprecated
from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from typing import TypeIs

    from .._transpose import ResultTransposedIter


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """Outcome wrapper: either `Ok(value)` or `Err(error)`.

    The error is plain data, it is never raised by the wrapper itself.
    """

    __slots__ = ()

    @staticmethod
    def from_call[**P, V](
        func: Callable[P, V], *args: P.args, **kwargs: P.kwargs
    ) -> Result[V, Exception]:
        """Call `func` and capture its outcome.

        Any `Exception` raised by `func` is stored in an `Err`.

        Args:
            func (Callable[P, V]): The fallible callable.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Result[V, Exception]: `Ok(func(*args, **kwargs))`, or `Err(exc)`.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Result.from_call(int, "12")
        Ok(value=12)
        >>> it.Result.from_call(int, "twelve").is_err()
        True

        ```
        """
        try:
            return Ok(func(*args, **kwargs))
        except Exception as e:  # noqa: BLE001
            return Err(e)

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Ok(1).unwrap()
        1
        >>> it.Err("boom").unwrap()
        Traceback (most recent call last):
            ...
        itertranspose._results._result.ResultUnwrapError: called `unwrap` on Err: 'boom'

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError with `msg` and the error.

        Args:
            msg (str): The message to display if the result is Err.
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or `default`."""
        return self.unwrap() if self.is_ok() else default

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Applies `f` to a contained Ok value, leaving Err untouched.

        Example:
        ```python
        >>> import itertranspose as it
        >>> it.Ok("abc").map(len)
        Ok(value=3)
        >>> it.Err("boom").map(len)
        Err(error='boom')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Applies `f` to a contained Err value, leaving Ok untouched."""
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def ok(self) -> Option[T]:
        """Converts to an `Option`, discarding the error."""
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts to an `Option` of the error, discarding the value."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE

    def transpose_iter[V](
        self: Result[Iterable[V], E], clone: Callable[[E], E] | None = None
    ) -> ResultTransposedIter[V, E]:
        """Turn a `Result` of an iterable into an iterator of results.

        - `Ok(v)` yields the elements of `v` wrapped by `Ok`, then stops.
        - `Err(e)` yields `Err` forever, each one carrying a duplicate of `e` (exceptions are shared, see `clone_error`).

        Use `take_while_ok()` or `unwrap_while_ok()` to stop at the first `Err`.

        Args:
            clone (Callable[[E], E] | None): How to duplicate the error. Defaults to `get_config().error_clone`.

        Returns:
            ResultTransposedIter[V, E]: The lazy transposed iterator.

        Example:
        ```python
        >>> import itertranspose as it
        >>> list(it.Ok([1, 2]).transpose_iter())
        [Ok(value=1), Ok(value=2)]
        >>> list(zip("ab", it.Err("boom").transpose_iter()))
        [('a', Err(error='boom')), ('b', Err(error='boom'))]

        ```
        """
        from .._transpose import ResultTransposedIter

        return ResultTransposedIter(self, clone)

    @deprecated("`into_transposed_iter` was renamed, use `transpose_iter` instead.")
    def into_transposed_iter[V](
        self: Result[Iterable[V], E], clone: Callable[[E], E] | None = None
    ) -> ResultTransposedIter[V, E]:
        return self.transpose_iter(clone)


@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
