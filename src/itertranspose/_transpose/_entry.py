from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, overload

from .._results import Option, Result
from ._option_iter import OptionTransposedIter
from ._result_iter import ResultTransposedIter


@overload
def transposed_iter[T](wrapped: Option[Iterable[T]]) -> OptionTransposedIter[T]: ...
@overload
def transposed_iter[T, E](
    wrapped: Result[Iterable[T], E],
) -> ResultTransposedIter[T, E]: ...
def transposed_iter(
    wrapped: Option[Iterable[Any]] | Result[Iterable[Any], Any],
) -> OptionTransposedIter[Any] | ResultTransposedIter[Any, Any]:
    """A free function version of `Option.transpose_iter()` and `Result.transpose_iter()`.

    Args:
        wrapped (Option[Iterable[T]] | Result[Iterable[T], E]): The wrapped iterable.

    Returns:
        OptionTransposedIter[T] | ResultTransposedIter[T, E]: The matching lazy transposed iterator.

    Raises:
        TypeError: If `wrapped` is neither an `Option` nor a `Result`.

    Example:
    ```python
    >>> import itertranspose as it
    >>> it.transposed_iter(it.Some([1, 2]))
    OptionTransposedIter(Some(<list_iterator>))
    >>> it.transposed_iter(it.Err("boom"))
    ResultTransposedIter(Err(error='boom'))
    >>> it.transposed_iter([1, 2])
    Traceback (most recent call last):
        ...
    TypeError: expected an Option or a Result, got list

    ```
    """
    match wrapped:
        case Option():
            return wrapped.transpose_iter()
        case Result():
            return wrapped.transpose_iter()
        case _:
            msg = f"expected an Option or a Result, got {type(wrapped).__name__}"
            raise TypeError(msg)


def transpose_collect[C](
    wrapped: Option[Iterable[Any]] | Result[Iterable[Any], Any],
    factory: Callable[[Iterable[Any]], C] = list,  # type: ignore[assignment]
) -> C:
    """Transpose `wrapped` and materialize it into `factory`, up to the first `NONE`/`Err`.

    The container holds exactly as many items as the wrapped iterable, and none for `NONE` or `Err`.

    Example:
    ```python
    >>> import itertranspose as it
    >>> it.transpose_collect(it.Some([1, 2, 3]))
    [Some(value=1), Some(value=2), Some(value=3)]
    >>> it.transpose_collect(it.Err("boom"), tuple)
    ()

    ```
    """
    return transposed_iter(wrapped).collect(factory)
