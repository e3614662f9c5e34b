import copy
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any


def clone_error[E](error: E) -> E:
    """Duplicate a replayed error.

    Exceptions are shared by reference: copying one calls its `__init__` with its `args`, which fails for many custom exceptions, and drops its `__traceback__`, `__cause__` and `__context__`.
    Any other value is deep-copied.

    Example:
    ```python
    >>> import itertranspose as it
    >>> error = ValueError("boom")
    >>> it.clone_error(error) is error
    True
    >>> details = {"lines": [3]}
    >>> it.clone_error(details) is details
    False

    ```
    """
    if isinstance(error, BaseException):
        return error
    return copy.deepcopy(error)


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings of the package.

    Adapters read it once, when they are built.

    Args:
        max_repr_items (int): Number of pending items an `Iter` repr may preview.
        error_clone (Callable[[Any], Any]): Function duplicating the error replayed by a failed `ResultTransposedIter`.
            Defaults to `clone_error`. Note that `copy.deepcopy` rebuilds exceptions without their traceback or chained causes.
    """

    max_repr_items: int = 10
    error_clone: Callable[[Any], Any] = clone_error

    def iter_repr(self, head: Sequence[object]) -> str:
        items = ", ".join(repr(x) for x in head[: self.max_repr_items])
        if len(head) > self.max_repr_items:
            return f"{items}, ..."
        return items


_CONFIG = Config()


def get_config() -> Config:
    """Return the current configuration.

    Example:
    ```python
    >>> import itertranspose as it
    >>> it.get_config().max_repr_items
    10

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace the current configuration with a copy carrying `changes`.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The previous configuration, handy to restore it later.

    Example:
    ```python
    >>> import itertranspose as it
    >>> previous = it.set_config(max_repr_items=2)
    >>> it.Iter(iter([1, 2, 3]))
    Iter(1, 2, ...)
    >>> _ = it.set_config(max_repr_items=previous.max_repr_items)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return previous
