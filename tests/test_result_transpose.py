"""Tests for the Result-backed transposed iterator."""

import copy

import pytest

import itertranspose as it


class TestEngaged:
    """Iterators built from `Ok`."""

    def test_yields_elements_then_stops(self) -> None:
        """Exhaustion ends the sequence instead of producing an Err."""
        items = it.Ok([1, 2]).transpose_iter()
        assert next(items) == it.Ok(1)
        assert next(items) == it.Ok(2)
        with pytest.raises(StopIteration):
            next(items)
        with pytest.raises(StopIteration):
            next(items)

    def test_next_returns_option(self) -> None:
        """`next()` reports the end of the sequence as NONE."""
        items = it.Ok("a").transpose_iter()
        assert items.next() == it.Some(it.Ok("a"))
        assert items.next() == it.NONE
        assert items.next() == it.NONE
        assert items.is_engaged()

    def test_list(self) -> None:
        """A plain `list()` call terminates."""
        assert list(it.Ok(range(3)).transpose_iter()) == [it.Ok(0), it.Ok(1), it.Ok(2)]


class TestDisengaged:
    """Iterators built from `Err`."""

    @pytest.mark.parametrize("k", [1, 3, 500])
    def test_always_err(self, k: int) -> None:
        """Any number of calls yields the error."""
        error = ValueError("bad input")
        items = it.Err[list[int], ValueError](error).transpose_iter()
        produced = it.Iter(items).take(k).collect()
        assert len(produced) == k
        assert all(r.is_err() for r in produced)
        assert all(r.unwrap_err().args == error.args for r in produced)
        assert not items.is_engaged()

    def test_errors_are_independent_copies(self) -> None:
        """Emitted errors never share state with the retained one."""
        error = {"code": 1, "details": ["a"]}
        items = it.Err[list[int], dict[str, object]](error).transpose_iter()
        first = next(items).unwrap_err()
        first["details"].append("mutated")  # type: ignore[union-attr]
        second = next(items).unwrap_err()
        assert first is not error
        assert second is not first
        assert second == {"code": 1, "details": ["a"]}
        assert error == {"code": 1, "details": ["a"]}

    def test_exception_with_custom_init_is_replayed(self) -> None:
        """Exceptions that can't be rebuilt from their args are replayed as is."""

        class LoadError(Exception):
            def __init__(self, path: str, line: int) -> None:
                super().__init__(f"{path}:{line}")

        def load() -> list[int]:
            raise LoadError("values.txt", 3)

        items = it.Result.from_call(load).transpose_iter()
        first = next(items).unwrap_err()
        assert isinstance(first, LoadError)
        assert str(first) == "values.txt:3"
        assert first.__traceback__ is not None
        assert next(items).unwrap_err() is first
        assert items.take_while_ok().collect() == []

    def test_custom_clone(self) -> None:
        """An explicit clone function is honored."""
        error = ["shared"]
        items = it.Err[list[int], list[str]](error).transpose_iter(clone=lambda e: e)
        assert next(items).unwrap_err() is error

    def test_config_clone(self) -> None:
        """The configured clone function is read at construction."""
        previous = it.set_config(error_clone=copy.copy)
        try:
            items = it.Err[list[int], list[list[str]]]([["inner"]]).transpose_iter()
        finally:
            it.set_config(error_clone=previous.error_clone)
        produced = next(items).unwrap_err()
        assert produced == [["inner"]]
        assert produced[0] is next(items).unwrap_err()[0]


class TestCombinators:
    """take_while_ok, unwrap_while_ok and collect."""

    def test_take_while_ok(self) -> None:
        """Ok items are kept, Err stops at once."""
        assert it.Ok([1, 2]).transpose_iter().take_while_ok().collect() == [
            it.Ok(1),
            it.Ok(2),
        ]
        assert it.Err("e").transpose_iter().take_while_ok().collect() == []

    def test_unwrap_while_ok(self) -> None:
        """Values come out bare."""
        assert it.Ok([1, 2]).transpose_iter().unwrap_while_ok().collect() == [1, 2]
        assert it.Err("e").transpose_iter().unwrap_while_ok().collect() == []

    def test_collect(self) -> None:
        """Collecting is finite on both variants."""
        assert it.Ok(["a"]).transpose_iter().collect(tuple) == (it.Ok("a"),)
        assert it.Err(RuntimeError("x")).transpose_iter().collect() == []

    def test_collect_into_set(self) -> None:
        """Items are hashable."""
        assert it.Ok([1, 2, 1]).transpose_iter().collect(set) == {it.Ok(1), it.Ok(2)}


def test_repr() -> None:
    """The repr shows the state."""
    items = it.Ok([1]).transpose_iter()
    assert repr(items) == "ResultTransposedIter(Ok(<list_iterator>))"
    items.collect()
    assert repr(items) == "ResultTransposedIter(Ok(spent))"
    assert repr(it.Err("e").transpose_iter()) == "ResultTransposedIter(Err(error='e'))"
