"""Tests for the Option-backed transposed iterator."""

from collections import deque
from collections.abc import Iterator

import pytest

import itertranspose as it


class TestEngaged:
    """Iterators built from `Some`."""

    def test_yields_elements_then_none(self) -> None:
        """Each element comes wrapped in Some, then NONE."""
        items = it.Some([1, 2, 3]).transpose_iter()
        assert [next(items) for _ in range(3)] == [it.Some(1), it.Some(2), it.Some(3)]
        assert next(items) == it.NONE

    def test_keeps_yielding_none_after_exhaustion(self) -> None:
        """The iterator is infinite."""
        items = it.Some(["a"]).transpose_iter()
        next(items)
        assert [next(items) for _ in range(100)] == [it.NONE] * 100

    def test_empty_source_behaves_like_none(self) -> None:
        """Some of an empty iterable starts with NONE right away."""
        assert it.Some([]).transpose_iter().next() == it.NONE
        assert it.NONE.transpose_iter().next() == it.NONE

    def test_none_elements_are_kept(self) -> None:
        """A `None` element is a value, not the end of the data."""
        items = it.Some([None, 1]).transpose_iter()
        assert items.collect() == [it.Some(None), it.Some(1)]

    def test_cursor_not_advanced_once_spent(self) -> None:
        """An exhausted source is never polled again."""
        calls: list[int] = []

        class Counting(Iterator[int]):
            def __next__(self) -> int:
                calls.append(1)
                raise StopIteration

        items = it.Some(Counting()).transpose_iter()
        for _ in range(5):
            items.next()
        assert len(calls) == 1

    def test_construction_is_lazy(self) -> None:
        """Nothing is pulled from the source before the first item."""
        pulled: list[int] = []

        def source() -> Iterator[int]:
            for x in range(3):
                pulled.append(x)
                yield x

        items = it.Some(source()).transpose_iter()
        assert pulled == []
        items.next()
        assert pulled == [0]

    def test_is_engaged_is_fixed(self) -> None:
        """The discriminant does not change with exhaustion."""
        items = it.Some([1]).transpose_iter()
        assert items.is_engaged()
        items.collect()
        assert items.is_engaged()
        assert next(items) == it.NONE


class TestDisengaged:
    """Iterators built from `NONE`."""

    @pytest.mark.parametrize("k", [1, 5, 1000])
    def test_always_none(self, k: int) -> None:
        """Any number of calls yields NONE."""
        items = it.NONE.transpose_iter()
        assert it.Iter(items).take(k).collect() == [it.NONE] * k
        assert not items.is_engaged()


class TestCombinators:
    """take_while_some, unwrap_while_some and collect."""

    def test_take_while_some(self) -> None:
        """Stops at the first NONE."""
        assert it.Some([1, 2, 3]).transpose_iter().take_while_some().collect() == [
            it.Some(1),
            it.Some(2),
            it.Some(3),
        ]
        assert it.NONE.transpose_iter().take_while_some().collect() == []

    def test_unwrap_while_some(self) -> None:
        """Equivalent to iterating the wrapped iterable."""
        data = range(5)
        assert it.Some(data).transpose_iter().unwrap_while_some().collect() == list(data)
        assert it.NONE.transpose_iter().unwrap_while_some().collect() == []

    @pytest.mark.parametrize("data", [[], ["a"], [1.5, 2.5], list("hello")])
    def test_collect_keeps_length(self, data: list[object]) -> None:
        """The collected container has the source's length."""
        assert len(it.Some(data).transpose_iter().collect()) == len(data)

    def test_collect_custom_container(self) -> None:
        """Any container factory can be used."""
        collected = it.Some((1, 2)).transpose_iter().collect(deque)
        assert collected == deque([it.Some(1), it.Some(2)])
        assert it.NONE.transpose_iter().collect(tuple) == ()

    def test_collect_into_set(self) -> None:
        """Items are hashable."""
        assert it.Some([1, 2, 1]).transpose_iter().collect(set) == {it.Some(1), it.Some(2)}
        assert it.NONE.transpose_iter().collect(frozenset) == frozenset()

    def test_unwrap_count(self) -> None:
        """The truncated iterator is finite."""
        assert it.Some("abcd").transpose_iter().unwrap_while_some().count() == 4


class TestZipWithRequired:
    """Pairing required ids with optional data."""

    def test_present(self) -> None:
        """Each id receives its value."""
        paired = it.Iter(["x", "y"]).zip(it.Some(["A", "B"]).transpose_iter())
        assert dict(paired.collect()) == {"x": it.Some("A"), "y": it.Some("B")}

    def test_absent(self) -> None:
        """Each id receives NONE."""
        paired = it.Iter(["x", "y"]).zip(it.NONE.transpose_iter())
        assert dict(paired.collect()) == {"x": it.NONE, "y": it.NONE}

    def test_short_optional_data(self) -> None:
        """Missing trailing values become NONE."""
        paired = zip(["x", "y", "z"], it.Some(["A"]).transpose_iter(), strict=False)
        assert list(paired) == [("x", it.Some("A")), ("y", it.NONE), ("z", it.NONE)]


def test_repr() -> None:
    """The repr shows the state without consuming anything."""
    items = it.Some([1]).transpose_iter()
    assert repr(items) == "OptionTransposedIter(Some(<list_iterator>))"
    assert items.next() == it.Some(1)
    items.next()
    assert repr(items) == "OptionTransposedIter(Some(spent))"
    assert repr(it.NONE.transpose_iter()) == "OptionTransposedIter(NONE)"
