"""Tests for the source constructors of `Iter`."""

import pytest

import lazyfn as lf


class TestOver:
    """Test `Iter.over` on the various kinds of input."""

    def test_round_trip(self) -> None:
        """Test that a collection comes back unchanged."""
        data = [1, "a", None, 2.5]
        assert lf.Iter.over(data).to_array() == data

    def test_snapshot(self) -> None:
        """Test that later changes to the collection are not seen."""
        data = [1, 2]
        it = lf.Iter.over(data)
        data.append(3)
        assert it.to_array() == [1, 2]

    def test_iter_is_returned_unchanged(self) -> None:
        """Test that an existing Iter is passed through."""
        it = lf.Iter.counter()
        assert lf.Iter.over(it) is it

    def test_python_iterator_is_driven_lazily(self) -> None:
        """Test that a Python iterator is pulled on demand, not copied."""
        pulled: list[int] = []

        def numbers():  # noqa: ANN202
            for i in range(1, 4):
                pulled.append(i)
                yield i

        it = lf.Iter.over(numbers())
        assert it.next().unwrap() == 1
        assert pulled == [1]

    def test_not_iterable(self) -> None:
        """Test that a non-iterable is rejected at construction."""
        with pytest.raises(TypeError, match="param iterable expected iterable, got: 5"):
            lf.Iter.over(5)

    def test_none_values_are_kept(self) -> None:
        """Test that stored None values do not end the iteration."""
        assert lf.Iter.over([None, None]).count() == 2

    def test_repr(self) -> None:
        """Test the repr of a snapshot source."""
        assert repr(lf.Iter.over((1, 2, 3))) == "Over(1, 2, 3)"
        assert repr(lf.Iter.over(())) == "Over()"

    def test_repr_is_truncated(self) -> None:
        """Test that repr_max_items limits the items shown."""
        previous = lf.set_config(repr_max_items=2)
        try:
            assert repr(lf.Iter.over(range(5))) == "Over(0, 1, ...)"
        finally:
            lf.set_config(repr_max_items=previous.repr_max_items)


class TestCounter:
    """Test the unbounded counter."""

    def test_default(self) -> None:
        """Test that the counter starts at one."""
        assert lf.Iter.counter().take(5).to_array() == [1, 2, 3, 4, 5]

    def test_start_and_step(self) -> None:
        """Test a custom start and negative step."""
        assert lf.Iter.counter(10, -3).take(3).to_array() == [10, 7, 4]

    def test_zero_step(self) -> None:
        """Test that a zero step is rejected."""
        with pytest.raises(ValueError, match="param step must not be zero"):
            lf.Iter.counter(1, 0)

    def test_non_number(self) -> None:
        """Test that a non-numeric start is rejected."""
        with pytest.raises(TypeError, match="param start expected number"):
            lf.Iter.counter("1")  # type: ignore[arg-type]


class TestRange:
    """Test the inclusive numeric range."""

    def test_stop_only(self) -> None:
        """Test that a single bound is the stop."""
        assert lf.Iter.range(3).to_array() == [1, 2, 3]

    def test_start_stop(self) -> None:
        """Test both bounds being inclusive."""
        assert lf.Iter.range(2, 4).to_array() == [2, 3, 4]

    def test_step_not_landing_on_stop(self) -> None:
        """Test a step that overshoots the stop."""
        assert lf.Iter.range(1, 10, 4).to_array() == [1, 5, 9]
        assert lf.Iter.range(1, 10, 2).to_array() == [1, 3, 5, 7, 9]

    def test_descending(self) -> None:
        """Test a negative step."""
        assert lf.Iter.range(5, 1, -2).to_array() == [5, 3, 1]
        assert lf.Iter.range(10, 1, -3).to_array() == [10, 7, 4, 1]

    def test_empty_when_direction_mismatches(self) -> None:
        """Test that a step going away from the stop yields nothing."""
        assert lf.Iter.range(3, 1).to_array() == []
        assert lf.Iter.range(1, 3, -1).to_array() == []

    def test_floats(self) -> None:
        """Test fractional bounds and step."""
        assert lf.Iter.range(0, 1, 0.5).to_array() == [0, 0.5, 1.0]

    def test_zero_step(self) -> None:
        """Test that a zero step is rejected."""
        with pytest.raises(ValueError, match="param step must not be zero"):
            lf.Iter.range(1, 3, 0)

    def test_none_bound(self) -> None:
        """Test that a None bound is rejected."""
        with pytest.raises(TypeError, match="param stop is None"):
            lf.Iter.range(1, None)

    def test_non_numeric_bound(self) -> None:
        """Test that a non-numeric bound is rejected."""
        with pytest.raises(TypeError, match="param start expected number"):
            lf.Iter.range("a", 3)  # type: ignore[arg-type]


class TestFromGenerator:
    """Test driving external generators."""

    def test_values(self) -> None:
        """Test that values are produced in order."""
        assert lf.Iter.from_generator(iter("abc")).to_array() == ["a", "b", "c"]

    def test_exception_propagates(self) -> None:
        """Test that an exception raised by the generator reaches the caller unchanged."""

        def failing():  # noqa: ANN202
            yield 1
            msg = "boom"
            raise KeyError(msg)

        it = lf.Iter.from_generator(failing())
        assert it.next().unwrap() == 1
        with pytest.raises(KeyError, match="boom"):
            it.next()

    def test_not_an_iterator(self) -> None:
        """Test that an iterable which is not an iterator is rejected."""
        with pytest.raises(TypeError, match="param gen expected iterator or generator"):
            lf.Iter.from_generator([1, 2])  # type: ignore[arg-type]

    def test_none(self) -> None:
        """Test that None is rejected."""
        with pytest.raises(TypeError, match="param gen is None"):
            lf.Iter.from_generator(None)  # type: ignore[arg-type]

    def test_from_coroutine_is_deprecated(self) -> None:
        """Test the deprecated alias."""
        with pytest.warns(DeprecationWarning, match="from_generator"):
            it = lf.Iter.from_coroutine(iter([1]))
        assert it.to_array() == [1]


class TestFromFn:
    """Test the step-function source."""

    def test_single_values(self) -> None:
        """Test that the first value is fed back as the control variable."""

        def halve(_state: None, var: int) -> int | None:
            return var // 2 if var > 1 else None

        assert lf.Iter.from_fn(halve, None, 20).to_array() == [10, 5, 2, 1]

    def test_state_is_passed_unchanged(self) -> None:
        """Test that the invariant state reaches every call."""
        seen: list[object] = []
        state = object()

        def step(s: object, var: int) -> int | None:
            seen.append(s)
            return var + 1 if var < 3 else None

        lf.Iter.from_fn(step, state, 0).foreach(lf.nop)
        assert seen == [state] * 4

    def test_multiple_values(self) -> None:
        """Test that a returned tuple is a multi-value pull."""

        def indexed(seq: str, idx: int) -> tuple[int, str] | tuple[()]:
            return () if idx >= len(seq) else (idx + 1, seq[idx])

        assert lf.Iter.from_fn(indexed, "xy", 0).map(lambda idx, c: c * idx).to_array() == ["x", "yy"]

    def test_empty_sequences_are_values(self) -> None:
        """Test that only None or an empty tuple end the iteration."""

        def step(_state: None, var: list[int] | None) -> list[int] | None:
            return None if var is not None else []

        assert lf.Iter.from_fn(step, None, None).to_array() == [[]]

        def ranges(_state: None, var: range | None) -> range | None:
            return range(0) if var is None else None

        assert lf.Iter.from_fn(ranges, None, None).to_array() == [range(0)]

    def test_packed_from(self) -> None:
        """Test that packed_from passes one tuple downstream."""

        def indexed(seq: str, idx: int) -> tuple[int, str] | None:
            return None if idx >= len(seq) else (idx + 1, seq[idx])

        assert lf.Iter.packed_from(indexed, "xy", 0).map(len).to_array() == [2, 2]

    def test_callback_not_called_after_completion(self) -> None:
        """Test that the completion latch stops calling the step function."""
        calls: list[int] = []

        def once(_state: None, var: int | None) -> int | None:
            calls.append(1)
            return None if var else 1

        it = lf.Iter.from_fn(once)
        assert it.to_array() == [1]
        assert it.next().is_none()
        assert len(calls) == 2

    def test_not_callable(self) -> None:
        """Test that a non-callable step is rejected."""
        with pytest.raises(TypeError, match="param func expected callable"):
            lf.Iter.from_fn(42)  # type: ignore[arg-type]
