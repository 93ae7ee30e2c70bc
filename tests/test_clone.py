"""Tests for cloning iterators and pipelines."""

import pytest

import lazyfn as lf


def _gen():  # noqa: ANN202
    yield from (1, 2, 3)


PIPELINES = {
    "over": lambda: lf.Iter.over([1, 2, 3, 4]),
    "counter": lambda: lf.Iter.counter().take(5),
    "range": lambda: lf.Iter.range(10, 1, -3),
    "filter": lambda: lf.Iter.range(10).filter(lambda x: x % 3 == 0),
    "map": lambda: lf.Iter.over("abc").map(str.upper),
    "take_while": lambda: lf.Iter.counter().take_while(lambda x: x < 4),
    "take_last": lambda: lf.Iter.range(6).take_last(3),
    "skip": lambda: lf.Iter.range(6).skip(2),
    "skip_while": lambda: lf.Iter.range(6).skip_while(lambda x: x < 3),
    "every": lambda: lf.Iter.range(9).every(2),
    "zip": lambda: lf.Iter.over("abc").zip(lf.Iter.counter()),
    "concat": lambda: lf.Iter.over([1, 2]).concat([3, 4]),
    "enumerate": lambda: lf.Iter.over("abc").enumerate(),
}


@pytest.mark.parametrize("make", list(PIPELINES.values()), ids=list(PIPELINES))
def test_clone_replays_remaining_values(make) -> None:  # noqa: ANN001
    """Test that a clone taken mid-way yields what the original yields afterwards."""
    it = make()
    it.next()
    copy = it.clone()
    assert copy.to_array() == it.to_array()


@pytest.mark.parametrize("make", list(PIPELINES.values()), ids=list(PIPELINES))
def test_clone_is_independent(make) -> None:  # noqa: ANN001
    """Test that consuming a clone does not affect the original."""
    expected = make().to_array()
    it = make()
    it.clone().to_array()
    assert it.to_array() == expected


@pytest.mark.parametrize("n", [0, 1, 2])
@pytest.mark.parametrize("make", list(PIPELINES.values()), ids=list(PIPELINES))
def test_take_from_clone_and_skip_rebuild_sequence(make, n: int) -> None:  # noqa: ANN001
    """Test that the first n values of a clone followed by skip(n) give the whole sequence."""
    expected = make().to_array()
    it = make()
    head = it.clone().take(n).to_array()
    assert head + it.skip(n).to_array() == expected


@pytest.mark.parametrize("make", list(PIPELINES.values()), ids=list(PIPELINES))
def test_take_is_a_prefix(make) -> None:  # noqa: ANN001
    """Test that take(n) yields the first n values of the pipeline."""
    expected = make().to_array()
    for n in range(len(expected) + 1):
        assert make().take(n).to_array() == expected[:n]


def test_clone_copies_latch() -> None:
    """Test that the clone of an exhausted iterator is exhausted."""
    it = lf.Iter.over([1])
    it.to_array()
    copy = it.clone()
    assert copy.is_complete()
    assert copy.next().is_none()


def test_clone_of_fresh_pipeline() -> None:
    """Test cloning before any pull."""
    it = lf.Iter.over([1, 2, 3]).filter(lambda x: x != 2)
    assert it.clone().to_array() == [1, 3]
    assert it.to_array() == [1, 3]


def test_clone_keeps_take_while_state() -> None:
    """Test that a clone after the failing item is complete on the next pull."""
    it = lf.Iter.over([1, 2, 3]).take_while(lambda x: x < 2)
    it.next()
    it.next()
    assert it.clone().to_array() == []


def test_generator_source_is_not_clonable() -> None:
    """Test that a generator source cannot be cloned."""
    with pytest.raises(lf.NotClonableError, match="cannot clone generator iterator; try .to_array()"):
        lf.Iter.from_generator(_gen()).clone()


def test_callback_source_is_not_clonable() -> None:
    """Test that a callback source cannot be cloned."""
    with pytest.raises(lf.NotClonableError, match="cannot clone callback iterator"):
        lf.Iter.from_fn(lf.nop).clone()


def test_pipeline_above_generator_is_not_clonable() -> None:
    """Test that cloning fails for a pipeline built on a generator."""
    it = lf.Iter.over([1, 2]).zip(lf.Iter.from_generator(_gen())).map(lf.pack)
    with pytest.raises(lf.NotClonableError):
        it.clone()
    assert it.to_array() == [(1, 1), (2, 2)]


def test_not_clonable_is_a_type_error() -> None:
    """Test the base class of NotClonableError."""
    assert issubclass(lf.NotClonableError, TypeError)


def test_drained_take_last_is_clonable() -> None:
    """Test that a drained take_last above a generator can be cloned."""
    it = lf.Iter.from_generator(_gen()).take_last(2)
    assert it.next().unwrap() == 2
    assert it.clone().to_array() == [3]
    assert it.to_array() == [3]


def test_undrained_take_last_clones_upstream() -> None:
    """Test that a take_last not yet drained clones its upstream."""
    it = lf.Iter.range(5).take_last(2)
    copy = it.clone()
    assert it.to_array() == [4, 5]
    assert copy.to_array() == [4, 5]


def test_try_clone() -> None:
    """Test the Result-returning variant."""
    assert lf.Iter.over([1]).try_clone().unwrap().to_array() == [1]
    err = lf.Iter.from_generator(_gen()).try_clone()
    assert err.is_err()
    assert isinstance(err.unwrap_err(), lf.NotClonableError)


def test_free_function_clone() -> None:
    """Test that clone passes non-Iter values through."""
    data = (1, 2)
    assert lf.clone(data) is data
    it = lf.iterate(data)
    assert lf.clone(it).to_array() == [1, 2]
    assert it.to_array() == [1, 2]
