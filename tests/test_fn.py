"""Tests for the function combinator utilities."""

import pytest

import lazyfn as lf


class TestCompose:
    """Test compose."""

    def test_two_functions(self) -> None:
        """Test that the rightmost function runs first."""
        assert lf.compose(str, abs)(-3) == "3"

    def test_many_functions(self) -> None:
        """Test three functions and multiple arguments."""
        assert lf.compose(lambda x: x + 1, lambda x: x * 2, lambda a, b: a - b)(5, 2) == 7

    def test_none_rejected(self) -> None:
        """Test that None is not a function."""
        with pytest.raises(TypeError, match="param f2 is None"):
            lf.compose(str, None)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="param f3 is None"):
            lf.compose(str, str, None)  # type: ignore[arg-type]


class TestBinding:
    """Test bind, bind_self and curry."""

    def test_bind(self) -> None:
        """Test that bound arguments come first."""
        ten_minus = lf.bind(lambda x, y: x - y, 10)
        assert ten_minus(3) == 7

    def test_bind_appends_call_arguments(self) -> None:
        """Test that call arguments follow the bound ones."""
        assert lf.bind(lambda *args: args, 1, 2)(3) == (1, 2, 3)

    def test_bind_self(self) -> None:
        """Test binding a method by name."""
        join = lf.bind_self(", ", "join")
        assert join(["a", "b"]) == "a, b"

    def test_curry(self) -> None:
        """Test calling a curried function level by level."""
        volume = lf.curry(lambda w, h, d: w * h * d, 3)
        assert volume(2)(3)(4) == 24

    def test_curry_last_level_takes_extra_arguments(self) -> None:
        """Test that the last call passes all its arguments."""
        assert lf.curry(lambda a, b, c: (a, b, c), 2)(1)(2, 3) == (1, 2, 3)

    def test_curry_inner_level_drops_extra_arguments(self) -> None:
        """Test that inner calls only keep their first argument."""
        assert lf.curry(lambda a, b: (a, b), 2)(1, 99)(2) == (1, 2)

    def test_curry_levels(self) -> None:
        """Test invalid level counts."""
        with pytest.raises(ValueError, match="param levels expected a positive integer, got: 0"):
            lf.curry(max, 0)
        with pytest.raises(TypeError, match="param levels expected integer"):
            lf.curry(max, 1.5)  # type: ignore[arg-type]

    def test_curried_partial_is_reusable(self) -> None:
        """Test that a partially applied curried function can be called again."""
        add = lf.curry(lambda a, b: a + b, 2)
        add_one = add(1)
        assert (add_one(1), add_one(2)) == (2, 3)


class TestSmallFunctions:
    """Test the small helpers."""

    def test_constant(self) -> None:
        """Test that arguments are ignored."""
        assert lf.constant(7)(1, 2, key=3) == 7

    def test_identity(self) -> None:
        """Test identity on zero, one and several arguments."""
        assert lf.identity() is None
        assert lf.identity(1) == 1
        assert lf.identity(1, 2) == (1, 2)

    def test_nop(self) -> None:
        """Test that nop returns nothing."""
        assert lf.nop(1, x=2) is None

    def test_pack(self) -> None:
        """Test that pack returns its arguments as a tuple."""
        assert lf.pack(1, "a") == (1, "a")
        assert lf.pack() == ()

    def test_negate(self) -> None:
        """Test the complement of a predicate."""
        assert lf.iterate([1, 2, 3]).filter(lf.negate(lambda x: x == 2)).to_array() == [1, 3]

    def test_lookup(self) -> None:
        """Test mapping lookups, with None for absent keys."""
        names = lf.lookup({"a": 1})
        assert names("a") == 1
        assert names("b") is None
        with pytest.raises(TypeError, match="param mapping expected mapping"):
            lf.lookup([1])  # type: ignore[arg-type]

    def test_indexer(self) -> None:
        """Test item access by key or index."""
        assert lf.indexer(1)("abc") == "b"
        assert lf.iterate([{"k": 1}]).map(lf.indexer("k")).to_array() == [1]
