"""Tests for the expression compiler `lambda_`."""

import warnings

import pytest

import lazyfn as lf


class TestImplicitParameters:
    """Test expressions using the implicit parameter names."""

    @pytest.mark.parametrize("expr", ["_1 + _2", "a + b", "x + y", "v + b"])
    def test_two_arguments(self, expr: str) -> None:
        """Test the aliases of the first two parameters."""
        assert lf.lambda_(expr)(2, 3) == 5

    def test_underscore(self) -> None:
        """Test the single underscore alias."""
        assert lf.lambda_("_ * 2")(4) == 8

    def test_ninth_parameter(self) -> None:
        """Test the last parameter and its alias."""
        args = range(1, 10)
        assert lf.lambda_("_9")(*args) == 9
        assert lf.lambda_("i - d")(*args) == 5

    def test_missing_arguments_are_none(self) -> None:
        """Test calling with fewer arguments than referenced."""
        assert lf.lambda_("y is None")(1) is True

    def test_in_pipeline(self) -> None:
        """Test a compiled function as a combinator callback."""
        ten_minus = lf.bind(lf.lambda_("x - y"), 10)
        assert lf.range(3).map(ten_minus).to_array() == [9, 8, 7]
        assert lf.iterate("ab").enumerate().map(lf.lambda_("b * a")).to_array() == ["a", "bb"]


class TestArrows:
    """Test the arrow form."""

    def test_single(self) -> None:
        """Test one arrow with two parameters."""
        assert lf.lambda_("(p, q) => p * q")(3, 4) == 12

    def test_nested(self) -> None:
        """Test nested arrows."""
        assert lf.lambda_("(x) => (y)   => x+y")(1)(3) == 4

    def test_no_parameters(self) -> None:
        """Test arrows without parameters."""
        func = lf.lambda_("()=>" * 5 + "'lol'")
        assert func()()()()() == "lol"

    def test_too_deep(self) -> None:
        """Test that nesting is limited by the configuration."""
        with pytest.raises(lf.LambdaError, match="more than the maximum of 10"):
            lf.lambda_("()=>" * 20 + "'lol'")

    def test_configured_depth(self) -> None:
        """Test changing the nesting limit."""
        previous = lf.set_config(lambda_max_depth=1)
        try:
            with pytest.raises(lf.LambdaError):
                lf.lambda_("(x) => (y) => x")
        finally:
            lf.set_config(lambda_max_depth=previous.lambda_max_depth)

    def test_misplaced_arrow(self) -> None:
        """Test that parameters must directly precede the arrow."""
        with pytest.raises(lf.LambdaError, match="Load failed for lambda body"):
            lf.lambda_("(x) (what) => 3*x")

    def test_invalid_parameter(self) -> None:
        """Test that parameters must be identifiers."""
        with pytest.raises(lf.LambdaError, match="Invalid lambda parameter list"):
            lf.lambda_("(1) => 2")


class TestEnvironment:
    """Test the environment given to compiled functions."""

    def test_env_names(self) -> None:
        """Test that env entries are visible."""
        assert lf.lambda_("_ + inc(_)", {"inc": lambda n: n + 1})(1) == 3

    def test_env_overrides_alias(self) -> None:
        """Test that an env entry named like an alias replaces it."""
        assert lf.lambda_("v + 2 * i", {"i": 1j})(1) == 1 + 2j

    def test_falsy_alias(self) -> None:
        """Test that an alias bound to a falsy value is rejected."""
        with pytest.raises(lf.LambdaError, match='special key "f"'):
            lf.lambda_("v and not f", {"f": False})

    @pytest.mark.parametrize("key", ["_", "_1", "_9", "__builtins__"])
    def test_illegal_keys(self, key: str) -> None:
        """Test that parameter names and dunders cannot be bound."""
        with pytest.raises(lf.LambdaError, match="Illegal key in lambda environment"):
            lf.lambda_("x", {key: 1})

    def test_non_string_keys_are_dropped(self) -> None:
        """Test that non-string keys are dropped with a warning."""
        with pytest.warns(UserWarning, match="keys must be strings"):
            func = lf.lambda_("k", {1: "one", "k": "kept"})
        assert func() == "kept"

    def test_string_keys_do_not_warn(self) -> None:
        """Test that a proper environment does not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            lf.lambda_("k", {"k": 1})

    def test_sandbox(self) -> None:
        """Test that module globals are not visible."""
        with pytest.raises(NameError):
            lf.lambda_("pytest")()

    def test_builtins(self) -> None:
        """Test that whitelisted builtins are available and others are not."""
        assert lf.lambda_("len(x)")("abc") == 3
        with pytest.raises(NameError):
            lf.lambda_("open(x)")("file.txt")

    def test_bad_env(self) -> None:
        """Test that env must be a mapping."""
        with pytest.raises(TypeError, match="param env expected mapping"):
            lf.lambda_("x", [("a", 1)])  # type: ignore[arg-type]


class TestRejectedExpressions:
    """Test the expressions refused by the compiler."""

    def test_not_a_string(self) -> None:
        """Test that expr must be a string."""
        with pytest.raises(TypeError, match="param expr expected str"):
            lf.lambda_(42)  # type: ignore[arg-type]

    def test_newline(self) -> None:
        """Test that newlines are refused."""
        with pytest.raises(lf.LambdaError, match="newlines"):
            lf.lambda_("x +\ny")

    def test_comment(self) -> None:
        """Test that comments are refused."""
        with pytest.raises(lf.LambdaError, match="comments"):
            lf.lambda_("x # comment")

    def test_hash_in_string(self) -> None:
        """Test that a hash inside a string literal is not a comment."""
        assert lf.lambda_("'#' + x")("a") == "#a"

    def test_return(self) -> None:
        """Test that an explicit return is refused."""
        with pytest.raises(lf.LambdaError, match="`return` is implied"):
            lf.lambda_("return x")

    @pytest.mark.parametrize("expr", ["x.__class__", "__import__('os')", "(lambda: 1).__globals__"])
    def test_dunders(self, expr: str) -> None:
        """Test that dunder names and attributes are refused."""
        with pytest.raises(lf.LambdaError, match="dunder"):
            lf.lambda_(expr)

    @pytest.mark.parametrize("expr", ["x = 1", "import os", "x +", "(x + 1"])
    def test_invalid(self, expr: str) -> None:
        """Test statements and syntax errors."""
        with pytest.raises(lf.LambdaError):
            lf.lambda_(expr)

    def test_unbalanced(self) -> None:
        """Test an extra closing parenthesis."""
        with pytest.raises(lf.LambdaError):
            lf.lambda_("x) + (y")


class TestLambdaFunction:
    """Test the compiled function object."""

    def test_str_and_expr(self) -> None:
        """Test the string form and the kept expression."""
        func = lf.lambda_("  x * 2  ")
        assert func.expr == "x * 2"
        assert str(func) == "lambda[[x * 2]]"
        assert repr(func) == "LambdaFunction('x * 2')"

    def test_code_names_the_caller(self) -> None:
        """Test that tracebacks point to where the function was compiled."""
        func = lf.lambda_("1 / x")
        with pytest.raises(ZeroDivisionError) as info:
            func(0)
        tb = info.value.__traceback__
        while tb.tb_next is not None:
            tb = tb.tb_next
        filename = tb.tb_frame.f_code.co_filename
        assert filename.startswith("<lambda ")
        assert "test_lambda.py" in filename
