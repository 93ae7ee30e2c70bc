"""Benchmarks for lazyfn pipelines, each next to its builtin equivalent."""

import itertools

import lazyfn as lf

from ._registery import bench


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _square(x: int) -> int:
    return x * x


_IS_EVEN = lf.lambda_("x % 2 == 0")
_SQUARE = lf.lambda_("x * x")


class FilterMap:
    """Benchmark a filter followed by a map."""

    @bench()
    @staticmethod
    def lazyfn_methods(data: list[int]) -> object:
        """Benchmark the method chain."""
        return lf.iterate(data).filter(_is_even).map(_square).to_array()

    @bench()
    @staticmethod
    def lazyfn_lambda(data: list[int]) -> object:
        """Benchmark the method chain with compiled expressions."""
        return lf.iterate(data).filter(_IS_EVEN).map(_SQUARE).to_array()

    @bench()
    @staticmethod
    def builtins(data: list[int]) -> object:
        """Benchmark the builtin equivalent."""
        return list(map(_square, filter(_is_even, data)))


class Reduce:
    """Benchmark summing values."""

    @bench()
    @staticmethod
    def lazyfn_reduce(data: list[int]) -> object:
        """Benchmark reduce."""
        return lf.iterate(data).reduce(lambda acc, x: acc + x, 0)

    @bench()
    @staticmethod
    def builtins(data: list[int]) -> object:
        """Benchmark the builtin sum."""
        return sum(data)


class ZipEnumerate:
    """Benchmark multi-value pulls."""

    @bench()
    @staticmethod
    def lazyfn_zip(data: list[int]) -> object:
        """Benchmark zip then enumerate."""
        return lf.iterate(data).zip(data).enumerate().count()

    @bench()
    @staticmethod
    def builtins(data: list[int]) -> object:
        """Benchmark the builtin equivalent."""
        return sum(1 for _ in enumerate(zip(data, data, strict=True)))


class Clone:
    """Benchmark cloning a partially consumed pipeline."""

    @bench(gen=lambda size: lf.Iter.over(size.to_array()).skip(1).map(_square))
    @staticmethod
    def lazyfn_clone(pipeline: lf.Iter[int]) -> object:
        """Benchmark clone and drain."""
        return pipeline.clone().to_array()

    @bench()
    @staticmethod
    def itertools_tee(data: list[int]) -> object:
        """Benchmark the itertools equivalent."""
        left, _right = itertools.tee(map(_square, itertools.islice(data, 1, None)))
        return list(left)
