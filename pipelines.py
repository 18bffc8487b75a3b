"""
Pipelines and function composition.

The same transformation - keep the odd numbers, square them, add one - is
written five ways, from named intermediate results to a composed function
value. All five give the same result.
"""

from functools import reduce
from typing import Any, Callable, Iterable, List


def square(x):
    return x * x


def add_one(x):
    return x + 1


def is_odd(x) -> bool:
    return x % 2 != 0


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Feed value through fns left to right: pipe(x, f, g) == g(f(x))."""
    return reduce(lambda acc, fn: fn(acc), fns, value)


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right composition: compose(f, g)(x) == g(f(x))."""
    return lambda value: pipe(value, *fns)


def map_with(fn: Callable[[Any], Any]) -> Callable[[Iterable], List]:
    """Partially applied map, usable as a pipeline stage."""
    return lambda values: [fn(x) for x in values]


def filter_with(pred: Callable[[Any], bool]) -> Callable[[Iterable], List]:
    """Partially applied filter, usable as a pipeline stage."""
    return lambda values: [x for x in values if pred(x)]


def square_odd_values_and_add_one(values):
    odds = [x for x in values if is_odd(x)]
    squares = [square(x) for x in odds]
    result = [add_one(x) for x in squares]
    return result


def square_odd_values_and_add_one_nested(values):
    # Short, but reads inside-out
    return list(map(add_one, map(square, filter(is_odd, values))))


def square_odd_values_and_add_one_pipeline(values):
    return pipe(values, filter_with(is_odd), map_with(square), map_with(add_one))


def square_odd_values_and_add_one_shorter_pipeline(values):
    return pipe(values, filter_with(is_odd), map_with(lambda x: pipe(x, square, add_one)))


square_odd_values_and_add_one_composition = compose(
    filter_with(is_odd), map_with(compose(square, add_one))
)
