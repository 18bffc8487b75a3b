"""
Recursive functions and their accumulator-passing counterparts.

Python does not eliminate tail calls, so the tail-recursive forms are
written as the loops a compiler would turn them into.
"""

from typing import Iterable, Iterator


def factorial(n: int) -> int:
    """n! defined recursively: 0! = 1, n! = n * (n - 1)!"""
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def greatest_common_factor(a: int, b: int) -> int:
    """Greatest common factor by repeated subtraction.

    Every recursive step of the subtraction form is a tail call, so it
    rebinds (a, b) and loops instead of calling itself.
    """
    if a < 0 or b < 0 or (a != 0 and b == 0):
        raise ValueError(f"Subtraction GCF needs a >= 0 and b > 0, got ({a}, {b})")
    while a != 0:
        if a < b:
            b = b - a
        else:
            a = a - b
    return b


def sum_naive(values: Iterable[int]) -> int:
    """head + sum(tail); stack depth grows with the input length."""
    return _sum_rest(iter(values))


def _sum_rest(rest: Iterator[int]) -> int:
    for head in rest:
        return head + _sum_rest(rest)
    return 0


def sum_tail_recursive(values: Iterable[int]) -> int:
    """Sum with a running accumulator, in constant stack depth."""
    accumulator = 0
    for value in values:
        accumulator = accumulator + value
    return accumulator
