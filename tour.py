"""
The basics tour, one function per section.

Each section builds its examples once and returns them in a SectionResult;
printing is left to main.
"""

import calendar
import datetime
import logging
import random
import time
from collections import namedtuple
from typing import Callable, Dict, Optional

from lazy import LazySeq, init, random_walk, take
from models import SectionResult, TourConfig, TourReport
from pipelines import (
    square_odd_values_and_add_one,
    square_odd_values_and_add_one_composition,
    square_odd_values_and_add_one_nested,
    square_odd_values_and_add_one_pipeline,
    square_odd_values_and_add_one_shorter_pipeline,
)
from recursion import factorial, greatest_common_factor, sum_naive, sum_tail_recursive
from utils import measure_performance

logger = logging.getLogger(__name__)


def sample_function1(x):
    return x * x + 3


def sample_function2(x: int) -> int:
    return 2 * x * x - x // 5 + 3


def sample_function3(x: float) -> float:
    """Conditionals use if/elif/else."""
    if x < 100.0:
        return 2.0 * x * x - x / 5.0 + 3.0
    else:
        return 2.0 * x * x + x / 5.0 - 37.0


def basic_functions(config: TourConfig) -> SectionResult:
    section = SectionResult(name="basic_functions")
    section.add("squaring 4573 and adding 3", sample_function1(4573))
    section.add("second sample function of (7 + 4)", sample_function2(7 + 4))
    section.add("third sample function of (6.5 + 4.5)", sample_function3(6.5 + 4.5))
    return section


def immutability(config: TourConfig) -> SectionResult:
    section = SectionResult(name="immutability")

    # Names are rebindable; the old value is simply no longer reachable by that name
    other_number = 2
    section.add("'other_number' is", other_number)
    other_number = other_number + 1
    section.add("'other_number' changed to be", other_number)

    # Tuples can't be changed in place
    frozen = (1, 2, 3)
    section.add("a tuple stays", frozen)
    return section


def integers_and_numbers(config: TourConfig) -> SectionResult:
    section = SectionResult(name="integers_and_numbers")
    sample_integer = 176
    sample_double = 4.1

    # Numeric conversions use int(), float() and friends
    section.add("sample_integer2", (sample_integer // 4 + 5 - 7) * 4 + int(sample_double))
    section.add("sample numbers", list(range(100)))
    section.add("table of squares from 0 to 99", [(i, i * i) for i in range(100)])
    return section


def booleans(config: TourConfig) -> SectionResult:
    section = SectionResult(name="booleans")
    boolean1 = True
    boolean2 = False
    section.add("not boolean1 and (boolean2 or False)", not boolean1 and (boolean2 or False))
    return section


def strings(config: TourConfig) -> SectionResult:
    section = SectionResult(name="strings")
    string1 = "Hello"
    string2 = "world"
    section.add("concatenated", string1 + " " + string2)

    # Raw strings ignore escapes; they can't end in an odd number of backslashes
    section.add("raw string literal", r"C:\Program Files" + "\\")
    section.add("triple-quoted literal", """The computer said "hello world" when I told it to!""")

    hello_world = string1 + " " + string2
    section.add("hello world", hello_world)
    section.add("japanese", "こんにちは世界")
    section.add("first 7 characters", hello_world[0:7])
    section.add("from index 0", hello_world[0:])
    return section


def swap_elems(pair):
    a, b = pair
    return (b, a)


StructTuple = namedtuple("StructTuple", ["a", "b"])


def convert_from_struct_tuple(value: StructTuple) -> tuple:
    return tuple(value)


def convert_to_struct_tuple(pair) -> StructTuple:
    return StructTuple(*pair)


def tuples(config: TourConfig) -> SectionResult:
    section = SectionResult(name="tuples")
    section.add("tuple1", (1, 2, 3))
    section.add("swapping (1, 2)", swap_elems((1, 2)))
    section.add("tuple2", (1, "fred", 3.1415))

    sample_struct_tuple = StructTuple(1, 2)
    section.add("named tuple", sample_struct_tuple)
    section.add("plain tuple from named tuple", convert_from_struct_tuple(sample_struct_tuple))
    section.add("named tuple from plain tuple", convert_to_struct_tuple((1, 2)))
    return section


def pipelines(config: TourConfig) -> SectionResult:
    section = SectionResult(name="pipelines")
    numbers = [1, 2, 3, 4, 5]
    variants = [
        square_odd_values_and_add_one,
        square_odd_values_and_add_one_nested,
        square_odd_values_and_add_one_pipeline,
        square_odd_values_and_add_one_shorter_pipeline,
        square_odd_values_and_add_one_composition,
    ]
    names = ["named steps", "nested", "pipeline", "shorter pipeline", "composition"]
    for name, variant in zip(names, variants):
        section.add(f"processing {numbers} through {name}", variant(numbers))
    return section


def lists(config: TourConfig) -> SectionResult:
    section = SectionResult(name="lists")
    section.add("empty list", [])
    section.add("list2", [1, 2, 3])
    number_list = list(range(1, 1001))

    days_list = [
        datetime.date(2023, month, day)
        for month in range(1, 13)
        for day in range(1, calendar.monthrange(2023, month)[1] + 1)
    ]
    section.add("days in 2023", len(days_list))
    section.add("first 5 days of 2023", days_list[:5])

    black_squares = [(i, j) for i in range(8) for j in range(8) if (i + j) % 2 == 1]
    section.add("black squares on a chess board", len(black_squares))

    squares = [x * x for x in number_list]
    section.add("last square", squares[-1])
    section.add(
        "sum of squares up to 1000 divisible by 3",
        sum(x * x for x in number_list if x % 3 == 0),
    )
    return section


def arrays(config: TourConfig) -> SectionResult:
    section = SectionResult(name="arrays")
    array2 = ["hello", "world", "and", "hello", "world", "again"]
    array4 = [word for word in array2 if "l" in word]
    section.add("words containing 'l'", array4)

    even_numbers = [n * 2 for n in range(1001)]
    section.add("even numbers", len(even_numbers))
    section.add("even numbers slice", len(even_numbers[0:501]))

    # Lists are mutable in place; the filtered copy above is unaffected
    array2[1] = "WORLD!"
    section.add("array2 after mutation", array2)
    section.add(
        "sum of lengths of words starting with 'h'",
        sum(len(x) for x in array2 if x.startswith("h")),
    )
    return section


def sequences(config: TourConfig) -> SectionResult:
    section = SectionResult(name="sequences")
    section.add("empty sequence", LazySeq.empty().to_list())

    seq2 = LazySeq(["hello", "world", "and", "hello", "world", "again"])
    section.add("words containing 'l'", seq2.filter(lambda word: "l" in word).to_list())
    section.add("on-demand 1 to 1000, summed", LazySeq(range(1, 1001)).sum())
    section.add("even numbers up to 2000", LazySeq(init(1001, lambda n: n * 2)).count())

    rng = random.Random(config.random_seed)
    walk = take(random_walk(config.walk_start, rng), config.walk_length)
    section.add("random walk", walk)
    return section


def recursive_functions(config: TourConfig) -> SectionResult:
    section = SectionResult(name="recursive_functions")
    one_through_ten = list(range(1, 11))
    section.add("factorial of 6", factorial(6))
    section.add("greatest common factor of 300 and 620", greatest_common_factor(300, 620))
    section.add("recursive sum 1-10", sum_naive(one_through_ten))
    section.add("tail recursive sum 1-10", sum_tail_recursive(one_through_ten))
    return section


SECTIONS: Dict[str, Callable[[TourConfig], SectionResult]] = {
    "basic_functions": basic_functions,
    "immutability": immutability,
    "integers_and_numbers": integers_and_numbers,
    "booleans": booleans,
    "strings": strings,
    "tuples": tuples,
    "pipelines": pipelines,
    "lists": lists,
    "arrays": arrays,
    "sequences": sequences,
    "recursive_functions": recursive_functions,
}


def run_tour(config: Optional[TourConfig] = None) -> TourReport:
    """Run the selected sections in tour order"""
    config = config or TourConfig()
    start_time = time.perf_counter()
    report = TourReport()

    for name in config.get_section_names():
        logger.debug(f"Running section: {name}")
        info = measure_performance(name, SECTIONS[name], config)
        report.sections.append(info["result"])

    report.total_time_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f"Tour finished: {len(report.sections)} sections in {report.total_time_ms:.2f} ms")
    return report
