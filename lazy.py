"""
Lazy sequences for the basics tour.

``generate`` and ``take`` are the core: an unbounded sequence produced one
element at a time, and a way to materialize a finite prefix of it without
forcing anything past that prefix. ``LazySeq`` wraps any iterable in a
chainable collection whose transformations only run when it is iterated.
"""

import random
from functools import reduce as builtin_reduce
from itertools import islice
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


def generate(seed: T, step: Callable[[T], T]) -> Iterator[T]:
    """Yield seed, step(seed), step(step(seed)), ... forever.

    The next value is only computed when the consumer asks for it, so taking
    n elements calls ``step`` exactly n - 1 times.
    """
    value = seed
    while True:
        yield value
        value = step(value)


def take(sequence: Iterable[T], n: int) -> List[T]:
    """Materialize at most n elements from the front of sequence."""
    n = _count(n)
    if n == 0:
        return []
    return list(islice(sequence, n))


def random_walk(start: float, rng: Optional[random.Random] = None) -> Iterator[float]:
    """Infinite random walk; each step moves by a value in [-0.5, 0.5)."""
    rng = rng or random.Random()
    return generate(start, lambda x: x + rng.random() - 0.5)


def init(count: int, fn: Callable[[int], T]) -> Iterator[T]:
    """Lazily yield fn(0) .. fn(count - 1)."""
    return (fn(i) for i in range(count))


def empty() -> Iterator[Any]:
    return iter(())


class LazySeq:
    """
    A chainable, lazy sequence. Transformations are stored and applied
    only when you iterate. Optionally supports caching of realized results.

    The source may be infinite, as long as something downstream (take,
    first, find, ...) stops consuming.
    """
    def __init__(self, source, ops=None, cache_enabled=False):
        self._source = source
        self._ops = ops or []          # sequence of ("op_name", callable/arg)
        self._cache_enabled = cache_enabled
        self._cache = []               # realized items (post-ops)
        self._exhausted = False        # whether the pipeline has run out (when caching)
        self._pipeline = None          # shared pipeline iterator feeding the cache

    @classmethod
    def generate(cls, seed, step):
        """Unbounded sequence seed, step(seed), ...

        Each iteration restarts from seed, so the sequence can be consumed
        more than once.
        """
        return cls(_Unfold(seed, step))

    @classmethod
    def init(cls, count, fn):
        return cls(range(count)).map(fn)

    @classmethod
    def empty(cls):
        return cls(())

    # --------- chainable operators (lazy) ----------
    def map(self, fn):
        return self._with_op(("map", fn))

    def filter(self, pred):
        return self._with_op(("filter", pred))

    def skip(self, n):
        return self._with_op(("skip", _count(n)))

    def take(self, n):
        return self._with_op(("take", _count(n)))

    def truncate(self, n):
        """Alias for take() - stops early on short sources instead of failing"""
        return self.take(n)

    def batch(self, size):
        size = _count(size)
        if size < 1:
            raise ValueError("Batch size must be >= 1")
        return self._with_op(("batch", size))

    def chunk(self, size):
        """Alias for batch() - groups elements into chunks of specified size"""
        return self.batch(size)

    def cache(self, enabled=True):
        c = self._clone()
        c._cache_enabled = enabled
        return c

    # --------- forcing evaluation ----------
    def to_list(self) -> List[Any]:
        return list(self)

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, fn, initial=_MISSING):
        """Apply a function of two arguments cumulatively to items, from left to right"""
        if initial is not _MISSING:
            return builtin_reduce(fn, self, initial)
        return builtin_reduce(fn, self)

    def sum(self, start=0):
        """Return the sum of all elements"""
        total = start
        for item in self:
            total += item
        return total

    def sum_by(self, fn, start=0):
        """Return the sum of fn(element) over all elements"""
        return self.map(fn).sum(start)

    def count(self) -> int:
        count = 0
        for _ in self:
            count += 1
        return count

    def first(self, default=None):
        """Return the first element, or default if empty"""
        for item in self:
            return item
        return default

    def last(self, default=None):
        last_item = default
        for item in self:
            last_item = item
        return last_item

    def any(self, pred=None):
        if pred is None:
            return any(self)
        return any(pred(x) for x in self)

    def all(self, pred=None):
        if pred is None:
            return all(self)
        return all(pred(x) for x in self)

    def find(self, pred):
        """Return the first element that satisfies the predicate, or None"""
        for item in self:
            if pred(item):
                return item
        return None

    def group_by(self, key_fn) -> Dict[Any, List[Any]]:
        """Group elements by the result of key_fn"""
        groups = {}
        for item in self:
            groups.setdefault(key_fn(item), []).append(item)
        return groups

    # --------- iterator protocol ----------
    def __iter__(self):
        if not self._cache_enabled:
            yield from self._build_pipeline()
            return

        # Every pass reads the shared cache by position and only pulls from
        # the one pipeline iterator once it has caught up with the cache
        index = 0
        while True:
            if index < len(self._cache):
                yield self._cache[index]
                index += 1
                continue
            if self._exhausted:
                return
            if self._pipeline is None:
                self._pipeline = self._build_pipeline()
            try:
                item = next(self._pipeline)
            except StopIteration:
                self._exhausted = True
                return
            self._cache.append(item)

    def __repr__(self):
        ops = ", ".join(op for op, _ in self._ops)
        return f"LazySeq({self._source!r}, ops=[{ops}])"

    # --------- helpers ----------
    def _build_pipeline(self):
        it = iter(self._source)
        for op, arg in self._ops:
            if op == "map":
                it = map(arg, it)
            elif op == "filter":
                it = filter(arg, it)
            elif op == "skip":
                it = islice(it, arg, None)
            elif op == "take":
                # islice stops before pulling element n+1 from upstream
                it = islice(it, arg)
            elif op == "batch":
                it = _batch(it, arg)
            else:
                raise ValueError(f"Unknown op: {op}")
        return it

    def _with_op(self, op_tuple):
        return LazySeq(self._source, self._ops + [op_tuple], self._cache_enabled)

    def _clone(self):
        # Clones never share a cache; each pipeline realizes its own results
        return LazySeq(self._source, list(self._ops), self._cache_enabled)


class _Unfold:
    """Re-iterable wrapper around generate()."""

    def __init__(self, seed, step):
        self.seed = seed
        self.step = step

    def __iter__(self):
        return generate(self.seed, self.step)

    def __repr__(self):
        return f"generate({self.seed!r}, {getattr(self.step, '__name__', 'step')})"


def _count(n) -> int:
    # bool is an int subclass, but True is not a count
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("Count must be >= 0")
    return n


def _batch(gen, size):
    bucket = []
    for x in gen:
        bucket.append(x)
        if len(bucket) == size:
            yield tuple(bucket)
            bucket = []
    if bucket:
        yield tuple(bucket)
