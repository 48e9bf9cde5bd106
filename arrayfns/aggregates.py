from __future__ import annotations
from typing import Callable, Iterable, Optional, TypeVar

from .errors import EmptyCollectionError

T = TypeVar("T")

Number = float  # ints are accepted wherever a float is


def sum(source: Iterable[Number]) -> Number:
    total: Number = 0
    for x in source:
        total += x
    return total


def sum_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    total: Number = 0
    for x in source:
        total += selector(x)
    return total


def _extreme(values: Iterable[Number], better: Callable[[Number, Number], bool], message: str) -> Number:
    best: Optional[Number] = None
    for v in values:
        if best is None or better(v, best):
            best = v
    if best is None:
        raise EmptyCollectionError(message)
    return best


def max(source: Iterable[Number]) -> Number:
    return _extreme(source, lambda a, b: a > b, "Can't find max of an empty collection")


def max_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    """Largest ``selector(item)``; the selected value is returned, not the item."""
    return _extreme((selector(x) for x in source), lambda a, b: a > b, "Can't find max of an empty array")


def min(source: Iterable[Number]) -> Number:
    return _extreme(source, lambda a, b: a < b, "Can't find min of an empty collection")


def min_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    """Smallest ``selector(item)``; the selected value is returned, not the item."""
    return _extreme((selector(x) for x in source), lambda a, b: a < b, "Can't find min of an empty array")


def _mean(values: Iterable[Number], message: str) -> Number:
    total: Number = 0
    n = 0
    for v in values:
        total += v
        n += 1
    if n == 0:
        raise EmptyCollectionError(message)
    return total / n


def mean(source: Iterable[Number]) -> Number:
    return _mean(source, "Can't find mean of an empty collection")


def mean_by(source: Iterable[T], selector: Callable[[T], Number]) -> Number:
    return _mean((selector(x) for x in source), "Can't find mean of an empty array")
