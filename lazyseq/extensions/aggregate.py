from __future__ import annotations
import logging
import operator
import typing
from functools import cmp_to_key
from ..types import *
from ..core import shift, reduce

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)


def every(sequence: 'LazySequence[T]', test: Predicate[T], n: Cap = None) -> bool:
    """true when each of the first n items passes test; stops at the first failure"""
    return reduce(sequence, lambda value, result: bool(test(value)) and result, True, n,
                  lambda value: not test(value))


def some(sequence: 'LazySequence[T]', test: Predicate[T], n: Cap = None) -> bool:
    """true when any of the first n items passes test; stops at the first success"""
    return not every(sequence, lambda value: not test(value), n)


def take(sequence: 'LazySequence[T]', n: Cap = None) -> List[T]:
    """materialize up to n items into a list, in iteration order"""
    def append(value: T, result: List[T]) -> List[T]:
        result.append(value)
        return result
    return reduce(sequence, append, [], n)


def count(sequence: 'LazySequence[T]', test: Optional[Predicate[T]] = None, n: Cap = None) -> int:
    """count the first n items passing test (every item when test is none)"""
    if test is None:
        return reduce(sequence, lambda value, result: result + 1, 0, n)
    return reduce(sequence, lambda value, result: result + (1 if test(value) else 0), 0, n)


def min(sequence: 'LazySequence[T]', less_than: LessThan[T] = operator.lt, n: Cap = None) -> T:
    """
    smallest of the first n items according to a strict less-than comparator.
    on ties the earliest item is kept. raises EmptySequenceError when the
    sequence has no items at all, whatever n is.
    """
    first = shift(sequence)
    if first.done:
        logger.debug("extremum requested from an empty sequence")
        raise EmptySequenceError("sequence contains no elements")
    # the first item already counts towards the cap
    rest = None if n is None else n - 1
    return reduce(sequence,
                  lambda value, candidate: value if less_than(value, candidate) else candidate,
                  first.value, rest)


def max(sequence: 'LazySequence[T]', less_than: LessThan[T] = operator.lt, n: Cap = None) -> T:
    """largest of the first n items; min with the comparator's arguments swapped"""
    return min(sequence, lambda value, other: less_than(other, value), n)


def sort(sequence: 'LazySequence[T]', less_than: LessThan[T] = operator.lt, n: Cap = None) -> List[T]:
    """take the first n items and sort them ascending by the comparator"""
    data = take(sequence, n)
    logger.debug(f"sorting {len(data)} materialized items")

    def compare(value: T, other: T) -> int:
        if less_than(value, other): return -1
        if less_than(other, value): return 1
        return 0

    return sorted(data, key=cmp_to_key(compare))
