from __future__ import annotations
import builtins
import operator
import typing
import numpy as np
import pandas as pd
from ..types import *
from . import aggregate
from .. import core

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

class TerminalAccessor(Generic[T]):
    """
    operations that consume the sequence and return a concrete result.
    every one of them takes a cap n so infinite sequences can be drained safely.
    """

    def __init__(self, sequence_instance: 'LazySequence[T]'):
        self._sequence = sequence_instance

    def list(self, n: Cap = None) -> List[T]:
        """convert to list"""
        return aggregate.take(self._sequence, n)

    def tuple(self, n: Cap = None) -> Tuple[T, ...]:
        """convert to tuple"""
        return builtins.tuple(aggregate.take(self._sequence, n))

    def set(self, n: Cap = None) -> Set[T]:
        """convert to set"""
        return builtins.set(aggregate.take(self._sequence, n))

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Mapper[T, V]] = None, n: Cap = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda value: value
        return {key_selector(value): val_sel(value) for value in aggregate.take(self._sequence, n)}

    def array(self, n: Cap = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(aggregate.take(self._sequence, n))

    def pandas(self, n: Cap = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(aggregate.take(self._sequence, n))

    def reduce(self, reducer: Reducer[T, U], initial: U, n: Cap = None,
               stop: Optional[Predicate[T]] = None) -> U:
        """fold items with reducer(item, accumulator)"""
        return core.reduce(self._sequence, reducer, initial, n, stop)

    def every(self, test: Predicate[T], n: Cap = None) -> bool:
        return aggregate.every(self._sequence, test, n)

    def some(self, test: Predicate[T], n: Cap = None) -> bool:
        return aggregate.some(self._sequence, test, n)

    def count(self, test: Optional[Predicate[T]] = None, n: Cap = None) -> int:
        return aggregate.count(self._sequence, test, n)

    def min(self, less_than: LessThan[T] = operator.lt, n: Cap = None) -> T:
        return aggregate.min(self._sequence, less_than, n)

    def max(self, less_than: LessThan[T] = operator.lt, n: Cap = None) -> T:
        return aggregate.max(self._sequence, less_than, n)

    def sort(self, less_than: LessThan[T] = operator.lt, n: Cap = None) -> List[T]:
        """sorted list of the first n items"""
        return aggregate.sort(self._sequence, less_than, n)
