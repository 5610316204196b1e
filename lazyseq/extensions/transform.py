from __future__ import annotations
from collections import deque
from ..types import *
from ..sequence import LazySequence
from ..factories import iterator, empty


class _MappedSequence(LazySequence[U]):
    def __init__(self, source: LazySequence[T], mapper: Mapper[T, U]):
        self._source = source
        self._mapper = mapper

    def next_step(self) -> StepResult[U]:
        step = self._source.next_step()
        if step.done: return step
        return item(self._mapper(step.value))

    @property
    def length(self) -> Optional[int]:
        return self._source.length


class _FilteredSequence(LazySequence[T]):
    def __init__(self, source: LazySequence[T], test: Predicate[T]):
        self._source = source
        self._test = test

    def next_step(self) -> StepResult[T]:
        # loop rather than recurse: a long run of rejected items must not grow the stack
        while True:
            step = self._source.next_step()
            if step.done or self._test(step.value):
                return step

    @property
    def length(self) -> Optional[int]:
        # only an exhausted source tells us anything without pulling
        return 0 if self._source.length == 0 else None


class _ConcatenatedSequence(LazySequence[T]):
    def __init__(self, sources: List[LazySequence[T]]):
        self._sources = deque(sources)

    def next_step(self) -> StepResult[T]:
        while self._sources:
            step = self._sources[0].next_step()
            if not step.done:
                return step
            # current source is spent, move on to the next one
            self._sources.popleft()
        return DONE

    @property
    def length(self) -> Optional[int]:
        total = 0
        for source in self._sources:
            remaining = source.length
            if remaining is None: return None
            total += remaining
        return total


def map(sequence: LazySequence[T], mapper: Mapper[T, U]) -> LazySequence[U]:
    """lazily apply mapper to each item; one pull on the result is one pull on the source"""
    return _MappedSequence(sequence, mapper)


def filter(sequence: LazySequence[T], test: Predicate[T]) -> LazySequence[T]:
    """lazily skip the items that fail test"""
    return _FilteredSequence(sequence, test)


def concatenate(*sequences: Iterable[T]) -> LazySequence[T]:
    """chain sequences left to right; with no sequences the result is empty"""
    if not sequences:
        return empty()
    return _ConcatenatedSequence([iterator(s) for s in sequences])


def unshift(sequence: LazySequence[T], *values: T) -> LazySequence[T]:
    """prepend values, in order, ahead of sequence"""
    return concatenate(iterator(values), sequence)
