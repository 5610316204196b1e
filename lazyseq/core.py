from __future__ import annotations
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import LazySequence


def shift(sequence: 'LazySequence[T]', n: int = 0) -> StepResult[T]:
    """
    pulls n + 1 items from sequence and returns the last step.

    the first n results are discarded. n < 1 pulls exactly once. if the
    sequence finishes early the remaining pulls are skipped and the done step
    is returned.
    """
    step = sequence.next_step()
    while n >= 1 and not step.done:
        step = sequence.next_step()
        n -= 1
    return step


def reduce(sequence: 'LazySequence[T]',
           reducer: Reducer[T, U],
           initial: U,
           n: Cap = None,
           stop: Optional[Predicate[T]] = None) -> U:
    """
    folds the items of sequence into an accumulator.

    :param reducer: called as reducer(item, accumulator) for each item.
    :param initial: the starting accumulator, returned untouched when nothing is folded.
    :param n: fold at most n items; none means no cap. n <= 0 consumes nothing.
    :param stop: checked on each item after it is folded; a true result ends the fold.
    """
    result = initial
    remaining = n
    while remaining is None or remaining > 0:
        step = shift(sequence)
        if step.done: break
        result = reducer(step.value, result)
        if stop is not None and stop(step.value): break
        if remaining is not None: remaining -= 1
    return result
