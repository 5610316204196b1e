import logging
import math
from collections import deque
from collections.abc import Sized
from .types import *
from .sequence import LazySequence

logger = logging.getLogger(__name__)


def _normalize_length(length: Cap) -> Cap:
    """map an infinite length to none (unbounded) and a nan or -inf length to 0"""
    if length is None: return None
    if math.isnan(length): return 0
    if math.isinf(length): return None if length > 0 else 0
    return length


# --- sequence variants ---

class _IndexedSequence(LazySequence[T]):
    """items are nth(0), nth(1), ... up to an optional length"""

    def __init__(self, nth: Nth[T], length: Cap = None):
        self._nth = nth
        self._length = _normalize_length(length)
        self._index = 0

    def next_step(self) -> StepResult[T]:
        if self._length is not None and not self._index < self._length:
            return DONE
        value = self._nth(self._index)
        self._index += 1
        return item(value)

    @property
    def length(self) -> Optional[int]:
        if self._length is None: return None
        return max(0, math.ceil(self._length) - self._index)


class _WindowedSequence(_IndexedSequence[T]):
    """a recurrence over a fixed-size window of the most recent items"""

    def __init__(self, recurrence: Callable[..., T], initial: Tuple[T, ...], length: Cap = None):
        self._recurrence = recurrence
        self._window = deque(initial)
        super().__init__(self._advance, length)

    def _advance(self, _index: int) -> T:
        # the window always holds k items: push the next one, emit the oldest
        self._window.append(self._recurrence(*self._window))
        return self._window.popleft()


class _IterableSequence(LazySequence[T]):
    """adapts a python iterable to the pull protocol"""

    def __init__(self, source: Iterable[T]):
        self._iterator = iter(source)
        self._remaining = len(source) if isinstance(source, Sized) else None
        self._exhausted = False

    def next_step(self) -> StepResult[T]:
        if self._exhausted: return DONE
        try:
            value = next(self._iterator)
        except StopIteration:
            # python iterators are not required to keep raising, so remember it
            self._exhausted = True
            self._iterator = None
            self._remaining = 0
            return DONE
        if self._remaining is not None:
            self._remaining = max(0, self._remaining - 1)
        return item(value)

    @property
    def length(self) -> Optional[int]:
        return self._remaining


class _EmptySequence(LazySequence[Any]):
    def next_step(self) -> StepResult[Any]:
        return DONE

    @property
    def length(self) -> Optional[int]:
        return 0


# --- factory functions ---

def sequence(nth: Nth[T], length: Cap = None) -> 'LazySequence[T]':
    """create a sequence whose i-th item is nth(i), infinite unless length is given"""
    return _IndexedSequence(nth, length)


def arange(start: float, stop: Optional[float] = None, step: float = 1) -> 'LazySequence[float]':
    """
    create an arithmetic progression from start up to (never including) stop.

    arange(stop) starts at 0, arange(start, stop) steps by 1. the number of
    items is ceil((stop - start) / step), so floating point bounds never let
    stop slip in. a step whose sign disagrees with stop - start gives an empty
    sequence; a step of zero raises InvalidStepError.
    """
    if stop is None:
        start, stop = 0, start
    if step == 0:
        logger.debug(f"arange rejected zero step for start={start}, stop={stop}")
        raise InvalidStepError("arange step must not be zero")

    span = (stop - start) / step
    if math.isnan(span):
        length = 0
    elif math.isinf(span):
        # an infinite stop in the direction of step counts forever
        length = None if span > 0 else 0
    else:
        length = max(0, math.ceil(span))
    logger.debug(f"arange({start}, {stop}, {step}) has length {length}")

    return sequence(lambda i: start + i * step, length)


def recursive(nth: Callable[..., T], length: Cap = None, *initial: T) -> 'LazySequence[T]':
    """
    create a sequence from a recurrence over the previous len(initial) items.

    the first items are the initial ones; every later item is nth applied to
    the window of the most recent items, oldest first.
    e.g. recursive(lambda a, b: a + b, 7, 0, 1) -> 0, 1, 1, 2, 3, 5, 8
    """
    if not initial:
        raise TypeError("recursive() requires at least one initial item")
    logger.debug(f"recursive sequence with a window of {len(initial)} items")
    return _WindowedSequence(nth, initial, length)


def empty() -> 'LazySequence[Any]':
    """create a sequence that is done from the start"""
    return _EmptySequence()


def iterator(source: Union[Iterable[T], Any]) -> 'LazySequence[T]':
    """
    adapt an iterable, or an object supporting len() and indexing, into a sequence.
    element order is preserved. a LazySequence is returned as is.
    """
    if isinstance(source, LazySequence):
        return source
    if getattr(source, '__iter__', None) is not None:
        return _IterableSequence(source)
    if hasattr(source, '__len__') and hasattr(source, '__getitem__'):
        return sequence(lambda i: source[i], len(source))
    raise TypeError(f"'{type(source).__name__}' object is neither iterable nor indexable")
