from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# none means "no cap"
Cap = Optional[int]

Predicate = Callable[[T], bool]
Mapper = Callable[[T], U]
KeySelector = Callable[[T], K]
LessThan = Callable[[T, T], bool]
Nth = Callable[[int], T]
# reducers receive the item first and the accumulator second
Reducer = Callable[[T, U], U]


class StepResult(Generic[T]):
    """the outcome of a single pull: an item, or the done signal"""

    __slots__ = ('done', 'value')

    def __init__(self, done: bool, value: Optional[T] = None):
        object.__setattr__(self, 'done', done)
        object.__setattr__(self, 'value', None if done else value)

    def __setattr__(self, name, value):
        raise AttributeError("step results are immutable")

    def __iter__(self) -> Iterator[Any]:
        # allows `value, done = step`
        yield self.value
        yield self.done

    def __eq__(self, other) -> bool:
        if not isinstance(other, StepResult): return NotImplemented
        return self.done == other.done and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.done, self.value))

    def __repr__(self) -> str:
        if self.done: return "StepResult(done=True)"
        return f"StepResult(done=False, value={self.value!r})"


DONE: StepResult[Any] = StepResult(True)


def item(value: T) -> StepResult[T]:
    """wrap a value in a not-done step result"""
    return StepResult(False, value)


# --- errors ---

class LazySequenceError(ValueError):
    """base class for errors raised by lazyseq"""
    pass


class EmptySequenceError(LazySequenceError):
    """raised when an extremum is requested from a sequence with no items"""
    pass


class InvalidStepError(LazySequenceError):
    """raised when an arithmetic range is given a step of zero"""
    pass
