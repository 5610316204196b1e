from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class LazySequence(ABC, Generic[T]):
    """
    a stateful, single-pass, pull-based sequence.

    every producer and transformer implements `next_step`, which advances the
    cursor by one position and reports either an item or the done signal.
    once done has been reported, every later call reports done again.
    the handle is not copyable: two callers pulling from the same instance
    share (and advance) the same cursor.
    """

    @abstractmethod
    def next_step(self) -> StepResult[T]:
        """advance one position and report the result"""
        pass

    @property
    def length(self) -> Optional[int]:
        """items still to be produced, or none when unbounded or unknown"""
        return None

    # --- python iterator protocol ---

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        step = self.next_step()
        if step.done: raise StopIteration
        return step.value

    def __length_hint__(self) -> int:
        remaining = self.length
        return remaining if remaining is not None else 0

    @property
    def to(self) -> 'TerminalAccessor[T]':
        return TerminalAccessor(self)

    # --- chaining ---

    def shift(self, n: int = 0) -> StepResult[T]:
        """discard n items and return the step after them"""
        from .core import shift
        return shift(self, n)

    def map(self, mapper: Mapper[T, U]) -> 'LazySequence[U]':
        """lazily apply mapper to every item"""
        from .extensions.transform import map
        return map(self, mapper)

    def filter(self, test: Predicate[T]) -> 'LazySequence[T]':
        """lazily keep only the items that pass test"""
        from .extensions.transform import filter
        return filter(self, test)

    def concat(self, *others: Iterable[T]) -> 'LazySequence[T]':
        """chain other sequences after this one"""
        from .extensions.transform import concatenate
        return concatenate(self, *others)

    def unshift(self, *values: T) -> 'LazySequence[T]':
        """prepend values ahead of this sequence"""
        from .extensions.transform import unshift
        return unshift(self, *values)

    def __repr__(self) -> str:
        remaining = self.length
        shown = "unknown" if remaining is None else remaining
        return f"{type(self).__name__.lstrip('_')}(length={shown})"
