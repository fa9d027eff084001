from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..optional import Optional

if typing.TYPE_CHECKING:
    from ..stream import Stream


def to_ordered_list(source: Iterable[T]) -> List[T]:
    """materialize any iterable into a list, keeping iteration order and duplicates"""
    return [item for item in source]


class _TerminalOperations(Generic[T]):
    def fold(self: 'Stream[T]', initial: U, operation: Accumulator[U, T]) -> U:
        """left fold starting from initial"""
        return reduce(operation, self, initial)

    def reduce(self: 'Stream[T]', operation: Callable[[T, T], T]) -> Optional[T]:
        """left fold seeded with the first element. absent for an empty stream."""
        cursor = self.iterator()
        if not cursor.has_next():
            return Optional.absent()
        result = cursor.next()
        while cursor.has_next():
            result = operation(result, cursor.next())
        return Optional.present(result)

    def first(self: 'Stream[T]') -> Optional[T]:
        cursor = self.iterator()
        return Optional.present(cursor.next()) if cursor.has_next() else Optional.absent()

    def last(self: 'Stream[T]') -> Optional[T]:
        # track "found" separately so a trailing None is still reported as present
        found = False
        value = None
        for item in self:
            found = True
            value = item
        return Optional.present(value) if found else Optional.absent()

    def collect(self: 'Stream[T]', collector: Callable[['Stream[T]'], R]) -> R:
        """pass this stream to collector and return its result"""
        return collector(self)


class TerminalAccessor(Generic[T]):
    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """convert to list"""
        return to_ordered_list(self._stream)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._stream)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._stream)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: typing.Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._stream}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(to_ordered_list(self._stream))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(to_ordered_list(self._stream))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(to_ordered_list(self._stream))

    def count(self, predicate: typing.Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._stream)
        return sum(1 for x in self._stream if predicate(x))

    def any(self, predicate: typing.Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first match."""
        if predicate is None: return self._stream.iterator().has_next()
        return any(predicate(x) for x in self._stream)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._stream)
