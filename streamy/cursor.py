from __future__ import annotations
from .types import *


class Cursor(Generic[T]):
    """
    a single traversal over a stream. created fresh for every iteration and
    owned by the loop that asked for it.
    supports both has_next()/next() and the python iterator protocol.
    """

    __slots__ = ('_source', '_pending', '_has_pending', '_exhausted')

    def __init__(self, source: Iterator[T]):
        self._source = source
        self._pending = None
        self._has_pending = False
        self._exhausted = False

    def has_next(self) -> bool:
        """true if another element is available. looks ahead at most one element."""
        if self._has_pending:
            return True
        if self._exhausted:
            return False
        try:
            self._pending = next(self._source)
        except StopIteration:
            self._exhausted = True
            return False
        self._has_pending = True
        return True

    def next(self) -> T:
        """return the next element, raising StopIteration once exhausted"""
        return self.__next__()

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        if self._has_pending:
            item = self._pending
            self._pending = None
            self._has_pending = False
            return item
        if self._exhausted:
            raise StopIteration
        try:
            return next(self._source)
        except StopIteration:
            self._exhausted = True
            raise

    def __repr__(self) -> str:
        return f"Cursor(pending={self._has_pending}, exhausted={self._exhausted})"


class MappedCursor(Cursor[U]):
    """
    applies func to each element of an upstream cursor.
    has_next() only asks upstream, so func runs on next() and nowhere else.
    """

    __slots__ = ('_upstream', '_func')

    def __init__(self, upstream: Cursor[T], func: Selector[T, U]):
        self._upstream = upstream
        self._func = func

    def has_next(self) -> bool:
        return self._upstream.has_next()

    def __next__(self) -> U:
        return self._func(self._upstream.next())

    def __repr__(self) -> str:
        return f"MappedCursor(upstream={self._upstream!r})"
