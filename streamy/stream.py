from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .cursor import Cursor

# --- operators ---
from .extensions.core import _CoreOperations
from .extensions.buffering import _BufferingOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor

# --- abstract base class ---

class IStream(ABC, Generic[T]):
    @abstractmethod
    def iterator(self) -> Cursor[T]:
        """create a fresh cursor over the elements"""
        pass

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

# --- base stream implementation ---

class _BaseStream(IStream[T]):
    def __init__(self, cursor_factory: CursorFactory[T]):
        """init with a function that returns a new iterator each time it is called"""
        self._cursor_factory = cursor_factory

    def iterator(self) -> Cursor[T]:
        # no caching: every call starts over from the factory
        source = self._cursor_factory()
        if isinstance(source, Cursor):
            return source
        return Cursor(iter(source))

# --- main stream class ---

class Stream(
    _BaseStream[T],
    _CoreOperations[T],
    _BufferingOperations[T],
    _TerminalOperations[T]
):
    """a lazy, re-iterable sequence of elements with chainable operators."""
    def __init__(self, cursor_factory: CursorFactory[T]):
        super().__init__(cursor_factory)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"Stream({self._cursor_factory!r})"
