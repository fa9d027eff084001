from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream

logger = logging.getLogger(__name__)


class _ValueLookup(Generic[T]):
    """
    membership by value equality. hashable values go in a set,
    anything unhashable (dicts, lists) falls back to a linear scan.
    """

    def __init__(self, values: Iterable[T] = ()):
        self._hashed: Set[T] = set()
        self._unhashable: List[T] = []
        for value in values:
            self.add(value)

    def __contains__(self, value: T) -> bool:
        try:
            return value in self._hashed
        except TypeError:
            return any(null_safe_equals(value, seen) for seen in self._unhashable)

    def add(self, value: T) -> None:
        try:
            self._hashed.add(value)
        except TypeError:
            self._unhashable.append(value)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)


class _BufferingOperations(Generic[T]):
    def distinct(self: 'Stream[T]') -> 'Stream[T]':
        """drop repeated elements, keeping the first occurrence of each"""
        from ..stream import Stream
        def distinct_cursor():
            # a new seen-set per iteration
            seen = _ValueLookup()
            for item in self:
                if item not in seen:
                    seen.add(item)
                    yield item
        return Stream(distinct_cursor)

    def sorted(self: 'Stream[T]', comparator: typing.Optional[Comparer[T]] = None, *,
               key: typing.Optional[KeySelector[T, K]] = None,
               reverse: bool = False) -> 'Stream[T]':
        """
        stable sort of the whole stream, redone on every iteration.
        comparator is a cmp-style function (negative, zero, positive);
        key/reverse behave like the builtin sorted(). with neither, natural order is used.
        """
        from ..stream import Stream
        from .terminal import to_ordered_list
        if comparator is not None and key is not None:
            raise ValueError("pass either a comparator or a key, not both")
        sort_key = cmp_to_key(comparator) if comparator is not None else key

        def sorted_cursor():
            buffer = to_ordered_list(self)
            logger.debug(f"sorted: buffered {len(buffer)} elements")
            buffer.sort(key=sort_key, reverse=reverse)
            return buffer
        return Stream(sorted_cursor)

    def reverse(self: 'Stream[T]') -> 'Stream[T]':
        """the elements back to front. buffers the whole stream per iteration."""
        from ..stream import Stream
        from .terminal import to_ordered_list
        def reverse_cursor():
            buffer = to_ordered_list(self)
            logger.debug(f"reverse: buffered {len(buffer)} elements")
            return reversed(buffer)
        return Stream(reverse_cursor)

    def separate(self: 'Stream[T]', exclude: Iterable[T]) -> 'Stream[T]':
        """
        elements not found in exclude.
        exclude is read once, right now; the filtering itself stays lazy.
        """
        from .terminal import to_ordered_list
        excluded = _ValueLookup(to_ordered_list(exclude))
        logger.debug(f"separate: excluding {len(excluded)} values")
        return self.filter(lambda item: item not in excluded)
