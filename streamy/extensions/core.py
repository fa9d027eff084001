from __future__ import annotations
import typing
from itertools import chain, islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream

class _CoreOperations(Generic[T]):
    def map(self: 'Stream[T]', func: Selector[T, U]) -> 'Stream[U]':
        """project each element to a new form"""
        from ..stream import Stream
        from ..cursor import MappedCursor
        return Stream(lambda: MappedCursor(self.iterator(), func))

    def flat_map(self: 'Stream[T]', func: Selector[T, Iterable[U]]) -> 'Stream[U]':
        """project each element to an iterable and flatten the results"""
        from ..stream import Stream
        def flat_map_cursor():
            # an empty inner iterable just falls through to the next outer element
            for item in self:
                yield from func(item)
        return Stream(flat_map_cursor)

    def filter(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """keep elements that satisfy the predicate"""
        from ..stream import Stream
        def filter_cursor():
            for item in self:
                if predicate(item):
                    yield item
        return Stream(filter_cursor)

    def without(self: 'Stream[T]', value: T) -> 'Stream[T]':
        """drop every element equal to value. None only matches None."""
        return self.filter(lambda item: not null_safe_equals(item, value))

    def take(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """the first 'count' elements"""
        from ..stream import Stream
        # islice checks the count before pulling, so element count + 1 is never read
        return Stream(lambda: islice(self, max(count, 0)))

    def skip(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """everything after the first 'count' elements"""
        from ..stream import Stream
        def skip_cursor():
            cursor = self.iterator()
            remaining = count
            while remaining > 0 and cursor.has_next():
                cursor.next()
                remaining -= 1
            return cursor
        return Stream(skip_cursor)

    def merge(self: 'Stream[T]', other: Iterable[T]) -> 'Stream[T]':
        """this stream's elements followed by the elements of other"""
        from ..stream import Stream
        return Stream(lambda: chain(self, other))

    def cast(self: 'Stream[T]', type_: Type[U]) -> 'Stream[U]':
        """check that every element is an instance of type_, failing on the first that is not"""
        def cast_item(item):
            if not isinstance(item, type_):
                raise TypeError(f"cannot cast {item!r} to {type_.__name__}")
            return item
        return self.map(cast_item)

    def compose(self: 'Stream[T]', factory: Callable[['Stream[T]'], R]) -> R:
        """hand this stream to factory and return whatever it builds"""
        return factory(self)
