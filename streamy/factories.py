import typing
from itertools import repeat as itertools_repeat
from .types import *

if typing.TYPE_CHECKING:
    from .stream import Stream

def from_supplier(cursor_factory: CursorFactory[T]) -> 'Stream[T]':
    """create stream from a function returning a fresh iterator per iteration"""
    from .stream import Stream
    return Stream(cursor_factory)

def from_array(elements: Sequence[T]) -> 'Stream[T]':
    """
    create stream over an indexable sequence (list, tuple, numpy array, ...).
    elements are read by index as the cursor advances, not copied.
    the length is fixed when each cursor starts.
    """
    def array_cursor():
        length = len(elements)
        return (elements[index] for index in range(length))
    return from_supplier(array_cursor)

def from_iterable(source: Iterable[T]) -> 'Stream[T]':
    """create stream from iterable. re-iterable only if the source is."""
    return from_supplier(lambda: iter(source))

def single(value: T) -> 'Stream[T]':
    """create stream with exactly one element"""
    return from_supplier(lambda: iter((value,)))

def of(*values: T) -> 'Stream[T]':
    """create stream from the given values"""
    return from_array(values)

def empty() -> 'Stream[Any]':
    """create empty stream"""
    return from_supplier(lambda: iter(()))

def from_range(start: int, stop: int) -> 'Stream[int]':
    """create stream of integers in [start, stop)"""
    return from_supplier(lambda: iter(range(start, stop)))

def repeat(item: T, count: int) -> 'Stream[T]':
    """create stream with repeated item"""
    return from_supplier(lambda: itertools_repeat(item, max(count, 0)))

def generate(supplier: Supplier[T], count: typing.Optional[int] = None) -> 'Stream[T]':
    """call supplier for each element on demand. unbounded when count is None."""
    def generate_cursor():
        if count is None:
            while True:
                yield supplier()
        for _ in range(count):
            yield supplier()
    return from_supplier(generate_cursor)

# --- aliases ---
S = from_iterable
