from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Union,
    Dict, List, Tuple, Set, Type, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Supplier = Callable[[], T]
Action = Callable[[T], Any]
CursorFactory = Callable[[], Iterable[T]]


def null_safe_equals(left: Any, right: Any) -> bool:
    """none only equals none; everything else uses =="""
    if left is None or right is None:
        return left is right
    return left == right
