from __future__ import annotations
from .types import *


class AbsentValueError(ValueError):
    """raised when the value of an absent optional is accessed."""
    pass


class Optional(Generic[T]):
    """
    holds either exactly one value (present) or nothing (absent).
    presence is tracked by a flag, so a present optional may wrap None.
    optional.of(None) is the only factory that maps None to absent.
    """

    __slots__ = ('_value', '_present')

    _ABSENT_HASH = 0
    _NONE_HASH = 1

    def __init__(self, value: Any, present: bool):
        # use the classmethod factories; this is not part of the public api
        self._present = bool(present)
        self._value = value if self._present else None

    # --- factories ---

    @classmethod
    def of(cls, value: Union[T, None]) -> 'Optional[T]':
        """present for any value except None"""
        if value is None:
            return cls.absent()
        return cls(value, True)

    @classmethod
    def present(cls, value: T) -> 'Optional[T]':
        """always present, even when value is None"""
        return cls(value, True)

    @classmethod
    def absent(cls) -> 'Optional[Any]':
        return _ABSENT

    @classmethod
    def empty(cls) -> 'Optional[Any]':
        return _ABSENT

    # --- queries ---

    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    def get(self) -> T:
        """the wrapped value. raises AbsentValueError if absent."""
        if not self._present:
            raise AbsentValueError("no value present")
        return self._value

    def or_none(self) -> Union[T, None]:
        return self._value if self._present else None

    def or_(self, default: T) -> T:
        """the wrapped value, or default if absent"""
        return self._value if self._present else default

    def or_get(self, supplier: Supplier[T]) -> T:
        """the wrapped value, or the supplier's result. the supplier only runs when absent."""
        if self._present:
            return self._value
        return supplier()

    # --- transformations ---

    def map(self, func: Selector[T, U]) -> 'Optional[U]':
        if not self._present:
            return _ABSENT
        return Optional.present(func(self._value))

    def if_present(self, action: Action[T]) -> None:
        if self._present:
            action(self._value)

    # --- protocol ---

    def __iter__(self) -> Iterator[T]:
        if self._present:
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if not self._present or not other._present:
            return self._present == other._present
        return null_safe_equals(self._value, other._value)

    def __hash__(self) -> int:
        if not self._present:
            return self._ABSENT_HASH
        if self._value is None:
            return self._NONE_HASH
        return hash(self._value)

    def __repr__(self) -> str:
        if not self._present:
            return "Optional.absent()"
        return f"Optional.present({self._value!r})"


# immutable, so one shared instance is enough
_ABSENT: Optional[Any] = Optional(None, False)
