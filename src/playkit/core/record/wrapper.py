from __future__ import annotations

import copy
import inspect
import types
from typing import Any, cast

from playkit.core.record.models import MutationError, is_mutating
from playkit.core.types import Copy


class Frozen[T]:
    """Immutable view over a private deep copy of a record.

    Reads return copies, non-mutating methods work, and anything that would
    change the record raises MutationError.

    Methods run with the frozen view itself as `self`, so an unmarked method
    that assigns to a field still raises MutationError, and changes made to
    values it reads stay local to those copies.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", copy.deepcopy(value))

    def __getattr__(self, name: str) -> Any:
        if name == "_value":
            raise AttributeError(name)
        attr = getattr(self._value, name)
        if callable(attr):
            if is_mutating(attr):
                raise MutationError(
                    f"Cannot call mutating method {name}() on a frozen "
                    f"{type(self._value).__name__}"
                )
            if inspect.ismethod(attr) and attr.__self__ is self._value:
                return types.MethodType(attr.__func__, self)
            return attr
        return copy.deepcopy(attr)

    def __setattr__(self, name: str, value: Any) -> None:
        raise MutationError(
            f"Cannot assign to {name!r} on a frozen {type(self._value).__name__}"
        )

    def __delattr__(self, name: str) -> None:
        raise MutationError(
            f"Cannot delete {name!r} on a frozen {type(self._value).__name__}"
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Frozen):
            return bool(self._value == other._value)
        return bool(self._value == other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Frozen({self._value!r})"

    # Immutable, so copies can share the instance.
    def __copy__(self) -> Frozen[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Frozen[T]:
        return self

    def unwrap(self) -> Copy[T]:
        """Return a mutable deep copy of the wrapped record."""
        return cast(T, copy.deepcopy(self._value))

    @property
    def record_type(self) -> type[T]:
        """Return the type of the wrapped record."""
        return type(self._value)


def freeze[T](value: T | Frozen[T]) -> Frozen[T]:
    """Declare a record immutable. Already-frozen values are returned as-is."""
    if isinstance(value, Frozen):
        return value
    return Frozen(value)


def thaw[T](value: T | Frozen[T]) -> Copy[T]:
    """Declare a mutable copy of a record, unwrapping frozen views."""
    if isinstance(value, Frozen):
        return value.unwrap()
    return copy.deepcopy(value)
