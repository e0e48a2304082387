"""Stored fields with before/after change hooks.

Usage:
    @dataclass
    class Thermostat:
        target: Observed[int] = Observed(20)
        log: list[str] = field(default_factory=list)

        @target.will_set
        def _before(self, new_value: int) -> None:
            self.log.append(f"about to set {new_value}")

        @target.did_set
        def _after(self, old_value: int) -> None:
            self.log.append(f"changed from {old_value}")

    t = Thermostat()
    add_listener(t, "target", print)
    t.target = 22   # will_set, store, did_set, then listeners

The first assignment (normally from __init__) only stores the value; hooks
and listeners fire on later assignments, even when the value is unchanged.

Observed keeps its value in the instance __dict__, so dataclasses using it
must not set slots=True.
"""

from __future__ import annotations

import inspect
import weakref
from collections.abc import Callable
from typing import Any

from playkit.core.properties.models import PropertyChange


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

type WillSetHook[T] = Callable[[Any, T], None]
type DidSetHook[T] = Callable[[Any, T], None]
type Listener = Callable[[PropertyChange], None]


class Observed[T]:
    """Data descriptor running will_set/did_set hooks around each assignment.

    Hooks belong to the descriptor of the class that declared the field. A
    subclass adding its own hooks re-declares the field with inherit(), which
    keeps the inherited hooks and leaves the base class untouched:

        class Base:
            level = Observed(0)

        class Child(Base):
            level = Observed.inherit(Base, "level")

            @level.did_set
            def _child_only(self, old_value): ...
    """

    def __init__(self, default: T = MISSING) -> None:
        self._default = default
        self._will_set: list[WillSetHook[T]] = []
        self._did_set: list[DidSetHook[T]] = []
        # Keyed by id(instance); weakref.finalize drops entries on collection.
        self._listeners: dict[int, list[Listener]] = {}
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: object | None, owner: type | None = None) -> T:
        if instance is None:
            # Class access yields the default so dataclass picks it up.
            if self._default is MISSING:
                raise AttributeError(f"Observed field {self.name!r} has no default")
            return self._default
        try:
            return instance.__dict__[self.name]  # type: ignore[no-any-return]
        except KeyError:
            raise AttributeError(
                f"{type(instance).__name__!r} object has no attribute {self.name!r}"
            ) from None

    def __set__(self, instance: object, value: T) -> None:
        state = instance.__dict__
        if self.name not in state:
            state[self.name] = value
            return

        old = state[self.name]
        for will_set in self._will_set:
            will_set(instance, value)
        state[self.name] = value
        for did_set in self._did_set:
            did_set(instance, old)

        listeners = self._listeners.get(id(instance))
        if listeners:
            change = PropertyChange(name=self.name, old=old, new=value)
            for listener in list(listeners):
                listener(change)

    def will_set(self, hook: WillSetHook[T]) -> WillSetHook[T]:
        """Register a hook called as hook(instance, new_value) before the store."""
        self._will_set.append(hook)
        return hook

    def did_set(self, hook: DidSetHook[T]) -> DidSetHook[T]:
        """Register a hook called as hook(instance, old_value) after the store."""
        self._did_set.append(hook)
        return hook

    @classmethod
    def inherit(cls, owner: type, name: str) -> Observed[Any]:
        """Copy an observed field of owner, default and hooks, for a subclass to extend.

        Raises:
            AttributeError: If name is not an Observed field of owner.
        """
        base = inspect.getattr_static(owner, name, None)
        if not isinstance(base, Observed):
            raise AttributeError(f"{owner.__name__}.{name} is not an Observed field")
        field: Observed[Any] = cls(base._default)
        field._will_set = list(base._will_set)
        field._did_set = list(base._did_set)
        return field

    def subscribe(self, instance: object, listener: Listener) -> None:
        """Add a listener for this field on one instance only.

        Listeners are held strongly; one that references the instance keeps it
        alive until removed.
        """
        key = id(instance)
        if key not in self._listeners:
            self._listeners[key] = []
            weakref.finalize(instance, self._listeners.pop, key, None)
        self._listeners[key].append(listener)

    def unsubscribe(self, instance: object, listener: Listener) -> None:
        """Remove a listener added with subscribe().

        Raises:
            ValueError: If listener is not subscribed on this instance.
        """
        listeners = self._listeners.get(id(instance), [])
        if listener not in listeners:
            raise ValueError(f"Listener not subscribed to {type(instance).__name__}.{self.name}")
        listeners.remove(listener)


def _observed_field(instance: object, name: str) -> Observed[Any]:
    descriptor = inspect.getattr_static(type(instance), name, None)
    if not isinstance(descriptor, Observed):
        raise AttributeError(f"{type(instance).__name__}.{name} is not an Observed field")
    return descriptor


def add_listener(instance: object, name: str, listener: Listener) -> None:
    """Subscribe listener to assignments of one observed field on one instance.

    Listeners run after the field's did_set hooks, in subscription order.
    Subscriptions are not part of the instance's state, so copies of the
    instance start with none.

    Raises:
        AttributeError: If name is not an Observed field of the instance's type.
    """
    _observed_field(instance, name).subscribe(instance, listener)


def remove_listener(instance: object, name: str, listener: Listener) -> None:
    """Unsubscribe a listener added with add_listener.

    Raises:
        AttributeError: If name is not an Observed field of the instance's type.
        ValueError: If listener is not subscribed.
    """
    _observed_field(instance, name).unsubscribe(instance, listener)
