"""Change-notifying properties and simple signals for screen state objects."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Generic, TypeVar, overload

T = TypeVar("T")

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> Slot:
        """Attach ``slot``; returns it so this can be used as a decorator."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, not {type(slot).__name__}")
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Slot) -> None:
        """Detach ``slot``; raises ValueError if it was never connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class NotifyProperty(Generic[T]):
    """A property that emits ``<name>_changed`` when its value really changes.

    ``kind`` converts every assigned value (for example ``int`` or ``str``);
    a value it cannot convert raises the converter's own error.
    """

    def __init__(self, default: T, kind: Callable[[Any], T] | None = None) -> None:
        self.default = default
        self.kind = kind
        self.name = ""
        self.signal_name = ""
        self.storage = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.signal_name = f"{name}_changed"
        self.storage = f"_{name}"

    @overload
    def __get__(self, instance: None, owner: type) -> NotifyProperty[T]: ...

    @overload
    def __get__(self, instance: object, owner: type) -> T: ...

    def __get__(self, instance: object | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.storage, self.default)

    def __set__(self, instance: object, value: Any) -> None:
        if self.kind is not None:
            value = self.kind(value)
        if instance.__dict__.get(self.storage, self.default) == value:
            return
        instance.__dict__[self.storage] = value
        getattr(instance, self.signal_name).emit()


class Observable:
    """Base for objects whose NotifyProperty fields each get a change signal."""

    _notify_properties: ClassVar[tuple[NotifyProperty[Any], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        found: dict[str, NotifyProperty[Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, NotifyProperty):
                    found[name] = attr
        cls._notify_properties = tuple(found.values())

    def __init__(self) -> None:
        for prop in self._notify_properties:
            setattr(self, prop.signal_name, Signal())
            self.__dict__[prop.storage] = prop.default

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{prop.name}={getattr(self, prop.name)!r}" for prop in self._notify_properties
        )
        return f"{type(self).__name__}({fields})"