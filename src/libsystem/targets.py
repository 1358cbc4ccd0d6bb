"""Destination handles written to by configuration converters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Protocol


class Target(Protocol):
    """Anything a converter can read the current value from and store into."""

    def get(self) -> Any:
        ...

    def set(self, value: Any) -> None:
        ...


@dataclass
class Slot:
    """Standalone value box, handy for tables built from local variables."""

    value: Any = None

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value


class AttrTarget:
    """Bind a converter to an attribute of an object (e.g. a dataclass field)."""

    def __init__(self, obj: Any, name: str) -> None:
        self._obj = obj
        self._name = name

    def get(self) -> Any:
        return getattr(self._obj, self._name, None)

    def set(self, value: Any) -> None:
        setattr(self._obj, self._name, value)

    def __repr__(self) -> str:
        return f"AttrTarget({type(self._obj).__name__}.{self._name})"


class ItemTarget:
    """Bind a converter to a key of a mutable mapping."""

    def __init__(self, mapping: MutableMapping[str, Any], key: str) -> None:
        self._mapping = mapping
        self._key = key

    def get(self) -> Any:
        return self._mapping.get(self._key)

    def set(self, value: Any) -> None:
        self._mapping[self._key] = value

    def __repr__(self) -> str:
        return f"ItemTarget({self._key!r})"
