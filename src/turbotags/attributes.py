"""Ordered, case-insensitive attribute collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class Attribute:
    __slots__ = ("name", "value")

    def __init__(self, name: str, value: Any = None) -> None:
        if name is None or name == "":
            msg = "Attribute name must be a non-empty string"
            raise ValueError(msg)
        self.name = name
        self.value = value

    @property
    def minimized(self) -> bool:
        """True for bare boolean attributes such as `<input disabled>`."""
        return self.value is None

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name.lower() == other.name.lower() and self.value == other.value

    __hash__ = None  # type: ignore[assignment]


class AttributeList:
    """Attributes of one element, in source order.

    Names are matched case-insensitively. The first spelling of a name is kept
    for output; `set_attribute` replaces the value in place so the attribute
    keeps its position.
    """

    __slots__ = ("_items",)

    def __init__(self, attributes: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> None:
        self._items: list[Attribute] = []
        if attributes is None:
            return
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        for name, value in pairs:
            self.set_attribute(name, value)

    def _index(self, name: str) -> int:
        lowered = name.lower()
        for i, attr in enumerate(self._items):
            if attr.name.lower() == lowered:
                return i
        return -1

    def set_attribute(self, name: str, value: Any = None) -> None:
        i = self._index(name)
        if i == -1:
            self._items.append(Attribute(name, value))
        else:
            self._items[i].value = value

    def add(self, name: str, value: Any = None) -> None:
        """Append without replacing; used when copying raw source attributes."""
        self._items.append(Attribute(name, value))

    def remove(self, name: str) -> bool:
        lowered = name.lower()
        before = len(self._items)
        self._items = [a for a in self._items if a.name.lower() != lowered]
        return len(self._items) != before

    def get(self, name: str, default: Any = None) -> Any:
        i = self._index(name)
        if i == -1:
            return default
        return self._items[i].value

    def contains(self, name: str) -> bool:
        return self._index(name) != -1

    def names(self) -> list[str]:
        return [a.name for a in self._items]

    def copy(self) -> AttributeList:
        out = AttributeList()
        out._items = [Attribute(a.name, a.value) for a in self._items]
        return out

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __getitem__(self, name: str) -> Attribute:
        i = self._index(name)
        if i == -1:
            raise KeyError(name)
        return self._items[i]

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(f"{a.name}={a.value!r}" for a in self._items)
        return f"AttributeList({inner})"
