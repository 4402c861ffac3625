"""Resources owned by a renderer and a keyed store that manages them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

R = TypeVar("R", bound="Resource")


@dataclass
class Resource:
    """Base of every render resource."""

    render: Any = None
    entry_key: Any = field(default=None, compare=False, repr=False)

    def _free(self) -> None:
        """Drop the resource's link to its renderer."""
        self.render = None


class ResourceManager(Generic[R]):
    """Store of resources keyed by a running number or by their name."""

    def __init__(self, render: Any, keyed_by_name: bool = False):
        self.render = render
        self.keyed_by_name = keyed_by_name
        self._stock: dict[Any, R] = {}
        self._total = 0

    def add(self, entry: R) -> R:
        """Store a copy of the entry and return the stored copy."""
        if not isinstance(entry, Resource):
            raise TypeError("only resources can be stored")
        key = entry.name if self.keyed_by_name else self._total
        self._total += 1
        stored = copy.copy(entry)
        stored.entry_key = key
        self._stock[key] = stored
        return stored

    def find(self, key: Any) -> Optional[R]:
        """The stored entry with this key, or None."""
        return self._stock.get(key)

    def delete(self, entry: Optional[R]) -> "ResourceManager[R]":
        """Free a stored entry and remove it from the store."""
        if entry is None:
            return self
        entry._free()
        self._stock.pop(entry.entry_key, None)
        return self

    def clear(self) -> "ResourceManager[R]":
        """Free and remove every stored entry."""
        for entry in self._stock.values():
            entry._free()
        self._stock.clear()
        return self

    def __len__(self) -> int:
        return len(self._stock)