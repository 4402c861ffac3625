"""A list that can be filled with << and walked with a callback."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


class Stock(list):
    """List with stream-style appending and a walk helper."""

    def __lshift__(self, item):
        self.append(item)
        return self

    def walk(self, func: Callable[[T], object]) -> None:
        """Call func on every element in order."""
        for item in self:
            func(item)