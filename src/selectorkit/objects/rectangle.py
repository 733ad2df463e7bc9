"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with a width and a height."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
