"""Shape records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width by height rectangle."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
