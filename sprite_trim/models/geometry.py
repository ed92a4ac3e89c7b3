from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class Rectangle:
    """
    Pixel rectangle, half-open on the right and bottom edges.
    """
    left: int
    top: int
    right: int   # exclusive
    bottom: int  # exclusive

    @classmethod
    def full(cls, width: int, height: int) -> Rectangle:
        return cls(left=0, top=0, right=width, bottom=height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class AspectEnvelope:
    """
    Inclusive range of legal width/height ratios.
    Bounds are exact fractions so derived sizes never suffer float drift.
    """
    min_ratio: Fraction
    max_ratio: Fraction

    def contains(self, width: int, height: int) -> bool:
        return self.min_ratio <= Fraction(width, height) <= self.max_ratio


ASPECT_ENVELOPE = AspectEnvelope(min_ratio=Fraction(2, 5), max_ratio=Fraction(5, 2))
