"""
Temperature scales — Celsius/Fahrenheit conversion and dual-scale bounds.

Values are stored in Celsius (the primary scale).  The Fahrenheit
(secondary) bounds are the converted Celsius range rounded inward to the
nearest multiple of ten, so every Fahrenheit label lies inside the
Celsius span.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

DECADE = 10

PRIMARY_UNIT = "C"
SECONDARY_UNIT = "F"


def to_fahrenheit(celsius: float) -> float:
    return 1.8 * celsius + 32


def to_celsius(fahrenheit: float) -> float:
    return 5.0 * (fahrenheit - 32) / 9.0


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit *value* to ``[lo, hi]``."""
    return min(max(value, lo), hi)


@dataclass(frozen=True)
class DualScale:
    """Primary (Celsius) range and the derived secondary (Fahrenheit) range.

    Parameters:
        minimum: Lowest displayed temperature in Celsius.
        maximum: Highest displayed temperature in Celsius.

    Raises:
        ValueError: if the range is empty or inverted.
    """
    minimum: int
    maximum: int
    min_secondary: int = field(init=False)
    max_secondary: int = field(init=False)

    def __post_init__(self):
        if self.maximum <= self.minimum:
            raise ValueError(
                f"maximum ({self.maximum}) must be greater than minimum ({self.minimum})"
            )
        # Round up / down so the Fahrenheit range sits inside the Celsius one
        lo = DECADE * math.ceil(to_fahrenheit(self.minimum) / DECADE)
        hi = DECADE * math.floor(to_fahrenheit(self.maximum) / DECADE)
        object.__setattr__(self, "min_secondary", int(lo))
        object.__setattr__(self, "max_secondary", int(hi))

    @property
    def span(self) -> int:
        return self.maximum - self.minimum

    @property
    def secondary_span(self) -> int:
        return self.max_secondary - self.min_secondary

    @property
    def decades(self) -> float:
        """Number of ten-degree steps covered by the primary range."""
        return self.span / DECADE

    def primary_decades(self) -> List[int]:
        """Labels for the primary scale, top (maximum) to bottom."""
        return list(range(self.maximum, self.minimum - 1, -DECADE))

    def secondary_decades(self) -> List[int]:
        """Labels for the secondary scale, top to bottom (may be empty)."""
        return list(range(self.max_secondary, self.min_secondary - 1, -DECADE))

    def fraction(self, value: float) -> float:
        """Fill fraction 0..1 of *value*, clamped to the primary range."""
        return (clamp(value, self.minimum, self.maximum) - self.minimum) / self.span
