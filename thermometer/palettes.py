"""
Colours used to paint the thermometer.

A single fixed scheme; the values are hex-equivalent RGB tuples so the
renderer stays free of any Qt types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]


def hex_to_rgb(value: int) -> RGB:
    """``0x8A0707`` → ``(138, 7, 7)``."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


@dataclass(frozen=True)
class ColorScheme:
    """Immutable colour set for one thermometer."""
    body: RGB
    track: RGB
    mercury: RGB
    text: RGB


DEFAULT_SCHEME = ColorScheme(
    body=(255, 255, 255),
    track=hex_to_rgb(0xEEEEEE),
    mercury=hex_to_rgb(0x8A0707),
    text=(0, 0, 0),
)
