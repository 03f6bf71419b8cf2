"""
Proportional layout — every drawing coordinate is derived from the widget size.

``compute_layout`` is pure: the same ``(width, height, scale)`` always
yields the same geometry and the current temperature never enters it.
``LayoutCache`` keeps the last result so painting at 30 fps only pays for
the arithmetic when the widget is actually resized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .scales import DECADE, DualScale, to_celsius

logger = logging.getLogger(__name__)

# Proportions (fractions of the panel or of the body)
MARGIN = 0.05          # distance from the panel edge
RATIO = 2.0 / 4.0      # body width : height
RADIUS = 0.2           # corner radius relative to body width
PADDING = 0.1          # gap between body and mercury, relative to body height
MERCURY_WIDTH = 0.05   # mercury width relative to body width

# Label font: 12pt at a 200px wide body
BASE_FONT_SIZE = 12
BASE_BODY_WIDTH = 200.0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned pixel rectangle."""
    x: int
    y: int
    width: int
    height: int

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class LayoutGeometry:
    """All derived drawing geometry for one widget size."""
    scale: DualScale
    body: Rect
    mercury: Rect
    body_radius: int
    bulb_radius: int
    font_size: int
    primary_spacing: float
    secondary_spacing: float
    secondary_leading_offset: float
    secondary_trailing_offset: float


def map_range(value: float, start1: float, stop1: float,
              start2: float, stop2: float) -> float:
    """Map *value* linearly from ``[start1, stop1]`` onto ``[start2, stop2]``."""
    return (value - start1) / (stop1 - start1) * (stop2 - start2) + start2


def body_bounds(width: int, height: int) -> Rect:
    """Largest 1:2 rectangle that fits the panel, inset by the margin."""
    if width < height * RATIO:
        # Width is the constraint
        inner = width - 2 * MARGIN * width
        return Rect(
            int(width * MARGIN),
            int(width * MARGIN),
            int(inner),
            int(inner / RATIO),
        )
    full = height * RATIO
    return Rect(
        int(full * MARGIN),
        int(full * MARGIN),
        int(full - 2 * MARGIN * full),
        int(height - 2 * MARGIN * full),
    )


def mercury_bounds(body: Rect) -> Rect:
    w = int(body.width * MERCURY_WIDTH)
    return Rect(
        int(body.center_x - w / 2.0),
        int(body.y + body.height * PADDING),
        w,
        int(body.height * (1 - 2 * PADDING)),
    )


def secondary_offsets(scale: DualScale, primary_spacing: float) -> Tuple[float, float]:
    """Pixel gaps above and below the secondary labels.

    The amount rounded off each end of the converted range, in primary
    degrees, is mapped onto pixels through the primary spacing.  The
    secondary labels therefore sit near, not exactly at, the heights of
    the temperatures they name.
    """
    leading = map_range(scale.maximum - to_celsius(scale.max_secondary),
                        0, DECADE, 0, primary_spacing)
    trailing = map_range(to_celsius(scale.min_secondary) - scale.minimum,
                         0, DECADE, 0, primary_spacing)
    return leading, trailing


def compute_layout(width: int, height: int, scale: DualScale) -> LayoutGeometry:
    """Derive the full geometry for a ``width`` × ``height`` panel."""
    body = body_bounds(width, height)
    mercury = mercury_bounds(body)

    font_size = int(BASE_FONT_SIZE * (body.width / BASE_BODY_WIDTH))

    # Spacing = height / number of labels, labels = range / 10
    primary_spacing = mercury.height / scale.decades
    leading, trailing = secondary_offsets(scale, primary_spacing)
    if scale.secondary_span > 0:
        secondary_spacing = (mercury.height - (leading + trailing)) / (scale.secondary_span / DECADE)
    else:
        secondary_spacing = 0.0

    return LayoutGeometry(
        scale=scale,
        body=body,
        mercury=mercury,
        body_radius=int(body.width * RADIUS),
        bulb_radius=int(body.width * 2 * MERCURY_WIDTH),
        font_size=font_size,
        primary_spacing=primary_spacing,
        secondary_spacing=secondary_spacing,
        secondary_leading_offset=leading,
        secondary_trailing_offset=trailing,
    )


class LayoutCache:
    """Geometry memoised on the last seen widget size."""

    def __init__(self, scale: DualScale) -> None:
        self.scale = scale
        self._key: Optional[Tuple[int, int]] = None
        self._geometry: Optional[LayoutGeometry] = None
        self.computations = 0

    def invalidate(self) -> None:
        self._key = None
        self._geometry = None

    def get(self, width: int, height: int) -> LayoutGeometry:
        key = (width, height)
        if self._geometry is None or key != self._key:
            self._geometry = compute_layout(width, height, self.scale)
            self._key = key
            self.computations += 1
            logger.debug("Layout recomputed for %dx%d (body %s)",
                         width, height, self._geometry.body)
        return self._geometry
