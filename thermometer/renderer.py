"""
Thermometer renderer — paints a ``LayoutGeometry`` onto a drawing surface.

The renderer knows nothing about Qt.  It talks to a small surface
protocol (filled shapes, text with font metrics) that the canvas
implements on top of ``QPainter``; tests implement it with a recorder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Protocol, Sequence

import numpy as np

from .layout import Rect
from .palettes import DEFAULT_SCHEME, RGB, ColorScheme
from .scales import PRIMARY_UNIT, SECONDARY_UNIT

if TYPE_CHECKING:
    from .layout import LayoutGeometry

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Drawing primitives consumed by ``render``.  Text y is the baseline."""

    def fill_rounded_rect(self, rect: Rect, radius: int, color: RGB) -> None: ...
    def fill_rect(self, rect: Rect, color: RGB) -> None: ...
    def fill_ellipse(self, rect: Rect, color: RGB) -> None: ...
    def set_font_size(self, size: int) -> None: ...
    def text_width(self, text: str) -> int: ...
    def line_height(self) -> int: ...
    def draw_text(self, x: int, y: int, text: str, color: RGB) -> None: ...


def mercury_fill(geometry: "LayoutGeometry", value: float) -> Rect:
    """Bottom-anchored part of the mercury column representing *value*."""
    m = geometry.mercury
    fraction = geometry.scale.fraction(value)
    return Rect(
        m.x,
        int(m.y + m.height * (1 - fraction)),
        m.width,
        int(m.height * fraction),
    )


def bulb_bounds(geometry: "LayoutGeometry") -> Rect:
    """Square bounding the bulb, centred on the bottom of the column."""
    m = geometry.mercury
    d = geometry.bulb_radius
    return Rect(int(m.center_x - d / 2.0), int(m.bottom - d / 2.0), d, d)


def label_baselines(top: float, spacing: float, count: int, line_height: int) -> np.ndarray:
    """Baseline y of *count* labels stacked *spacing* apart from *top*."""
    return top + np.arange(count) * spacing + line_height / 2.0


def _draw_column(surface: Surface, x: int, ys: np.ndarray, labels: Sequence[int], color: RGB) -> None:
    for y, label in zip(ys, labels):
        surface.draw_text(x, int(y), str(label), color)


def render(
    surface: Surface,
    geometry: "LayoutGeometry",
    value: float,
    scheme: ColorScheme = DEFAULT_SCHEME,
) -> None:
    """Paint body, mercury, bulb and both scales for *value*."""
    body = geometry.body
    if body.is_empty:
        return
    mercury = geometry.mercury
    scale = geometry.scale

    # Body
    surface.fill_rounded_rect(body, geometry.body_radius, scheme.body)

    # Mercury track, fill and bulb
    surface.fill_rect(mercury, scheme.track)
    surface.fill_rect(mercury_fill(geometry, value), scheme.mercury)
    surface.fill_ellipse(bulb_bounds(geometry), scheme.mercury)

    if geometry.font_size <= 0:
        return

    # Unit names in the top corners
    surface.set_font_size(geometry.font_size)
    line_height = surface.line_height()
    inset = geometry.body_radius / 2.0
    unit_y = int(body.y + line_height / 2.0 + inset)
    surface.draw_text(int(body.x + inset), unit_y, PRIMARY_UNIT, scheme.text)
    surface.draw_text(
        int(body.right - surface.text_width(SECONDARY_UNIT) - inset),
        unit_y, SECONDARY_UNIT, scheme.text,
    )

    # Primary labels, right-aligned against the widest one so they never
    # overlap the column
    primary: List[int] = scale.primary_decades()
    text_offset = max(surface.text_width(str(scale.maximum)),
                      surface.text_width(str(scale.minimum)))
    _draw_column(
        surface,
        int(mercury.center_x - mercury.width - text_offset),
        label_baselines(mercury.y, geometry.primary_spacing, len(primary), line_height),
        primary,
        scheme.text,
    )

    secondary = scale.secondary_decades()
    _draw_column(
        surface,
        int(mercury.center_x + mercury.width),
        label_baselines(mercury.y + geometry.secondary_leading_offset,
                        geometry.secondary_spacing, len(secondary), line_height),
        secondary,
        scheme.text,
    )
