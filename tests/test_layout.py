import pytest

from thermometer.layout import LayoutCache, Rect, compute_layout
from thermometer.scales import DualScale, to_celsius

SCALE = DualScale(-40, 50)


def test_body_sized_from_width_when_narrow():
    g = compute_layout(200, 800, SCALE)
    assert g.body == Rect(10, 10, 180, 360)


def test_body_sized_from_height_when_wide():
    g = compute_layout(800, 400, SCALE)
    assert g.body == Rect(10, 10, 180, 380)


def test_derived_proportions():
    g = compute_layout(200, 800, SCALE)
    assert g.body_radius == 36
    assert g.font_size == 10
    assert g.mercury.width == 9
    assert g.bulb_radius == 2 * g.mercury.width
    assert abs(g.mercury.center_x - g.body.center_x) <= 1
    assert g.mercury.y == 46
    assert abs(g.mercury.height - 288) <= 1


def test_font_reference_size():
    g = compute_layout(220, 1000, SCALE)
    assert g.body.width == 198
    assert g.font_size == 11


def test_primary_spacing_divides_column_into_decades():
    g = compute_layout(200, 800, SCALE)
    assert g.primary_spacing == pytest.approx(g.mercury.height / 9)


def test_secondary_offsets_follow_rounding_remainder():
    g = compute_layout(200, 800, SCALE)
    remainder = 50 - to_celsius(120)
    assert g.secondary_leading_offset == pytest.approx(remainder / 10 * g.primary_spacing)
    # -40 is the same in both units, nothing rounded off the bottom
    assert g.secondary_trailing_offset == pytest.approx(0.0)
    covered = (g.secondary_leading_offset + g.secondary_trailing_offset
               + g.secondary_spacing * 16)
    assert covered == pytest.approx(g.mercury.height)


def test_layout_is_pure():
    assert compute_layout(321, 654, SCALE) == compute_layout(321, 654, SCALE)


def test_degenerate_size_gives_empty_geometry():
    g = compute_layout(0, 0, SCALE)
    assert g.body.is_empty
    assert g.mercury.is_empty
    assert g.font_size == 0
    assert g.primary_spacing == 0.0


def test_no_secondary_labels_means_zero_spacing():
    g = compute_layout(200, 800, DualScale(0, 1))
    assert g.secondary_spacing == 0.0


def test_cache_recomputes_only_on_size_change():
    cache = LayoutCache(SCALE)
    first = cache.get(200, 800)
    assert cache.get(200, 800) is first
    assert cache.computations == 1

    cache.get(300, 800)
    assert cache.computations == 2

    cache.invalidate()
    cache.get(300, 800)
    assert cache.computations == 3
