import pytest

from yagl.gon import Polygon
from yagl.vectors import Vector2


def test_square_area_from_source():
    poly = Polygon(
        [
            Vector2(1.0, 0.0),
            Vector2(2.0, 0.0),
            Vector2(2.0, 1.0),
            Vector2(1.0, 1.0),
        ]
    )
    assert poly.area() == 1.0


def test_clockwise_area_is_negative():
    poly = Polygon(
        [
            Vector2(1.0, 1.0),
            Vector2(2.0, 1.0),
            Vector2(2.0, 0.0),
            Vector2(1.0, 0.0),
        ]
    )
    assert poly.area() == -1.0


def test_triangle_area():
    poly = Polygon([Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(0.0, 1.0)])
    assert poly.area() == 0.5


def test_l_shape_area():
    poly = Polygon(
        [
            Vector2(0.0, 0.0),
            Vector2(2.0, 0.0),
            Vector2(2.0, 1.0),
            Vector2(1.0, 1.0),
            Vector2(1.0, 2.0),
            Vector2(0.0, 2.0),
        ]
    )
    assert poly.area() == pytest.approx(3.0)


def test_degenerate_polygons_have_zero_area():
    assert Polygon([Vector2(1.0, 2.0)]).area() == 0.0
    assert Polygon([Vector2(1.0, 2.0), Vector2(3.0, 4.0)]).area() == 0.0


def test_empty_polygon_raises():
    with pytest.raises(ValueError):
        Polygon([]).area()


def test_points_are_stored_as_tuple():
    pts = [Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(0.0, 1.0)]
    assert Polygon(pts).points == tuple(pts)