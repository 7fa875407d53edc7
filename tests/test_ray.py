import pytest

from yagl.ray import Ray
from yagl.vectors import Vector3

RAY = Ray(Vector3(1.0, 1.0, 1.0), Vector3(3.0, 0.0, 0.0))


def test_direction_is_not_normalised():
    assert RAY.direction == Vector3(3.0, 0.0, 0.0)
    assert RAY.origin == Vector3(1.0, 1.0, 1.0)


@pytest.mark.parametrize(
    "point, expected",
    [
        (Vector3(5.0, 1.0, 1.0), -1),
        (Vector3(-5.0, 2.0, 0.0), 1),
        (Vector3(1.0, 8.0, -3.0), 0),
    ],
)
def test_points_away(point, expected):
    assert RAY.points_away(point) == expected


def test_reversed_ray_flips_answer():
    reversed_ray = Ray(RAY.origin, -RAY.direction)
    point = Vector3(4.0, 2.0, 0.0)
    assert reversed_ray.points_away(point) == -RAY.points_away(point)