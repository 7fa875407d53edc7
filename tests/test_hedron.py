import math

import pytest

from yagl.hedron import Polyhedron, Tetrahedron
from yagl.simple_tri import SimpleTriangle
from yagl.vectors import Vector3


@pytest.fixture
def unit_tetra():
    return Tetrahedron(Vector3.zero(), Vector3.ihat(), Vector3.jhat(), Vector3.khat())


def test_volume_from_source():
    hedr = Tetrahedron(
        Vector3.zero(),
        Vector3.ihat() * 3.0,
        Vector3.jhat() * 3.0,
        -Vector3.khat() * 3.0,
    )
    assert hedr.volume() == -4.5


def test_from_points_roots_at_first():
    t = Tetrahedron.from_points(
        Vector3(1.0, 1.0, 1.0),
        Vector3(2.0, 1.0, 1.0),
        Vector3(1.0, 2.0, 1.0),
        Vector3(1.0, 1.0, 2.0),
    )
    assert t.origin == Vector3(1.0, 1.0, 1.0)
    assert t.a == Vector3.ihat()
    assert t.b == Vector3.jhat()
    assert t.c == Vector3.khat()
    assert t.volume() == pytest.approx(1.0 / 6.0)


def test_corner_points(unit_tetra):
    moved = Tetrahedron(Vector3(1.0, 2.0, 3.0), unit_tetra.a, unit_tetra.b, unit_tetra.c)
    assert moved.pt_1() == Vector3(1.0, 2.0, 3.0)
    assert moved.pt_2() == Vector3(2.0, 2.0, 3.0)
    assert moved.pt_3() == Vector3(1.0, 3.0, 3.0)
    assert moved.pt_4() == Vector3(1.0, 2.0, 4.0)


@pytest.mark.parametrize(
    "point, inside",
    [
        (Vector3(0.1, 0.1, 0.1), True),
        (Vector3(0.0, 0.0, 0.0), True),
        (Vector3(1.0, 1.0, 1.0), False),
        (Vector3(-0.1, 0.1, 0.1), False),
    ],
)
def test_point_in(unit_tetra, point, inside):
    assert unit_tetra.point_in(point) is inside


def test_surface_first_normal_points_outward(unit_tetra):
    faces = unit_tetra.surface()
    assert len(faces) == 4
    assert faces[0] == SimpleTriangle(Vector3.zero(), Vector3.jhat(), Vector3.ihat())
    assert faces[0].normal() == Vector3(0.0, 0.0, -0.5)


def test_surface_area(unit_tetra):
    assert unit_tetra.surface_area() == pytest.approx(1.5 + math.sqrt(3.0) / 2.0)


def test_cube_volume():
    assert Polyhedron.cube().volume() == pytest.approx(1.0)


def test_cube_triangles():
    tris = Polyhedron.cube().triangles()
    assert len(tris) == 12
    assert tris[0] == SimpleTriangle(Vector3.zero(), Vector3.jhat(), Vector3.ihat())


def test_cube_to_obj():
    lines = Polyhedron.cube().to_obj().splitlines()
    assert lines[0] == "# Automatically generated from polyhederon by YAGL"
    assert lines[1] == "v 0 0 0"
    assert lines[8] == "v 1 1 1"
    assert lines[9] == "f 1 3 2"
    assert lines[-1] == "f 6 2 7"
    assert len(lines) == 1 + 8 + 12


def test_to_obj_fractional_coordinates():
    poly = Polyhedron([Vector3(0.5, -1.25, 2.0)], [])
    assert poly.to_obj() == "# Automatically generated from polyhederon by YAGL\nv 0.5 -1.25 2\n"