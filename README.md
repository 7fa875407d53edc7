# yagl

A small pure-Python geometry library with no dependencies. It provides
immutable 2D and 3D vectors, 3x3 matrices, quaternions, rotations and poses,
lines, line segments, rays, planes, triangles, tetrahedra, triangulated
polyhedra and polygons.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `yagl.vectors` | `Vector2`, `Vector3` |
| `yagl.matrix` | `Matrix3`, `SingularMatrixError` |
| `yagl.quaternion` | `Quaternion` |
| `yagl.rotation3` | `Rotation3` |
| `yagl.pose3` | `Pose3` |
| `yagl.line` | `Line`, `LineSegment` |
| `yagl.ray` | `Ray`, `IntersectionError` |
| `yagl.simple_plane` | `SimplePlane`, `CoordinatePlane` |
| `yagl.simple_tri` | `SimpleTriangle` |
| `yagl.hedron` | `Tetrahedron`, `Polyhedron` |
| `yagl.gon` | `Polygon` |

All classes are frozen dataclasses; operations return new values.

## Vectors

```python
from yagl.vectors import Vector2, Vector3

i, j = Vector3.ihat(), Vector3.jhat()
i + j              # Vector3(x=1.0, y=1.0, z=0.0)
i - j              # Vector3(x=1.0, y=-1.0, z=0.0)
i.dot(j)           # 0.0
i.cross(j)         # Vector3(x=0.0, y=0.0, z=1.0)
(i * 3.0).normd()  # Vector3(x=1.0, y=0.0, z=0.0)
```

Vectors support `+`, `-`, unary `-`, and `*` and `/` by a number. They also
offer `magnitude()`, `angle_cosine()` and `normd()`; `Vector3` adds
`cross()` and `with_magnitude()`, while `Vector2.cross()` returns the scalar
z component. `normd()` returns the vector unchanged when its x and y
components are both zero (for `Vector3` this includes vectors along z).

## Matrices

`Matrix3` is built from three rows of three numbers. It has
`determinant()`, `inverse()` (raising `SingularMatrixError` when the
determinant is zero), `row_vectors()`, unary `-`, and `*` by a number or by
a `Vector3`. Note that `row_vectors()`, and therefore multiplication by a
vector, takes the x component of the third row from the second row.

## Rays and planes

```python
from yagl.ray import IntersectionError, Ray
from yagl.simple_plane import SimplePlane
from yagl.vectors import Vector3

plane = SimplePlane(Vector3(1.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
plane.ray_intersects(Ray(Vector3(0.0, 2.0, 1.0), Vector3(1.0, 5.0, 3.0)))
# Vector3(x=1.0, y=7.0, z=4.0)

try:
    plane.ray_intersects(Ray(Vector3.zero(), Vector3(-1.0, 0.0, 0.0)))
except IntersectionError as err:
    print(err)  # Ray points away from plane
```

`SimplePlane` normalises its normal on construction and also has
`point_intersects()`, `line_intersects()` and `segment_intersects()`; each
intersection method raises `IntersectionError` when there is no intersection.
`SimplePlane.from_mxb(mx, my, c)` builds the plane `z = mx*x + my*y + c`,
and `SimplePlane.regress(points)` fits such a plane by least squares,
returning the plane together with the squared error.

`CoordinatePlane(origin, x, y)` raises `ValueError` unless `x` and `y` are
orthogonal.

`Ray.points_away(point)` returns 1 if the ray points away from the point,
-1 if towards it and 0 if neither. `Line` normalises its direction and
`Line.at(t)` gives the point at parameter `t`.

## Triangles

`SimpleTriangle` gives `normal()` (half of `AB x BC`, so its length is the
area), `center()`, `normal_ray()`, `area()`, `point_intersects()` and
`ray_intersects()`, which raises `IntersectionError` when the ray misses.

## Quaternions, rotations and poses

```python
import math
from yagl.rotation3 import Rotation3
from yagl.vectors import Vector3

turn = Rotation3.from_axis_angle(Vector3.khat() * (math.pi / 2))
turn.q  # Quaternion(w=cos(pi/4), x=0.0, y=0.0, z=sin(pi/4))
```

`Quaternion` defaults to the identity and supports `+`, `-`, `*` (by a
quaternion or a number) and `/` by a number, together with `dot()`,
`conjugate()`, `inverse()`, `norm()`, `hat()`, `exp()` and the `scalar` and
`vector` properties.

`Rotation3` wraps a quaternion. `a + b` stores `b.q * a.q`, unary `-`
inverts, `a - b` stores `b.q.inverse() * a.q`, and `*` and `/` scale the
rotation angle. `rotate_vector(v)` returns the vector part of `v * q * v⁻¹`
with `v` taken as a pure quaternion.

`Pose3` pairs a position with a `Rotation3`. `+` composes two poses, `-`
between two poses composes exactly as `+` does, unary `-` inverts, and `*`
scales both parts.

## Solids and polygons

```python
from yagl.gon import Polygon
from yagl.hedron import Polyhedron, Tetrahedron
from yagl.vectors import Vector2, Vector3

Tetrahedron(Vector3.zero(), Vector3.ihat() * 3.0,
            Vector3.jhat() * 3.0, -Vector3.khat() * 3.0).volume()  # -4.5

cube = Polyhedron.cube()
cube.volume()
print(cube.to_obj())  # Wavefront OBJ text

Polygon([Vector2(1.0, 0.0), Vector2(2.0, 0.0),
         Vector2(2.0, 1.0), Vector2(1.0, 1.0)]).area()  # 1.0
```

`Tetrahedron` holds an origin and three edge vectors; `from_points()` builds
one from four corners. It offers a signed `volume()`, the corners `pt_1()`
to `pt_4()`, `point_in()`, `surface()` and `surface_area()`.

`Polyhedron(points, faces)` holds points and triangular faces given as
index triples. It offers `triangles()`, a signed `volume()` and `to_obj()`.

`Polygon.area()` is signed, positive for counter-clockwise corners, and
raises `ValueError` for a polygon with no points.

## Limitations

- `Polyhedron` does not check that its faces form a closed surface or that
  they are consistently oriented.
- OBJ text can be written with `Polyhedron.to_obj()`, but there is no reader
  for OBJ or any other file format.
- There is no command-line tool; the package is a library only.