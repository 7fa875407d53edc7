import pytest

from yagl.matrix import Matrix3, SingularMatrixError
from yagl.vectors import Vector3

IDENTITY = Matrix3(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)))
SAMPLE = Matrix3(((4.0, 7.0, 2.0), (3.0, 6.0, 1.0), (2.0, 5.0, 3.0)))


def _flat(matrix):
    return [value for row in matrix.data for value in row]


def test_identity_determinant_and_inverse():
    assert IDENTITY.determinant() == 1.0
    assert IDENTITY.inverse() == IDENTITY


def test_singular_matrix_raises():
    singular = Matrix3(((1.0, 2.0, 3.0), (2.0, 4.0, 6.0), (1.0, 1.0, 1.0)))
    assert singular.determinant() == 0.0
    with pytest.raises(SingularMatrixError):
        singular.inverse()


def test_negation():
    assert -(-SAMPLE) == SAMPLE
    assert SAMPLE * -1.0 == -SAMPLE


def test_scalar_multiplication_scales_determinant():
    assert (SAMPLE * 2.0).determinant() == pytest.approx(SAMPLE.determinant() * 2.0**3)


def test_identity_times_vector():
    v = Vector3(1.5, -2.0, 3.25)
    assert IDENTITY * v == v


def test_row_vectors():
    rows = SAMPLE.row_vectors()
    assert rows[0] == Vector3(4.0, 7.0, 2.0)
    assert rows[1] == Vector3(3.0, 6.0, 1.0)
    assert rows[2] == Vector3(3.0, 5.0, 3.0)


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Matrix3(((1.0, 2.0), (3.0, 4.0)))