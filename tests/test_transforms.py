"""Tests for the transform builders."""

import pytest
import math

from rayforge.tuples import point, vector
from rayforge.matrix import Matrix
from rayforge.transforms import (
    translation, scaling, rotation_x, rotation_y, rotation_z, shearing, chain
)

HALF_ROOT_2 = math.sqrt(2) / 2


class TestTranslation:
    """Test translation matrices."""

    def test_translate_point(self):
        transform = translation(5, -3, 2)
        assert transform @ point(-3, 4, 5) == point(2, 1, 7)

    def test_inverse_translates_backwards(self):
        inv = translation(5, -3, 2).inverse()
        assert inv @ point(-3, 4, 5) == point(-8, 7, 3)

    def test_vectors_are_not_translated(self):
        v = vector(-3, 4, 5)
        assert translation(5, -3, 2) @ v == v


class TestScaling:
    """Test scaling matrices."""

    def test_scale_point(self):
        assert scaling(2, 3, 4) @ point(-4, 6, 8) == point(-8, 18, 32)

    def test_scale_vector(self):
        assert scaling(2, 3, 4) @ vector(-4, 6, 8) == vector(-8, 18, 32)

    def test_inverse_shrinks(self):
        inv = scaling(2, 3, 4).inverse()
        assert inv @ vector(-4, 6, 8) == vector(-2, 2, 2)

    def test_reflection(self):
        assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)


class TestRotation:
    """Test rotation matrices."""

    def test_rotate_x(self):
        p = point(0, 1, 0)
        assert rotation_x(math.pi / 4) @ p == point(0, HALF_ROOT_2, HALF_ROOT_2)
        assert rotation_x(math.pi / 2) @ p == point(0, 0, 1)

    def test_inverse_rotate_x(self):
        inv = rotation_x(math.pi / 4).inverse()
        assert inv @ point(0, 1, 0) == point(0, HALF_ROOT_2, -HALF_ROOT_2)

    def test_rotate_y(self):
        p = point(0, 0, 1)
        assert rotation_y(math.pi / 4) @ p == point(HALF_ROOT_2, 0, HALF_ROOT_2)
        assert rotation_y(math.pi / 2) @ p == point(1, 0, 0)

    def test_rotate_z(self):
        p = point(0, 1, 0)
        assert rotation_z(math.pi / 4) @ p == point(-HALF_ROOT_2, HALF_ROOT_2, 0)
        assert rotation_z(math.pi / 2) @ p == point(-1, 0, 0)

    @pytest.mark.parametrize("rotation", [rotation_x, rotation_y, rotation_z])
    def test_inverse_is_transpose(self, rotation):
        m = rotation(0.7)
        assert m.inverse() == m.transpose()


class TestShearing:
    """Test shearing matrices."""

    @pytest.mark.parametrize("coefficients, expected", [
        ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
        ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
        ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
        ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
        ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
        ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
    ])
    def test_shear_point(self, coefficients, expected):
        transform = shearing(*coefficients)
        assert transform @ point(2, 3, 4) == point(*expected)


class TestComposition:
    """Test combining transforms."""

    def test_applied_in_sequence(self):
        p = point(1, 0, 1)
        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)

        p2 = a @ p
        assert p2 == point(1, -1, 0)
        p3 = b @ p2
        assert p3 == point(5, -5, 0)
        p4 = c @ p3
        assert p4 == point(15, 0, 7)

    def test_chained_in_reverse_order(self):
        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        t = c @ b @ a
        assert t @ point(1, 0, 1) == point(15, 0, 7)

    def test_chain_helper(self):
        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        assert chain(a, b, c) == c @ b @ a
        assert chain(a, b, c) @ point(1, 0, 1) == point(15, 0, 7)

    def test_empty_chain_is_identity(self):
        assert chain() == Matrix.identity(4)

    def test_builders_return_4x4(self):
        for m in (translation(1, 2, 3), scaling(1, 2, 3), rotation_x(1.0), shearing(1, 2, 3, 4, 5, 6)):
            assert m.rows == 4
            assert m.columns == 4
