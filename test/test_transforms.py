################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for homogeneous transform construction."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_matrix.matrix import Matrix
from oasis_matrix.matrix_errors import MatrixShapeError
from oasis_matrix.transforms import Transform4
from oasis_matrix.vectors import Vec3
from oasis_matrix.vectors import Vec4


def test_translation_layout() -> None:
    """Checks the offset sits in the last column."""
    mat: Matrix = Matrix.translation(Vec3(1.0, 2.0, 3.0))
    assert mat.shape == (4, 4)
    assert mat.column(3) == (1.0, 2.0, 3.0, 1.0)
    assert mat.row(3) == (0.0, 0.0, 0.0, 1.0)


def test_translation_moves_origin() -> None:
    """Checks translating the origin yields the offset."""
    mat: Matrix = Matrix.translation(Vec3(1.0, 2.0, 3.0))
    moved: Matrix = mat @ Matrix.point(Vec3(0.0, 0.0, 0.0))
    assert moved.column(0) == (1.0, 2.0, 3.0, 1.0)
    assert moved.to_vec3() == Vec3(1.0, 2.0, 3.0)


def test_scale_diagonal() -> None:
    """Checks scale places (x, y, z, 1) on the diagonal."""
    mat: Matrix = Matrix.scale(Vec3(2.0, 3.0, 4.0))
    assert np.array_equal(mat.as_array(), np.diag([2.0, 3.0, 4.0, 1.0]))
    scaled: Matrix = mat @ Matrix.point(Vec3(1.0, 1.0, 1.0))
    assert scaled.to_vec3() == Vec3(2.0, 3.0, 4.0)


def test_rotation_z_quarter_turn() -> None:
    """Checks a quarter turn about z maps x to y."""
    mat: Matrix = Matrix.rotation(Vec3(0.0, 0.0, 1.0), math.pi / 2.0)
    rotated: Vec3 = (mat @ Matrix.point(Vec3(1.0, 0.0, 0.0))).to_vec3()
    assert np.allclose(rotated.as_tuple(), (0.0, 1.0, 0.0), atol=1e-5)


@pytest.mark.parametrize(
    "axis, start, expected",
    [
        ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
        ((0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
        ((0.0, 0.0, 1.0), (0.0, 1.0, 0.0), (-1.0, 0.0, 0.0)),
    ],
)
def test_rotation_right_handed(
    axis: tuple[float, float, float],
    start: tuple[float, float, float],
    expected: tuple[float, float, float],
) -> None:
    """Checks quarter turns follow the right-hand rule for each axis."""
    mat: Matrix = Matrix.rotation(Vec3(*axis), math.pi / 2.0)
    rotated: Vec3 = (mat @ Matrix.point(Vec3(*start))).to_vec3()
    assert np.allclose(rotated.as_tuple(), expected, atol=1e-12)


def test_rotation_orthonormal_for_unit_axis() -> None:
    """Checks rotations about unit axes are orthonormal with det 1."""
    axis: NDArray[np.float64] = np.array([1.0, 2.0, 2.0], dtype=float) / 3.0
    rot: NDArray[np.float64] = Matrix.rotation(Vec3.from_sequence(axis), 0.7).as_array()
    block: NDArray[np.float64] = rot[:3, :3]
    assert np.allclose(block.T @ block, np.eye(3))
    assert np.isclose(float(np.linalg.det(block)), 1.0)
    assert np.allclose(block @ axis, axis)


def test_rotation_unnormalized_axis_not_orthogonal() -> None:
    """Checks a non-unit axis is used as given without normalization."""
    rot: NDArray[np.float64] = Matrix.rotation(Vec3(0.0, 0.0, 2.0), 0.5).as_array()
    block: NDArray[np.float64] = rot[:3, :3]
    assert not np.allclose(block.T @ block, np.eye(3))


def test_point_shape() -> None:
    """Checks points are 4x1 homogeneous columns."""
    pt: Matrix = Matrix.point(Vec3(1.0, 2.0, 3.0))
    assert pt.shape == (4, 1)
    assert pt.column(0) == (1.0, 2.0, 3.0, 1.0)
    assert np.array_equal(Transform4.point(Vec3(1.0, 2.0, 3.0)), pt.as_array())


def test_to_vec3_requires_point_shape() -> None:
    """Checks only 4x1 matrices convert to Vec3."""
    with pytest.raises(MatrixShapeError):
        Matrix.identity(4).to_vec3()
    with pytest.raises(MatrixShapeError):
        Matrix.from_column([1.0, 2.0, 3.0]).to_vec3()


def test_from_vec3_is_translation() -> None:
    """Checks Vec3 conversion builds a translation."""
    v: Vec3 = Vec3(4.0, 5.0, 6.0)
    assert Matrix.from_vec3(v) == Matrix.translation(v)


def test_from_vec4_is_axis_angle_rotation() -> None:
    """Checks the fourth Vec4 component is read as an angle."""
    v: Vec4 = Vec4(0.0, 0.0, 1.0, math.pi / 2.0)
    assert Matrix.from_vec4(v) == Matrix.rotation(Vec3(0.0, 0.0, 1.0), math.pi / 2.0)
    assert Matrix.from_vec4(v) != Matrix.translation(Vec3(0.0, 0.0, 1.0))


def test_composition_order() -> None:
    """Checks B @ A applies A first."""
    move: Matrix = Matrix.translation(Vec3(1.0, 0.0, 0.0))
    turn: Matrix = Matrix.rotation(Vec3(0.0, 0.0, 1.0), math.pi / 2.0)
    origin: Matrix = Matrix.point(Vec3(0.0, 0.0, 0.0))
    move_then_turn: Vec3 = ((turn @ move) @ origin).to_vec3()
    turn_then_move: Vec3 = ((move @ turn) @ origin).to_vec3()
    assert np.allclose(move_then_turn.as_tuple(), (0.0, 1.0, 0.0))
    assert np.allclose(turn_then_move.as_tuple(), (1.0, 0.0, 0.0))


def test_non_finite_inputs_never_reach_a_matrix() -> None:
    """Checks transform builders refuse NaN and infinite parameters."""
    with pytest.raises(MatrixShapeError):
        Matrix.translation(Vec3(float("nan"), 0.0, 0.0))
    with pytest.raises(MatrixShapeError):
        Matrix.from_vec4(Vec4(0.0, 0.0, 1.0, float("inf")))
    with pytest.raises(MatrixShapeError):
        Matrix.rotation(Vec3(0.0, 0.0, 1.0), float("nan"))
