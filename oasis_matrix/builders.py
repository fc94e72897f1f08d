################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shorthand entry points for building matrices and transforms.

Each helper forwards to a Matrix constructor and adds no behavior of its own.
"""

from __future__ import annotations

from typing import Dict
from typing import Optional
from typing import Sequence
from typing import Union

from .matrix import Matrix
from .vectors import Vec3


# Unit axes selectable by name
AXES: Dict[str, Vec3] = {
    "x": Vec3(1.0, 0.0, 0.0),
    "y": Vec3(0.0, 1.0, 0.0),
    "z": Vec3(0.0, 0.0, 1.0),
}

AxisLike = Union[str, Vec3, Sequence[float]]


def matrix(rows: int, cols: Optional[int] = None) -> Matrix:
    """Return a zero matrix, square when cols is omitted."""
    return Matrix.zeros(rows, rows if cols is None else cols)


def identity(rows: int, cols: Optional[int] = None) -> Matrix:
    return Matrix.identity(rows, cols)


def point(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Matrix:
    return Matrix.point(Vec3(x, y, z))


def translate(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Matrix:
    return Matrix.translation(Vec3(x, y, z))


def scale(x: float = 1.0, y: float = 1.0, z: float = 1.0) -> Matrix:
    return Matrix.scale(Vec3(x, y, z))


def rotate(axis: AxisLike, angle: float) -> Matrix:
    """Return a rotation by angle radians about a named or explicit axis.

    Explicit axes are used as given and should have unit length.
    """
    return Matrix.rotation(_resolve_axis(axis), angle)


def rotate_x(angle: float) -> Matrix:
    return rotate("x", angle)


def rotate_y(angle: float) -> Matrix:
    return rotate("y", angle)


def rotate_z(angle: float) -> Matrix:
    return rotate("z", angle)


def apply(transform: Matrix, p: Vec3) -> Vec3:
    """Transform a Cartesian point by a 4x4 homogeneous matrix."""
    return transform.multiply(Matrix.point(p)).to_vec3()


def compose(*transforms: Matrix) -> Matrix:
    """Return the transform that applies the arguments first to last."""
    result: Matrix = Matrix.identity(4)
    for transform in transforms:
        result = transform.multiply(result)
    return result


def _resolve_axis(axis: AxisLike) -> Vec3:
    if isinstance(axis, Vec3):
        return axis
    if isinstance(axis, str):
        key: str = axis.lower()
        if key not in AXES:
            raise ValueError(f"Unknown axis '{axis}', expected x, y or z")
        return AXES[key]
    return Vec3.from_sequence(axis)
