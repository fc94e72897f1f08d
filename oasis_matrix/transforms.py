################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Homogeneous 4x4 transform and 4x1 point arrays.

Convention: column vectors with row-major entries. A transform T maps a
point p as T @ p, so the translation lives in the last column.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from .matrix_errors import MatrixShapeError
from .vectors import Vec3


class Transform4:
    """Builders for homogeneous transform arrays."""

    @staticmethod
    def translation(t: Vec3) -> NDArray[np.float64]:
        """Return the 4x4 translation by t."""
        return np.array(
            [
                [1.0, 0.0, 0.0, t.x],
                [0.0, 1.0, 0.0, t.y],
                [0.0, 0.0, 1.0, t.z],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    @staticmethod
    def scale(s: Vec3) -> NDArray[np.float64]:
        """Return the 4x4 axis-aligned scale by s."""
        return np.diag(np.array([s.x, s.y, s.z, 1.0], dtype=np.float64))

    @staticmethod
    def rotation(axis: Vec3, angle: float) -> NDArray[np.float64]:
        """Return the 4x4 Rodrigues rotation about axis by angle radians.

        The axis is used as given. A non-unit axis yields a scaled, skewed
        matrix rather than an error.
        """
        if not math.isfinite(angle):
            raise MatrixShapeError("angle must be finite")

        s: float = math.sin(angle)
        c: float = math.cos(angle)
        one_c: float = 1.0 - c

        x: float = axis.x
        y: float = axis.y
        z: float = axis.z

        xs: float = x * s
        ys: float = y * s
        zs: float = z * s

        xy_c: float = x * y * one_c
        yz_c: float = y * z * one_c
        zx_c: float = z * x * one_c

        return np.array(
            [
                [x * x * one_c + c, xy_c - zs, zx_c + ys, 0.0],
                [xy_c + zs, y * y * one_c + c, yz_c - xs, 0.0],
                [zx_c - ys, yz_c + xs, z * z * one_c + c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    @staticmethod
    def point(p: Vec3) -> NDArray[np.float64]:
        """Return the 4x1 homogeneous column for p with w = 1."""
        return np.array([[p.x], [p.y], [p.z], [1.0]], dtype=np.float64)
