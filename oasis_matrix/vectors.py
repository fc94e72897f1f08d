################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Small coordinate tuples used to build and read 4x4 transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .matrix_errors import MatrixShapeError


def _finite(value: float, name: str) -> float:
    component: float = float(value)
    if not math.isfinite(component):
        raise MatrixShapeError(f"{name} must be finite")
    return component


@dataclass(frozen=True)
class Vec3:
    """Cartesian 3-vector (x, y, z)."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Coerce components to finite floats."""
        object.__setattr__(self, "x", _finite(self.x, "x"))
        object.__setattr__(self, "y", _finite(self.y, "y"))
        object.__setattr__(self, "z", _finite(self.z, "z"))

    @staticmethod
    def from_sequence(values: Sequence[float] | NDArray[np.float64]) -> "Vec3":
        """Create a vector from exactly three finite values."""
        vec: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
        if vec.shape != (3,):
            raise MatrixShapeError("Vec3 requires exactly 3 values")
        if not np.all(np.isfinite(vec)):
            raise MatrixShapeError("Vec3 values must be finite")
        return Vec3(float(vec[0]), float(vec[1]), float(vec[2]))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"


@dataclass(frozen=True)
class Vec4:
    """Axis-angle bundle (x, y, z, w).

    The fourth component is a rotation angle in radians, NOT a homogeneous
    weight. ``Matrix.from_vec4`` turns this into a rotation about the axis
    (x, y, z) by angle w. Use ``Matrix.point`` for homogeneous points.
    """

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        """Coerce components to finite floats."""
        object.__setattr__(self, "x", _finite(self.x, "x"))
        object.__setattr__(self, "y", _finite(self.y, "y"))
        object.__setattr__(self, "z", _finite(self.z, "z"))
        object.__setattr__(self, "w", _finite(self.w, "w"))

    def axis(self) -> Vec3:
        """Return the rotation axis part."""
        return Vec3(self.x, self.y, self.z)

    def angle(self) -> float:
        """Return the rotation angle in radians."""
        return self.w

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)
