################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-shape matrices and homogeneous 3D transforms."""

from __future__ import annotations

from oasis_matrix.matrix import Matrix
from oasis_matrix.matrix_errors import DimensionMismatchError
from oasis_matrix.matrix_errors import MatrixError
from oasis_matrix.matrix_errors import MatrixShapeError
from oasis_matrix.matrix_params import MatrixParams
from oasis_matrix.matrix_params import MatrixParamsError
from oasis_matrix.vectors import Vec3
from oasis_matrix.vectors import Vec4


__all__ = [
    "DimensionMismatchError",
    "Matrix",
    "MatrixError",
    "MatrixParams",
    "MatrixParamsError",
    "MatrixShapeError",
    "Vec3",
    "Vec4",
]
