################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by fixed-shape matrix operations."""

from __future__ import annotations

from typing import Optional


class MatrixError(ValueError):
    """Base class for matrix shape and construction errors."""


class DimensionMismatchError(MatrixError):
    """Raised when two matrices are combined with incompatible shapes."""

    def __init__(
        self,
        operation: str,
        lhs_shape: tuple[int, int],
        rhs_shape: tuple[int, int],
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = (
                f"{operation}: dimension mismatch between "
                f"{lhs_shape[0]}x{lhs_shape[1]} and {rhs_shape[0]}x{rhs_shape[1]}"
            )
        super().__init__(message)
        self.operation: str = operation
        self.lhs_shape: tuple[int, int] = lhs_shape
        self.rhs_shape: tuple[int, int] = rhs_shape


class MatrixShapeError(MatrixError):
    """Raised when a literal or conversion does not match the expected shape."""
