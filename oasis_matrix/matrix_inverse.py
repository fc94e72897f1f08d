################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray


_LOG: logging.Logger = logging.getLogger(__name__)


# Pivot magnitude below which a debug line is emitted. The pivot is still used.
SMALL_PIVOT: float = 1e-12


class GaussJordan:
    """Gauss-Jordan elimination for square matrix inversion.

    Responsibility:
        Invert a square array by reducing a working copy to the identity
        while applying the same row operations to an identity accumulator.

    Inputs/outputs:
        - Input is an (n, n) float array. It is never modified.
        - Output is the (n, n) inverse, or None when a zero pivot is hit.

    Determinism and edge cases:
        - Without partial pivoting, a pivot that is exactly 0.0 declares the
          matrix singular even when a lower row could supply a nonzero
          pivot. [[0, 1], [1, 0]] has no inverse in this mode.
        - Small nonzero pivots are divided by as-is. The resulting error
          amplification is not corrected.
        - With partial pivoting, the row with the largest magnitude entry at
          or below the pivot is swapped in first.

    Equations:
        For pivot row i with pivot d = A[i, i]:
            A[i, :] <- A[i, :] / d
            A[k, :] <- A[k, :] - A[k, i] * A[i, :]    for k != i
        and the same operations on the accumulator.
    """

    @staticmethod
    def invert(
        matrix: NDArray[np.float64],
        partial_pivoting: bool = False,
    ) -> Optional[NDArray[np.float64]]:
        work: NDArray[np.float64] = np.array(matrix, dtype=np.float64, copy=True)
        if work.ndim != 2 or work.shape[0] != work.shape[1]:
            raise ValueError("invert requires a square matrix")

        size: int = work.shape[0]
        result: NDArray[np.float64] = np.eye(size, dtype=np.float64)

        for i in range(size):
            if partial_pivoting:
                GaussJordan._swap_in_pivot(work, result, i)

            pivot: float = float(work[i, i])
            if pivot == 0.0:
                _LOG.debug("Matrix is singular, zero pivot at row %d", i)
                return None
            if abs(pivot) < SMALL_PIVOT:
                _LOG.debug("Small pivot %g accepted at row %d", pivot, i)

            inv_pivot: float = 1.0 / pivot
            work[i, :] *= inv_pivot
            result[i, :] *= inv_pivot

            for k in range(size):
                if k == i:
                    continue
                factor: float = float(work[k, i])
                work[k, :] -= factor * work[i, :]
                result[k, :] -= factor * result[i, :]

        return result

    @staticmethod
    def _swap_in_pivot(
        work: NDArray[np.float64],
        result: NDArray[np.float64],
        i: int,
    ) -> None:
        best: int = i + int(np.argmax(np.abs(work[i:, i])))
        if best == i or work[best, i] == 0.0:
            return
        _LOG.debug("Exchanging rows %d and %d", i, best)
        work[[i, best], :] = work[[best, i], :]
        result[[i, best], :] = result[[best, i], :]
