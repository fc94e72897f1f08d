################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Fixed-shape dense matrix with homogeneous transform builders."""

from __future__ import annotations

from typing import Any
from typing import List
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from .matrix_errors import DimensionMismatchError
from .matrix_errors import MatrixShapeError
from .matrix_inverse import GaussJordan
from .matrix_params import MatrixParams
from .transforms import Transform4
from .vectors import Vec3
from .vectors import Vec4


def _require_dimension(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise MatrixShapeError(f"{name} must be an int")
    if value <= 0:
        raise MatrixShapeError(f"{name} must be positive")
    return int(value)


def _as_numeric(values: ArrayLike, name: str) -> NDArray[np.float64]:
    try:
        raw: NDArray[Any] = np.asarray(values)
    except (TypeError, ValueError) as exc:
        # Ragged nested sequences land here
        raise MatrixShapeError(f"{name} must be a rectangular array") from exc
    if raw.dtype.kind not in "biuf":
        raise MatrixShapeError(f"{name} must be numeric, got dtype {raw.dtype}")
    return np.array(raw, dtype=np.float64, copy=True)


def _as_entries(values: ArrayLike, name: str) -> NDArray[np.float64]:
    array: NDArray[np.float64] = _as_numeric(values, name)
    if array.ndim != 2:
        raise MatrixShapeError(f"{name} must be 2-dimensional")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise MatrixShapeError(f"{name} must be non-empty")
    if not np.all(np.isfinite(array)):
        raise MatrixShapeError(f"{name} must be finite")
    return array


class Matrix:
    """Dense rows x cols float64 matrix whose shape is fixed at construction.

    Entry ``m[i, j]`` is row i, column j. Every binary operation checks shapes
    before any arithmetic and raises DimensionMismatchError on a mismatch.

    Constructors copy their input and accessors return copies, so no two
    matrices share storage. Only ``+=`` and ``-=`` mutate, and only the
    receiver.

    Transforms act on column vectors: ``T @ p`` applies T to the point p, and
    "first A, then B" composes as ``B @ A``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: ArrayLike) -> None:
        self._data: NDArray[np.float64] = _as_entries(values, "values")

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Matrix:
        # Takes ownership of a freshly computed array
        matrix: Matrix = cls.__new__(cls)
        matrix._data = array
        return matrix

    #
    # Construction
    #

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a rows x cols matrix of 0.0."""
        shape: tuple[int, int] = (
            _require_dimension(rows, "rows"),
            _require_dimension(cols, "cols"),
        )
        return cls._wrap(np.zeros(shape, dtype=np.float64))

    @classmethod
    def identity(cls, rows: int, cols: Optional[int] = None) -> Matrix:
        """Return 1.0 on the leading diagonal and 0.0 elsewhere.

        Non-square shapes fill only the leading min(rows, cols) block.
        """
        n_rows: int = _require_dimension(rows, "rows")
        n_cols: int = n_rows if cols is None else _require_dimension(cols, "cols")
        return cls._wrap(np.eye(n_rows, n_cols, dtype=np.float64))

    @classmethod
    def from_rows(
        cls,
        values: Sequence[Sequence[float]] | NDArray[np.float64],
        shape: Optional[tuple[int, int]] = None,
    ) -> Matrix:
        """Create a matrix from nested rows, optionally asserting its shape."""
        matrix: Matrix = cls(values)
        if shape is not None and matrix.shape != tuple(shape):
            raise MatrixShapeError(
                f"Literal is {matrix.rows}x{matrix.cols}, "
                f"expected {shape[0]}x{shape[1]}"
            )
        return matrix

    @classmethod
    def from_flat(cls, values: Sequence[float], rows: int, cols: int) -> Matrix:
        """Create a matrix from row-major flat values."""
        n_rows: int = _require_dimension(rows, "rows")
        n_cols: int = _require_dimension(cols, "cols")
        array: NDArray[np.float64] = _as_numeric(values, "values")
        if array.ndim != 1 or array.size != n_rows * n_cols:
            raise MatrixShapeError(f"values must have {n_rows * n_cols} elements")
        return cls(array.reshape((n_rows, n_cols)))

    @classmethod
    def from_column(cls, values: Sequence[float]) -> Matrix:
        """Create an S x 1 column from S values."""
        array: NDArray[np.float64] = _as_numeric(values, "values")
        if array.ndim != 1:
            raise MatrixShapeError("values must be 1-dimensional")
        return cls(array.reshape((-1, 1)))

    #
    # Homogeneous transforms
    #

    @classmethod
    def translation(cls, t: Vec3) -> Matrix:
        """Return the 4x4 translation by t."""
        return cls._wrap(Transform4.translation(t))

    @classmethod
    def scale(cls, s: Vec3) -> Matrix:
        """Return the 4x4 diagonal scale (s.x, s.y, s.z, 1)."""
        return cls._wrap(Transform4.scale(s))

    @classmethod
    def rotation(cls, axis: Vec3, angle: float) -> Matrix:
        """Return the 4x4 rotation about axis by angle radians.

        The caller must pass a unit axis. It is not normalized here.
        """
        return cls._wrap(Transform4.rotation(axis, angle))

    @classmethod
    def point(cls, p: Vec3) -> Matrix:
        """Return p as a 4x1 homogeneous column (x, y, z, 1)."""
        return cls._wrap(Transform4.point(p))

    @classmethod
    def from_vec3(cls, v: Vec3) -> Matrix:
        """Return the translation-only 4x4 for v."""
        return cls.translation(v)

    @classmethod
    def from_vec4(cls, v: Vec4) -> Matrix:
        """Return a rotation about (v.x, v.y, v.z) by v.w radians.

        The fourth component is treated as an ANGLE, not a homogeneous weight.
        """
        return cls.rotation(v.axis(), v.angle())

    def to_vec3(self) -> Vec3:
        """Return the first three entries of a 4x1 homogeneous point."""
        if self.shape != (4, 1):
            raise MatrixShapeError(
                f"to_vec3 requires a 4x1 point, got {self.rows}x{self.cols}"
            )
        return Vec3(
            float(self._data[0, 0]), float(self._data[1, 0]), float(self._data[2, 0])
        )

    #
    # Shape and access
    #

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def row(self, i: int) -> tuple[float, ...]:
        return tuple(float(value) for value in self._data[i, :])

    def column(self, j: int) -> tuple[float, ...]:
        return tuple(float(value) for value in self._data[:, j])

    def as_array(self) -> NDArray[np.float64]:
        """Return a copy of the entries as an array."""
        return self._data.copy()

    def to_list(self) -> List[List[float]]:
        return [[float(value) for value in row] for row in self._data]

    #
    # Arithmetic
    #

    def transpose(self) -> Matrix:
        """Return the cols x rows transpose."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def add(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, "add")
        return Matrix._wrap(self._data + other._data)

    def sub(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, "sub")
        return Matrix._wrap(self._data - other._data)

    def add_in_place(self, other: Matrix) -> Matrix:
        """Add other into this matrix's storage and return self."""
        self._check_same_shape(other, "add_in_place")
        np.add(self._data, other._data, out=self._data)
        return self

    def sub_in_place(self, other: Matrix) -> Matrix:
        """Subtract other from this matrix's storage and return self."""
        self._check_same_shape(other, "sub_in_place")
        np.subtract(self._data, other._data, out=self._data)
        return self

    def multiply(self, other: Matrix) -> Matrix:
        """Return the product self @ other.

        self is m x n and other is n x p; the result is m x p.
        """
        if not isinstance(other, Matrix):
            raise TypeError("multiply requires a Matrix operand")
        if self.cols != other.rows:
            raise DimensionMismatchError("multiply", self.shape, other.shape)
        return Matrix._wrap(self._data @ other._data)

    def inverse(self, params: Optional[MatrixParams] = None) -> Optional[Matrix]:
        """Return the inverse, or None when elimination hits a zero pivot.

        No row exchange is performed unless params.partial_pivoting is set, so
        some invertible matrices such as [[0, 1], [1, 0]] return None.
        """
        if not self.is_square:
            raise DimensionMismatchError(
                "inverse",
                self.shape,
                (self.rows, self.rows),
                message=(
                    "inverse: requires a square matrix, "
                    f"got {self.rows}x{self.cols}"
                ),
            )
        config: MatrixParams = params if params is not None else MatrixParams.defaults()
        result: Optional[NDArray[np.float64]] = GaussJordan.invert(
            self._data, partial_pivoting=config.partial_pivoting
        )
        if result is None:
            return None
        return Matrix._wrap(result)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add_in_place(other)

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub_in_place(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise TypeError(f"{operation} requires a Matrix operand")
        if self.shape != other.shape:
            raise DimensionMismatchError(operation, self.shape, other.shape)

    #
    # Comparison and rendering
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def allclose(self, other: Matrix, params: Optional[MatrixParams] = None) -> bool:
        """Return True when shapes match and entries agree within tolerance."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        config: MatrixParams = params if params is not None else MatrixParams.defaults()
        return bool(
            np.allclose(self._data, other._data, rtol=config.rtol, atol=config.atol)
        )

    def format(self, params: Optional[MatrixParams] = None) -> str:
        """Render one bracketed row per line for diagnostics."""
        config: MatrixParams = params if params is not None else MatrixParams.defaults()
        precision: int = config.print_precision
        lines: List[str] = [
            "[" + ", ".join(f"{value:.{precision}f}" for value in row) + "]"
            for row in self._data
        ]
        return "\n" + "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, {self.to_list()})"
