################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration schema for matrix comparison, inversion and rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Absolute tolerance for approximate matrix comparison
ALLCLOSE_ATOL: float = 1e-9
# Relative tolerance for approximate matrix comparison
ALLCLOSE_RTOL: float = 1e-9

# Exchange rows during inversion when a larger pivot is available
PARTIAL_PIVOTING: bool = False

# Decimal places used when rendering matrices as text
PRINT_PRECISION: int = 4
# Largest useful precision for float64 rendering
PRINT_PRECISION_MAX: int = 17


class MatrixParamsError(Exception):
    """Raised when matrix parameters are invalid."""


def _require_tolerance(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MatrixParamsError(f"{name} must be a float")
    if not math.isfinite(value) or value < 0.0:
        raise MatrixParamsError(f"{name} must be finite and non-negative")


@dataclass(frozen=True)
class MatrixParams:
    """Tunable behavior shared by matrix operations.

    Fields:
        atol: absolute tolerance used by ``Matrix.allclose``
        rtol: relative tolerance used by ``Matrix.allclose``
        partial_pivoting: when False, inversion fails on the first zero
            pivot without trying a row exchange
        print_precision: decimal places in the text rendering
    """

    atol: float = ALLCLOSE_ATOL
    rtol: float = ALLCLOSE_RTOL
    partial_pivoting: bool = PARTIAL_PIVOTING
    print_precision: int = PRINT_PRECISION

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameters."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> MatrixParams:
        """Build validated parameters from a flat mapping."""
        known: set[str] = {item.name for item in fields(cls)}
        unknown: list[str] = sorted(key for key in values if key not in known)
        if unknown:
            raise MatrixParamsError(f"Unknown matrix params: {', '.join(unknown)}")

        params: MatrixParams = cls(**dict(values))
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter ranges and types."""
        _require_tolerance(self.atol, "atol")
        _require_tolerance(self.rtol, "rtol")

        if not isinstance(self.partial_pivoting, bool):
            raise MatrixParamsError("partial_pivoting must be a bool")

        if isinstance(self.print_precision, bool) or not isinstance(
            self.print_precision, int
        ):
            raise MatrixParamsError("print_precision must be an int")
        if not 0 <= self.print_precision <= PRINT_PRECISION_MAX:
            raise MatrixParamsError(
                f"print_precision must be in [0, {PRINT_PRECISION_MAX}]"
            )

    def replace(self, **overrides: Any) -> MatrixParams:
        """Return a validated copy with the given fields replaced."""
        params: MatrixParams = replace(self, **overrides)
        params.validate()
        return params

    def as_dict(self) -> dict[str, Any]:
        """Return the parameters as a flat dictionary."""
        return {item.name: getattr(self, item.name) for item in fields(self)}
