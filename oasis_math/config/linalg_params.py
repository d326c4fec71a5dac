################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric tolerances used by the linear algebra routines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Pivot magnitude below which elimination treats a matrix as singular
DET_PIVOT_EPS: float = 1e-12
# Cholesky pivot (value under the square root) must exceed this
CHOL_EPS: float = 1e-12
# Max |A - A^T| entry accepted as symmetric by Cholesky, per unit of max(1, max|A|)
SYMMETRY_ATOL: float = 1e-9
# Sum-abs tolerance for comparing matrices against calibration data
SUM_ABS_TOL: float = 1e-4


class LinalgParamsError(Exception):
    """Raised when linear algebra parameter validation fails."""


def _require_finite_non_negative(value: float, name: str) -> None:
    """Require a finite, non-negative float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LinalgParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise LinalgParamsError(f"{name} must be finite")
    if value < 0.0:
        raise LinalgParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class LinalgParams:
    """Tolerances for determinant, Cholesky and inverse.

    Fields:
        det_pivot_eps: Pivot magnitude below which det returns 0.0 and inv
            raises SingularMatrixError
        chol_eps: Minimum value under the square root accepted by Cholesky
        symmetry_atol: Cholesky symmetry tolerance, scaled by
            max(1, max|A|)
        sum_abs_tol: Sum-abs tolerance for matrix comparisons
    """

    det_pivot_eps: float = DET_PIVOT_EPS
    chol_eps: float = CHOL_EPS
    symmetry_atol: float = SYMMETRY_ATOL
    sum_abs_tol: float = SUM_ABS_TOL

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default tolerances."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> LinalgParams:
        """Build parameters from a flat mapping, rejecting unknown keys.

        Missing keys keep their defaults. The result is validated.
        """
        known: set[str] = {field.name for field in fields(cls)}
        unknown: list[str] = sorted(set(values) - known)
        if unknown:
            raise LinalgParamsError(f"unknown parameters: {', '.join(unknown)}")
        params: LinalgParams = cls(
            **{key: _as_float(value, key) for key, value in values.items()}
        )
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_finite_non_negative(self.det_pivot_eps, "det_pivot_eps")
        _require_finite_non_negative(self.chol_eps, "chol_eps")
        _require_finite_non_negative(self.symmetry_atol, "symmetry_atol")
        _require_finite_non_negative(self.sum_abs_tol, "sum_abs_tol")

    def replace(self, **overrides: Any) -> LinalgParams:
        """Return a validated modified copy of the parameters."""
        params: LinalgParams = replace(self, **overrides)
        params.validate()
        return params

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a plain dict representation."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


def _as_float(value: Any, name: str) -> float:
    # YAML 1.1 loads exponents without a dot, such as 1e-12, as strings
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise LinalgParamsError(f"{name} must be a number") from exc
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LinalgParamsError(f"{name} must be a number")
    return float(value)


DEFAULT_PARAMS: LinalgParams = LinalgParams.defaults()
