################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Determinant of a square matrix

Sizes 1 and 2 use closed forms. Larger matrices use Gaussian elimination
with partial pivoting: at each column the row holding the largest absolute
value among the remaining rows is swapped into the pivot position, each swap
flips the sign, and the determinant is the signed product of the pivots.

Singular convention:
    When a pivot magnitude falls below ``params.det_pivot_eps`` the matrix is
    treated as singular and ``det`` returns exactly 0.0 instead of raising.
    Filters upstream rely on a zero result meaning "near-singular". Callers
    that need strict detection must test ``abs(det(a)) < tol`` themselves.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams
from oasis_math.linalg.validation import require_square
from oasis_math.matrix.matrix_base import MatrixBase


_LOG: logging.Logger = logging.getLogger(__name__)


def det(a: MatrixBase, params: Optional[LinalgParams] = None) -> float:
    """Return the determinant of a square matrix.

    Args:
        a: Square matrix, fixed or dynamic
        params: Tolerances, defaults to DEFAULT_PARAMS

    Returns:
        Determinant of ``a``, or exactly 0.0 if a pivot is below
        ``params.det_pivot_eps``

    Raises:
        MatrixDimensionError: If ``a`` is empty or not square
    """
    require_square(a, "a")
    eps: float = (params or DEFAULT_PARAMS).det_pivot_eps
    n: int = a.rows

    if n == 1:
        return a.coeff(0, 0)
    if n == 2:
        return a.coeff(0, 0) * a.coeff(1, 1) - a.coeff(0, 1) * a.coeff(1, 0)

    work: NDArray[np.float64] = a.as_array()
    sign: float = 1.0
    for k in range(n):
        pivot_row: int = k + int(np.argmax(np.abs(work[k:, k])))
        if abs(work[pivot_row, k]) < eps:
            _LOG.debug("Pivot %d below %g, treating matrix as singular", k, eps)
            return 0.0
        if pivot_row != k:
            work[[k, pivot_row]] = work[[pivot_row, k]]
            sign = -sign
        if k + 1 < n:
            factors: NDArray[np.float64] = work[k + 1 :, k] / work[k, k]
            work[k + 1 :, k:] -= np.outer(factors, work[k, k:])

    return sign * float(np.prod(np.diag(work)))
