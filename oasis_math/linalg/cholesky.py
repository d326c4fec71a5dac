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
Cholesky factorization of symmetric positive-definite matrices

For SPD ``A`` the lower-triangular factor ``L`` with ``L L^T = A`` is built
column by column:

    L[j][j] = sqrt(A[j][j] - sum_{k<j} L[j][k]^2)
    L[i][j] = (A[i][j] - sum_{k<j} L[i][k] L[j][k]) / L[j][j],  i > j

Entries above the diagonal are zero. A value under the square root at or
below ``params.chol_eps`` (or non-finite) means ``A`` is not SPD and raises
NotPositiveDefiniteError; the factorization never produces NaN. Because the
recurrence only reads the lower triangle, symmetry is checked up front so a
non-symmetric input is rejected instead of silently factoring its lower half.
The symmetry tolerance is relative to the largest entry magnitude (and
absolute for matrices whose entries are all at most 1).
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams
from oasis_math.linalg.validation import prepare_output
from oasis_math.linalg.validation import require_matrix
from oasis_math.linalg.validation import require_square
from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_errors import MatrixDimensionError
from oasis_math.matrix.matrix_errors import NotPositiveDefiniteError


_LOG: logging.Logger = logging.getLogger(__name__)


def _cholesky_lower(a: MatrixBase, params: LinalgParams) -> NDArray[np.float64]:
    data: NDArray[np.float64] = a.array_view()
    n: int = a.rows

    # Tolerance scales with the largest entry once it exceeds 1
    scale: float = max(1.0, float(np.max(np.abs(data))))
    if not np.all(np.abs(data - data.T) <= params.symmetry_atol * scale):
        _LOG.debug("Rejecting non-symmetric %dx%d matrix for Cholesky", n, n)
        raise NotPositiveDefiniteError("matrix is not symmetric")

    lower: NDArray[np.float64] = np.zeros((n, n), dtype=np.float64)
    for j in range(n):
        row_j: NDArray[np.float64] = lower[j, :j]
        pivot: float = float(data[j, j] - np.dot(row_j, row_j))
        if not math.isfinite(pivot) or pivot <= params.chol_eps:
            _LOG.debug("Cholesky pivot %d is %g, matrix is not SPD", j, pivot)
            raise NotPositiveDefiniteError(
                f"matrix is not positive definite (pivot {j} is {pivot:g})",
                column=j,
                value=pivot,
            )
        diag: float = math.sqrt(pivot)
        lower[j, j] = diag
        if j + 1 < n:
            lower[j + 1 :, j] = (data[j + 1 :, j] - lower[j + 1 :, :j] @ row_j) / diag
    return lower


def chol(
    a: MatrixBase,
    out: Optional[MatrixBase] = None,
    params: Optional[LinalgParams] = None,
) -> MatrixBase:
    """Return the lower-triangular Cholesky factor ``L`` of ``a``.

    Args:
        a: Symmetric positive-definite matrix, fixed or dynamic
        out: Optional output matrix. Dynamic outputs are resized, fixed
            outputs must already be n x n
        params: Tolerances, defaults to DEFAULT_PARAMS

    Returns:
        ``L`` with the same shape and size class as ``a``, or ``out`` when
        given

    Raises:
        MatrixDimensionError: If ``a`` is empty or not square
        NotPositiveDefiniteError: If ``a`` is not symmetric or not positive
            definite
    """
    require_square(a, "a")
    lower: NDArray[np.float64] = _cholesky_lower(a, params or DEFAULT_PARAMS)

    if out is None:
        result: MatrixBase = a.like(a.rows, a.cols)
        result.assign(lower)
        return result

    prepare_output(out, a.rows, a.cols, "out")
    out.assign(lower)
    return out


def is_spd(a: MatrixBase, params: Optional[LinalgParams] = None) -> bool:
    """Return True when ``a`` admits a Cholesky factorization."""
    try:
        require_square(a, "a")
        _cholesky_lower(a, params or DEFAULT_PARAMS)
    except (MatrixDimensionError, NotPositiveDefiniteError):
        return False
    return True


def solve_spd(
    a: MatrixBase,
    b: MatrixBase,
    params: Optional[LinalgParams] = None,
) -> MatrixBase:
    """Solve ``A X = B`` for SPD ``A`` using its Cholesky factor.

    Args:
        a: SPD matrix (n x n)
        b: Right-hand side (n x k)
        params: Tolerances, defaults to DEFAULT_PARAMS

    Returns:
        ``X`` (n x k) with the size class of ``b``

    Raises:
        MatrixDimensionError: If shapes are incompatible
        NotPositiveDefiniteError: If ``a`` is not SPD
    """
    require_square(a, "a")
    require_matrix(b, "b")
    if b.rows != a.rows:
        raise MatrixDimensionError(
            f"b must have {a.rows} rows, got {b.rows}x{b.cols}"
        )

    lower: NDArray[np.float64] = _cholesky_lower(a, params or DEFAULT_PARAMS)
    n: int = a.rows
    x: NDArray[np.float64] = b.as_array()

    # Forward substitution: L Y = B
    for i in range(n):
        x[i] = (x[i] - lower[i, :i] @ x[:i]) / lower[i, i]

    # Backward substitution: L^T X = Y
    for i in range(n - 1, -1, -1):
        x[i] = (x[i] - lower[i + 1 :, i] @ x[i + 1 :]) / lower[i, i]

    result: MatrixBase = b.copy()
    result.assign(x)
    return result
