################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix inverse by Gauss-Jordan elimination with partial pivoting."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams
from oasis_math.linalg.validation import require_square
from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_errors import SingularMatrixError


_LOG: logging.Logger = logging.getLogger(__name__)


def inv(a: MatrixBase, params: Optional[LinalgParams] = None) -> MatrixBase:
    """Return the inverse of a square matrix.

    Unlike ``det``, which reports a singular matrix as 0.0, there is no
    neutral inverse to return, so a vanishing pivot raises.

    Args:
        a: Square matrix, fixed or dynamic
        params: Tolerances, defaults to DEFAULT_PARAMS

    Returns:
        ``a^-1`` with the shape and size class of ``a``

    Raises:
        MatrixDimensionError: If ``a`` is empty or not square
        SingularMatrixError: If a pivot magnitude is below
            ``params.det_pivot_eps``
    """
    require_square(a, "a")
    eps: float = (params or DEFAULT_PARAMS).det_pivot_eps
    n: int = a.rows

    # Augmented system [A | I] reduced to [I | A^-1]
    work: NDArray[np.float64] = np.hstack([a.as_array(), np.eye(n, dtype=np.float64)])
    for k in range(n):
        pivot_row: int = k + int(np.argmax(np.abs(work[k:, k])))
        if abs(work[pivot_row, k]) < eps:
            _LOG.debug("Pivot %d below %g, matrix is singular", k, eps)
            raise SingularMatrixError(
                f"matrix is singular or nearly singular at column {k}", column=k
            )
        if pivot_row != k:
            work[[k, pivot_row]] = work[[pivot_row, k]]
        work[k] /= work[k, k]
        factors: NDArray[np.float64] = work[:, k].copy()
        factors[k] = 0.0
        work -= np.outer(factors, work[k])

    result: MatrixBase = a.like(n, n)
    result.assign(work[:, n:])
    return result
