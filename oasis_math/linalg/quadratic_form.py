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
Covariance propagation through a linear map

For a covariance ``C`` (n x n) and a linear or linearized model ``H``
(m x n), the propagated covariance is ``R = H C H^T`` (m x m). This is the
predicted measurement covariance of an EKF update and the motion-model
covariance of a prediction step.

The scalar form handles the common m = 1 case (a single scalar measurement)
without allocating a 1x1 result.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_math.linalg.validation import prepare_output
from oasis_math.linalg.validation import require_matrix
from oasis_math.linalg.validation import require_square
from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_errors import MatrixDimensionError


def _mirror_upper(r: NDArray[np.float64]) -> NDArray[np.float64]:
    # Lower triangle is a copy of the upper one
    return np.triu(r) + np.triu(r, 1).T


def multiply_hcht(
    h: MatrixBase,
    c: MatrixBase,
    out: Optional[MatrixBase] = None,
) -> MatrixBase:
    """Return ``H C H^T``.

    Args:
        h: Linear map (m x n)
        c: Covariance (n x n)
        out: Optional output matrix; dynamic outputs are resized, fixed
            outputs must already be m x m

    Returns:
        m x m matrix with the size class of ``h``, or ``out``. The result is
        exactly symmetric: the lower triangle mirrors the upper one

    Raises:
        MatrixDimensionError: If ``c`` is not square or ``h.cols != c.rows``
    """
    require_matrix(h, "h")
    require_square(c, "c")
    if h.cols != c.rows:
        raise MatrixDimensionError(
            f"h columns ({h.cols}) must match c size ({c.rows}x{c.cols})"
        )

    h_data: NDArray[np.float64] = h.array_view()
    r: NDArray[np.float64] = _mirror_upper(h_data @ c.array_view() @ h_data.T)

    if out is None:
        result: MatrixBase = h.like(h.rows, h.rows)
        result.assign(r)
        return result

    prepare_output(out, h.rows, h.rows, "out")
    out.assign(r)
    return out


def multiply_hcht_scalar(h: MatrixBase, c: MatrixBase) -> float:
    """Return the scalar ``h C h^T`` for a single-row ``h``.

    Args:
        h: Row vector (1 x n)
        c: Covariance (n x n)

    Returns:
        The single element of ``h C h^T``

    Raises:
        MatrixDimensionError: If ``h`` is not 1 x n or ``c`` is not n x n
    """
    require_matrix(h, "h")
    require_square(c, "c")
    if h.rows != 1:
        raise MatrixDimensionError(f"h must be a single row, got {h.rows}x{h.cols}")
    if h.cols != c.rows:
        raise MatrixDimensionError(
            f"h columns ({h.cols}) must match c size ({c.rows}x{c.cols})"
        )

    row: NDArray[np.float64] = h.array_view()[0]
    return float(row @ c.array_view() @ row)


def multiply_htch(
    h: MatrixBase,
    c: MatrixBase,
    out: Optional[MatrixBase] = None,
) -> MatrixBase:
    """Return ``H^T C H``, the information-form counterpart of ``H C H^T``.

    Args:
        h: Linear map (m x n)
        c: Matrix in measurement space (m x m)
        out: Optional output matrix; dynamic outputs are resized, fixed
            outputs must already be n x n

    Returns:
        n x n matrix with the size class of ``h``, or ``out``, exactly
        symmetric

    Raises:
        MatrixDimensionError: If ``c`` is not square or ``h.rows != c.rows``
    """
    require_matrix(h, "h")
    require_square(c, "c")
    if h.rows != c.rows:
        raise MatrixDimensionError(
            f"h rows ({h.rows}) must match c size ({c.rows}x{c.cols})"
        )

    h_data: NDArray[np.float64] = h.array_view()
    r: NDArray[np.float64] = _mirror_upper(h_data.T @ c.array_view() @ h_data)

    if out is None:
        result: MatrixBase = h.like(h.cols, h.cols)
        result.assign(r)
        return result

    prepare_output(out, h.cols, h.cols, "out")
    out.assign(r)
    return out
