################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shape checks shared by the linear algebra routines."""

from __future__ import annotations

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_dynamic import MatrixDynamic
from oasis_math.matrix.matrix_errors import MatrixDimensionError


def require_matrix(a: object, name: str) -> MatrixBase:
    """Return ``a`` if it is a non-empty matrix."""
    if not isinstance(a, MatrixBase):
        raise TypeError(f"{name} must be a matrix, got {type(a).__name__}")
    if a.is_empty():
        raise MatrixDimensionError(f"{name} must be non-empty")
    return a


def require_square(a: object, name: str) -> MatrixBase:
    """Return ``a`` if it is a non-empty square matrix."""
    matrix: MatrixBase = require_matrix(a, name)
    if not matrix.is_square():
        raise MatrixDimensionError(
            f"{name} must be square, got {matrix.rows}x{matrix.cols}"
        )
    return matrix


def prepare_output(out: MatrixBase, rows: int, cols: int, name: str) -> None:
    """Shape a caller-supplied output matrix to (rows, cols).

    Dynamic outputs are resized. Fixed outputs must already have the shape.
    """
    if not isinstance(out, MatrixBase):
        raise TypeError(f"{name} must be a matrix, got {type(out).__name__}")
    if isinstance(out, MatrixDynamic):
        out.resize(rows, cols)
    elif out.shape != (rows, cols):
        raise MatrixDimensionError(
            f"{name} must be {rows}x{cols}, got {out.rows}x{out.cols}"
        )
