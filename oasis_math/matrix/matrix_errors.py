################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by matrix storage, matrix types and linear algebra."""

from __future__ import annotations

from typing import Optional


class MatrixError(Exception):
    """Base class for all matrix library errors."""


class MatrixDimensionError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible with an operation.

    Covers elementwise add/subtract of different shapes, inner-dimension
    mismatch in products, non-square input to square-only algorithms,
    resizing a fixed-size matrix, and constructing a matrix from the wrong
    number of values.
    """


class MatrixIndexError(MatrixError, IndexError):
    """Raised by checked element access when (row, col) is out of range."""


class NotPositiveDefiniteError(MatrixError):
    """Raised when a Cholesky factorization meets a non-SPD input.

    Attributes:
        column: Column of the factor where the pivot failed, or None when the
            input was rejected for asymmetry before factorization
        value: Value found under the square root at ``column``, or None
    """

    def __init__(
        self,
        message: str,
        column: Optional[int] = None,
        value: Optional[float] = None,
    ) -> None:
        super().__init__(message)
        self.column: Optional[int] = column
        self.value: Optional[float] = value


class SingularMatrixError(MatrixError):
    """Raised when an inverse is requested for a (numerically) singular matrix.

    Attributes:
        column: Elimination column where no usable pivot was found
    """

    def __init__(self, message: str, column: Optional[int] = None) -> None:
        super().__init__(message)
        self.column: Optional[int] = column
