################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense fixed and dynamic size matrices for state estimation."""

from __future__ import annotations

from oasis_math.config.linalg_params import LinalgParams
from oasis_math.linalg import chol
from oasis_math.linalg import det
from oasis_math.linalg import inv
from oasis_math.linalg import is_spd
from oasis_math.linalg import multiply_hcht
from oasis_math.linalg import multiply_hcht_scalar
from oasis_math.linalg import multiply_htch
from oasis_math.linalg import solve_spd
from oasis_math.matrix import MatrixBase
from oasis_math.matrix import MatrixDimensionError
from oasis_math.matrix import MatrixDouble
from oasis_math.matrix import MatrixDouble22
from oasis_math.matrix import MatrixDouble33
from oasis_math.matrix import MatrixDouble44
from oasis_math.matrix import MatrixDynamic
from oasis_math.matrix import MatrixError
from oasis_math.matrix import MatrixFixed
from oasis_math.matrix import MatrixIndexError
from oasis_math.matrix import NotPositiveDefiniteError
from oasis_math.matrix import SingularMatrixError
from oasis_math.matrix import fixed_matrix_type


__all__ = [
    "LinalgParams",
    "MatrixBase",
    "MatrixDimensionError",
    "MatrixDouble",
    "MatrixDouble22",
    "MatrixDouble33",
    "MatrixDouble44",
    "MatrixDynamic",
    "MatrixError",
    "MatrixFixed",
    "MatrixIndexError",
    "NotPositiveDefiniteError",
    "SingularMatrixError",
    "chol",
    "det",
    "fixed_matrix_type",
    "inv",
    "is_spd",
    "multiply_hcht",
    "multiply_hcht_scalar",
    "multiply_htch",
    "solve_spd",
]
