################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Determinant, Cholesky, inverse and covariance propagation."""

from __future__ import annotations

from oasis_math.linalg.cholesky import chol
from oasis_math.linalg.cholesky import is_spd
from oasis_math.linalg.cholesky import solve_spd
from oasis_math.linalg.determinant import det
from oasis_math.linalg.inverse import inv
from oasis_math.linalg.quadratic_form import multiply_hcht
from oasis_math.linalg.quadratic_form import multiply_hcht_scalar
from oasis_math.linalg.quadratic_form import multiply_htch


__all__ = [
    "chol",
    "det",
    "inv",
    "is_spd",
    "multiply_hcht",
    "multiply_hcht_scalar",
    "multiply_htch",
    "solve_spd",
]
