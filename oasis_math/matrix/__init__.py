################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix storage and the fixed/dynamic matrix types."""

from __future__ import annotations

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_dynamic import MatrixDouble
from oasis_math.matrix.matrix_dynamic import MatrixDynamic
from oasis_math.matrix.matrix_errors import MatrixDimensionError
from oasis_math.matrix.matrix_errors import MatrixError
from oasis_math.matrix.matrix_errors import MatrixIndexError
from oasis_math.matrix.matrix_errors import NotPositiveDefiniteError
from oasis_math.matrix.matrix_errors import SingularMatrixError
from oasis_math.matrix.matrix_fixed import MatrixDouble12
from oasis_math.matrix.matrix_fixed import MatrixDouble13
from oasis_math.matrix.matrix_fixed import MatrixDouble21
from oasis_math.matrix.matrix_fixed import MatrixDouble22
from oasis_math.matrix.matrix_fixed import MatrixDouble31
from oasis_math.matrix.matrix_fixed import MatrixDouble33
from oasis_math.matrix.matrix_fixed import MatrixDouble44
from oasis_math.matrix.matrix_fixed import MatrixDouble66
from oasis_math.matrix.matrix_fixed import MatrixFixed
from oasis_math.matrix.matrix_fixed import fixed_matrix_type
from oasis_math.matrix.matrix_storage import DynamicStorage
from oasis_math.matrix.matrix_storage import FixedStorage
from oasis_math.matrix.matrix_storage import MatrixStorage


__all__ = [
    "DynamicStorage",
    "FixedStorage",
    "MatrixBase",
    "MatrixDimensionError",
    "MatrixDouble",
    "MatrixDouble12",
    "MatrixDouble13",
    "MatrixDouble21",
    "MatrixDouble22",
    "MatrixDouble31",
    "MatrixDouble33",
    "MatrixDouble44",
    "MatrixDouble66",
    "MatrixDynamic",
    "MatrixError",
    "MatrixFixed",
    "MatrixIndexError",
    "MatrixStorage",
    "NotPositiveDefiniteError",
    "SingularMatrixError",
    "fixed_matrix_type",
]
