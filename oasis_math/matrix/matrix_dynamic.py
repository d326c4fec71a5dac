################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dynamic-size matrices whose shape is chosen and changed at run time."""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Sequence

import numpy as np

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_base import coerce_values
from oasis_math.matrix.matrix_base import flat_values
from oasis_math.matrix.matrix_storage import DynamicStorage


class MatrixDynamic(MatrixBase):
    """Heap-backed matrix with a run-time shape.

    ``MatrixDynamic()`` is an empty 0x0 placeholder, typically handed to an
    algorithm as its output. ``MatrixDynamic(other)`` deep-copies any matrix,
    fixed or dynamic.
    """

    def __init__(
        self,
        rows: Any = 0,
        cols: int = 0,
        values: Optional[Any] = None,
    ) -> None:
        if isinstance(rows, MatrixBase):
            source: MatrixBase = rows
            self._storage = DynamicStorage(source.rows, source.cols)
            self._storage.assign(source.as_array())
            return
        self._storage = DynamicStorage(rows, cols)
        if values is not None:
            self._storage.assign(coerce_values(values, rows, cols))

    def _like(self, rows: int, cols: int) -> MatrixBase:
        return MatrixDynamic(rows, cols)

    def set_size(self, rows: int, cols: int) -> None:
        self.resize(rows, cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> MatrixDynamic:
        n_rows, n_cols, values = flat_values(rows)
        return cls(n_rows, n_cols, values)

    @classmethod
    def from_array(cls, array: np.ndarray) -> MatrixDynamic:
        data: np.ndarray = np.asarray(array, dtype=np.float64)
        if data.ndim == 1:
            data = data.reshape((1, data.size))
        return cls(int(data.shape[0]), int(data.shape[1]), data)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> MatrixDynamic:
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> MatrixDynamic:
        return cls(n, n, np.eye(n, dtype=np.float64))


MatrixDouble = MatrixDynamic
