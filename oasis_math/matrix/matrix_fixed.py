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
Fixed-size matrices

A fixed matrix type carries its shape as class attributes, so every instance
of ``fixed_matrix_type(3, 3)`` is 3x3 for its whole life. Types are generated
once per shape and cached, which keeps ``type(a) is type(b)`` meaningful for
two fixed matrices of the same shape.

Example:
    H = MatrixDouble33([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])
"""

from __future__ import annotations

import functools
from typing import Any
from typing import ClassVar
from typing import Optional
from typing import Sequence
from typing import Type

import numpy as np

from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_base import coerce_values
from oasis_math.matrix.matrix_errors import MatrixDimensionError
from oasis_math.matrix.matrix_storage import FixedStorage


class MatrixFixed(MatrixBase):
    """Matrix whose shape is fixed by its type.

    Do not instantiate MatrixFixed directly; use ``fixed_matrix_type`` or one
    of the predefined aliases such as ``MatrixDouble33``.
    """

    ROWS: ClassVar[int] = 0
    COLS: ClassVar[int] = 0

    def __init__(self, values: Optional[Any] = None) -> None:
        """Create a zero-filled matrix, or copy ``values`` in row-major order.

        Args:
            values: Optional flat sequence of ROWS * COLS values, nested rows,
                a numpy array, or another matrix of the same shape

        Raises:
            TypeError: If called on the unsized MatrixFixed base class
            MatrixDimensionError: If ``values`` has the wrong size
        """
        cls: Type[MatrixFixed] = type(self)
        if cls.ROWS <= 0 or cls.COLS <= 0:
            raise TypeError("use fixed_matrix_type(rows, cols) to get a sized type")
        self._storage = FixedStorage(cls.ROWS, cls.COLS)
        if values is not None:
            self._storage.assign(coerce_values(values, cls.ROWS, cls.COLS))

    def _like(self, rows: int, cols: int) -> MatrixBase:
        return fixed_matrix_type(rows, cols)()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> MatrixFixed:
        return cls(rows)

    @classmethod
    def from_array(cls, array: np.ndarray) -> MatrixFixed:
        return cls(np.asarray(array, dtype=np.float64))

    @classmethod
    def zeros(cls) -> MatrixFixed:
        return cls()

    @classmethod
    def identity(cls) -> MatrixFixed:
        if cls.ROWS != cls.COLS:
            raise MatrixDimensionError(
                f"identity requires a square type, got {cls.ROWS}x{cls.COLS}"
            )
        return cls(np.eye(cls.ROWS, dtype=np.float64))


@functools.lru_cache(maxsize=None)
def fixed_matrix_type(rows: int, cols: int) -> Type[MatrixFixed]:
    """Return the fixed matrix type for the given shape.

    Raises:
        MatrixDimensionError: If rows or cols is not positive
    """
    if rows <= 0 or cols <= 0:
        raise MatrixDimensionError(
            f"fixed matrix shape must be positive, got {rows}x{cols}"
        )
    name: str = f"MatrixFixed{rows}x{cols}"
    return type(
        name,
        (MatrixFixed,),
        {
            "ROWS": rows,
            "COLS": cols,
            "__module__": __name__,
            "__qualname__": name,
            "__doc__": f"Fixed-size {rows}x{cols} matrix of doubles.",
        },
    )


MatrixDouble12: Type[MatrixFixed] = fixed_matrix_type(1, 2)
MatrixDouble13: Type[MatrixFixed] = fixed_matrix_type(1, 3)
MatrixDouble21: Type[MatrixFixed] = fixed_matrix_type(2, 1)
MatrixDouble22: Type[MatrixFixed] = fixed_matrix_type(2, 2)
MatrixDouble31: Type[MatrixFixed] = fixed_matrix_type(3, 1)
MatrixDouble33: Type[MatrixFixed] = fixed_matrix_type(3, 3)
MatrixDouble44: Type[MatrixFixed] = fixed_matrix_type(4, 4)
MatrixDouble66: Type[MatrixFixed] = fixed_matrix_type(6, 6)
