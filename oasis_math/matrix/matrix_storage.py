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
Numeric buffers backing fixed-size and dynamic-size matrices

Values are held in a C-contiguous float64 numpy block of shape (rows, cols),
so element (r, c) sits at flat offset ``r * cols + c``. This row-major order
is the only element order used anywhere in the library.

Two accessor families are exposed:

    - get/set: checked, raise MatrixIndexError when (r, c) is out of range
    - coeff/set_coeff: unchecked, for inner loops. Callers guarantee
      0 <= r < rows and 0 <= c < cols. Violating this is undefined: a
      negative index silently addresses the wrong cell and a large index may
      raise a numpy IndexError
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from oasis_math.matrix.matrix_errors import MatrixDimensionError
from oasis_math.matrix.matrix_errors import MatrixIndexError


def _validate_shape(rows: int, cols: int, allow_empty: bool) -> None:
    if not isinstance(rows, (int, np.integer)) or not isinstance(
        cols, (int, np.integer)
    ):
        raise MatrixDimensionError("rows and cols must be integers")
    if allow_empty and rows == 0 and cols == 0:
        return
    if rows <= 0 or cols <= 0:
        raise MatrixDimensionError(
            f"rows and cols must be positive, got {rows}x{cols}"
        )


class MatrixStorage:
    """Owned row-major float64 block shared by both storage strategies."""

    def __init__(self, rows: int, cols: int) -> None:
        self._data: NDArray[np.float64] = np.zeros((rows, cols), dtype=np.float64)

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def size(self) -> int:
        return int(self._data.size)

    def get(self, r: int, c: int) -> float:
        """Return the value at (r, c), raising MatrixIndexError if out of range."""
        self._check_index(r, c)
        return float(self._data[r, c])

    def set(self, r: int, c: int, value: float) -> None:
        """Store ``value`` at (r, c), raising MatrixIndexError if out of range."""
        self._check_index(r, c)
        self._data[r, c] = value

    def coeff(self, r: int, c: int) -> float:
        """Return the value at (r, c) without bounds checking."""
        return float(self._data[r, c])

    def set_coeff(self, r: int, c: int, value: float) -> None:
        """Store ``value`` at (r, c) without bounds checking."""
        self._data[r, c] = value

    def fill(self, value: float) -> None:
        self._data.fill(value)

    def assign(self, values: NDArray[np.float64]) -> None:
        """Overwrite every cell from an array with exactly this shape."""
        if values.shape != self._data.shape:
            raise MatrixDimensionError(
                f"cannot assign {values.shape[0]}x{values.shape[1]} values "
                f"into {self.rows}x{self.cols} storage"
            )
        self._data[...] = values

    def as_array(self) -> NDArray[np.float64]:
        """Return the live buffer.

        The returned array aliases the storage. Algorithm modules read it for
        vectorized work; callers that need an independent array should copy.
        """
        return self._data

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape. Overridden by FixedStorage and DynamicStorage."""
        raise NotImplementedError

    def copy(self) -> MatrixStorage:
        """Return an independent copy. Overridden by each storage class."""
        raise NotImplementedError

    def _check_index(self, r: int, c: int) -> None:
        rows: int = self.rows
        cols: int = self.cols
        if r < 0 or r >= rows or c < 0 or c >= cols:
            raise MatrixIndexError(
                f"index ({r}, {c}) out of range for {rows}x{cols} matrix"
            )


class FixedStorage(MatrixStorage):
    """Fixed-capacity block whose shape is set once at construction."""

    def __init__(self, rows: int, cols: int) -> None:
        _validate_shape(rows, cols, allow_empty=False)
        super().__init__(rows, cols)

    def resize(self, rows: int, cols: int) -> None:
        """Accept only the current shape; any other shape is a dimension error."""
        if rows != self.rows or cols != self.cols:
            raise MatrixDimensionError(
                f"cannot resize fixed {self.rows}x{self.cols} storage "
                f"to {rows}x{cols}"
            )

    def copy(self) -> FixedStorage:
        clone: FixedStorage = FixedStorage(self.rows, self.cols)
        clone._data[...] = self._data
        return clone


class DynamicStorage(MatrixStorage):
    """Heap block that can be reallocated to a new shape at run time.

    An empty 0x0 block is allowed so a matrix can be declared before its
    size is known.
    """

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        _validate_shape(rows, cols, allow_empty=True)
        super().__init__(rows, cols)

    def resize(self, rows: int, cols: int) -> None:
        """Reallocate to (rows, cols).

        The overlapping top-left region keeps its values and new cells are
        zero. The previous block is released.
        """
        _validate_shape(rows, cols, allow_empty=True)
        if rows == self.rows and cols == self.cols:
            return
        fresh: NDArray[np.float64] = np.zeros((rows, cols), dtype=np.float64)
        keep_rows: int = min(rows, self.rows)
        keep_cols: int = min(cols, self.cols)
        fresh[:keep_rows, :keep_cols] = self._data[:keep_rows, :keep_cols]
        self._data = fresh

    def copy(self) -> DynamicStorage:
        clone: DynamicStorage = DynamicStorage()
        clone._data = self._data.copy()
        return clone
