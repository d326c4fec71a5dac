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
Operations shared by fixed-size and dynamic-size matrices

Both matrix variants derive from MatrixBase and differ only in their storage
strategy and in how a result of a given shape is allocated (``_like``). Every
arithmetic operation returns a new matrix whose size class follows the left
operand; arguments are never mutated.

Elementwise operations require identical shapes. Mixing a fixed and a
dynamic operand is allowed when the shapes agree.
"""

from __future__ import annotations

from typing import Any
from typing import List
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from oasis_math.matrix.matrix_errors import MatrixDimensionError
from oasis_math.matrix.matrix_storage import MatrixStorage


def coerce_values(values: Any, rows: int, cols: int) -> NDArray[np.float64]:
    """Return ``values`` as a (rows, cols) float64 array.

    Accepts a flat row-major sequence of ``rows * cols`` numbers, a nested
    sequence of rows, a numpy array, or another matrix.

    Raises:
        MatrixDimensionError: If the value count or shape does not fit
    """
    if isinstance(values, MatrixBase):
        array: NDArray[np.float64] = values.as_array()
    else:
        array = np.asarray(values, dtype=np.float64)

    if array.ndim == 1:
        if array.size != rows * cols:
            raise MatrixDimensionError(
                f"expected {rows * cols} values for {rows}x{cols}, "
                f"got {array.size}"
            )
        return array.reshape((rows, cols))

    if array.shape != (rows, cols):
        raise MatrixDimensionError(
            f"expected shape ({rows}, {cols}), got {tuple(array.shape)}"
        )
    return array


class MatrixBase:
    """Common interface of the fixed and dynamic matrix types."""

    _storage: MatrixStorage

    # Matrices are mutable containers
    __hash__ = None  # type: ignore[assignment]

    # numpy operands defer to the reflected operators defined here
    __array_ufunc__ = None

    def _like(self, rows: int, cols: int) -> MatrixBase:
        """Return a zero matrix of the same size class with the given shape.

        Overridden by MatrixFixed and MatrixDynamic.
        """
        raise NotImplementedError

    def like(self, rows: int, cols: int) -> MatrixBase:
        """Return a new zero matrix of this size class with shape (rows, cols)."""
        return self._like(rows, cols)

    def _with_values(self, values: NDArray[np.float64]) -> MatrixBase:
        result: MatrixBase = self._like(int(values.shape[0]), int(values.shape[1]))
        result._storage.assign(values)
        return result

    @property
    def rows(self) -> int:
        return self._storage.rows

    @property
    def cols(self) -> int:
        return self._storage.cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._storage.rows, self._storage.cols)

    @property
    def size(self) -> int:
        return self._storage.size

    def is_empty(self) -> bool:
        return self._storage.size == 0

    def is_square(self) -> bool:
        return self.rows == self.cols

    def get(self, r: int, c: int) -> float:
        """Checked element read; raises MatrixIndexError when out of range."""
        return self._storage.get(r, c)

    def set(self, r: int, c: int, value: float) -> None:
        """Checked element write; raises MatrixIndexError when out of range."""
        self._storage.set(r, c, value)

    def coeff(self, r: int, c: int) -> float:
        """Unchecked element read. The caller guarantees (r, c) is in range."""
        return self._storage.coeff(r, c)

    def set_coeff(self, r: int, c: int, value: float) -> None:
        """Unchecked element write. The caller guarantees (r, c) is in range."""
        self._storage.set_coeff(r, c, value)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        r, c = index
        return self._storage.get(r, c)

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        r, c = index
        self._storage.set(r, c, value)

    def fill(self, value: float) -> None:
        self._storage.fill(value)

    def set_zero(self) -> None:
        self._storage.fill(0.0)

    def assign(self, values: Any) -> None:
        """Overwrite all elements in place, keeping the current shape."""
        self._storage.assign(coerce_values(values, self.rows, self.cols))

    def resize(self, rows: int, cols: int) -> None:
        """Change the shape. Fixed matrices only accept their own shape."""
        self._storage.resize(rows, cols)

    def as_array(self) -> NDArray[np.float64]:
        """Return an independent (rows, cols) numpy copy of the elements."""
        return self._storage.as_array().copy()

    def array_view(self) -> NDArray[np.float64]:
        """Return a read-only numpy view of the elements."""
        view: NDArray[np.float64] = self._storage.as_array().view()
        view.flags.writeable = False
        return view

    def to_list(self) -> List[float]:
        """Return the elements as a flat row-major list of floats."""
        return [float(v) for v in self._storage.as_array().ravel()]

    def to_rows(self) -> List[List[float]]:
        return [[float(v) for v in row] for row in self._storage.as_array()]

    def copy(self) -> MatrixBase:
        return self._with_values(self._storage.as_array())

    def __copy__(self) -> MatrixBase:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> MatrixBase:
        return self.copy()

    def transpose(self) -> MatrixBase:
        """Return a new (cols x rows) matrix with ``result[j][i] = self[i][j]``."""
        return self._with_values(np.ascontiguousarray(self._storage.as_array().T))

    @property
    def T(self) -> MatrixBase:
        return self.transpose()

    def add(self, other: MatrixBase) -> MatrixBase:
        """Elementwise sum; shapes must match exactly."""
        self._require_same_shape(other, "add")
        return self._with_values(
            self._storage.as_array() + other._storage.as_array()
        )

    def sub(self, other: MatrixBase) -> MatrixBase:
        """Elementwise difference; shapes must match exactly."""
        self._require_same_shape(other, "subtract")
        return self._with_values(
            self._storage.as_array() - other._storage.as_array()
        )

    def scale(self, s: float) -> MatrixBase:
        return self._with_values(self._storage.as_array() * float(s))

    def multiply(self, other: MatrixBase) -> MatrixBase:
        """Matrix product ``self * other``.

        Raises:
            MatrixDimensionError: If ``self.cols != other.rows``
        """
        if not isinstance(other, MatrixBase):
            raise TypeError("multiply requires a matrix operand")
        if self.cols != other.rows:
            raise MatrixDimensionError(
                f"cannot multiply {self.rows}x{self.cols} "
                f"by {other.rows}x{other.cols}"
            )
        return self._with_values(
            self._storage.as_array() @ other._storage.as_array()
        )

    def sum_abs(self) -> float:
        """Return the sum of absolute values of all elements.

        Used as an aggregate error metric when comparing matrices; this is
        the entrywise L1 sum, not an induced matrix norm.
        """
        return float(np.abs(self._storage.as_array()).sum())

    def trace(self) -> float:
        if not self.is_square():
            raise MatrixDimensionError(
                f"trace requires a square matrix, got {self.rows}x{self.cols}"
            )
        return float(np.trace(self._storage.as_array()))

    def is_symmetric(self, atol: float = 0.0) -> bool:
        if not self.is_square():
            return False
        data: NDArray[np.float64] = self._storage.as_array()
        return bool(np.all(np.abs(data - data.T) <= atol))

    def __add__(self, other: object) -> MatrixBase:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> MatrixBase:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> MatrixBase:
        return self._with_values(-self._storage.as_array())

    def __mul__(self, other: object) -> MatrixBase:
        if isinstance(other, (int, float, np.floating, np.integer)):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> MatrixBase:
        return self.__mul__(other)

    def __matmul__(self, other: object) -> MatrixBase:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(
            np.array_equal(self._storage.as_array(), other._storage.as_array())
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}, {self.cols}, {self.to_rows()})"

    def __str__(self) -> str:
        return np.array2string(self._storage.as_array(), precision=6)

    def _require_same_shape(self, other: MatrixBase, op: str) -> None:
        if not isinstance(other, MatrixBase):
            raise TypeError(f"{op} requires a matrix operand")
        if self.shape != other.shape:
            raise MatrixDimensionError(
                f"cannot {op} {self.rows}x{self.cols} "
                f"and {other.rows}x{other.cols}"
            )


def flat_values(rows: Sequence[Sequence[float]]) -> Tuple[int, int, List[float]]:
    """Return (rows, cols, row-major values) for a nested rectangular sequence.

    Raises:
        MatrixDimensionError: If the sequence is empty or ragged
    """
    if len(rows) == 0:
        raise MatrixDimensionError("matrix rows must be non-empty")
    cols: int = len(rows[0])
    if cols == 0:
        raise MatrixDimensionError("matrix columns must be non-empty")
    values: List[float] = []
    for row in rows:
        if len(row) != cols:
            raise MatrixDimensionError("matrix rows must all have the same length")
        values.extend(float(v) for v in row)
    return len(rows), cols, values
