################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for Cholesky factorization and SPD solves."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.linalg.cholesky import chol
from oasis_math.linalg.cholesky import is_spd
from oasis_math.linalg.cholesky import solve_spd
from oasis_math.matrix.matrix_base import MatrixBase
from oasis_math.matrix.matrix_dynamic import MatrixDouble
from oasis_math.matrix.matrix_errors import MatrixDimensionError
from oasis_math.matrix.matrix_errors import NotPositiveDefiniteError
from oasis_math.matrix.matrix_fixed import MatrixDouble22
from oasis_math.matrix.matrix_fixed import MatrixDouble33
from oasis_math.matrix.matrix_fixed import MatrixFixed


TOL: float = DEFAULT_PARAMS.sum_abs_tol

DAT_A_2X2: list[float] = [1.0727710178, 0.6393375593, 0.6393375593, 0.8262219720]
# Reference factor stored as its upper-triangular transpose U = L^T
DAT_U_2X2: list[float] = [1.0357465992, 0.6172721781, 0.0000000000, 0.6672308672]

DAT_A_3X3: list[float] = [
    0.515479426556448,
    0.832723636299236,
    0.249691538245735,
    0.832723636299236,
    1.401081397506934,
    0.385539356127255,
    0.249691538245735,
    0.385539356127255,
    0.128633962591437,
]
DAT_U_3X3: list[float] = [
    0.717968959326549,
    1.159832365288224,
    0.347774837619643,
    0.000000000000000,
    0.236368952988455,
    -0.075395504153773,
    0.000000000000000,
    0.000000000000000,
    0.044745311077990,
]

# fmt: off
DAT_A_10X10: list[float] = [
    2.8955668335, 2.3041932983, 1.9002381085, 1.7993158652, 1.8456197228,
    2.9632296740, 1.9368565578, 2.1988923358, 2.0547605617, 2.5655678993,
    2.3041932983, 3.8406914364, 2.1811218706, 3.2312564555, 2.4736403918,
    3.4703311380, 1.4874417483, 3.1073538218, 2.1353324397, 2.9541115932,
    1.9002381085, 2.1811218706, 2.4942067597, 1.6851007198, 1.4585872052,
    2.3015952197, 1.0955231591, 2.2979627790, 1.3918738834, 2.1854562572,
    1.7993158652, 3.2312564555, 1.6851007198, 3.1226161015, 1.6779632687,
    2.7195826381, 1.2397348013, 2.3757864319, 1.6291224768, 2.4463194915,
    1.8456197228, 2.4736403918, 1.4585872052, 1.6779632687, 2.8123267839,
    2.5860688816, 1.4131630919, 2.1914803135, 1.5542420639, 2.7170092067,
    2.9632296740, 3.4703311380, 2.3015952197, 2.7195826381, 2.5860688816,
    4.1669180394, 2.1145239023, 3.3214801332, 2.6694845663, 3.0742063088,
    1.9368565578, 1.4874417483, 1.0955231591, 1.2397348013, 1.4131630919,
    2.1145239023, 1.8928811570, 1.7097998455, 1.7205860530, 1.8710847505,
    2.1988923358, 3.1073538218, 2.2979627790, 2.3757864319, 2.1914803135,
    3.3214801332, 1.7097998455, 3.4592638415, 2.1518695071, 2.8907499694,
    2.0547605617, 2.1353324397, 1.3918738834, 1.6291224768, 1.5542420639,
    2.6694845663, 1.7205860530, 2.1518695071, 2.1110960664, 1.6731209980,
    2.5655678993, 2.9541115932, 2.1854562572, 2.4463194915, 2.7170092067,
    3.0742063088, 1.8710847505, 2.8907499694, 1.6731209980, 3.9093678727,
]
DAT_U_10X10: list[float] = [
    1.7016365163, 1.3541042851, 1.1167121124, 1.0574031810, 1.0846145491,
    1.7413999087, 1.1382316607, 1.2922221137, 1.2075202560, 1.5077061845,
    0.0000000000, 1.4167191047, 0.4722017314, 1.2701334167, 0.7093566960,
    0.7851196867, -0.0380051491, 0.9582353452, 0.3530862859, 0.6441080558,
    0.0000000000, 0.0000000000, 1.0120209201, -0.0943393725, -0.0865342379,
    -0.0136183214, -0.1557357390, 0.3976620401, -0.1218419159, 0.1952860421,
    0.0000000000, 0.0000000000, 0.0000000000, 0.6183654266, -0.6113744707,
    -0.1944977093, 0.1127886805, -0.2752173394, -0.1741275611, 0.0847171764,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.8668818973,
    0.0234194680, 0.3011475111, -0.0272963639, -0.1417917925, 0.8000162775,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000,
    0.6924364129, 0.2527445784, 0.3919505633, 0.3715689962, -0.0817608778,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000,
    0.0000000000, 0.6358623279, 0.4364121485, 0.4859857603, -0.0313828244,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000,
    0.0000000000, 0.0000000000, 0.5408375843, -0.1995475524, 0.6258606925,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000,
    0.0000000000, 0.0000000000, 0.0000000000, 0.2213262214, -0.2367037013,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000,
    0.0000000000, 0.0000000000, 0.0000000000, 0.0000000000, 0.2838575216,
]
# fmt: on


def _assert_roundtrip(A: MatrixBase, L: MatrixBase) -> None:
    """Check L L^T reproduces A and L is lower triangular."""
    assert (L @ L.T - A).sum_abs() <= TOL
    upper: np.ndarray = np.triu(L.as_array(), 1)
    assert np.all(upper == 0.0)


def _random_spd(rng: np.random.Generator, n: int) -> MatrixDouble:
    """Return a well-conditioned random SPD matrix."""
    m: np.ndarray = rng.normal(size=(n, n))
    return MatrixDouble.from_array(m @ m.T + n * np.eye(n))


def test_chol_2x2_dyn() -> None:
    A: MatrixDouble = MatrixDouble(2, 2, DAT_A_2X2)
    L: MatrixBase = chol(A)
    reference: MatrixDouble = MatrixDouble(2, 2, DAT_U_2X2)
    assert (reference.T - L).sum_abs() <= TOL
    _assert_roundtrip(A, L)


def test_chol_2x2_fix() -> None:
    A: MatrixFixed = MatrixDouble22(DAT_A_2X2)
    L: MatrixBase = chol(A)
    assert isinstance(L, MatrixDouble22)
    reference: MatrixDouble = MatrixDouble(2, 2, DAT_U_2X2)
    assert (reference.T - MatrixDouble(L)).sum_abs() <= TOL
    _assert_roundtrip(A, L)


def test_chol_3x3_dyn() -> None:
    A: MatrixDouble = MatrixDouble(3, 3, DAT_A_3X3)
    L: MatrixBase = chol(A)
    reference: MatrixDouble = MatrixDouble(3, 3, DAT_U_3X3)
    assert (reference.T - L).sum_abs() <= TOL
    _assert_roundtrip(A, L)


def test_chol_3x3_fix() -> None:
    A: MatrixFixed = MatrixDouble33(DAT_A_3X3)
    L: MatrixBase = chol(A)
    assert isinstance(L, MatrixDouble33)
    reference: MatrixFixed = MatrixDouble33(DAT_U_3X3)
    assert (reference.T - L).sum_abs() <= TOL
    _assert_roundtrip(A, L)


def test_chol_10x10_dyn() -> None:
    A: MatrixDouble = MatrixDouble(10, 10, DAT_A_10X10)
    L: MatrixBase = chol(A)
    assert isinstance(L, MatrixDouble)
    reference: MatrixDouble = MatrixDouble(10, 10, DAT_U_10X10)
    assert (reference.T - L).sum_abs() <= TOL
    _assert_roundtrip(A, L)


def test_chol_random_spd_roundtrip() -> None:
    rng: np.random.Generator = np.random.default_rng(1234)
    for n in (1, 2, 3, 6, 10, 15):
        A: MatrixDouble = _random_spd(rng, n)
        L: MatrixBase = chol(A)
        _assert_roundtrip(A, L)
        np.testing.assert_allclose(
            L.as_array(), np.linalg.cholesky(A.as_array()), atol=1e-10
        )


def test_chol_into_output_matrix() -> None:
    """Output parameters are resized (dynamic) or shape-checked (fixed)."""
    A: MatrixDouble = MatrixDouble(3, 3, DAT_A_3X3)

    out_dyn: MatrixDouble = MatrixDouble()
    returned: MatrixBase = chol(A, out=out_dyn)
    assert returned is out_dyn
    assert out_dyn.shape == (3, 3)
    _assert_roundtrip(A, out_dyn)

    out_fix: MatrixFixed = MatrixDouble33()
    chol(A, out=out_fix)
    _assert_roundtrip(A, out_fix)

    with pytest.raises(MatrixDimensionError):
        chol(A, out=MatrixDouble22())


def test_chol_rejects_indefinite() -> None:
    """Symmetric but indefinite input raises rather than returning NaN."""
    A: MatrixFixed = MatrixDouble22([1.0, 2.0, 2.0, 1.0])
    with pytest.raises(NotPositiveDefiniteError) as excinfo:
        chol(A)
    assert excinfo.value.column == 1
    assert excinfo.value.value is not None
    assert excinfo.value.value < 0.0
    assert not is_spd(A)


def test_chol_rejects_negative_diagonal() -> None:
    A: MatrixDouble = MatrixDouble(2, 2, [-1.0, 0.0, 0.0, 1.0])
    with pytest.raises(NotPositiveDefiniteError) as excinfo:
        chol(A)
    assert excinfo.value.column == 0


def test_chol_rejects_semidefinite() -> None:
    A: MatrixDouble = MatrixDouble(2, 2, [1.0, 1.0, 1.0, 1.0])
    with pytest.raises(NotPositiveDefiniteError):
        chol(A)


def test_chol_rejects_non_symmetric() -> None:
    """The lower triangle alone is SPD but the matrix is not symmetric."""
    A: MatrixDouble = MatrixDouble(2, 2, [4.0, 3.0, 1.0, 3.0])
    with pytest.raises(NotPositiveDefiniteError) as excinfo:
        chol(A)
    assert excinfo.value.column is None


def test_chol_symmetry_tolerance_scales_with_magnitude() -> None:
    """Rounding-level asymmetry in a large SPD matrix is accepted."""
    rng: np.random.Generator = np.random.default_rng(77)
    data: np.ndarray = 1e6 * _random_spd(rng, 4).as_array()
    scale: float = float(np.max(np.abs(data)))

    data[0, 1] += 1e-12 * scale
    A: MatrixDouble = MatrixDouble.from_array(data)
    assert abs(A.get(0, 1) - A.get(1, 0)) > DEFAULT_PARAMS.symmetry_atol
    L: MatrixBase = chol(A)
    assert (L @ L.T - A).sum_abs() <= 1e-6 * scale

    data[0, 1] += 1e-3 * scale
    with pytest.raises(NotPositiveDefiniteError) as excinfo:
        chol(MatrixDouble.from_array(data))
    assert excinfo.value.column is None


def test_chol_rejects_non_finite() -> None:
    A: MatrixDouble = MatrixDouble(2, 2, [math.inf, 0.0, 0.0, 1.0])
    with pytest.raises(NotPositiveDefiniteError):
        chol(A)


def test_chol_rejects_non_square() -> None:
    with pytest.raises(MatrixDimensionError):
        chol(MatrixDouble(2, 3))
    with pytest.raises(MatrixDimensionError):
        chol(MatrixDouble())
    assert not is_spd(MatrixDouble(2, 3))


def test_is_spd_accepts_spd() -> None:
    assert is_spd(MatrixDouble(10, 10, DAT_A_10X10))


def test_solve_spd_residual() -> None:
    rng: np.random.Generator = np.random.default_rng(99)
    A: MatrixDouble = _random_spd(rng, 5)
    B: MatrixDouble = MatrixDouble.from_array(rng.normal(size=(5, 2)))
    X: MatrixBase = solve_spd(A, B)
    assert X.shape == (5, 2)
    assert (A @ X - B).sum_abs() <= 1e-9


def test_solve_spd_rejects_mismatch() -> None:
    A: MatrixDouble = MatrixDouble(3, 3, DAT_A_3X3)
    with pytest.raises(MatrixDimensionError):
        solve_spd(A, MatrixDouble(2, 1))
