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
YAML persistence for linear algebra tolerances

The document holds a single ``linalg`` mapping:

    linalg:
      det_pivot_eps: 1.0e-12
      chol_eps: 1.0e-12
      symmetry_atol: 1.0e-09
      sum_abs_tol: 0.0001
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from oasis_math.config.linalg_params import LinalgParams
from oasis_math.config.linalg_params import LinalgParamsError


# Top-level key of the parameter document
ROOT_KEY: str = "linalg"


def params_from_yaml(text: str) -> LinalgParams:
    """Parse tolerances from a YAML document string."""
    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LinalgParamsError(f"invalid YAML: {exc}") from exc

    if document is None:
        return LinalgParams.defaults()
    if not isinstance(document, dict):
        raise LinalgParamsError("parameter document must be a mapping")

    unknown: list[str] = sorted(str(key) for key in document if key != ROOT_KEY)
    if unknown:
        raise LinalgParamsError(f"unknown top-level keys: {', '.join(unknown)}")

    section: Any = document.get(ROOT_KEY)
    if section is None:
        return LinalgParams.defaults()
    if not isinstance(section, dict):
        raise LinalgParamsError(f"{ROOT_KEY} must be a mapping")

    return LinalgParams.from_dict(section)


def params_to_yaml(params: LinalgParams) -> str:
    """Serialize tolerances to a YAML document string."""
    params.validate()
    return yaml.safe_dump({ROOT_KEY: params.as_nested_dict()}, sort_keys=False)


def load_linalg_params(path: str | Path) -> LinalgParams:
    """Load tolerances from a YAML file."""
    text: str = Path(path).read_text(encoding="utf-8")
    return params_from_yaml(text)


def dump_linalg_params(params: LinalgParams, path: str | Path) -> None:
    """Write tolerances to a YAML file."""
    Path(path).write_text(params_to_yaml(params), encoding="utf-8")
