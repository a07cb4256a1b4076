"""Numerically careful elementary functions not provided by NumPy."""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np

from pysatl_variates.types import Number, NumericArray

_MINUS_LOG_2 = -np.log(2.0)


def log1mexp(y: Number | NumericArray) -> Any:
    """
    Compute ``log(1 - exp(y))`` for ``y <= 0``.

    Uses ``log(-expm1(y))`` for ``y > -log 2`` and ``log1p(-exp(y))`` below,
    following Mächler (2012), "Accurately Computing log(1 - exp(-|a|))".
    ``y = 0`` gives ``-inf`` and ``y = -inf`` gives ``0``.
    """
    arr = np.asarray(y, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.where(arr > _MINUS_LOG_2, np.log(-np.expm1(arr)), np.log1p(-np.exp(arr)))
    if np.ndim(result) == 0:
        return result[()]
    return result
