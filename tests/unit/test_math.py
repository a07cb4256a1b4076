from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_variates._math import log1mexp


@pytest.mark.parametrize("y", [-1e-20, -1e-8, -0.1, -0.5, -1.0, -5.0, -40.0])
def test_log1mexp_matches_definition(y: float) -> None:
    expected = math.log(-math.expm1(y))
    assert log1mexp(y) == pytest.approx(expected, rel=1e-12)


def test_log1mexp_limits() -> None:
    assert log1mexp(0.0) == -np.inf
    assert log1mexp(-np.inf) == 0.0


def test_log1mexp_is_vectorised() -> None:
    y = np.array([-1e-3, -2.0, -50.0])
    result = log1mexp(y)
    assert result.shape == (3,)
    np.testing.assert_allclose(result, np.log(-np.expm1(y)), rtol=1e-12, atol=1e-15)
