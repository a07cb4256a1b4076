"""
Common fixtures and utilities for continuous distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Relative comparison; ``precision`` defaults to ``CALCULATION_PRECISION``."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_allclose(actual, expected, rtol=precision, atol=precision)

    @staticmethod
    def numerical_derivative(func: Any, x: float, step: float = 1e-6) -> float:
        """Central difference of a scalar function."""
        return (func(x + step) - func(x - step)) / (2.0 * step)

