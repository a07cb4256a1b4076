"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous.frechet import (
    FrechetSamplingStrategy,
    configure_frechet_family,
)

__all__ = [
    "FrechetSamplingStrategy",
    "configure_frechet_family",
]
