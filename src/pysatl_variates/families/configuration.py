"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL variates:

- :class:`Frechet Family`: Fréchet (inverse Weibull) distribution with
  shape-scale and reciprocal-Weibull parameterizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Configuration is idempotent and cached; reset it with
  :func:`reset_families_register`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates.families.builtins import configure_frechet_family
from pysatl_variates.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_frechet_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
