"""
Built-in distribution families for PySATL variates.

This package contains implementations of the statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous import configure_frechet_family

__all__ = [
    "configure_frechet_family",
]
