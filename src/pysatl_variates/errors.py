"""
Exceptions
==========

Error taxonomy shared by the samplers and distribution families.

All errors are raised eagerly while an object is being constructed; drawing
and evaluating never raise them. Each class also derives from
:class:`ValueError`, so callers that already catch ``ValueError`` around
parameter validation keep working.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class VariateError(Exception):
    """Base class for errors raised by PySATL variates."""


class ConstructionError(VariateError, ValueError):
    """Input cannot be turned into a sampler (empty, negative or zero-sum weights)."""


class DomainError(VariateError, ValueError):
    """A parameter lies outside its valid range (e.g. ``alpha <= 0``, ``kappa <= 0``)."""


class DimensionError(VariateError, ValueError):
    """A vector has the wrong length or norm (e.g. a non-unit mean direction)."""


__all__ = [
    "VariateError",
    "ConstructionError",
    "DomainError",
    "DimensionError",
]
