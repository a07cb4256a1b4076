"""
Distributions subpackage

Interfaces and default implementations shared by samplers and distributions:

- capability protocols (:mod:`.distribution`);
- analytical computation primitives (:mod:`.computation`);
- characteristic descriptors (:mod:`.characteristics`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- supports (:mod:`.support`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution, Sampler
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    ExplicitTableDiscreteSupport,
    Support,
    UnitSphereSupport,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # capabilities
    "Distribution",
    "Sampler",
    # sampling
    "Sample",
    "ArraySample",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "ExplicitTableDiscreteSupport",
    "UnitSphereSupport",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
]
