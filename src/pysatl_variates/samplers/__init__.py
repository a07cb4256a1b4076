"""
Samplers subpackage

Stand-alone samplers that are not tied to a parametric family:

- :class:`AliasTable`: Walker's alias method for categorical distributions.
- :class:`VonMisesFisherSampler`: Wood's algorithm for the von Mises-Fisher
  distribution on the unit sphere.

Both satisfy the :class:`~pysatl_variates.distributions.Sampler` protocol.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .alias import AliasTable
from .vonmises_fisher import VonMisesFisherSampler, vmf_b, vmf_rotation

__all__ = [
    "AliasTable",
    "VonMisesFisherSampler",
    "vmf_b",
    "vmf_rotation",
]
