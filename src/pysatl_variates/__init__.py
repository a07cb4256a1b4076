"""
PySATL Variates
===============

Random variate generation for PySATL: an alias-table sampler for categorical
distributions, a von Mises-Fisher sampler on the unit sphere, and the
Fréchet parametric family with closed-form characteristics.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .rng import *
from .rng import __all__ as _rng_all
from .samplers import *
from .samplers import __all__ as _samplers_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_rng_all,
    *_samplers_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _rng_all
del _samplers_all
del _types_all
