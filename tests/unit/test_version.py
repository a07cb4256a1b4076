from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re

import pysatl_variates
from pysatl_variates import __version__


def test_version_pep440() -> None:
    assert re.match(
        r"^\d+!\d+(\.\d+)*([abc]|rc)?\d*(\.post\d+)?(\.dev\d+)?$|^\d+(\.\d+)*([abc]|rc)?\d*(\.post\d+)?(\.dev\d+)?$",
        __version__,
    )


def test_public_names_are_exported() -> None:
    for name in ("AliasTable", "VonMisesFisherSampler", "DomainError", "as_variate_source"):
        assert name in pysatl_variates.__all__
        assert hasattr(pysatl_variates, name)
