from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_variates.errors import (
    ConstructionError,
    DimensionError,
    DomainError,
    VariateError,
)


@pytest.mark.parametrize("error", [ConstructionError, DomainError, DimensionError])
def test_errors_share_root_and_value_error(error: type[Exception]) -> None:
    assert issubclass(error, VariateError)
    assert issubclass(error, ValueError)
    with pytest.raises(VariateError, match="boom"):
        raise error("boom")
