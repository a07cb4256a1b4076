"""
Global registry for parametric distribution families using singleton pattern.

This module implements a centralized registry that maintains references to all
defined parametric families, so that they can be looked up by name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_variates.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton registry for parametric distribution families.

    Maintains a global registry of all parametric families, allowing
    them to be accessed by name.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Retrieve a parametric family by name.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a family with ``name`` is registered."""
        return name in cls()._registered_families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Register a new parametric family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family
        logger.debug("Registered family %r", family.name)

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton together with every registered family."""
        cls._instance = None
