"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_variates.families.builtins import configure_frechet_family
from pysatl_variates.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import FamilyName
from tests.unit.families.test_basic import TestBaseFamily


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        assert configure_families_register() is self.registry

    def test_families_registered(self):
        assert ParametricFamilyRegister.contains(FamilyName.FRECHET)

    def test_frechet_configuration_is_idempotent(self):
        family = ParametricFamilyRegister.get(FamilyName.FRECHET)
        configure_frechet_family()
        assert ParametricFamilyRegister.get(FamilyName.FRECHET) is family

    def test_reset_families_register(self):
        registry1 = configure_families_register()
        reset_families_register()
        assert not ParametricFamilyRegister.contains(FamilyName.FRECHET)
        registry2 = configure_families_register()

        assert registry1 is not registry2
        assert ParametricFamilyRegister.contains(FamilyName.FRECHET)

    def test_registry_singleton_pattern(self):
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_registry_get_family_method(self):
        frechet_family = self.registry.get(FamilyName.FRECHET)
        assert frechet_family.name == FamilyName.FRECHET

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")


class TestRegisterDuplicates(TestBaseFamily):
    def test_duplicate_family_rejected(self):
        ParametricFamilyRegister.register(self.make_default_family(name="Twice"))
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(self.make_default_family(name="Twice"))
