"""Tests for the material registry."""

import pytest

from combined_damage import (
    ConfigurationError,
    ConstantScalarDamage,
    MaterialNotFoundError,
    MaterialRegistry,
)


class TestMaterialRegistry:
    """Tests for registering and looking up materials."""

    def test_lookup(self):
        registry = MaterialRegistry()
        source = ConstantScalarDamage("a", n_points=1, damage_index=0.1)
        registry.add(source)

        assert registry.get_material_by_name("a") is source
        assert "a" in registry
        assert len(registry) == 1

    def test_preserves_order(self):
        registry = MaterialRegistry()
        for name in ["c", "a", "b"]:
            registry.add(ConstantScalarDamage(name, n_points=1, damage_index=0.0))

        assert registry.names() == ["c", "a", "b"]
        assert [m.name for m in registry] == ["c", "a", "b"]

    def test_duplicate_name(self):
        registry = MaterialRegistry()
        registry.add(ConstantScalarDamage("a", n_points=1, damage_index=0.1))

        with pytest.raises(ConfigurationError):
            registry.add(ConstantScalarDamage("a", n_points=1, damage_index=0.2))

    def test_missing_name(self):
        registry = MaterialRegistry()
        registry.add(ConstantScalarDamage("a", n_points=1, damage_index=0.1))

        with pytest.raises(MaterialNotFoundError) as excinfo:
            registry.get_material_by_name("b")

        assert isinstance(excinfo.value, KeyError)
        assert "Available materials: ['a']" in str(excinfo.value)
