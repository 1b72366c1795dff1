"""Tests for the bundled catalogs and the transform registry."""

import json

import pytest

from catalog.loader import DEFAULT_WEB_INCLUDES, MODULE_TRANSFORMATIONS, load_built_ins_list, load_catalog, load_plugin_list
from catalog.registry import BUILT_INS_ENTRY_ID, BUILT_INS_USAGE_ID, TransformRegistry, build_default_registry
from resolution.classifier import is_built_in_name
from resolution.models import TransformUnit, UnitKind
from versioning.errors import UnknownIdentifier
from versioning.semver_utils import semverify


class TestBundledCatalogs:
    """Shape of the bundled data files."""

    def test_plugin_catalog_versions_normalize(self):
        plugins = load_plugin_list()
        assert "transform-regenerator" in plugins
        for table in plugins.values():
            for version in table.values():
                semverify(version)

    def test_built_ins_follow_naming_convention(self):
        built_ins = load_built_ins_list()
        assert built_ins
        assert all(is_built_in_name(name) for name in built_ins)
        for table in built_ins.values():
            for version in table.values():
                semverify(version)

    def test_default_web_includes_are_built_ins(self):
        assert all(is_built_in_name(name) for name in DEFAULT_WEB_INCLUDES)

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            load_plugin_list()["x"] = {}

    def test_custom_catalog_keeps_order(self, tmp_path):
        path = tmp_path / "plugins.json"
        path.write_text(json.dumps({"b": {"chrome": "1"}, "a": {"chrome": "2"}}), encoding="utf-8")
        assert list(load_catalog(str(path))) == ["b", "a"]

    def test_custom_catalog_must_be_object(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_catalog(str(path))


class TestRegistry:
    """TransformRegistry lookups."""

    def test_unknown_identifier(self):
        with pytest.raises(UnknownIdentifier) as exc:
            TransformRegistry().get("transform-nope")
        assert exc.value.identifier == "transform-nope"
        assert "transform-nope" in str(exc.value)

    def test_register_and_get(self):
        registry = TransformRegistry()
        unit = registry.register_plugin("transform-classes")
        assert registry.get("transform-classes") is unit
        assert unit.package == "babel-plugin-transform-classes"
        assert "transform-classes" in registry
        assert len(registry) == 1

    def test_default_registry_contents(self):
        registry = build_default_registry({"transform-classes": {}})
        assert registry.get("transform-classes").kind is UnitKind.PLUGIN
        for name in MODULE_TRANSFORMATIONS.values():
            assert registry.get(name).kind is UnitKind.MODULE
        assert registry.get(BUILT_INS_ENTRY_ID).kind is UnitKind.BUILT_INS_ENTRY
        assert registry.get(BUILT_INS_USAGE_ID).kind is UnitKind.BUILT_INS_USAGE

    def test_register_replaces(self):
        registry = TransformRegistry([TransformUnit("x", "pkg-a")])
        registry.register(TransformUnit("x", "pkg-b"))
        assert registry.get("x").package == "pkg-b"
        assert list(registry) == ["x"]
