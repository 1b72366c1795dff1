"""Tests for catalog filtering and platform defaults."""

from catalog.loader import DEFAULT_WEB_INCLUDES
from resolution.filtering import filter_items, get_built_in_targets, get_platform_specific_default_for

CATALOG = {
    "transform-exponentiation-operator": {"chrome": "52"},
    "transform-async-to-generator": {"chrome": "60"},
    "transform-arrow-functions": {"chrome": "47"},
}


class TestFilterItems:
    """filter_items() merge semantics."""

    def test_selects_required_entries(self):
        result = filter_items(CATALOG, set(), set(), {"chrome": "55.0.0"})
        assert result == ["transform-async-to-generator"]

    def test_no_targets_selects_everything_in_catalog_order(self):
        result = filter_items(CATALOG, set(), set(), {})
        assert result == list(CATALOG)

    def test_exclude_drops_required_entry(self):
        result = filter_items(CATALOG, set(), {"transform-async-to-generator"}, {"chrome": "55.0.0"})
        assert result == []

    def test_include_wins_over_exclude(self):
        name = "transform-arrow-functions"
        result = filter_items(CATALOG, {name}, {name}, {"chrome": "60.0.0"})
        assert name in result

    def test_include_outside_catalog(self):
        result = filter_items(CATALOG, {"transform-unknown"}, set(), {"chrome": "99.0.0"})
        assert result == ["transform-unknown"]

    def test_defaults_added_without_version_check(self):
        catalog = {"web.timers": {"chrome": "1"}}
        result = filter_items(catalog, set(), set(), {"chrome": "60.0.0"}, {"web.timers"})
        assert result == ["web.timers"]

    def test_defaults_suppressed_by_exclude(self):
        result = filter_items({}, set(), {"web.timers"}, {}, DEFAULT_WEB_INCLUDES)
        assert "web.timers" not in result
        assert "web.immediate" in result

    def test_no_duplicates(self):
        name = "transform-async-to-generator"
        result = filter_items(CATALOG, {name}, set(), {"chrome": "55.0.0"}, {name})
        assert result.count(name) == 1


class TestPlatformDefaults:
    """get_platform_specific_default_for() and get_built_in_targets()."""

    def test_empty_targets_get_defaults(self):
        assert get_platform_specific_default_for({}) is not None

    def test_node_only_gets_none(self):
        assert get_platform_specific_default_for({"node": "8.0.0"}) is None

    def test_mixed_targets_get_defaults(self):
        assert get_platform_specific_default_for({"node": "8.0.0", "chrome": "60.0.0"}) == DEFAULT_WEB_INCLUDES

    def test_built_in_targets_drop_uglify_without_mutation(self):
        targets = {"uglify": True, "chrome": "55.0.0"}
        assert get_built_in_targets(targets) == {"chrome": "55.0.0"}
        assert targets == {"uglify": True, "chrome": "55.0.0"}
