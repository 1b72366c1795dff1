"""Tests for the requirement evaluator."""

import pytest

from resolution.requirements import is_plugin_required
from versioning.errors import InvalidCandidateVersion, InvalidTargetVersion


class TestIsPluginRequired:
    """is_plugin_required() decisions."""

    def test_no_targets_always_required(self):
        assert is_plugin_required({}, {"chrome": "52"}) is True
        assert is_plugin_required({}, {}) is True

    def test_support_predates_target(self):
        assert is_plugin_required({"chrome": "55.0.0"}, {"chrome": "52"}) is False

    def test_support_equal_to_target(self):
        assert is_plugin_required({"chrome": "55.0.0"}, {"chrome": "55"}) is False

    def test_support_postdates_target(self):
        assert is_plugin_required({"chrome": "55.0.0"}, {"chrome": "60"}) is True

    def test_missing_environment_forces_requirement(self):
        assert is_plugin_required({"ie": "11.0.0"}, {"chrome": "52"}) is True

    def test_any_environment_suffices(self):
        targets = {"chrome": "60.0.0", "firefox": "50.0.0"}
        support = {"chrome": "52", "firefox": "52"}
        assert is_plugin_required(targets, support) is True

    def test_all_environments_supported(self):
        targets = {"chrome": "60.0.0", "node": "8.0.0"}
        support = {"chrome": "52", "node": "7.6.0"}
        assert is_plugin_required(targets, support) is False

    def test_minor_versions_compared(self):
        assert is_plugin_required({"node": "6.0.0"}, {"node": "6.5.0"}) is True
        assert is_plugin_required({"node": "6.5.0"}, {"node": "6.5.0"}) is False

    def test_invalid_target_version_raises(self):
        with pytest.raises(InvalidTargetVersion) as exc:
            is_plugin_required({"chrome": "latest"}, {"chrome": "52"})
        assert 'target "chrome"' in str(exc.value)
        assert '"latest"' in str(exc.value)

    def test_invalid_target_after_decisive_environment_still_raises(self):
        with pytest.raises(InvalidTargetVersion):
            is_plugin_required({"ie": "11.0.0", "chrome": "55"}, {"chrome": "52"})

    def test_invalid_candidate_version_raises(self):
        with pytest.raises(InvalidCandidateVersion):
            is_plugin_required({"safari": "10.0.0"}, {"safari": "10.1"})

    def test_pure(self):
        targets = {"chrome": "55.0.0"}
        support = {"chrome": "60"}
        first = is_plugin_required(targets, support)
        assert is_plugin_required(targets, support) == first
        assert targets == {"chrome": "55.0.0"}
