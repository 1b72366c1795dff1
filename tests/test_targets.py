"""Tests for target normalization."""

import pytest

from versioning.errors import InvalidOptions, InvalidTargetVersion
from versioning.targets import get_targets


class TestGetTargets:
    """get_targets() behavior."""

    def test_none_is_empty(self):
        assert get_targets(None) == {}

    def test_numbers_and_strings_are_semverified(self):
        assert get_targets({"chrome": 55, "node": "6.5.0", "firefox": "52"}) == {
            "chrome": "55.0.0",
            "node": "6.5.0",
            "firefox": "52.0.0",
        }

    def test_invalid_version_names_environment(self):
        with pytest.raises(InvalidTargetVersion) as exc:
            get_targets({"chrome": "latest"})
        assert exc.value.environment == "chrome"
        assert exc.value.version == "latest"

    def test_truthy_uglify_is_preserved(self):
        assert get_targets({"uglify": True, "chrome": 55}) == {"uglify": True, "chrome": "55.0.0"}

    def test_falsy_uglify_is_dropped(self):
        assert get_targets({"uglify": False}) == {}

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidOptions):
            get_targets(["chrome"])

    def test_input_not_mutated(self):
        raw = {"chrome": 55}
        get_targets(raw)
        assert raw == {"chrome": 55}

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(InvalidTargetVersion) as exc:
            get_targets({"chrome": "²"})
        assert exc.value.environment == "chrome"
