"""Tests for include/exclude classification."""

from resolution.classifier import is_built_in_name, transform_includes_and_excludes


class TestClassifier:
    """transform_includes_and_excludes() partitioning."""

    def test_partition(self):
        names = ["es6.promise", "transform-arrow-functions", "web.timers"]
        result = transform_includes_and_excludes(names)
        assert result.built_ins == {"es6.promise", "web.timers"}
        assert result.plugins == {"transform-arrow-functions"}
        assert list(result.all) == names

    def test_disjoint(self):
        result = transform_includes_and_excludes(["es2017.foo", "es.bar", "webx.baz", "web.dom.iterable"])
        assert result.built_ins == {"es2017.foo", "web.dom.iterable"}
        assert result.plugins == {"es.bar", "webx.baz"}
        assert not result.built_ins & result.plugins

    def test_empty(self):
        result = transform_includes_and_excludes([])
        assert result.plugins == set()
        assert result.built_ins == set()

    def test_is_built_in_name(self):
        assert is_built_in_name("es7.array.includes")
        assert not is_built_in_name("transform-es2015-modules-commonjs")
