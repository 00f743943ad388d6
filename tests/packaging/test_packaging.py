"""Packaging correctness verification for tree-conformance.

Tests validate:
- Top-level import exposes the public API
- py.typed marker ships with the package
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the current installation rather than building a wheel
or creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

from importlib.metadata import entry_points, metadata
from importlib.resources import files


class TestBaseInstall:
    """Verify the base install imports cleanly."""

    def test_import_tree_conformance(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import tree_conformance

        assert hasattr(tree_conformance, "check")
        assert hasattr(tree_conformance, "resolve")
        assert hasattr(tree_conformance, "assert_conforms")

    def test_check_basic(self):  # type: ignore[no-untyped-def]
        """check() works on plain dicts."""
        from tree_conformance import check

        assert check({"a": 1}, {"a": 1}) is None

    def test_py_typed_present(self):  # type: ignore[no-untyped-def]
        """py.typed marker must ship inside the package."""
        assert files("tree_conformance").joinpath("py.typed").is_file()


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for tree-conformance."""
        pytest11_eps = entry_points(group="pytest11")

        tc_eps = [ep for ep in pytest11_eps if ep.value.startswith("tree_conformance")]
        assert tc_eps, (
            f"No pytest11 entry point found for tree-conformance. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_tree_conforms fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("tree_conformance.integrations._pytest_plugin")
        assert hasattr(mod, "assert_tree_conforms")
        assert callable(mod.assert_tree_conforms)


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_distribution_metadata(self):  # type: ignore[no-untyped-def]
        meta = metadata("tree-conformance")
        assert meta["Name"] == "tree-conformance"
        assert meta["Version"] == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import tree_conformance

        expected = {
            "UNDEFINED",
            "ConformanceChecker",
            "ConformanceError",
            "DiagnosticConfig",
            "Mismatch",
            "MismatchKind",
            "MissingField",
            "TypeMismatch",
            "ValueMismatch",
            "VariantMismatch",
            "assert_conforms",
            "check",
            "conforms",
            "explain",
            "find_mismatch",
            "resolve",
        }
        actual = set(tree_conformance.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
