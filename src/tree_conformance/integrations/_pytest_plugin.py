"""pytest plugin for tree-conformance.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from tree_conformance import DiagnosticConfig, assert_conforms


@pytest.fixture(scope="session")
def assert_tree_conforms() -> Any:
    """Fixture that returns a callable tree conformance asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to assert_conforms() which creates a fresh checker per call).

    Usage in tests::

        def test_template_literal(assert_tree_conforms):
            assert_tree_conforms(reference_parse("`a`"), candidate_parse("`a`"))

        def test_missing_field(assert_tree_conforms):
            with pytest.raises(AssertionError, match=r"At a\\.b"):
                assert_tree_conforms({"a": {"b": 1}}, {"a": {}})

    Returns:
        A callable ``_assert(reference, candidate, config=None, labels=...) -> None``
        that raises a ``ConformanceError`` (an ``AssertionError``) carrying a
        rendering of both trees around the failing path.
    """

    def _assert(
        reference: Any,
        candidate: Any,
        config: DiagnosticConfig | None = None,
        labels: tuple[str, str] = ("reference", "candidate"),
    ) -> None:
        """Assert that ``candidate`` implements ``reference``.

        Args:
            reference: Tree from the trusted producer.
            candidate: Tree from the producer under test.
            config:    Optional DiagnosticConfig for the failure rendering.
            labels:    Names of the two producers for the rendering headings.
        """
        assert_conforms(reference, candidate, config=config, labels=labels)

    return _assert
