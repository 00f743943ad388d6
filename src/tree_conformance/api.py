"""Public API functions for tree-conformance.

This module provides the user-facing functions: check, find_mismatch,
conforms and assert_conforms.  Each call creates a fresh ConformanceChecker
to guarantee zero shared state between calls.
"""

from __future__ import annotations

from typing import Any

from tree_conformance.checker import ConformanceChecker
from tree_conformance.config import DiagnosticConfig
from tree_conformance.diagnostics import explain
from tree_conformance.errors import ConformanceError
from tree_conformance.result import Mismatch

__all__ = ["assert_conforms", "check", "conforms", "find_mismatch"]


def check(
    reference: Any,
    candidate: Any,
    path: list[Any] | None = None,
) -> None:
    """Raise ``ConformanceError`` unless ``candidate`` implements ``reference``.

    Args:
        reference: Trusted tree.  Its keys define every field the candidate
                   must reproduce.
        candidate: Tree under test.  Extra keys are ignored.
        path:      Optional key stack to start from (see
                   ``ConformanceChecker.check``).
    """
    ConformanceChecker().check(reference, candidate, path)


def find_mismatch(
    reference: Any,
    candidate: Any,
    path: list[Any] | None = None,
) -> Mismatch | None:
    """Return the first ``Mismatch`` between the trees, or None if they conform."""
    return ConformanceChecker().find_mismatch(reference, candidate, path)


def conforms(reference: Any, candidate: Any) -> bool:
    """Return True if ``candidate`` implements ``reference``."""
    return find_mismatch(reference, candidate) is None


def assert_conforms(
    reference: Any,
    candidate: Any,
    config: DiagnosticConfig | None = None,
    labels: tuple[str, str] = ("reference", "candidate"),
) -> None:
    """Check conformance and attach a bounded rendering of both trees on failure.

    The rendering is added to the raised error with ``add_note`` so the
    error keeps its message, type and path.

    Args:
        reference: Trusted tree.
        candidate: Tree under test.
        config:    Rendering parameters.  Defaults to ``DiagnosticConfig()``.
        labels:    Names of the two tree-producers, used as headings.

    Raises:
        ConformanceError: On the first discrepancy, with the rendering as a note.
    """
    try:
        check(reference, candidate)
    except ConformanceError as err:
        err.add_note(explain(reference, candidate, err, config=config, labels=labels))
        raise
