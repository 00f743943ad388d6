"""Tree conformance - structural subsumption checks for parser output trees."""

from __future__ import annotations

from tree_conformance.api import assert_conforms, check, conforms, find_mismatch
from tree_conformance.checker import ConformanceChecker
from tree_conformance.config import DiagnosticConfig
from tree_conformance.diagnostics import explain
from tree_conformance.errors import (
    ConformanceError,
    MissingField,
    TypeMismatch,
    ValueMismatch,
    VariantMismatch,
)
from tree_conformance.result import Mismatch, MismatchKind
from tree_conformance.tree import UNDEFINED, resolve

__version__: str = "0.1.0"
__all__: list[str] = [
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
]
