"""Mismatch record produced by a failed conformance comparison.

This module provides the immutable result type returned by find_mismatch()
and carried by every ConformanceError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["Mismatch", "MismatchKind", "format_keypath"]


class MismatchKind(StrEnum):
    """Which rule a comparison failed.

    - TYPE:    node kinds differ (object vs string, number vs null, ...)
    - MISSING: the candidate lacks a key or index the reference defines
    - VARIANT: both object-like, but the reference's tagged variant differs
    - VALUE:   same scalar kind, different value
    """

    TYPE = auto()
    MISSING = auto()
    VARIANT = auto()
    VALUE = auto()


def format_keypath(keys: tuple[Any, ...] | list[Any]) -> str:
    """Encode a key chain as a dotted keypath.  The root is ``""``."""
    return ".".join(str(k) for k in keys)


@dataclass(frozen=True, slots=True)
class Mismatch:
    """First discrepancy found between a reference and a candidate tree.

    Attributes:
        kind:     Which comparison rule failed.
        keys:     Key chain from the root to the failing node, snapshotted at
                  the moment of detection.
        expected: Reference value at that node.
        actual:   Candidate value at that node (``UNDEFINED`` when missing).
        detail:   Human-readable description naming both kinds, tags or values.
    """

    kind: MismatchKind
    keys: tuple[Any, ...]
    expected: Any
    actual: Any
    detail: str

    @property
    def path(self) -> str:
        """Dotted keypath of the failing node."""
        return format_keypath(self.keys)

    @property
    def depth(self) -> int:
        """Rendering depth for diagnostics: one more than the path length."""
        return len(self.keys) + 1

    @property
    def message(self) -> str:
        return f"At {self.path or '<root>'}: {self.detail}"
