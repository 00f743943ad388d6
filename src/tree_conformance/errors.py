"""ConformanceError hierarchy.

Every error wraps exactly one ``Mismatch``.  ``ConformanceError`` subclasses
``AssertionError`` so test runners report a non-conforming candidate as a
failed assertion rather than as a crash.

Taxonomy::

    ConformanceError
    ├── TypeMismatch
    │   └── MissingField
    ├── VariantMismatch
    └── ValueMismatch
"""

from __future__ import annotations

from typing import Any

from tree_conformance.result import Mismatch, MismatchKind

__all__ = [
    "ConformanceError",
    "MissingField",
    "TypeMismatch",
    "ValueMismatch",
    "VariantMismatch",
]


class ConformanceError(AssertionError):
    """A candidate tree does not reproduce its reference tree."""

    def __init__(self, mismatch: Mismatch) -> None:
        super().__init__(mismatch.message)
        self.mismatch = mismatch

    def __reduce__(self) -> tuple[type[ConformanceError], tuple[Mismatch]]:
        return type(self), (self.mismatch,)

    @property
    def path(self) -> str:
        return self.mismatch.path

    @property
    def keys(self) -> tuple[Any, ...]:
        return self.mismatch.keys

    @property
    def depth(self) -> int:
        return self.mismatch.depth

    @classmethod
    def from_mismatch(cls, mismatch: Mismatch) -> ConformanceError:
        """Build the error subclass matching ``mismatch.kind``."""
        return _ERROR_BY_KIND[mismatch.kind](mismatch)


class TypeMismatch(ConformanceError):
    """Node kinds differ."""


class MissingField(TypeMismatch):
    """The candidate lacks a key or index present in the reference."""


class VariantMismatch(ConformanceError):
    """Both nodes are object-like but the tagged variants differ."""


class ValueMismatch(ConformanceError):
    """Scalars of the same kind hold different values."""


_ERROR_BY_KIND: dict[MismatchKind, type[ConformanceError]] = {
    MismatchKind.TYPE: TypeMismatch,
    MismatchKind.MISSING: MissingField,
    MismatchKind.VARIANT: VariantMismatch,
    MismatchKind.VALUE: ValueMismatch,
}
