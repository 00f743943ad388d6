"""Kind and Variant classification for arbitrary tree nodes.

A tree node is any Python value.  Classification happens in two layers:

- ``classify()`` returns the node *kind*: ``null``, ``undefined``, ``object``
  for every container-like node, or the scalar kind (``boolean``, ``number``,
  ``string``, or the type name of any other scalar).
- ``classify_variant()`` refines ``object`` nodes into a ``Variant``: plain
  mappings and sequences, or a *tagged* variant (compiled regex, numpy array,
  ``ast`` node) that must be reproduced exactly by the candidate tree.

The variant table is an ordered tuple of ``(Variant, predicate)`` rows.  The
first matching row wins, so tagged variants sit above the generic rows.
"""

from __future__ import annotations

import ast
import re
from collections.abc import Callable, Mapping
from enum import StrEnum, auto
from typing import Any, Final

import numpy as np

__all__ = [
    "UNDEFINED",
    "VARIANT_TABLE",
    "Kind",
    "Variant",
    "child",
    "classify",
    "classify_variant",
    "own_keys",
    "variant_tag",
]


class _Undefined:
    """Marker for a key or index that is absent from a node."""

    __slots__ = ()

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class Kind(StrEnum):
    """The known node kinds.

    Scalars of any other type classify as their type name, so ``classify()``
    returns plain ``str`` values and these members compare equal to them.
    """

    NULL = auto()
    UNDEFINED = auto()
    OBJECT = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()


class Variant(StrEnum):
    """Capability class of an ``object`` node.

    - MAPPING:  keyed node, enumerated in insertion order
    - SEQUENCE: list or tuple, enumerated by index
    - REGEX:    compiled ``re.Pattern`` (tagged)
    - NDARRAY:  ``numpy.ndarray``, enumerated along the first axis (tagged)
    - AST:      ``ast.AST`` node, enumerated by its fields (tagged by class)
    """

    MAPPING = auto()
    SEQUENCE = auto()
    REGEX = auto()
    NDARRAY = auto()
    AST = auto()


_TAGGED: Final = frozenset({Variant.REGEX, Variant.NDARRAY, Variant.AST})

VARIANT_TABLE: Final[tuple[tuple[Variant, Callable[[Any], bool]], ...]] = (
    (Variant.REGEX, lambda v: isinstance(v, re.Pattern)),
    (Variant.NDARRAY, lambda v: isinstance(v, np.ndarray)),
    (Variant.AST, lambda v: isinstance(v, ast.AST)),
    (Variant.MAPPING, lambda v: isinstance(v, Mapping)),
    (Variant.SEQUENCE, lambda v: isinstance(v, (list, tuple))),
)


def classify_variant(value: Any) -> Variant | None:
    """Return the Variant of an object-like node, or None for anything else."""
    for variant, predicate in VARIANT_TABLE:
        if predicate(value):
            return variant
    return None


def classify(value: Any) -> str:
    """Return the kind of a node.

    Dispatch order matters: bool (and ``numpy.bool_``) MUST be checked before
    int because ``isinstance(True, int)`` is True.  ``numpy.ndarray`` is
    matched through the variant table before the scalar checks.
    """
    if value is None:
        return Kind.NULL
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if classify_variant(value) is not None:
        return Kind.OBJECT
    if isinstance(value, (bool, np.bool_)):
        return Kind.BOOLEAN
    if isinstance(value, (int, float, np.integer, np.floating)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    return type(value).__name__


def variant_tag(value: Any) -> str | None:
    """Return the distinguishing tag of a tagged variant, else None.

    ``ast`` nodes are tagged per node class (``ast.Name``, ``ast.Call``, ...)
    so a candidate must produce the same node type, not just any AST node.
    """
    variant = classify_variant(value)
    if variant not in _TAGGED:
        return None
    if variant is Variant.AST:
        return f"ast.{type(value).__name__}"
    return str(variant)


def own_keys(value: Any, variant: Variant | None = None) -> list[Any]:
    """Enumerate the keys a node defines, in natural order."""
    if variant is None:
        variant = classify_variant(value)
    if variant is Variant.MAPPING:
        return list(value.keys())
    if variant is Variant.SEQUENCE:
        return list(range(len(value)))
    if variant is Variant.NDARRAY:
        # 0-d arrays have no first axis to enumerate
        return list(range(value.shape[0])) if value.ndim else []
    if variant is Variant.REGEX:
        return ["pattern", "flags"]
    if variant is Variant.AST:
        keys = list(value._fields)
        keys.extend(a for a in value._attributes if hasattr(value, a))
        return keys
    return []


def child(value: Any, key: Any) -> Any:
    """Strict single-step lookup.  Absent keys yield ``UNDEFINED``.

    Keys are matched exactly: a string key never reaches a sequence index and
    an int key never reaches a string mapping key.
    """
    variant = classify_variant(value)
    if variant is Variant.MAPPING:
        try:
            return value[key] if key in value else UNDEFINED
        except TypeError:
            # unhashable key
            return UNDEFINED
    if variant in (Variant.SEQUENCE, Variant.NDARRAY):
        if isinstance(key, bool) or not isinstance(key, int):
            return UNDEFINED
        if variant is Variant.NDARRAY and value.ndim == 0:
            return UNDEFINED
        if 0 <= key < len(value):
            return value[key]
        return UNDEFINED
    if variant in (Variant.REGEX, Variant.AST) and isinstance(key, str):
        return getattr(value, key, UNDEFINED)
    return UNDEFINED
