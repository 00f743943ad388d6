"""Keypath resolution: walk a tree along a dotted path.

A keypath is the dotted encoding of the key chain from the root to a node,
e.g. ``"body.0.expression.left"``.  Resolution is lenient: it backs off a
caller-chosen number of trailing segments so the returned subtree shows some
surrounding context, and any missing step yields ``UNDEFINED`` instead of
raising.  Diagnostic code calls this while explaining a different failure,
so it must never fail itself.
"""

from __future__ import annotations

from typing import Any

from tree_conformance.tree.kinds import UNDEFINED, Variant, child, classify_variant

__all__ = ["resolve", "split_keypath"]


def split_keypath(keypath: str | None) -> list[str]:
    """Split a dotted keypath into segments.  Empty or None yields ``[]``."""
    if not keypath:
        return []
    return keypath.split(".")


def resolve(root: Any, keypath: str | None, backtrack: int = 0) -> Any:
    """Return the subtree of ``root`` at ``keypath`` minus ``backtrack`` segments.

    Args:
        root:      Tree to walk.  Never mutated.
        keypath:   Dotted path, e.g. ``"a.b.c"``.  Empty or None returns root.
        backtrack: Number of trailing segments to drop before walking.

    Returns:
        The subtree, or ``UNDEFINED`` if any step along the way is missing.

    Raises:
        ValueError: If ``backtrack`` is negative.

    Example::

        resolve({"a": {"b": {"c": 1}}}, "a.b.c", 2)   # {"b": {"c": 1}}
    """
    if backtrack < 0:
        msg = f"backtrack must be >= 0, got {backtrack}"
        raise ValueError(msg)

    segments = split_keypath(keypath)
    if backtrack:
        segments = segments[: max(len(segments) - backtrack, 0)]

    node = root
    for segment in segments:
        node = _step(node, segment)
        if node is UNDEFINED:
            break
    return node


def _step(node: Any, segment: str) -> Any:
    """Look up one path segment, converting it to an index where needed."""
    variant = classify_variant(node)
    if variant is Variant.MAPPING:
        found = child(node, segment)
        if found is UNDEFINED and _is_index(segment):
            found = child(node, int(segment))
        return found
    if variant in (Variant.SEQUENCE, Variant.NDARRAY):
        return child(node, int(segment)) if _is_index(segment) else UNDEFINED
    return child(node, segment)


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()
