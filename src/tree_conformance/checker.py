"""ConformanceChecker: one-directional structural subsumption of two trees.

The reference tree defines the complete set of fields the candidate must
reproduce.  The candidate may carry extra fields; they are never visited.

Rules applied at each (target, source) node pair:

1. Kinds must be identical (``classify()``).  A candidate kind of
   ``undefined`` is reported as a missing field.
2. When the target is a tagged variant (regex, ndarray, ast node) the source
   must carry the same tag.
3. Object-like nodes descend over the target's own keys only.
4. Scalars compare by identity, then equality.  A 0-d numpy array is
   compared as the scalar it holds.

Architecture:
- The walk is iterative over an explicit stack of frames, so tree depth is
  not bounded by the interpreter recursion limit.  The first failure is
  returned as a ``Mismatch`` and siblings are never scanned.  Only the
  public ``check()`` turns it into a raised ``ConformanceError``.
- The key chain is a per-call list pushed and popped in step with the frame
  stack.  On failure it is snapshotted into the ``Mismatch`` and not unwound.
"""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Iterator
from typing import Any

from tree_conformance.errors import ConformanceError
from tree_conformance.result import Mismatch, MismatchKind
from tree_conformance.tree.kinds import (
    Kind,
    Variant,
    child,
    classify,
    classify_variant,
    own_keys,
    variant_tag,
)

__all__ = ["ConformanceChecker"]

logger = logging.getLogger(__name__)

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80
_repr.maxlist = 6
_repr.maxdict = 6


def render_value(value: Any) -> str:
    """Bounded single-line rendering of a node for error messages."""
    return _repr.repr(value)


class ConformanceChecker:
    """Checks that a candidate tree implements a reference tree.

    The checker holds no state between calls; every ``check()`` works on its
    own key stack, so one instance may be shared across threads.

    Example::

        from tree_conformance.checker import ConformanceChecker

        checker = ConformanceChecker()
        checker.check({"a": 1}, {"a": 1, "b": 2})     # passes, extra key ignored
        checker.check({"a": {"b": 1}}, {"a": {}})     # raises MissingField at "a.b"
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(
        self,
        reference: Any,
        candidate: Any,
        path: list[Any] | None = None,
    ) -> None:
        """Raise ``ConformanceError`` unless ``candidate`` implements ``reference``.

        Args:
            reference: Trusted tree whose keys and values must be reproduced.
            candidate: Tree under test.  Extra keys are ignored.
            path:      Optional key stack to start from.  It is restored on
                       success and left pointing at the failing node on error.

        Raises:
            ConformanceError: The ``TypeMismatch``, ``MissingField``,
                ``VariantMismatch`` or ``ValueMismatch`` subclass describing
                the first discrepancy in reference enumeration order.
        """
        mismatch = self.find_mismatch(reference, candidate, path)
        if mismatch is not None:
            raise ConformanceError.from_mismatch(mismatch)

    def find_mismatch(
        self,
        reference: Any,
        candidate: Any,
        path: list[Any] | None = None,
    ) -> Mismatch | None:
        """Return the first ``Mismatch``, or None when the candidate conforms."""
        keys = path if path is not None else []
        mismatch = self._compare(reference, candidate, keys)
        if mismatch is not None:
            logger.debug(
                "Conformance %s mismatch at %r (depth %d)",
                mismatch.kind,
                mismatch.path,
                mismatch.depth,
            )
        return mismatch

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def _compare(self, target: Any, source: Any, keys: list[Any]) -> Mismatch | None:
        """Iterative depth-first walk over the reference's own keys.

        Each frame is ``(target, source, pending_keys)`` for one object-like
        node; ``keys`` grows by one entry per frame below the root, so the
        two stacks move in step.
        """
        mismatch, frame = self._visit(target, source, keys)
        if mismatch is not None or frame is None:
            return mismatch

        frames = [frame]
        while frames:
            parent_t, parent_s, pending = frames[-1]
            key = next(pending, _EXHAUSTED)
            if key is _EXHAUSTED:
                frames.pop()
                if frames:
                    keys.pop()
                continue

            keys.append(key)
            mismatch, frame = self._visit(
                child(parent_t, key), child(parent_s, key), keys
            )
            if mismatch is not None:
                return mismatch
            if frame is None:
                keys.pop()
            else:
                frames.append(frame)
        return None

    def _visit(
        self, target: Any, source: Any, keys: list[Any]
    ) -> tuple[Mismatch | None, _Frame | None]:
        """Compare one node pair without descending.

        Returns a mismatch, or a frame to descend into for object-like
        nodes, or ``(None, None)`` for an equal leaf.
        """
        kind_t = classify(target)
        kind_s = classify(source)

        if kind_t != kind_s:
            if kind_s == Kind.UNDEFINED:
                return _mismatch(
                    MismatchKind.MISSING,
                    keys,
                    target,
                    source,
                    "missing from candidate, have different types "
                    f"({kind_t} != {kind_s}) ({render_value(target)} != undefined)",
                ), None
            return _mismatch(
                MismatchKind.TYPE,
                keys,
                target,
                source,
                f"have different types ({kind_t} != {kind_s}) "
                f"({render_value(target)} != {render_value(source)})",
            ), None

        if kind_t == Kind.OBJECT:
            return self._visit_object(target, source, keys)

        if target is source or bool(target == source):
            return None, None
        return _mismatch(
            MismatchKind.VALUE,
            keys,
            target,
            source,
            f"are different ({render_value(target)} != {render_value(source)})",
        ), None

    def _visit_object(
        self, target: Any, source: Any, keys: list[Any]
    ) -> tuple[Mismatch | None, _Frame | None]:
        tag_t = variant_tag(target)
        if tag_t is not None:
            tag_s = variant_tag(source)
            if tag_t != tag_s:
                return _mismatch(
                    MismatchKind.VARIANT,
                    keys,
                    target,
                    source,
                    f"objects have different variants ({tag_t} != {tag_s or 'plain'})",
                ), None

        variant = classify_variant(target)
        if variant is Variant.NDARRAY and target.ndim == 0:
            # 0-d arrays hold a single scalar at the same path
            return self._visit(target[()], source[()], keys)

        return None, (target, source, iter(own_keys(target, variant)))


_EXHAUSTED = object()

_Frame = tuple[Any, Any, Iterator[Any]]


def _mismatch(
    kind: MismatchKind,
    keys: list[Any],
    expected: Any,
    actual: Any,
    detail: str,
) -> Mismatch:
    return Mismatch(
        kind=kind,
        keys=tuple(keys),
        expected=expected,
        actual=actual,
        detail=detail,
    )
