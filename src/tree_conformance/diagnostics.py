"""Bounded side-by-side rendering of a conformance failure.

When a check fails, the dotted path alone rarely explains the problem.  The
helpers here resolve both trees a few segments above the failing node and
pretty-print what they find, capped at the error's depth so a huge tree
(long token or children lists) cannot flood the terminal.
"""

from __future__ import annotations

import pprint
from collections.abc import Mapping
from typing import Any

from tree_conformance.config import DiagnosticConfig
from tree_conformance.errors import ConformanceError
from tree_conformance.tree.keypath import resolve

__all__ = ["explain", "render_subtree"]


def render_subtree(
    root: Any,
    keypath: str | None,
    depth: int,
    backtrack: int = 2,
    omit_keys: tuple[str, ...] = (),
    width: int = 80,
) -> str:
    """Pretty-print the subtree of ``root`` around ``keypath``.

    Args:
        root:      Tree to render.  Never mutated.
        keypath:   Dotted keypath of the failing node.
        depth:     Maximum nesting depth to expand.
        backtrack: Trailing segments dropped before resolving.
        omit_keys: Top-level keys of ``root`` left out of the rendering.
        width:     Pretty-printer line width.

    Returns:
        The rendering; ``undefined`` when the path does not exist in ``root``.
    """
    if omit_keys and isinstance(root, Mapping):
        root = {k: v for k, v in root.items() if k not in omit_keys}
    subtree = resolve(root, keypath, backtrack)
    return pprint.pformat(subtree, depth=depth, width=width, sort_dicts=False)


def explain(
    reference: Any,
    candidate: Any,
    error: ConformanceError,
    config: DiagnosticConfig | None = None,
    labels: tuple[str, str] = ("reference", "candidate"),
) -> str:
    """Render both trees around the path carried by ``error``.

    Args:
        reference: Reference tree passed to the failing check.
        candidate: Candidate tree passed to the failing check.
        error:     The raised ConformanceError.
        config:    Rendering parameters.  Defaults to ``DiagnosticConfig()``.
        labels:    Headings for the reference and candidate renderings.

    Returns:
        A multi-line block: each label followed by its indented rendering.
    """
    config = config if config is not None else DiagnosticConfig()
    depth = config.render_depth(error.depth)

    blocks = []
    for label, tree in zip(labels, (reference, candidate), strict=True):
        rendered = render_subtree(
            tree,
            error.path,
            depth,
            backtrack=config.backtrack,
            omit_keys=config.omit_keys,
            width=config.width,
        )
        body = "\n".join(f"  {line}" for line in rendered.splitlines())
        blocks.append(f"{label}:\n{body}")
    return "\n".join(blocks)
