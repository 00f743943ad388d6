"""DiagnosticConfig for rendering conformance failures.

DiagnosticConfig is a frozen (immutable) dataclass holding the parameters
that shape the human-readable context appended to a ConformanceError.  It
has no effect on whether two trees conform.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiagnosticConfig"]


@dataclass(frozen=True, slots=True)
class DiagnosticConfig:
    """Immutable configuration for failure diagnostics.

    Attributes:
        backtrack: Trailing keypath segments dropped before rendering, so the
            rendered subtree shows the failing node with some context (>= 0).
        omit_keys: Top-level keys stripped from both trees before rendering.
            Defaults to ``("tokens",)``: token lists are long and rarely the
            interesting part of a parser mismatch.
        width: Line width passed to the pretty-printer (> 0).
        max_depth: Upper bound on the nesting depth rendered.  The error's own
            depth is used when None; otherwise the smaller of the two (>= 1).
    """

    backtrack: int = 2
    omit_keys: tuple[str, ...] = ("tokens",)
    width: int = 80
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.backtrack < 0:
            msg = f"backtrack must be >= 0, got {self.backtrack}"
            raise ValueError(msg)
        if self.width <= 0:
            msg = f"width must be > 0, got {self.width}"
            raise ValueError(msg)
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

    def render_depth(self, error_depth: int) -> int:
        """Depth to render for an error reported at ``error_depth``."""
        if self.max_depth is None:
            return error_depth
        return min(error_depth, self.max_depth)
