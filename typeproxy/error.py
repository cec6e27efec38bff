"""
Diagnostic model for typeproxy.

A Diagnostic says "the data at `path` failed to satisfy `expectations`".
Each expectation may carry a nested cause explaining why a labelled sub-check
failed. Diagnostics are immutable: prefixing and merging build new values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .render import display
from .types import UNDEFINED, Path


@dataclass(frozen=True, slots=True)
class Expectation:
    """One expected shape, optionally explained by a nested Diagnostic."""

    label: str
    cause: Diagnostic | None = None

    def prefix(self, segment: str) -> Expectation:
        if self.cause is None:
            return self
        return Expectation(self.label, self.cause.prefix(segment))


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    Path-located explanation of a validation failure.

    Attributes:
        path: Segments (dict keys, list indices) from the root to the failure
        received: The value that failed at this location
        expectations: What was expected here, in encounter order
    """

    path: Path = ()
    received: Any = UNDEFINED
    expectations: tuple[Expectation, ...] = field(default=())

    @classmethod
    def empty(cls, received: Any) -> Diagnostic:
        """Merge identity: no expectations at the root."""
        return cls((), received, ())

    @classmethod
    def simple(cls, received: Any, expected: str) -> Diagnostic:
        """Leaf mismatch at the root with a single label."""
        return cls((), received, (Expectation(expected),))

    @classmethod
    def label(cls, label: str, cause: Diagnostic) -> Diagnostic:
        """Wrap `cause` so the outer expectation reads `label`."""
        return cls((), cause.received, (Expectation(label, cause),))

    def prefix(self, segment: str | int) -> Diagnostic:
        """
        Return a copy with `segment` prepended to this path and every cause's.

        Combinators call this while unwinding so a failure deep in the input
        ends up located relative to the outermost validator.
        """
        segment = str(segment)
        return Diagnostic(
            (segment, *self.path),
            self.received,
            tuple(e.prefix(segment) for e in self.expectations),
        )

    def compare_paths(self, other: Diagnostic) -> int:
        """
        Order two diagnostics by path specificity.

        Negative when self wins: its path is longer, or equally long with a
        smaller first differing segment. Positive when other wins. 0 if the
        paths are equal.
        """
        if len(self.path) != len(other.path):
            return -1 if len(self.path) > len(other.path) else 1

        for mine, theirs in zip(self.path, other.path):
            if mine != theirs:
                return -1 if mine < theirs else 1

        return 0

    def combine(self, other: Diagnostic) -> Diagnostic:
        """
        Merge two diagnostics raised by alternative attempts at one location.

        The more specific path wins outright. Equal paths concatenate their
        expectations, self's first.
        """
        comparison = self.compare_paths(other)
        if comparison < 0:
            return self
        if comparison > 0:
            return other

        return Diagnostic(
            self.path, self.received, self.expectations + other.expectations
        )

    def display(self, indentation: int = 0) -> str:
        return display(self, indentation)

    def to_tree(self) -> dict[str, Any]:
        """Export as nested plain data for custom presentation layers."""
        return {
            "path": list(self.path),
            "received": self.received,
            "expectations": [
                {
                    "label": e.label,
                    "cause": e.cause.to_tree() if e.cause is not None else None,
                }
                for e in self.expectations
            ],
        }

    def __str__(self) -> str:
        return display(self)


class ProxyError(ValueError):
    """Raised by `validate` when data does not match its validator."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(display(diagnostic))
        self.diagnostic = diagnostic
