"""
Textual rendering of Diagnostics.

    data.a.b is invalid. We expected a number type or a string type but found {"x":1} instead.
    it is not a number type because:
      data.a.b.type is invalid. We expected "number" but found "x" instead.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .context import current_display_options
from .types import UNDEFINED

if TYPE_CHECKING:
    from .error import Diagnostic

INDENT = "  "


def display(diagnostic: Diagnostic, indentation: int = 0) -> str:
    """Render a Diagnostic and its causes, one indentation level per cause."""
    options = current_display_options()
    indent = INDENT * indentation
    pretty_path = ".".join((options.root, *diagnostic.path))
    lines = [
        f"{indent}{pretty_path} is invalid. {_expected_sentence(diagnostic)}"
    ]

    for expectation in diagnostic.expectations:
        if expectation.cause is not None:
            lines.append(f"{indent}it is not {expectation.label} because:")
            lines.append(display(expectation.cause, indentation + 1))

    return "\n".join(lines)


def pretty_received(value: Any) -> str:
    """
    Compact JSON text of `value`, truncated to the configured length.

    Falls back to the type name when the value cannot be serialized.
    """
    limit = current_display_options().max_received_length

    if value is UNDEFINED:
        text = "undefined"
    else:
        try:
            text = json.dumps(
                value, separators=(",", ":"), ensure_ascii=False, default=_undefined_as_null
            )
        except (TypeError, ValueError):
            text = type(value).__name__

    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def _expected_sentence(diagnostic: Diagnostic) -> str:
    received = pretty_received(diagnostic.received)
    labels = [e.label for e in diagnostic.expectations]

    match labels:
        case []:
            return f"We found {received}."
        case [only]:
            return f"We expected {only} but found {received} instead."
        case [*rest, last]:
            return (
                f"We expected {', '.join(rest)} or {last} "
                f"but found {received} instead."
            )


def _undefined_as_null(value: Any) -> Any:
    # Holes in sparse lists render like JSON.stringify renders them
    if value is UNDEFINED:
        return None
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
