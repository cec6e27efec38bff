"""
Context manager for rendering configuration (root label, received length).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Options read by `render.display` when formatting a Diagnostic."""

    root: str = "data"
    max_received_length: int = 50


# Context variable for display options
_display_options: ContextVar[DisplayOptions] = ContextVar(
    "display_options", default=DisplayOptions()
)


def current_display_options() -> DisplayOptions:
    """Return the display options active in this context."""
    return _display_options.get()


@contextmanager
def display_context(*, root: str = "data", max_received_length: int = 50):
    """
    Context manager for diagnostic rendering.

    Args:
        root: Label printed in front of every path (default "data")
        max_received_length: Received values rendered longer than this are
            truncated with a trailing "..."

    Example:
        from typeproxy import String, display_context, validate

        with display_context(root="payload"):
            validate(3, String)
            # ProxyError: payload is invalid. We expected a string but found 3 instead.
    """
    if max_received_length < 0:
        raise ValueError(
            f"max_received_length must be >= 0, got {max_received_length}"
        )

    token = _display_options.set(
        DisplayOptions(root=root, max_received_length=max_received_length)
    )
    try:
        yield
    finally:
        _display_options.reset(token)
