"""
Type definitions for typeproxy.

Provides the Result type (Ok/Err), the UNDEFINED sentinel and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union

if TYPE_CHECKING:
    from .error import Diagnostic

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the narrowed value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing a Diagnostic."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


class Undefined(Enum):
    """
    Sentinel for an absent value.

    Distinct from None (JSON null). Dict validators look up missing keys as
    UNDEFINED, and list validators treat UNDEFINED entries as holes.
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined.UNDEFINED

# Type aliases
Result = Union[Ok[T], "Err[Diagnostic]"]
ValidatorFn = Callable[[Any], "Ok[Any] | Err[Diagnostic]"]
Path = tuple[str, ...]
