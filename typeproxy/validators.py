"""
Built-in validators for typeproxy.

Primitive validators are module-level instances; combinators and modifiers
are factory functions returning Validator instances.
"""

from __future__ import annotations

import copy
import json
from datetime import date
from typing import Any, Callable

from .core import (
    FnV,
    IntersectionV,
    LabelV,
    LazyV,
    MapV,
    PureV,
    UnionV,
    V,
    Validator,
    to_validator,
)
from .error import Diagnostic
from .types import UNDEFINED, Err, Ok, Result

# Primitives
Boolean = to_validator(bool)
Integer = to_validator(int)
Number = to_validator(float)
String = to_validator(str)
Null = to_validator(type(None))
Date = to_validator(date)
Undefined = V(check=lambda x: x is UNDEFINED, label="undefined")
TrueV = V(check=lambda x: x is True, label="true")
FalseV = V(check=lambda x: x is False, label="false")
Unknown = V(check=lambda _: True, label="anything")


def InstanceOf(cls: type) -> V:
    """
    Validate that value is an instance of `cls`.

    Usage:
        InstanceOf(Decimal)
    """

    def check(x: Any) -> bool:
        return isinstance(x, cls)

    return V(check=check, label=f"an instance of {cls.__name__}")


def StrLiteral(literal: str) -> V:
    """Validate a string equal to `literal`."""

    def check(x: Any) -> bool:
        return isinstance(x, str) and x == literal

    return V(check=check, label=f'"{literal}"')


def NumLiteral(literal: int | float) -> V:
    """Validate a number (never a bool) equal to `literal`."""

    def check(x: Any) -> bool:
        return isinstance(x, (int, float)) and not isinstance(x, bool) and x == literal

    return V(check=check, label=f"{literal}")


def Literal(literal: Any) -> V:
    """
    Validate exact equality in value and kind.

    Usage:
        Literal("left")     # same as StrLiteral("left")
        Literal(2)          # same as NumLiteral(2)
        Literal(True)       # same as TrueV
    """
    if literal is True:
        return TrueV
    if literal is False:
        return FalseV
    if literal is None:
        return Null
    if isinstance(literal, str):
        return StrLiteral(literal)
    if isinstance(literal, (int, float)):
        return NumLiteral(literal)

    def check(x: Any) -> bool:
        return type(x) is type(literal) and x == literal

    return V(check=check, label=repr(literal))


# Combinators


def OneOf(*choices: Any) -> UnionV:
    """
    Union: the first passing choice wins; on total failure the most specific
    diagnostic is kept (see `Diagnostic.combine`).

    Usage:
        OneOf(StrLiteral("one"), StrLiteral("two"))
        String | Null         # same as OneOf(String, Null)
    """
    return UnionV(choices)


def Or2(left: Any, right: Any) -> UnionV:
    return UnionV((left, right))


def Or3(first: Any, second: Any, third: Any) -> UnionV:
    return Or2(first, Or2(second, third))


def Or4(first: Any, second: Any, third: Any, fourth: Any) -> UnionV:
    return Or2(Or2(first, second), Or2(third, fourth))


def AllOf(*parts: Any) -> IntersectionV:
    """
    Intersection: every part must pass; returns the original input.

    Usage:
        AllOf(DictV({"id": String}), DictV({"name": String}))
    """
    return IntersectionV(parts)


# Modifiers


def Optional(v: Any) -> UnionV:
    """
    Allow an absent value (UNDEFINED), validate if present.

    Usage:
        DictV({"email": Optional(String)})
    """
    return UnionV((Undefined, v))


def Nullable(v: Any) -> UnionV:
    """Allow None, validate otherwise."""
    return UnionV((v, Null))


def Default(default: Any, v: Any) -> UnionV:
    """
    Validate `v`; substitute `default` only when the value is absent.

    A present but invalid value still fails. Each absent value receives a
    fresh deep copy of `default`, so mutable defaults are not shared.

    Usage:
        DictV({"retries": Default(3, Integer)})
    """
    return UnionV((v, Undefined.map(lambda _: copy.deepcopy(default))))


def Label(label: str, v: Any) -> LabelV:
    """
    Name a validator in diagnostics.

    Usage:
        OneOf(
            Label("a number type", DictV({"type": StrLiteral("number")})),
            Label("a string type", DictV({"type": StrLiteral("string")})),
        )
    """
    return LabelV(label, v)


def Lazy(thunk: Callable[[], Any]) -> LazyV:
    """
    Refer to a validator that is defined later, typically itself.

    Usage:
        linked_list = Nullable(DictV({"value": Number, "next": Lazy(lambda: linked_list)}))
    """
    return LazyV(thunk)


# Transforms


def Pure(value: Any) -> PureV:
    """Always succeed with `value`, ignoring the input."""
    return PureV(value)


def Transform(v: Any, fn: Callable[[Any], Any]) -> MapV:
    """
    Validate with `v`, then map the narrowed value through `fn`.

    Usage:
        Transform(String, str.strip)
    """
    return MapV(v, fn)


# JSON text

_JSON_STRING = LabelV("JSON string", String)


def _parse_json(value: Any) -> Result[Any]:
    result = _JSON_STRING(value)
    if isinstance(result, Err):
        return result

    try:
        return Ok(json.loads(result.value))
    except json.JSONDecodeError:
        return Err(Diagnostic.simple(value, "valid JSON"))


Json: Validator[Any] = FnV(_parse_json)
