"""
Core validator classes for typeproxy.

Provides the Validator base and the combinator dataclasses (V, ListV, DictV,
RecordV, UnionV, IntersectionV, ...) plus `to_validator` coercion.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Any, Callable, Generic, TypeVar

from .error import Diagnostic
from .lib.helpers import camel_to_snake, is_array, is_mapping
from .types import UNDEFINED, Err, Ok, Result, ValidatorFn

T = TypeVar("T")
U = TypeVar("U")

CheckFn = Callable[[Any], bool]


class Validator(Generic[T]):
    """
    Base of every validator: an immutable callable from untyped data to Result.

    Supports composition with operators:
        String | Null        # union
        String & V(check=str.isalpha, label="letters")   # intersection
    """

    __slots__ = ()

    def __call__(self, value: Any) -> Result[T]:
        raise NotImplementedError

    def __or__(self, other: Any) -> UnionV:
        other_v = to_validator(other)
        return UnionV((*_union_choices(self), *_union_choices(other_v)))

    def __ror__(self, other: Any) -> UnionV:
        return to_validator(other) | self

    def __and__(self, other: Any) -> IntersectionV:
        other_v = to_validator(other)
        return IntersectionV((*_intersection_parts(self), *_intersection_parts(other_v)))

    def __rand__(self, other: Any) -> IntersectionV:
        return to_validator(other) & self

    def labelled(self, label: str) -> LabelV[T]:
        """Return a validator that reports failures under `label`."""
        return LabelV(label, self)

    def map(self, fn: Callable[[T], U]) -> MapV[U]:
        """Return a validator that applies `fn` to the narrowed value."""
        return MapV(self, fn)

    def then(self, next_validator: Any) -> ThenV:
        """Return a validator that runs `next_validator` on the narrowed value."""
        return ThenV(self, next_validator)


@dataclass(frozen=True, slots=True)
class V(Validator[Any]):
    """
    Primitive validator: a predicate plus the label reported when it fails.

    Usage:
        V(check=lambda x: isinstance(x, str), label="a string")
    """

    check: CheckFn
    label: str

    def __call__(self, value: Any) -> Result[Any]:
        try:
            if self.check(value):
                return Ok(value)
        except Exception:
            pass
        return Err(Diagnostic.simple(value, self.label))


@dataclass(frozen=True, slots=True)
class FnV(Validator[Any]):
    """Wraps a raw `value -> Result` function."""

    fn: ValidatorFn

    def __call__(self, value: Any) -> Result[Any]:
        return self.fn(value)


@dataclass(frozen=True, slots=True)
class PureV(Validator[T]):
    """Ignores its input and succeeds with a constant."""

    value: T

    def __call__(self, value: Any) -> Result[T]:
        return Ok(self.value)


@dataclass(frozen=True, slots=True)
class ListV(Validator[list]):
    """
    Validator for list structures with item validation.

    UNDEFINED entries are holes: they are copied through without running the
    item validator. Fails fast on the first bad index.
    """

    items: Validator[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", to_validator(self.items))

    def __call__(self, value: Any) -> Result[list]:
        if not is_array(value):
            return Err(Diagnostic.simple(value, "an array"))

        result: list[Any] = []
        for index, item in enumerate(value):
            if item is UNDEFINED:
                result.append(UNDEFINED)
                continue

            item_result = self.items(item)
            if isinstance(item_result, Err):
                return Err(item_result.error.prefix(index))
            result.append(item_result.value)

        return Ok(result)


@dataclass(frozen=True, slots=True)
class DictV(Validator[dict]):
    """
    Validator for dict structures with a fixed set of fields.

    Fields are checked in declaration order and missing keys are looked up as
    UNDEFINED. Only declared fields are kept; a field whose narrowed value is
    UNDEFINED is left out of the output. Fails fast on the first bad field.
    """

    fields: Mapping[str, Validator[Any]]

    def __post_init__(self) -> None:
        frozen = {key: to_validator(v) for key, v in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(frozen))

    def __call__(self, value: Any) -> Result[dict]:
        if not is_mapping(value):
            return Err(Diagnostic.simple(value, "an object"))

        result: dict[str, Any] = {}
        for key, validator in self.fields.items():
            field_result = validator(value.get(key, UNDEFINED))
            if isinstance(field_result, Err):
                return Err(field_result.error.prefix(key))
            if field_result.value is not UNDEFINED:
                result[key] = field_result.value

        return Ok(result)


@dataclass(frozen=True, slots=True)
class RecordV(Validator[dict]):
    """Validator for open-ended dicts: every input key shares one value validator."""

    values: Validator[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", to_validator(self.values))

    def __call__(self, value: Any) -> Result[dict]:
        if not is_mapping(value):
            return Err(Diagnostic.simple(value, "an object"))

        result: dict[Any, Any] = {}
        for key, item in value.items():
            item_result = self.values(item)
            if isinstance(item_result, Err):
                return Err(item_result.error.prefix(key))
            result[key] = item_result.value

        return Ok(result)


@dataclass(frozen=True, slots=True)
class UnionV(Validator[Any]):
    """
    Alternative validator: the first passing choice wins.

    When every choice fails, the choices' diagnostics are merged left to right
    with `Diagnostic.combine`, so the deepest failure is reported and failures
    at the same path list all their expectations.
    """

    choices: tuple[Validator[Any], ...]

    def __post_init__(self) -> None:
        if len(self.choices) == 0:
            raise ValueError("A union needs at least one choice")
        object.__setattr__(
            self, "choices", tuple(to_validator(c) for c in self.choices)
        )

    def __call__(self, value: Any) -> Result[Any]:
        error = Diagnostic.empty(value)
        for choice in self.choices:
            result = choice(value)
            if isinstance(result, Ok):
                return result
            error = error.combine(result.error)

        return Err(error)


@dataclass(frozen=True, slots=True)
class IntersectionV(Validator[Any]):
    """
    Conjunction validator: every part must pass against the same input.

    Reports the first failing part as is. On success the original input is
    returned, not any part's narrowed value.
    """

    parts: tuple[Validator[Any], ...]

    def __post_init__(self) -> None:
        if len(self.parts) == 0:
            raise ValueError("An intersection needs at least one part")
        object.__setattr__(self, "parts", tuple(to_validator(p) for p in self.parts))

    def __call__(self, value: Any) -> Result[Any]:
        for part in self.parts:
            result = part(value)
            if isinstance(result, Err):
                return result

        return Ok(value)


@dataclass(frozen=True, slots=True)
class LabelV(Validator[T]):
    """Reports failures of `inner` as one expectation named `label`."""

    label: str
    inner: Validator[T]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", to_validator(self.inner))

    def __call__(self, value: Any) -> Result[T]:
        result = self.inner(value)
        if isinstance(result, Ok):
            return result
        return Err(Diagnostic.label(self.label, result.error))


@dataclass(frozen=True, slots=True)
class LazyV(Validator[Any]):
    """
    Defers to the validator returned by `thunk`, resolved on every call.

    Lets a module-level validator refer to itself:

        node = DictV({"value": Number, "next": Nullable(Lazy(lambda: node))})
    """

    thunk: Callable[[], Any]

    def __call__(self, value: Any) -> Result[Any]:
        return to_validator(self.thunk())(value)


@dataclass(frozen=True, slots=True)
class MapV(Validator[T]):
    """Runs `inner` and applies `fn` to the narrowed value."""

    inner: Validator[Any]
    fn: Callable[[Any], T]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", to_validator(self.inner))

    def __call__(self, value: Any) -> Result[T]:
        result = self.inner(value)
        if isinstance(result, Err):
            return result
        return Ok(self.fn(result.value))


@dataclass(frozen=True, slots=True)
class ThenV(Validator[Any]):
    """Runs `first`, then `second` on the value `first` narrowed to."""

    first: Validator[Any]
    second: Validator[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", to_validator(self.first))
        object.__setattr__(self, "second", to_validator(self.second))

    def __call__(self, value: Any) -> Result[Any]:
        result = self.first(value)
        if isinstance(result, Err):
            return result
        return self.second(result.value)


@dataclass(frozen=True, slots=True)
class SnakeCaseDictV(Validator[dict]):
    """
    Dict validator reading camelCase fields from snake_case input keys.

    Unlike DictV every field is checked and all failures are reported. Input
    that is not a mapping is read as an empty one, so a shape whose fields all
    have defaults still succeeds.
    """

    fields: Mapping[str, Validator[Any]]

    def __post_init__(self) -> None:
        frozen = {key: to_validator(v) for key, v in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(frozen))

    def __call__(self, value: Any) -> Result[dict]:
        source = value if is_mapping(value) else {}

        error = Diagnostic.empty(value)
        failed = False
        result: dict[str, Any] = {}

        for key, validator in self.fields.items():
            snake_key = camel_to_snake(key)
            field_result = validator(source.get(snake_key, UNDEFINED))
            if isinstance(field_result, Err):
                failed = True
                error = error.combine(
                    Diagnostic.label(
                        f"a valid '{snake_key}' field",
                        field_result.error.prefix(snake_key),
                    )
                )
            elif field_result.value is not UNDEFINED:
                result[key] = field_result.value

        return Err(error) if failed else Ok(result)


def _union_choices(v: Validator[Any]) -> tuple[Validator[Any], ...]:
    return v.choices if isinstance(v, UnionV) else (v,)


def _intersection_parts(v: Validator[Any]) -> tuple[Validator[Any], ...]:
    return v.parts if isinstance(v, IntersectionV) else (v,)


def _is_bool(x: Any) -> bool:
    return isinstance(x, bool)


def _is_integer(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_string(x: Any) -> bool:
    return isinstance(x, str)


def _is_none(x: Any) -> bool:
    return x is None


def _is_date(x: Any) -> bool:
    return isinstance(x, date)


_BUILTIN_TYPES: dict[type, V] = {
    bool: V(check=_is_bool, label="a boolean"),
    int: V(check=_is_integer, label="an integer"),
    float: V(check=_is_number, label="a number"),
    str: V(check=_is_string, label="a string"),
    type(None): V(check=_is_none, label="null"),
    date: V(check=_is_date, label="a date"),
}


def to_validator(v: Any) -> Validator[Any]:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        bool/int/float/str/NoneType/date -> matching primitive
        other type -> isinstance check
        dict -> DictV with recursive conversion
        list -> ListV with item validator from list[0] (several items = union)
        Callable -> FnV(fn), fn returning Ok/Err
    """
    if isinstance(v, Validator):
        return v

    if isinstance(v, type):
        if v in _BUILTIN_TYPES:
            return _BUILTIN_TYPES[v]

        def type_check(x: Any, t: type = v) -> bool:
            return isinstance(x, t)

        return V(check=type_check, label=f"an instance of {v.__name__}")

    if isinstance(v, dict):
        return DictV(fields=v)

    if isinstance(v, list):
        if len(v) == 0:
            raise ValueError("Empty list cannot be converted to validator")
        if len(v) == 1:
            return ListV(items=v[0])
        return ListV(items=UnionV(tuple(v)))

    if callable(v):
        return FnV(fn=v)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
