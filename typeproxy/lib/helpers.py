"""
Helper functions shared by typeproxy validators.
"""

import re
from collections.abc import Mapping
from typing import Any, NoReturn

_CAMEL_BOUNDARY = re.compile(r"(?!^)([A-Z])")


def camel_to_snake(key: str) -> str:
    """
    Convert a camelCase field name to snake_case.

    Examples:
        camel_to_snake("firstName")   # "first_name"
        camel_to_snake("userIDCode")  # "user_i_d_code"
        camel_to_snake("Name")        # "Name" (leading capital kept)
    """
    return _CAMEL_BOUNDARY.sub(lambda m: f"_{m.group(1).lower()}", key)


def is_array(value: Any) -> bool:
    """Lists and tuples are arrays; strings and mappings are not."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def unreachable(value: NoReturn) -> NoReturn:
    """
    Mark a branch a type checker should prove impossible.

    Usage:
        def handle(kind: Literal["one", "two"]) -> None:
            if kind == "one":
                ...
            elif kind == "two":
                ...
            else:
                unreachable(kind)
    """
    raise AssertionError(f"Unreachable code executed: {value!r}")
