"""
Entry points for typeproxy validation.

Provides check() (returns a Result) and validate() (returns the value or raises).
"""

from __future__ import annotations

import logging
from typing import Any

from .core import to_validator
from .error import ProxyError
from .types import Err, Result

logger = logging.getLogger(__name__)


def check(value: Any, schema: Any) -> Result[Any]:
    """
    Validate data against a schema without raising.

    Args:
        value: The untyped data to validate
        schema: A Validator, or anything `to_validator` accepts

    Returns:
        Ok(narrowed) if validation passes
        Err(diagnostic) if validation fails

    Usage:
        result = check({"name": "Alice"}, {"name": str})
        if result.is_err():
            print(result.error)
    """
    return to_validator(schema)(value)


def validate(value: Any, schema: Any) -> Any:
    """
    Validate data against a schema, raising on mismatch.

    Args:
        value: The untyped data to validate
        schema: A Validator, or anything `to_validator` accepts

    Returns:
        The narrowed value

    Raises:
        ProxyError: If the data does not match; the message is the rendered
            diagnostic and `.diagnostic` holds the tree.

    Usage:
        validate("hello", String)   # "hello"
        validate(3, String)
        # ProxyError: data is invalid. We expected a string but found 3 instead.
    """
    result = check(value, schema)

    if isinstance(result, Err):
        logger.debug(
            "Validation failed at %s", ".".join(result.error.path) or "<root>"
        )
        raise ProxyError(result.error)

    return result.value
