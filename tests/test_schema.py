"""
Tests for the check/validate entry points.
"""

import logging

import pytest

from typeproxy import (
    DictV,
    Err,
    Ok,
    ProxyError,
    String,
    check,
    display_context,
    validate,
)


class TestValidate:
    def test_returns_value(self):
        assert validate("hello", String) == "hello"

    def test_raises_rendered_diagnostic(self):
        with pytest.raises(ProxyError) as exc_info:
            validate(3, String)
        assert str(exc_info.value) == (
            "data is invalid. We expected a string but found 3 instead."
        )
        assert exc_info.value.diagnostic.received == 3

    def test_accepts_plain_schema(self):
        schema = {"name": str, "tags": [str]}
        data = {"name": "Alice", "tags": ["a"], "ignored": 1}
        assert validate(data, schema) == {"name": "Alice", "tags": ["a"]}

    def test_error_paths(self):
        with pytest.raises(ProxyError) as exc_info:
            validate({"user": {"name": None}}, {"user": {"name": str}})
        assert exc_info.value.diagnostic.path == ("user", "name")
        assert str(exc_info.value) == (
            "data.user.name is invalid. We expected a string but found null instead."
        )

    def test_root_label_in_context(self):
        with display_context(root="payload"):
            with pytest.raises(ProxyError, match="^payload.name is invalid"):
                validate({}, DictV({"name": String}))

    def test_logs_failure_path(self, caplog):
        caplog.set_level(logging.DEBUG, logger="typeproxy.schema")
        with pytest.raises(ProxyError):
            validate({"a": 1}, {"a": str})
        assert "Validation failed at a" in caplog.text


class TestCheck:
    def test_ok(self):
        assert check({"name": "Alice"}, {"name": str}) == Ok({"name": "Alice"})

    def test_err(self):
        result = check({"name": 1}, {"name": str})
        assert isinstance(result, Err)
        assert result.is_err()
        assert not result.is_ok()
        assert result.error.path == ("name",)

    def test_idempotent(self):
        schema = DictV({"a": [int], "b": {"c": str}})
        data = {"a": [1, "x"], "b": {"c": "y"}}
        assert check(data, schema) == check(data, schema)
