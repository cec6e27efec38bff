"""
Tests for JSON text parsing, transforms and the snake_case dict validator.
"""

from typeproxy import (
    Default,
    DictV,
    Err,
    Integer,
    Json,
    ListV,
    Number,
    Ok,
    Pure,
    SnakeCaseDictV,
    String,
    Transform,
    camel_to_snake,
)


def labels(diagnostic):
    return [e.label for e in diagnostic.expectations]


class TestJson:
    def test_parses(self):
        assert Json('{"a": [1, 2]}') == Ok({"a": [1, 2]})

    def test_not_a_string(self):
        result = Json(3)
        assert labels(result.error) == ["JSON string"]
        assert labels(result.error.expectations[0].cause) == ["a string"]

    def test_malformed(self):
        result = Json("{")
        assert isinstance(result, Err)
        assert result.error.display() == (
            'data is invalid. We expected valid JSON but found "{" instead.'
        )

    def test_chained_shape(self):
        v = Json.then(DictV({"a": Integer}))
        assert v('{"a": 1, "b": 2}') == Ok({"a": 1})
        assert v('{"a": "x"}').error.path == ("a",)


class TestTransforms:
    def test_pure(self):
        assert Pure(5)("anything") == Ok(5)

    def test_transform(self):
        assert Transform(String, str.upper)("abc") == Ok("ABC")
        assert labels(Transform(String, str.upper)(1).error) == ["a string"]

    def test_map(self):
        assert ListV(Number).map(sum)([1, 2, 3]) == Ok(6)


class TestCamelToSnake:
    def test_conversion(self):
        assert camel_to_snake("firstName") == "first_name"
        assert camel_to_snake("id") == "id"
        assert camel_to_snake("userIDCode") == "user_i_d_code"
        assert camel_to_snake("Name") == "Name"


class TestSnakeCaseDictV:
    def test_reads_snake_case_keys(self):
        v = SnakeCaseDictV({"firstName": String, "lastName": String})
        result = v({"first_name": "Ada", "last_name": "Lovelace", "extra": 1})
        assert result == Ok({"firstName": "Ada", "lastName": "Lovelace"})

    def test_reports_every_failing_field(self):
        v = SnakeCaseDictV({"firstName": String, "lastName": String})
        result = v({"first_name": 1})
        assert labels(result.error) == [
            "a valid 'first_name' field",
            "a valid 'last_name' field",
        ]
        assert result.error.display() == "\n".join(
            [
                "data is invalid. We expected a valid 'first_name' field or a valid "
                "'last_name' field but found {\"first_name\":1} instead.",
                "it is not a valid 'first_name' field because:",
                "  data.first_name is invalid. We expected a string but found 1 instead.",
                "it is not a valid 'last_name' field because:",
                "  data.last_name is invalid. We expected a string but found undefined instead.",
            ]
        )

    def test_non_mapping_uses_defaults(self):
        v = SnakeCaseDictV({"pageSize": Default(10, Integer)})
        assert v(None) == Ok({"pageSize": 10})
        assert v({"page_size": 25}) == Ok({"pageSize": 25})

    def test_non_mapping_without_defaults_fails(self):
        result = SnakeCaseDictV({"pageSize": Integer})("x")
        assert result.error.received == "x"
        assert result.error.expectations[0].cause.path == ("page_size",)
