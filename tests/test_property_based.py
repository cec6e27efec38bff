"""Property-based tests for typeproxy validators and diagnostics."""

from hypothesis import given
from hypothesis import strategies as st

from typeproxy import (
    Boolean,
    Diagnostic,
    DictV,
    Err,
    Expectation,
    ListV,
    Null,
    Number,
    Ok,
    OneOf,
    Optional,
    Or2,
    Or3,
    RecordV,
    String,
)

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False)
    | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=5), children, max_size=4),
    max_leaves=20,
)

segments = st.lists(st.sampled_from(["a", "b", "0", "1"]), max_size=3)


@st.composite
def diagnostics(draw):
    path = tuple(draw(segments))
    labels = draw(st.lists(st.sampled_from(["x", "y", "z"]), max_size=2))
    return Diagnostic(path, None, tuple(Expectation(label) for label in labels))


shape = DictV(
    {
        "name": String,
        "tags": ListV(String),
        "meta": Optional(RecordV(Number | Boolean)),
    }
)


@given(st.text())
def test_strings_accepted(s):
    assert String(s) == Ok(s)


@given(st.integers() | st.floats(allow_nan=False))
def test_numbers_accepted_and_not_strings(n):
    assert Number(n) == Ok(n)
    result = String(n)
    assert isinstance(result, Err)
    assert result.error.path == ()


@given(st.booleans())
def test_booleans_are_not_numbers(b):
    assert Boolean(b) == Ok(b)
    assert isinstance(Number(b), Err)


@given(json_values)
def test_validation_is_idempotent(value):
    assert shape(value) == shape(value)
    assert shape({"name": "n", "tags": [], "meta": value}) == shape(
        {"name": "n", "tags": [], "meta": value}
    )


@given(json_values)
def test_union_nesting_is_equivalent(value):
    a = DictV({"a": String})
    b = ListV(Number)
    c = Null
    flat = OneOf(a, b, c)(value)
    assert flat == Or3(a, b, c)(value)
    assert flat == OneOf(OneOf(a, b), c)(value)
    assert flat == Or2(a, Or2(b, c))(value)


@given(diagnostics(), diagnostics(), diagnostics())
def test_combine_is_associative(a, b, c):
    assert a.combine(b).combine(c) == a.combine(b.combine(c))


@given(diagnostics(), diagnostics())
def test_combine_keeps_the_more_specific_path(a, b):
    combined = a.combine(b)
    comparison = a.compare_paths(b)
    if comparison < 0:
        assert combined is a
    elif comparison > 0:
        assert combined is b
    else:
        assert combined.expectations == a.expectations + b.expectations


@given(diagnostics(), segments)
def test_prefix_prepends(d, extra):
    prefixed = d
    for segment in reversed(extra):
        prefixed = prefixed.prefix(segment)
    assert prefixed.path == tuple(extra) + d.path
