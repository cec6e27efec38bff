"""
typeproxy - Composable runtime validators with path-located diagnostics.

Usage:
    from typeproxy import DictV, ListV, Number, OneOf, StrLiteral, String, validate

    shape = DictV({
        "name": String,
        "scores": ListV(Number),
        "kind": OneOf(StrLiteral("a"), StrLiteral("b")),
    })

    data = validate(raw, shape)
"""

from .context import DisplayOptions, current_display_options, display_context
from .core import (
    DictV,
    FnV,
    IntersectionV,
    LabelV,
    LazyV,
    ListV,
    MapV,
    PureV,
    RecordV,
    SnakeCaseDictV,
    ThenV,
    UnionV,
    V,
    Validator,
    to_validator,
)
from .error import Diagnostic, Expectation, ProxyError
from .interop import Model, ModelV, from_pydantic
from .lib.helpers import camel_to_snake, unreachable
from .render import display, pretty_received
from .schema import check, validate
from .types import UNDEFINED, Err, Ok, Result
from .validators import (
    AllOf,
    Boolean,
    Date,
    Default,
    FalseV,
    InstanceOf,
    Integer,
    Json,
    Label,
    Lazy,
    Literal,
    Null,
    Nullable,
    NumLiteral,
    Number,
    OneOf,
    Optional,
    Or2,
    Or3,
    Or4,
    Pure,
    StrLiteral,
    String,
    Transform,
    TrueV,
    Undefined,
    Unknown,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "UNDEFINED",
    # Diagnostics
    "Diagnostic",
    "Expectation",
    "ProxyError",
    "display",
    "pretty_received",
    "display_context",
    "current_display_options",
    "DisplayOptions",
    # Core
    "Validator",
    "V",
    "FnV",
    "PureV",
    "ListV",
    "DictV",
    "RecordV",
    "UnionV",
    "IntersectionV",
    "LabelV",
    "LazyV",
    "MapV",
    "ThenV",
    "SnakeCaseDictV",
    "to_validator",
    # Primitives
    "Boolean",
    "Integer",
    "Number",
    "String",
    "Null",
    "Undefined",
    "TrueV",
    "FalseV",
    "Date",
    "Unknown",
    "InstanceOf",
    "StrLiteral",
    "NumLiteral",
    "Literal",
    "Json",
    # Combinators
    "OneOf",
    "Or2",
    "Or3",
    "Or4",
    "AllOf",
    "Optional",
    "Nullable",
    "Default",
    "Label",
    "Lazy",
    "Pure",
    "Transform",
    # Pydantic
    "Model",
    "ModelV",
    "from_pydantic",
    # Entry points
    "check",
    "validate",
    # Helpers
    "camel_to_snake",
    "unreachable",
]
