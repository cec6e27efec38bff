"""
Pydantic interop for typeproxy.

Model(cls) runs a Pydantic model as a validator and converts its error list
into a single Diagnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .core import Validator
from .error import Diagnostic
from .types import UNDEFINED, Err, Ok, Result

_ModelT = TypeVar("_ModelT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class ModelV(Validator[_ModelT]):
    """Validator backed by `model.model_validate`."""

    model: type[_ModelT]

    def __call__(self, value: Any) -> Result[_ModelT]:
        try:
            return Ok(self.model.model_validate(value))
        except ValidationError as e:
            return Err(
                Diagnostic.label(f"a valid {self.model.__name__}", from_pydantic(e, value))
            )


def Model(model: type[_ModelT]) -> ModelV[_ModelT]:
    """
    Validate through a Pydantic model, producing a model instance.

    Usage:
        class User(BaseModel):
            name: str

        users = ListV(Model(User))
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(f"Model() requires a pydantic BaseModel, got {model!r}")
    return ModelV(model)


def from_pydantic(error: ValidationError, received: Any) -> Diagnostic:
    """
    Convert a Pydantic ValidationError into one Diagnostic.

    Each error becomes a leaf at its `loc`; leaves are merged with
    `Diagnostic.combine`, so the deepest location wins and errors sharing a
    location are listed together.
    """
    combined = Diagnostic.empty(received)

    for detail in error.errors():
        leaf = Diagnostic.simple(detail.get("input", UNDEFINED), detail["msg"])
        for segment in reversed(detail["loc"]):
            leaf = leaf.prefix(segment)
        combined = combined.combine(leaf)

    return combined
