"""Validation of raw parameter tokens against a model's schema."""

import math
import re
from typing import TYPE_CHECKING, Sequence

from pydantic import BaseModel, ValidationError

from models import (
    ArityMismatchError,
    ParameterParseError,
    ParameterRangeError,
    ParameterSlot,
    ParamKind,
)

if TYPE_CHECKING:
    from .base import GraphModel

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_PROBABILITY_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_token(model_name: str, slot: ParameterSlot, position: int, token: str) -> int | float:
    """Parse one token into the numeric kind its slot declares.

    Raises:
        ParameterParseError: If the token is not a valid literal of that kind
    """
    if slot.kind is ParamKind.UNSIGNED:
        if _UNSIGNED_PATTERN.fullmatch(token):
            try:
                return int(token)
            except ValueError:
                # Beyond the interpreter's digit limit
                pass
    elif slot.kind is ParamKind.PROBABILITY:
        if _PROBABILITY_PATTERN.fullmatch(token):
            value = float(token)
            if math.isfinite(value):
                return value

    raise ParameterParseError(model_name, slot.name, position, token, slot.kind)


def bind_parameters(model: "GraphModel", tokens: Sequence[str]) -> BaseModel:
    """Turn raw tokens into the model's immutable parameter object.

    Checks run in order: arity, per-token parsing, then range and cross-field
    constraints declared on the model's parameter type.

    Args:
        model: Model whose schema and parameter type apply
        tokens: Raw parameter tokens

    Returns:
        Frozen instance of ``model.params_type``

    Raises:
        ArityMismatchError: Token count differs from the schema length
        ParameterParseError: A token is not a literal of its slot's kind
        ParameterRangeError: Parsed values violate the model's constraints
    """
    schema = model.schema
    if len(tokens) != len(schema):
        raise ArityMismatchError(
            model.name,
            expected=[slot.name for slot in schema],
            actual=len(tokens),
        )

    values = {
        slot.name: parse_token(model.name, slot, position, token)
        for position, (slot, token) in enumerate(zip(schema, tokens))
    }

    try:
        return model.params_type(**values)
    except ValidationError as exc:
        error = exc.errors()[0]
        location = error.get("loc") or ()
        parameter = str(location[0]) if location else None
        reason = error["msg"]
        if error["type"] == "value_error":
            reason = str(error["ctx"]["error"])
        raise ParameterRangeError(model.name, reason, parameter=parameter) from exc
