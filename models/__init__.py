"""Data models for graph specifications."""

from .enums import EdgeDirection, ParamKind
from .spec import GraphSpec, ParameterSlot, ParameterSchema
from .errors import (
    GraphSpecError,
    UnknownModelError,
    ArityMismatchError,
    ParameterParseError,
    ParameterRangeError,
)

__all__ = [
    # Enums
    "EdgeDirection",
    "ParamKind",
    # Specification
    "GraphSpec",
    "ParameterSlot",
    "ParameterSchema",
    # Errors
    "GraphSpecError",
    "UnknownModelError",
    "ArityMismatchError",
    "ParameterParseError",
    "ParameterRangeError",
]
