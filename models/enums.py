"""Enumerations for graph generation."""

from enum import Enum


class EdgeDirection(str, Enum):
    """Direction of the edges a generator inserts."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @property
    def is_directed(self) -> bool:
        return self is EdgeDirection.DIRECTED

    def __str__(self) -> str:
        return self.value


class ParamKind(str, Enum):
    """Numeric kind a raw parameter token is parsed into."""

    UNSIGNED = "unsigned integer"
    PROBABILITY = "probability"

    def __str__(self) -> str:
        return self.value
