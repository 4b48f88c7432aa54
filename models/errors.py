"""Errors raised while turning a specification string into a generator.

Every error in this module is raised during binding, before any random value
is drawn and before a generator exists.
"""

from typing import Iterable

from .enums import ParamKind


class GraphSpecError(ValueError):
    """Base class for invalid graph specifications."""

    def __init__(self, message: str, model: str | None = None):
        super().__init__(message)
        self.model = model


class UnknownModelError(GraphSpecError):
    """No registered model matches the requested name."""

    def __init__(self, name: str, available: Iterable[str]):
        self.available = tuple(available)
        super().__init__(
            f'unknown graph model "{name}" (available: {", ".join(self.available)})',
            model=name,
        )


class ArityMismatchError(GraphSpecError):
    """Wrong number of parameter tokens for a model."""

    def __init__(self, model: str, expected: Iterable[str], actual: int):
        self.expected = tuple(expected)
        self.actual = actual
        super().__init__(
            f'model "{model}" expects {len(self.expected)} parameter(s) '
            f"({', '.join(self.expected)}), got {actual}",
            model=model,
        )


class ParameterParseError(GraphSpecError):
    """A token could not be read as its slot's numeric kind."""

    def __init__(
        self,
        model: str,
        parameter: str,
        position: int,
        token: str,
        kind: ParamKind,
    ):
        self.parameter = parameter
        self.position = position
        self.token = token
        self.kind = kind
        super().__init__(
            f'model "{model}": parameter {position + 1} ({parameter}): '
            f'expected {kind}, got "{token}"',
            model=model,
        )


class ParameterRangeError(GraphSpecError):
    """Parsed values violate a model's constraints."""

    def __init__(self, model: str, reason: str, parameter: str | None = None):
        self.parameter = parameter
        self.reason = reason
        where = f" ({parameter})" if parameter else ""
        super().__init__(f'model "{model}"{where}: {reason}', model=model)
