"""Value types describing a textual graph specification."""

from dataclasses import dataclass

from .enums import ParamKind


@dataclass(frozen=True)
class GraphSpec:
    """A model name and its raw, uninterpreted parameter tokens.

    Attributes:
        name: Model name or alias
        tokens: Parameter tokens in order of appearance
    """

    name: str
    tokens: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.tokens:
            return self.name
        return f"{self.name}/{','.join(self.tokens)}"


@dataclass(frozen=True)
class ParameterSlot:
    """One named, typed position in a model's parameter list."""

    name: str
    kind: ParamKind

    def __str__(self) -> str:
        return f"{self.name} ({self.kind})"


# Ordered slots; its length is the model's arity.
ParameterSchema = tuple[ParameterSlot, ...]
