"""Fixed model registries and specification-string dispatch.

Two registries exist, one per edge direction. Both hold the same five models;
direction only affects how each model inserts its edges.

Accepted names (canonical name first, then aliases):

    barabasi_albert, ba    n,m       1 <= m < n
    chain                  n         n >= 1
    erdos_renyi, er        n,p       n >= 1, 0 <= p <= 1
    tree                   n         n >= 1
    watts_strogatz, ws     n,k,p     k even, 2 <= k < n, 0 <= p <= 1
"""

from typing import Iterator

from models import EdgeDirection, GraphSpec, UnknownModelError
from .base import GraphModel
from .barabasi_albert import BarabasiAlbertModel
from .capsule import GraphGenerator
from .chain import ChainModel
from .erdos_renyi import ErdosRenyiModel
from .parser import parse_spec
from .tree import TreeModel
from .watts_strogatz import WattsStrogatzModel

MODEL_TYPES: tuple[type[GraphModel], ...] = (
    BarabasiAlbertModel,
    ChainModel,
    ErdosRenyiModel,
    TreeModel,
    WattsStrogatzModel,
)

DIRECTED_MODELS: tuple[GraphModel, ...] = tuple(
    model_type(EdgeDirection.DIRECTED) for model_type in MODEL_TYPES
)
UNDIRECTED_MODELS: tuple[GraphModel, ...] = tuple(
    model_type(EdgeDirection.UNDIRECTED) for model_type in MODEL_TYPES
)


def get_models(direction: EdgeDirection) -> tuple[GraphModel, ...]:
    """Registry for the given edge direction."""
    if direction is EdgeDirection.DIRECTED:
        return DIRECTED_MODELS
    return UNDIRECTED_MODELS


def iter_directed_models() -> Iterator[GraphModel]:
    """Iterate over the directed model descriptors."""
    return iter(DIRECTED_MODELS)


def iter_undirected_models() -> Iterator[GraphModel]:
    """Iterate over the undirected model descriptors."""
    return iter(UNDIRECTED_MODELS)


def find_model(name: str, direction: EdgeDirection) -> GraphModel:
    """Look up a model by exact name or alias.

    Raises:
        UnknownModelError: If no model answers to ``name``
    """
    models = get_models(direction)
    for model in models:
        if model.matches(name):
            return model

    available = [alias for model in models for alias in model.names]
    raise UnknownModelError(name, available)


def generator_from_spec(spec: GraphSpec, direction: EdgeDirection) -> GraphGenerator:
    """Build a generator from an already split specification."""
    model = find_model(spec.name, direction)
    return model.build_generator(spec.tokens)


def generator_from_str(text: str, directed: bool = False) -> GraphGenerator:
    """Build a generator from a string such as ``"ws/100,4,0.1"``.

    Args:
        text: Specification string ``name[/token,token,...]``
        directed: Whether generated graphs are directed

    Returns:
        Reusable generator; sampling it never raises a specification error

    Raises:
        GraphSpecError: Subclass describing why the string was rejected
    """
    direction = EdgeDirection.DIRECTED if directed else EdgeDirection.UNDIRECTED
    return generator_from_spec(parse_spec(text), direction)


def directed_generator_from_str(text: str) -> GraphGenerator:
    """Build a directed graph generator from a specification string."""
    return generator_from_str(text, directed=True)


def undirected_generator_from_str(text: str) -> GraphGenerator:
    """Build an undirected graph generator from a specification string."""
    return generator_from_str(text, directed=False)


def describe_models(direction: EdgeDirection) -> list[str]:
    """One usage line per model, for listings."""
    lines = []
    for model in get_models(direction):
        aliases = f" (alias: {', '.join(model.aliases)})" if model.aliases else ""
        lines.append(f"{model.usage()}{aliases}: {model.description}")
    return lines
