"""Random graph generators built from specification strings."""

from .parser import parse_spec
from .binder import bind_parameters
from .base import GraphModel
from .capsule import GraphGenerator
from .chain import ChainModel, ChainParams
from .erdos_renyi import ErdosRenyiModel, ErdosRenyiParams
from .barabasi_albert import BarabasiAlbertModel, BarabasiAlbertParams
from .tree import TreeModel, TreeParams
from .watts_strogatz import WattsStrogatzModel, WattsStrogatzParams
from .registry import (
    DIRECTED_MODELS,
    UNDIRECTED_MODELS,
    iter_directed_models,
    iter_undirected_models,
    find_model,
    generator_from_spec,
    generator_from_str,
    directed_generator_from_str,
    undirected_generator_from_str,
    describe_models,
)
from .statistics import get_graph_statistics

__all__ = [
    # Parsing and binding
    "parse_spec",
    "bind_parameters",
    # Models
    "GraphModel",
    "ChainModel",
    "ChainParams",
    "ErdosRenyiModel",
    "ErdosRenyiParams",
    "BarabasiAlbertModel",
    "BarabasiAlbertParams",
    "TreeModel",
    "TreeParams",
    "WattsStrogatzModel",
    "WattsStrogatzParams",
    # Generators
    "GraphGenerator",
    "DIRECTED_MODELS",
    "UNDIRECTED_MODELS",
    "iter_directed_models",
    "iter_undirected_models",
    "find_model",
    "generator_from_spec",
    "generator_from_str",
    "directed_generator_from_str",
    "undirected_generator_from_str",
    "describe_models",
    # Statistics
    "get_graph_statistics",
]
