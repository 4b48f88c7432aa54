"""Common interface of the random graph models."""

from abc import ABC, abstractmethod
from typing import Sequence

import networkx as nx
from loguru import logger
from numpy.random import Generator
from pydantic import BaseModel

from models import EdgeDirection, ParameterSchema
from .binder import bind_parameters
from .capsule import GraphGenerator


class GraphModel(ABC):
    """A named generative model bound to one edge direction.

    Subclasses declare their name, aliases, parameter schema and the frozen
    pydantic type holding bound parameters, and implement ``sample``. The
    direction only changes how edges are inserted, never which models exist.
    """

    name: str = "base"
    aliases: tuple[str, ...] = ()
    description: str = ""
    schema: ParameterSchema = ()
    params_type: type[BaseModel]

    def __init__(self, direction: EdgeDirection):
        self.direction = direction

    @property
    def directed(self) -> bool:
        return self.direction.is_directed

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical name followed by its aliases."""
        return (self.name, *self.aliases)

    def matches(self, name: str) -> bool:
        return name in self.names

    def usage(self) -> str:
        """Specification template, e.g. ``erdos_renyi/n,p``."""
        params = ",".join(slot.name for slot in self.schema)
        return f"{self.name}/{params}" if params else self.name

    def bind(self, tokens: Sequence[str]) -> BaseModel:
        """Validate raw tokens into this model's bound parameters."""
        return bind_parameters(self, tokens)

    def build_generator(self, tokens: Sequence[str]) -> GraphGenerator:
        """Bind tokens and wrap the result in a reusable generator."""
        params = self.bind(tokens)
        logger.debug(f"Bound {self.direction} generator {self.name} with {params!r}")
        return GraphGenerator(model=self, params=params)

    def empty_graph(self, num_nodes: int) -> nx.Graph:
        """Create a graph of this model's direction with nodes ``0..num_nodes-1``."""
        graph = nx.DiGraph() if self.directed else nx.Graph()
        graph.add_nodes_from(range(num_nodes))
        return graph

    @abstractmethod
    def sample(self, params: BaseModel, rng: Generator) -> nx.Graph:
        """Draw one graph.

        Args:
            params: Parameters previously produced by ``bind``
            rng: NumPy random generator, used exclusively for this call

        Returns:
            Newly built graph
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.direction.value!r})"
