"""Random recursive trees."""

import networkx as nx
from numpy.random import Generator
from pydantic import BaseModel, ConfigDict, Field

from models import ParameterSlot, ParamKind
from .base import GraphModel


class TreeParams(BaseModel):
    """Bound parameters of the tree model."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1, description="Number of nodes")


class TreeModel(GraphModel):
    """Each node ``v >= 1`` attaches to a parent drawn uniformly from ``[0, v)``.

    This is the random recursive tree distribution, not the uniform
    distribution over labeled trees. Directed edges point parent to child.
    """

    name = "tree"
    description = "random recursive tree of n nodes"
    schema = (ParameterSlot("n", ParamKind.UNSIGNED),)
    params_type = TreeParams

    def sample(self, params: TreeParams, rng: Generator) -> nx.Graph:
        graph = self.empty_graph(params.n)
        for v in range(1, params.n):
            parent = int(rng.integers(0, v))
            graph.add_edge(parent, v)
        return graph
