"""Chain (path) graphs."""

import networkx as nx
from numpy.random import Generator
from pydantic import BaseModel, ConfigDict, Field

from models import ParameterSlot, ParamKind
from .base import GraphModel


class ChainParams(BaseModel):
    """Bound parameters of the chain model."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1, description="Number of nodes")


class ChainModel(GraphModel):
    """Path ``0 - 1 - ... - n-1``; directed edges point to the higher index.

    Deterministic: the random generator is never touched.
    """

    name = "chain"
    description = "a path of n nodes"
    schema = (ParameterSlot("n", ParamKind.UNSIGNED),)
    params_type = ChainParams

    def sample(self, params: ChainParams, rng: Generator) -> nx.Graph:
        graph = self.empty_graph(params.n)
        for i in range(params.n - 1):
            graph.add_edge(i, i + 1)
        return graph
