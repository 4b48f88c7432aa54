"""Erdos-Renyi G(n, p) graphs."""

from itertools import combinations, permutations

import networkx as nx
from numpy.random import Generator
from pydantic import BaseModel, ConfigDict, Field

from models import ParameterSlot, ParamKind
from .base import GraphModel


class ErdosRenyiParams(BaseModel):
    """Bound parameters of the Erdos-Renyi model."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1, description="Number of nodes")
    p: float = Field(ge=0.0, le=1.0, description="Edge probability")


class ErdosRenyiModel(GraphModel):
    """Each pair of distinct nodes is linked independently with probability p.

    Pairs are visited in lexicographic order (ordered pairs when directed,
    unordered pairs otherwise) and each visit draws exactly one uniform value,
    so the output is a pure function of the random stream. No self-loops.
    """

    name = "erdos_renyi"
    aliases = ("er",)
    description = "n nodes, each pair of distinct nodes linked with probability p"
    schema = (
        ParameterSlot("n", ParamKind.UNSIGNED),
        ParameterSlot("p", ParamKind.PROBABILITY),
    )
    params_type = ErdosRenyiParams

    def sample(self, params: ErdosRenyiParams, rng: Generator) -> nx.Graph:
        graph = self.empty_graph(params.n)
        pairs = permutations if self.directed else combinations

        for u, v in pairs(range(params.n), 2):
            if rng.random() < params.p:
                graph.add_edge(u, v)

        return graph
