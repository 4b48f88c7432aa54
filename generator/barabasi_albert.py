"""Barabasi-Albert preferential attachment graphs."""

from itertools import combinations

import networkx as nx
import numpy as np
from numpy.random import Generator
from pydantic import BaseModel, ConfigDict, Field, model_validator

from models import ParameterSlot, ParamKind
from .base import GraphModel


class BarabasiAlbertParams(BaseModel):
    """Bound parameters of the Barabasi-Albert model."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1, description="Number of nodes")
    m: int = Field(ge=1, description="Edges attached by each new node")

    @model_validator(mode="after")
    def check_attachment_count(self) -> "BarabasiAlbertParams":
        """The seed clique of m + 1 nodes must fit in the graph."""
        if self.m >= self.n:
            raise ValueError(f"m must be lower than n (got m={self.m}, n={self.n})")
        return self


class BarabasiAlbertModel(GraphModel):
    """Growth by preferential attachment from a seed clique.

    Nodes ``0..m`` form a clique (one edge per pair, pointing to the higher
    index when directed). Each later node ``v`` picks ``m`` distinct targets
    among ``0..v-1`` with probability proportional to their degree, using the
    degrees as they stand before ``v`` is added, and links ``v -> target``.
    Degree counts both edge ends, whatever the direction.
    """

    name = "barabasi_albert"
    aliases = ("ba",)
    description = "n nodes grown by preferential attachment, m edges per new node"
    schema = (
        ParameterSlot("n", ParamKind.UNSIGNED),
        ParameterSlot("m", ParamKind.UNSIGNED),
    )
    params_type = BarabasiAlbertParams

    def sample(self, params: BarabasiAlbertParams, rng: Generator) -> nx.Graph:
        n, m = params.n, params.m
        graph = self.empty_graph(n)
        degrees = np.zeros(n, dtype=np.int64)

        # Seed clique
        for u, v in combinations(range(m + 1), 2):
            graph.add_edge(u, v)
        degrees[: m + 1] = m

        for v in range(m + 1, n):
            existing = degrees[:v]
            probs = existing / existing.sum()
            targets = rng.choice(v, size=m, replace=False, p=probs)

            for target in targets:
                graph.add_edge(v, int(target))

            degrees[targets] += 1
            degrees[v] = m

        return graph
