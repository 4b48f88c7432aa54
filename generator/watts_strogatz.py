"""Watts-Strogatz small-world graphs."""

import networkx as nx
from numpy.random import Generator
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models import ParameterSlot, ParamKind
from .base import GraphModel


class WattsStrogatzParams(BaseModel):
    """Bound parameters of the Watts-Strogatz model."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1, description="Number of nodes")
    k: int = Field(ge=2, description="Lattice degree, even")
    p: float = Field(ge=0.0, le=1.0, description="Rewiring probability")

    @field_validator("k")
    @classmethod
    def check_even(cls, v: int) -> int:
        if v % 2:
            raise ValueError(f"k must be even (got k={v})")
        return v

    @model_validator(mode="after")
    def check_degree_below_size(self) -> "WattsStrogatzParams":
        if self.k >= self.n:
            raise ValueError(f"k must be lower than n (got k={self.k}, n={self.n})")
        return self


class WattsStrogatzModel(GraphModel):
    """Ring lattice with random rewiring.

    Node ``i`` is first linked to ``i + j mod n`` for ``j`` in ``1..k/2``,
    giving ``n * k / 2`` lattice edges (directed from ``i`` forward along the
    ring). Lattice edges are then visited offset by offset; for each one a
    uniform value below ``p`` moves its far end to a node drawn uniformly
    among those that are neither the near end nor adjacent to it. Rewiring
    never creates self-loops or parallel edges, and adjacency is checked in
    both directions for directed graphs.
    """

    name = "watts_strogatz"
    aliases = ("ws",)
    description = "ring of n nodes with k nearest neighbors, each edge rewired with probability p"
    schema = (
        ParameterSlot("n", ParamKind.UNSIGNED),
        ParameterSlot("k", ParamKind.UNSIGNED),
        ParameterSlot("p", ParamKind.PROBABILITY),
    )
    params_type = WattsStrogatzParams

    def sample(self, params: WattsStrogatzParams, rng: Generator) -> nx.Graph:
        n, p = params.n, params.p
        edges = [
            (i, (i + j) % n)
            for j in range(1, params.k // 2 + 1)
            for i in range(n)
        ]

        neighbors: list[set[int]] = [set() for _ in range(n)]
        for u, v in edges:
            neighbors[u].add(v)
            neighbors[v].add(u)

        for index, (u, v) in enumerate(edges):
            if rng.random() >= p:
                continue
            # Already linked to every other node
            if len(neighbors[u]) >= n - 1:
                continue

            w = int(rng.integers(0, n))
            while w == u or w in neighbors[u]:
                w = int(rng.integers(0, n))

            neighbors[u].discard(v)
            neighbors[v].discard(u)
            neighbors[u].add(w)
            neighbors[w].add(u)
            edges[index] = (u, w)

        graph = self.empty_graph(n)
        graph.add_edges_from(edges)
        return graph
