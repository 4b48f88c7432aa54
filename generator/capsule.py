"""Reusable generator closing over validated parameters."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import networkx as nx
from loguru import logger
from numpy.random import Generator
from pydantic import BaseModel

if TYPE_CHECKING:
    from .base import GraphModel


@dataclass(frozen=True)
class GraphGenerator:
    """A model paired with its bound parameters.

    Holds no state between calls: every ``sample`` is an independent draw
    whose only shared resource is the random generator passed in. Instances
    can be shared freely; a given ``rng`` must not be used concurrently.

    Attributes:
        model: Model that performs the sampling
        params: Frozen parameters produced by the model's binder
    """

    model: "GraphModel"
    params: BaseModel

    @property
    def name(self) -> str:
        return self.model.name

    @property
    def directed(self) -> bool:
        return self.model.directed

    def sample(self, rng: Generator) -> nx.Graph:
        """Draw one graph from the model."""
        logger.debug(f"Sampling {self}")
        return self.model.sample(self.params, rng)

    def __call__(self, rng: Generator) -> nx.Graph:
        return self.sample(rng)

    def sample_many(self, rng: Generator, count: int) -> Iterator[nx.Graph]:
        """Draw ``count`` graphs one after the other from the same source."""
        for _ in range(count):
            yield self.sample(rng)

    def __str__(self) -> str:
        values = ",".join(str(value) for value in self.params.model_dump().values())
        return f"{self.model.name}/{values}" if values else self.model.name
