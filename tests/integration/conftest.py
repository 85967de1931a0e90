"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np

from evonet.genotype import Genome
from evonet.phenotype import Network
from evonet.pool import Individual


TOPOLOGY = [2, 4, 1]


class NetworkIndividual(Individual):
    """Individual powered by a network decoded from its genome."""

    def __init__(self, genome):
        self._genome = genome
        self.network = Network.from_weights(TOPOLOGY, genome)
        self.score = None

    @property
    def fitness(self):
        return self.score

    @property
    def genome(self):
        return self._genome

    @classmethod
    def create(cls, genome):
        return cls(genome)

    @classmethod
    def random(cls, rng):
        return cls(Genome(Network.build(rng, TOPOLOGY).weights()))


@pytest.fixture
def sum_task():
    """Inputs in [0, 1]^2 and their sums, the target of the regression."""
    inputs = np.random.default_rng(0).random((32, 2))
    return inputs, inputs.sum(axis=1)


@pytest.fixture
def evaluate_population(sum_task):
    """Assign to every individual a fitness decreasing with its squared error."""
    inputs, targets = sum_task

    def _evaluate(population):
        for individual in population:
            outputs = np.array([individual.network.evaluate(x)[0] for x in inputs])
            mse = float(np.mean((outputs - targets) ** 2))
            individual.score = float(np.exp(-4.0 * mse))
    return _evaluate


@pytest.fixture
def initial_population():
    """Factory for a random initial population."""
    def _make(rng, size):
        return [NetworkIndividual.random(rng) for _ in range(size)]
    return _make
