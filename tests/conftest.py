"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from evonet.genotype import Genome
from evonet.pool import Individual


class ScoredIndividual(Individual):
    """Minimal population member: a genome with a fitness set by the test."""

    def __init__(self, genome, fitness=0.0):
        self._genome = genome
        self._fitness = fitness

    @property
    def fitness(self):
        return self._fitness

    @property
    def genome(self):
        return self._genome

    @classmethod
    def create(cls, genome):
        return cls(genome)


@pytest.fixture
def rng():
    """Provide a seeded random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def individual_cls():
    """Provide the minimal Individual implementation used across tests."""
    return ScoredIndividual


@pytest.fixture
def make_population():
    """Factory building a population from a list of fitness values."""
    def _make(fitnesses, genome_length=4):
        return [ScoredIndividual(Genome([float(i)] * genome_length), fitness)
                for i, fitness in enumerate(fitnesses)]
    return _make
