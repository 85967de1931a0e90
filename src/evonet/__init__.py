"""
evonet - A genetic algorithm paired with a feed-forward neural network.

This package provides a generic genetic algorithm evolving populations of
fixed-length real-valued genomes, with pluggable selection, crossover and
mutation strategies, together with a deterministic feed-forward network
(ReLU activation) whose weights and biases can be decoded from a genome.

Main components:
- genotype:    Genetic encoding (Genome)
- operators:   Selection, crossover and mutation strategies
- pool:        Population members contract and the evolution engine
- phenotype:   Feed-forward network (Neuron, Layer, Network)
- activations: Activation functions for the network
- run:         Configuration

All randomness is drawn from a numpy Generator passed explicitly by the
caller, so a run is reproducible from its seed.

Example:
    >>> import numpy as np
    >>> from evonet import EvolutionEngine, RouletteWheelSelection, UniformCrossover, GaussianMutation
    >>> engine = EvolutionEngine(RouletteWheelSelection(), UniformCrossover(), GaussianMutation(0.01, 0.3))
    >>> rng = np.random.default_rng(42)
    >>> next_generation = engine.advance(rng, population)  # doctest: +SKIP
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evonet.run.config      import Config
from evonet.genotype.genome import Genome
from evonet.operators       import (CrossoverMethod, GaussianMutation, MutationMethod,
                                    RouletteWheelSelection, SelectionMethod, UniformCrossover)
from evonet.pool            import EvolutionEngine, Individual, Statistics
from evonet.phenotype       import Layer, Network, Neuron

__all__ = [
    "Config",
    "Genome",
    "SelectionMethod",
    "RouletteWheelSelection",
    "CrossoverMethod",
    "UniformCrossover",
    "MutationMethod",
    "GaussianMutation",
    "Individual",
    "EvolutionEngine",
    "Statistics",
    "Neuron",
    "Layer",
    "Network",
]
