"""
Crossover Module

This module implements the crossover strategies of the genetic algorithm,
which combine the genomes of two parents into the genome of a child.

Classes:
    CrossoverMethod:  Abstract base class for crossover strategies
    UniformCrossover: Gene-by-gene crossover driven by a fair coin

Exported:
    crossover_methods: Dictionary mapping crossover method names to classes
"""

import numpy as np
from abc import ABC, abstractmethod

from evonet.genotype import Genome

class CrossoverMethod(ABC):
    """
    Abstract base class for crossover strategies.

    Implementations read both parents without modifying them and return a
    child genome with its own storage.

    Public Methods (must be implemented by subclasses):
        crossover(rng, parent_a, parent_b): Produce a child genome
    """

    @abstractmethod
    def crossover(self, rng: np.random.Generator, parent_a: Genome, parent_b: Genome) -> Genome:
        """
        Combine two parent genomes into a child genome.

        Parameters:
            rng:      The random number generator to draw from
            parent_a: The first parent
            parent_b: The second parent, same length as the first

        Returns:
            A new Genome with the same length as the parents
        """
        pass

    @staticmethod
    def _check_lengths(parent_a: Genome, parent_b: Genome):
        if len(parent_a) != len(parent_b):
            raise ValueError(f"Parent genomes differ in length: {len(parent_a)} != {len(parent_b)}")

    def __repr__(self):
        return f"{type(self).__name__}()"

class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover.

    Each gene position is decided independently by a fair coin: heads takes
    the gene of parent_a, tails the gene of parent_b. No correlation between
    neighbouring genes is introduced, unlike single- or multi-point crossover.
    """

    def crossover(self, rng: np.random.Generator, parent_a: Genome, parent_b: Genome) -> Genome:
        self._check_lengths(parent_a, parent_b)

        # One coin per gene, drawn in index order
        heads = rng.random(len(parent_a)) < 0.5
        return Genome(np.where(heads, parent_a.genes, parent_b.genes))

crossover_methods = {
    "uniform": UniformCrossover,
}
