"""
Mutation Module

This module implements the mutation strategies of the genetic algorithm,
which perturb a genome in place.

Classes:
    MutationMethod:   Abstract base class for mutation strategies
    GaussianMutation: Random signed perturbation of individual genes

Exported:
    mutation_methods: Dictionary mapping mutation method names to classes
"""

import numpy as np
from abc import ABC, abstractmethod

from evonet.genotype import Genome

class MutationMethod(ABC):
    """
    Abstract base class for mutation strategies.

    Public Methods (must be implemented by subclasses):
        mutate(rng, genome): Perturb the genome in place
    """

    @abstractmethod
    def mutate(self, rng: np.random.Generator, genome: Genome) -> None:
        """
        Perturb the genes of a genome in place.

        Parameters:
            rng:    The random number generator to draw from
            genome: The genome to mutate; its length is left unchanged
        """
        pass

class GaussianMutation(MutationMethod):
    """
    Random signed perturbation of individual genes.

    For every gene, a sign (+1 or -1, equal odds) is drawn, then with
    probability 'chance' the gene is shifted by:
        sign * coefficient * U,   U ~ Uniform[0, 1)

    The sign and the shift magnitude are drawn for every gene whether or
    not the gene ends up mutated, so the amount of randomness consumed
    depends only on the genome length.

    Public Attributes:
        chance:      Per-gene mutation probability, in [0, 1]
        coefficient: Scale of the perturbation, non-negative
    """

    def __init__(self, chance: float, coefficient: float):
        """
        Parameters:
            chance:      Per-gene mutation probability, in [0, 1]
            coefficient: Scale of the perturbation, non-negative
        """
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"Mutation chance must be in [0, 1], got {chance}")
        if not coefficient >= 0.0:
            raise ValueError(f"Mutation coefficient must be non-negative, got {coefficient}")

        self.chance     : float = float(chance)
        self.coefficient: float = float(coefficient)

    def mutate(self, rng: np.random.Generator, genome: Genome) -> None:
        size = len(genome)

        signs     = np.where(rng.random(size) < 0.5, -1.0, 1.0)
        mutated   = rng.random(size) < self.chance
        magnitude = rng.random(size)

        delta = np.where(mutated, signs * self.coefficient * magnitude, 0.0)
        genome.genes[:] += delta.astype(np.float32)

    def __repr__(self):
        return f"GaussianMutation(chance={self.chance}, coefficient={self.coefficient})"

mutation_methods = {
    "gaussian": GaussianMutation,
}
