"""
Individual Module

This module defines the capability set the evolution engine requires from the
members of a population.

Classes:
    Individual: Abstract base class for population members
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evonet.genotype import Genome

class Individual(ABC):
    """
    Abstract base class for a member of an evolving population.

    The EvolutionEngine knows nothing about what an individual "is" (an agent
    in a simulation, a set of hyperparameters, a network...). It only needs to:
        - read its fitness, to weight parent selection
        - read its genome, to produce offspring through crossover
        - create a new individual of the same kind from an offspring genome

    The engine relies on duck typing, so any object exposing these three
    members can be evolved. Subclassing Individual documents the contract
    and has Python enforce it at instantiation time.

    Public Properties (must be implemented by subclasses):
        fitness: Non-negative fitness score
        genome:  The Genome of this individual (treated as read-only)

    Class Methods (must be implemented by subclasses):
        create(genome): Build a new individual from an offspring genome
    """

    @property
    @abstractmethod
    def fitness(self) -> float:
        """Non-negative fitness score; higher means more likely to reproduce."""
        pass

    @property
    @abstractmethod
    def genome(self) -> 'Genome':
        """The genome of this individual."""
        pass

    @classmethod
    @abstractmethod
    def create(cls, genome: 'Genome') -> 'Individual':
        """
        Create a new individual from a genome.

        The new individual takes ownership of the genome; its fitness
        is evaluated later, by whoever drives the evolution.

        Parameters:
            genome: The genome of the new individual

        Returns:
            The new individual
        """
        pass
