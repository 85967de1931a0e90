"""
Evolution Engine Module

This module implements the EvolutionEngine class, the orchestrator that turns
one generation of individuals into the next, and the Statistics class that
summarises the fitness of a generation.

Classes:
    EvolutionEngine: Advances a population by one generation
    Statistics:      Fitness summary of a population
"""

import numpy as np
from dataclasses import dataclass
from loguru      import logger
from typing      import Any, Sequence, TYPE_CHECKING

from evonet.operators import (CrossoverMethod, MutationMethod, SelectionMethod,
                              crossover_methods, mutation_methods, selection_methods)

if TYPE_CHECKING:
    from evonet.pool.individual import Individual
    from evonet.run.config      import Config

@dataclass(frozen=True)
class Statistics:
    """
    Fitness summary of one generation.

    Public Attributes:
        size:          Number of individuals in the population
        min_fitness:   Lowest fitness in the population
        max_fitness:   Highest fitness in the population
        mean_fitness:  Average fitness of the population
        fittest:       The individual with the highest fitness (first one on ties)
    """

    size        : int
    min_fitness : float
    max_fitness : float
    mean_fitness: float
    fittest     : Any

    @classmethod
    def of(cls, population: Sequence['Individual']) -> 'Statistics':
        """
        Summarise the fitness of a population whose fitness has been evaluated.

        Parameters:
            population: The individuals to summarise (non-empty)

        Returns:
            The Statistics of the population
        """
        if len(population) == 0:
            raise ValueError("Cannot compute statistics of an empty population")

        fitness = np.array([individual.fitness for individual in population], dtype=np.float64)
        return cls(size         = len(population),
                   min_fitness  = float(fitness.min()),
                   max_fitness  = float(fitness.max()),
                   mean_fitness = float(fitness.mean()),
                   fittest      = population[int(fitness.argmax())])

    def __str__(self):
        return (f"size={self.size}, min={self.min_fitness:.4f}, "
                f"max={self.max_fitness:.4f}, mean={self.mean_fitness:.4f}")

class EvolutionEngine:
    """
    The genetic algorithm: turns a population into the next generation.

    The engine composes three strategies: a SelectionMethod, a CrossoverMethod
    and a MutationMethod. Each of them can be replaced at any time by assigning
    to the corresponding attribute.

    For every slot of the new generation, the engine:
        - selects two parents (independently, they may be the same individual)
        - crosses their genomes to obtain a child genome
        - mutates the child genome in place
        - creates a new individual from the child genome, of the same type as
          the first parent

    All randomness comes from the generator passed to 'advance'. Slots are
    filled in order and share the same generator stream, so for a given seed
    the result is fully reproducible.

    Public Attributes:
        selection: The SelectionMethod choosing parents
        crossover: The CrossoverMethod combining parent genomes
        mutation:  The MutationMethod perturbing child genomes

    Public Methods:
        advance(rng, population): Create the next generation
        statistics(population):   Summarise the fitness of a population

    Class Methods:
        from_config(config): Create an engine from configuration parameters
    """

    def __init__(self,
                 selection: SelectionMethod,
                 crossover: CrossoverMethod,
                 mutation : MutationMethod):
        """
        Parameters:
            selection: Strategy used to choose parents
            crossover: Strategy used to combine two parent genomes
            mutation:  Strategy used to perturb a child genome
        """
        self.selection: SelectionMethod = selection
        self.crossover: CrossoverMethod = crossover
        self.mutation : MutationMethod  = mutation

    @classmethod
    def from_config(cls, config: 'Config') -> 'EvolutionEngine':
        """
        Create an engine whose strategies are described by a Config.

        Parameters:
            config: Stores configuration parameters

        Returns:
            A new EvolutionEngine
        """
        selection = selection_methods[config.selection_method]()
        crossover = crossover_methods[config.crossover_method]()
        mutation  = mutation_methods[config.mutation_method](config.mutation_chance, config.mutation_coefficient)
        return cls(selection, crossover, mutation)

    def advance(self, rng: np.random.Generator, population: Sequence['Individual']) -> list['Individual']:
        """
        Create the next generation from the current one.

        The fitness of every individual in 'population' must have been evaluated.
        The returned individuals have not been evaluated yet.

        Parameters:
            rng:        The random number generator to draw from
            population: The current generation (non-empty)

        Returns:
            The next generation, with as many individuals as the current one
        """
        if len(population) == 0:
            raise ValueError("Cannot advance an empty population")

        logger.debug("Advancing population of {} individuals ({})", len(population), self)

        offspring = []
        for _ in range(len(population)):
            parent_a = self.selection.select(rng, population)
            parent_b = self.selection.select(rng, population)

            child = self.crossover.crossover(rng, parent_a.genome, parent_b.genome)
            self.mutation.mutate(rng, child)

            offspring.append(type(parent_a).create(child))

        return offspring

    @staticmethod
    def statistics(population: Sequence['Individual']) -> Statistics:
        return Statistics.of(population)

    def __repr__(self):
        return (f"EvolutionEngine(selection={self.selection!r}, "
                f"crossover={self.crossover!r}, "
                f"mutation={self.mutation!r})")
