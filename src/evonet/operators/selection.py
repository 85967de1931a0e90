"""
Selection Module

This module implements the parent selection strategies of the genetic algorithm.

Classes:
    SelectionMethod:        Abstract base class for selection strategies
    RouletteWheelSelection: Fitness-proportionate selection

Exported:
    selection_methods: Dictionary mapping selection method names to classes
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from evonet.pool import Individual

class SelectionMethod(ABC):
    """
    Abstract base class for parent selection strategies.

    Public Methods (must be implemented by subclasses):
        select(rng, population): Choose one individual from the population
    """

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence['Individual']) -> 'Individual':
        """
        Choose one individual from the population.

        Parameters:
            rng:        The random number generator to draw from
            population: The individuals to choose from

        Returns:
            One member of the population (not a copy)
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"

class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate ("roulette wheel") selection.

    Individual i is chosen with probability fitness_i / sum(fitness).
    Selection is with replacement and has no memory across calls, so the
    same individual can be chosen repeatedly, including as both parents.

    All fitness values must be non-negative and finite, and at least one
    must be strictly positive.
    """

    def select(self, rng: np.random.Generator, population: Sequence['Individual']) -> 'Individual':
        if len(population) == 0:
            raise ValueError("Cannot select from an empty population")

        fitness = np.array([individual.fitness for individual in population], dtype=np.float64)
        if not np.all(np.isfinite(fitness)):
            raise ValueError("Fitness values must be finite")
        if np.any(fitness < 0.0):
            raise ValueError("Fitness values must be non-negative")

        if np.all(fitness == 0.0):
            raise ValueError("Total fitness of the population must be positive")

        # Scale by the largest fitness so the cumulative sum cannot overflow
        cumulative = np.cumsum(fitness / fitness.max())
        index = int(np.searchsorted(cumulative, rng.random() * cumulative[-1], side='right'))

        # Guard against rounding at the very end of the wheel
        return population[min(index, len(population) - 1)]

selection_methods = {
    "roulette": RouletteWheelSelection,
}
