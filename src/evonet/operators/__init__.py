"""
Operators Package

This package implements the genetic operators of the genetic algorithm.
Each operator family is an abstract base class with one or more concrete
strategies; custom strategies are plugged in by subclassing the base.

Modules:
    selection: parent selection strategies
    crossover: crossover strategies
    mutation:  mutation strategies

Exported Classes:
    SelectionMethod:        Abstract base class for selection strategies
    RouletteWheelSelection: Fitness-proportionate selection
    CrossoverMethod:        Abstract base class for crossover strategies
    UniformCrossover:       Gene-by-gene crossover driven by a fair coin
    MutationMethod:         Abstract base class for mutation strategies
    GaussianMutation:       Random signed perturbation of individual genes

Exported:
    selection_methods, crossover_methods, mutation_methods: name => class registries
"""

from evonet.operators.crossover import CrossoverMethod, UniformCrossover, crossover_methods
from evonet.operators.mutation  import MutationMethod, GaussianMutation, mutation_methods
from evonet.operators.selection import SelectionMethod, RouletteWheelSelection, selection_methods

__all__ = ['CrossoverMethod',
           'UniformCrossover',
           'crossover_methods',
           'MutationMethod',
           'GaussianMutation',
           'mutation_methods',
           'SelectionMethod',
           'RouletteWheelSelection',
           'selection_methods']
