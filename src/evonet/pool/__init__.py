"""
Pool Package

This package contains the classes operating at the population level: the
contract population members must fulfil, and the engine evolving them from
one generation to the next.

Modules:
    individual: The capability set required of population members
    engine:     Generation advance and fitness statistics

Exported Classes:
    Individual:      Abstract base class for population members
    EvolutionEngine: Advances a population by one generation
    Statistics:      Fitness summary of a population
"""

from evonet.pool.individual import Individual
from evonet.pool.engine     import EvolutionEngine, Statistics

__all__ = [
    'Individual',
    'EvolutionEngine',
    'Statistics',
]
