"""
Genotype Package

This package implements the genetic encoding evolved by the genetic algorithm:
a flat, fixed-length vector of real-valued genes.

Modules:
    genome: Genome class

Exported Classes:
    Genome: Fixed-length ordered sequence of real genes
"""

from evonet.genotype.genome import Genome

__all__ = ['Genome']
