"""
Genome Module

This module implements the Genome class, the unit the genetic algorithm
operates on: a flat, fixed-length vector of real-valued genes.

Classes:
    Genome: Fixed-length ordered sequence of 32-bit real genes
"""

import numpy as np
from typing import Iterable, Iterator

class Genome:
    """
    A fixed-length ordered sequence of real-valued genes.

    The genes are stored in a one-dimensional float32 numpy array owned
    exclusively by the genome. A genome has value semantics: constructing
    one from an existing sequence (including another genome) copies the
    values, so two genomes never share storage.

    The values may change (mutation writes them in place), the length never
    does. Indexed reads are bounds checked against [0, len), negative indices
    are rejected rather than counted from the end.

    Public Properties:
        genes: Writable float32 view over the genes (for in-place mutation)

    Public Methods:
        to_list(): Convert the genes to a plain list of floats
        copy():    Create an independent duplicate of this genome

    Class Methods:
        random(rng, length, low, high): Create a genome with uniformly distributed genes
    """

    def __init__(self, values: Iterable[float]):
        """
        Parameters:
            values: Any iterable of reals; the order is preserved
        """
        if isinstance(values, Genome):
            values = values._genes
        elif not isinstance(values, np.ndarray):
            values = list(values)

        genes = np.array(values, dtype=np.float32)  # np.array always copies
        if genes.ndim != 1:
            raise ValueError(f"Genome values must be one-dimensional, got {genes.ndim}D")

        self._genes: np.ndarray = genes

    @classmethod
    def random(cls,
               rng   : np.random.Generator,
               length: int,
               low   : float = -1.0,
               high  : float = 1.0) -> 'Genome':
        """
        Create a genome whose genes are drawn uniformly from [low, high).

        Parameters:
            rng:    The random number generator to draw from
            length: Number of genes
            low:    Lower bound (inclusive)
            high:   Upper bound (exclusive)

        Returns:
            A new Genome of the requested length
        """
        if length < 0:
            raise ValueError(f"Genome length must be non-negative, got {length}")
        return cls(rng.uniform(low, high, size=length))

    @property
    def genes(self) -> np.ndarray:
        """Writable view over the genes, in index order."""
        return self._genes

    def to_list(self) -> list[float]:
        return self._genes.tolist()

    def copy(self) -> 'Genome':
        return Genome(self._genes)

    def __len__(self) -> int:
        return self._genes.shape[0]

    def __iter__(self) -> Iterator[float]:
        return iter(self._genes.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._genes[self._check_index(index)])

    def __setitem__(self, index: int, value: float):
        self._genes[self._check_index(index)] = value

    def __array__(self, dtype=None, copy=None):
        # Conversions never alias the genes, so a no-copy request cannot be honoured
        if copy is False:
            raise ValueError("A Genome cannot be converted to an array without copying")
        return np.array(self._genes, dtype=dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return np.array_equal(self._genes, other._genes)

    __hash__ = None  # mutable

    def _check_index(self, index: int) -> int:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Genome indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self):
            raise IndexError(f"Gene index {index} out of range for genome of length {len(self)}")
        return int(index)

    def __str__(self):
        return "[" + ", ".join(f"{gene:+.3f}" for gene in self._genes) + "]"

    def __repr__(self):
        return f"Genome(length={len(self)})"
