"""
Unit tests for Genome class.

Tests cover construction, value semantics, indexed access, iteration,
random initialization and conversions.
"""

import pytest
import numpy as np

from evonet.genotype.genome import Genome


# ============================================================================
# Test Construction
# ============================================================================

class TestGenomeInit:
    """Test Genome construction."""

    def test_init_from_list_preserves_order(self):
        genome = Genome([0.5, -1.0, 2.0])
        assert genome.to_list() == [0.5, -1.0, 2.0]

    def test_init_from_generator(self):
        genome = Genome(float(i) for i in range(5))
        assert len(genome) == 5
        assert genome[4] == 4.0

    def test_init_empty(self):
        genome = Genome([])
        assert len(genome) == 0
        assert genome.to_list() == []

    def test_genes_are_float32(self):
        genome = Genome([1, 2, 3])
        assert genome.genes.dtype == np.float32

    def test_values_rounded_to_32_bit(self):
        genome = Genome([0.1])
        assert genome[0] == float(np.float32(0.1))

    def test_init_rejects_nested_values(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            Genome([[1.0, 2.0], [3.0, 4.0]])

    def test_init_copies_numpy_input(self):
        values = np.array([1.0, 2.0], dtype=np.float32)
        genome = Genome(values)
        values[0] = 99.0
        assert genome[0] == 1.0

    def test_init_from_genome_copies(self):
        source = Genome([1.0, 2.0])
        duplicate = Genome(source)
        duplicate[0] = 5.0
        assert source[0] == 1.0


# ============================================================================
# Test Access
# ============================================================================

class TestGenomeAccess:
    """Test indexed access and iteration."""

    def test_getitem_returns_float(self):
        genome = Genome([1.5, 2.5])
        assert isinstance(genome[1], float)
        assert genome[1] == 2.5

    @pytest.mark.parametrize("index", [2, 10, -1])
    def test_getitem_out_of_range(self, index):
        genome = Genome([1.0, 2.0])
        with pytest.raises(IndexError, match="out of range"):
            genome[index]

    def test_getitem_rejects_non_integer(self):
        genome = Genome([1.0, 2.0])
        with pytest.raises(TypeError):
            genome[0.5]

    def test_setitem(self):
        genome = Genome([1.0, 2.0])
        genome[1] = -3.0
        assert genome.to_list() == [1.0, -3.0]

    def test_setitem_out_of_range(self):
        genome = Genome([1.0])
        with pytest.raises(IndexError):
            genome[1] = 0.0

    def test_iteration_in_index_order(self):
        genome = Genome([3.0, 1.0, 2.0])
        assert list(genome) == [3.0, 1.0, 2.0]

    def test_genes_view_is_writable_in_place(self):
        genome = Genome([1.0, 2.0, 3.0])
        genome.genes[:] += 1.0
        assert genome.to_list() == [2.0, 3.0, 4.0]
        assert len(genome) == 3

    def test_numpy_conversion_does_not_alias(self):
        genome = Genome([1.0, 2.0])
        array = np.asarray(genome)
        array[0] = 42.0
        assert genome[0] == 1.0

    def test_numpy_conversion_refuses_no_copy(self):
        genome = Genome([1.0, 2.0])
        with pytest.raises(ValueError, match="without copying"):
            genome.__array__(copy=False)


# ============================================================================
# Test Value Semantics
# ============================================================================

class TestGenomeValueSemantics:
    """Test copy and equality."""

    def test_copy_is_independent(self):
        genome = Genome([1.0, 2.0])
        duplicate = genome.copy()
        duplicate.genes[:] = 0.0
        assert genome.to_list() == [1.0, 2.0]

    def test_equality(self):
        assert Genome([1.0, 2.0]) == Genome([1.0, 2.0])
        assert Genome([1.0, 2.0]) != Genome([2.0, 1.0])
        assert Genome([1.0]) != Genome([1.0, 1.0])

    def test_not_equal_to_list(self):
        assert Genome([1.0]) != [1.0]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Genome([1.0]))

    def test_repr(self):
        assert repr(Genome([1.0, 2.0, 3.0])) == "Genome(length=3)"


# ============================================================================
# Test Random Initialization
# ============================================================================

class TestGenomeRandom:
    """Test Genome.random."""

    def test_random_length_and_bounds(self, rng):
        genome = Genome.random(rng, 100)
        assert len(genome) == 100
        assert all(-1.0 <= gene <= 1.0 for gene in genome)

    def test_random_custom_bounds(self, rng):
        genome = Genome.random(rng, 50, low=2.0, high=3.0)
        assert all(2.0 <= gene <= 3.0 for gene in genome)

    def test_random_is_reproducible(self):
        first = Genome.random(np.random.default_rng(7), 10)
        second = Genome.random(np.random.default_rng(7), 10)
        assert first == second

    def test_random_negative_length(self, rng):
        with pytest.raises(ValueError, match="non-negative"):
            Genome.random(rng, -1)
