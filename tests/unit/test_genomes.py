"""
Unit tests for the genome contract and the bundled genomes.
"""

import pytest
import numpy as np

from genetic.core.genome import Genome, NullGenome, NULL_FITNESS
from genetic.genomes.bit_string import BitStringGenome
from genetic.genomes.phrase import PhraseGenome


class TestGenomeContract:
    """Test cases for the abstract Genome base class."""

    def test_cannot_instantiate_abstract(self):
        """Test that Genome requires the contract methods."""
        with pytest.raises(TypeError):
            Genome()

    def test_fitness_defaults_to_zero(self, fixed_genome):
        """Test the cached fitness before evaluation."""
        genome = fixed_genome(5.0)

        assert genome.get_fitness() == 0.0
        assert not genome.is_evaluated()

        genome.evaluate_fitness()

        assert genome.get_fitness() == 5.0
        assert genome.is_evaluated()


class TestNullGenome:
    """Test cases for the NullGenome sentinel."""

    def test_reserved_fitness(self):
        """Test that the sentinel reports the reserved minimum."""
        null = NullGenome()

        null.evaluate_fitness()

        assert null.get_fitness() == NULL_FITNESS
        assert null.get_fitness() < 0

    def test_falsy(self):
        """Test that the sentinel is falsy."""
        assert not NullGenome()

    def test_contract_methods(self, fixed_genome):
        """Test that every contract method is callable."""
        null = NullGenome()

        null.mutate(0.5)

        assert isinstance(null.replicate(), NullGenome)
        assert isinstance(null.crossover(fixed_genome(1.0)), NullGenome)
        assert repr(null) == "NullGenome()"


class TestBitStringGenome:
    """Test cases for BitStringGenome."""

    def test_fitness_counts_ones(self, rng):
        """Test one-max fitness."""
        genome = BitStringGenome(6, bits=[1, 0, 1, 1, 0, 1], rng=rng)

        genome.evaluate_fitness()

        assert genome.get_fitness() == 4
        assert genome.max_fitness == 6.0

    def test_random_bits(self, bit_genome):
        """Test random initialisation."""
        assert bit_genome.length == 16
        assert set(np.unique(bit_genome.bits)) <= {0, 1}

    def test_wrong_shape(self, rng):
        """Test that a bit array of the wrong length is rejected."""
        with pytest.raises(ValueError):
            BitStringGenome(4, bits=[1, 0], rng=rng)

    def test_replicate_is_independent(self, bit_genome):
        """Test that a replica does not share bits with the original."""
        bit_genome.evaluate_fitness()
        original_bits = bit_genome.bits.copy()
        original_fitness = bit_genome.get_fitness()

        replica = bit_genome.replicate()
        replica.mutate(1.0)

        assert not replica.is_evaluated()
        assert replica.get_fitness() == 0.0
        np.testing.assert_array_equal(bit_genome.bits, original_bits)
        np.testing.assert_array_equal(replica.bits, 1 - original_bits)
        assert bit_genome.get_fitness() == original_fitness

    def test_crossover_keeps_parents(self, rng):
        """Test single-point crossover."""
        ones = BitStringGenome(8, bits=np.ones(8), rng=rng)
        zeros = BitStringGenome(8, bits=np.zeros(8), rng=rng)

        child = ones.crossover(zeros)

        # Child is a prefix of ones followed by zeros.
        cut = int(child.bits.sum())
        np.testing.assert_array_equal(child.bits[:cut], 1)
        np.testing.assert_array_equal(child.bits[cut:], 0)
        assert ones.bits.sum() == 8
        assert zeros.bits.sum() == 0

    def test_crossover_length_mismatch(self, rng):
        """Test crossover with an incompatible genome."""
        with pytest.raises(ValueError):
            BitStringGenome(4, rng=rng).crossover(BitStringGenome(5, rng=rng))

    def test_mutate_zero_rate(self, bit_genome):
        """Test that rate 0 leaves the bits untouched."""
        before = bit_genome.bits.copy()

        bit_genome.mutate(0.0)

        np.testing.assert_array_equal(bit_genome.bits, before)


class TestPhraseGenome:
    """Test cases for PhraseGenome."""

    def test_fitness_counts_matches(self, rng):
        """Test match counting with smoothing."""
        genome = PhraseGenome("abcd", genes=list("abzz"), rng=rng)

        genome.evaluate_fitness()

        assert genome.get_fitness() == pytest.approx(2.01)

    def test_exponent(self, rng):
        """Test that the match count is raised to the exponent."""
        genome = PhraseGenome("abcd", genes=list("abcz"), exponent=2, smoothing=0.0, rng=rng)

        genome.evaluate_fitness()

        assert genome.get_fitness() == 9

    def test_no_match_is_positive(self, rng):
        """Test that smoothing keeps a no-match genome selectable."""
        genome = PhraseGenome("aaaa", genes=list("zzzz"), rng=rng)

        genome.evaluate_fitness()

        assert genome.get_fitness() > 0

    def test_exact_match_reaches_max(self, rng):
        """Test that the target phrase has max_fitness."""
        genome = PhraseGenome("hello", genes=list("hello"), rng=rng)

        genome.evaluate_fitness()

        assert genome.get_fitness() == genome.max_fitness
        assert genome.phrase == "hello"

    def test_replicate_is_independent(self, rng):
        """Test that a replica does not share genes with the original."""
        genome = PhraseGenome("hello", genes=list("hello"), rng=rng)

        replica = genome.replicate()
        replica.mutate(1.0)
        genome.evaluate_fitness()

        assert genome.phrase == "hello"
        assert genome.get_fitness() == genome.max_fitness

    def test_crossover(self, rng):
        """Test midpoint crossover."""
        left = PhraseGenome("abcdef", genes=list("aaaaaa"), rng=rng)
        right = PhraseGenome("abcdef", genes=list("bbbbbb"), rng=rng)

        child = left.crossover(right)

        n_a = child.phrase.count("a")
        assert child.phrase == "a" * n_a + "b" * (6 - n_a)
        assert left.phrase == "aaaaaa"
        assert right.phrase == "bbbbbb"

    def test_genes_from_string(self, rng):
        """Test that genes given as a string match genes given as a list."""
        from_string = PhraseGenome("abc", genes="abz", rng=rng)
        from_list = PhraseGenome("abc", genes=list("abz"), rng=rng)

        from_string.evaluate_fitness()
        from_list.evaluate_fitness()

        assert from_string.phrase == "abz"
        assert from_string.get_fitness() == from_list.get_fitness()

    def test_crossover_target_mismatch(self, rng):
        """Test crossover between different targets."""
        with pytest.raises(ValueError):
            PhraseGenome("abc", rng=rng).crossover(PhraseGenome("xyz", rng=rng))

    def test_empty_target(self, rng):
        """Test that an empty target is rejected."""
        with pytest.raises(ValueError):
            PhraseGenome("", rng=rng)
