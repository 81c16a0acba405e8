"""Test: stochastic L-system expansion."""

import numpy as np
import pytest

from biomorphs.decoders.l_system_decoding import LSystemDecoder, expand, grow
from biomorphs.decoders.turtle_decoding import render
from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome, Rule


class TestLSystemDecoderInitialization:
    """Tests for decoder preconditions."""

    def test_rules_are_required(self, rng) -> None:
        """Test that an empty rule list fails fast."""
        with pytest.raises(ValueError, match="at least one rule"):
            LSystemDecoder("f", [], iterations=2, rng=rng)

    def test_negative_iterations_rejected(self, rng) -> None:
        """Test that the generation count cannot be negative."""
        with pytest.raises(ValueError, match="non-negative"):
            LSystemDecoder("f", [Rule.parse("f=ff")], iterations=-1, rng=rng)

    def test_default_iterations(self, rng) -> None:
        """Test that five generations are used by default."""
        decoder = LSystemDecoder("f", [Rule.parse("f=f")], rng=rng)
        assert decoder.iterations == 5


class TestExpansion:
    """Tests for expansion results."""

    def test_zero_generations_return_axiom(self, rng, simple_genome) -> None:
        """Test that no rewriting happens without generations."""
        assert expand(simple_genome, generations=0, rng=rng) == simple_genome.axiom

    def test_single_rule_is_always_selected(self, rng) -> None:
        """Test that one rule rewrites every matching symbol."""
        genome = BiomorphGenome(axiom="f", rules=(Rule.parse("f=f+f"),), turn_angle=10)
        assert expand(genome, generations=1, rng=rng) == "f+f"
        assert expand(genome, generations=2, rng=rng) == "f+f+f+f"

    def test_unmatched_symbols_are_copied(self, rng) -> None:
        """Test that symbols without a rule survive unchanged."""
        genome = BiomorphGenome(axiom="gh", rules=(Rule.parse("f=[f]"),), turn_angle=10)
        assert expand(genome, generations=4, rng=rng) == "gh"

    def test_signs_and_brackets_are_copied(self, rng) -> None:
        """Test that non-letters are never rewritten."""
        decoder = LSystemDecoder("f", [Rule.parse("f=g")], iterations=1, rng=rng)
        assert decoder.rewrite("+[-]") == "+[-]"

    def test_output_alphabet(self, rng, simple_genome) -> None:
        """Test that expansion only produces grammar symbols."""
        command = expand(simple_genome, generations=3, rng=rng)
        assert set(command) <= set("fgh+-[]")
        assert len(command) >= len(simple_genome.axiom)

    def test_selection_is_noisy(self, simple_genome) -> None:
        """Test that different seeds give different expansions."""
        commands = {
            expand(simple_genome, generations=3, rng=np.random.default_rng(seed))
            for seed in range(10)
        }
        assert len(commands) > 1

    def test_unbalanced_rules_expand(self, rng) -> None:
        """Test that unbalanced successors are tolerated."""
        genome = BiomorphGenome(axiom="f", rules=(Rule.parse("f=f[["),), turn_angle=10)
        assert expand(genome, generations=2, rng=rng).count("[") == 4


class TestReproducibility:
    """Tests for seeded expansion and drawing."""

    def test_same_seed_same_command(self, simple_genome) -> None:
        """Test that a seeded generator reproduces the command string."""
        first = expand(simple_genome, generations=4, rng=np.random.default_rng(8))
        second = expand(simple_genome, generations=4, rng=np.random.default_rng(8))
        assert first == second

    def test_same_seed_same_drawing(self, simple_genome) -> None:
        """Test that render(expand(genome)) is deterministic."""
        first = render(expand(simple_genome, rng=np.random.default_rng(8)), simple_genome.turn_angle)
        second = render(expand(simple_genome, rng=np.random.default_rng(8)), simple_genome.turn_angle)
        assert first == second


class TestGrow:
    """Tests for generation-by-generation expansion."""

    def test_yields_every_generation(self, rng, simple_genome) -> None:
        """Test that one string is produced per generation."""
        assert len(list(grow(simple_genome, generations=3, rng=rng))) == 3

    def test_last_generation_matches_expand(self, simple_genome) -> None:
        """Test that grow ends where expand ends for the same seed."""
        *_, last = grow(simple_genome, generations=3, rng=np.random.default_rng(2))
        assert last == expand(simple_genome, generations=3, rng=np.random.default_rng(2))

    def test_generations_build_on_each_other(self, rng) -> None:
        """Test that each round rewrites the previous one."""
        genome = BiomorphGenome(axiom="f", rules=(Rule.parse("f=ff"),), turn_angle=10)
        assert list(grow(genome, generations=3, rng=rng)) == ["ff", "ffff", "ffffffff"]
