"""Mutation operators for biomorph genomes.

Notes
-----
    * Each locus (the axiom, every rule, the turn angle) mutates after its own
      Bernoulli(p) draw, so `p = 0` returns an identical genome.
    * Rules with three or more `[` lose about 80% of their bracket pairs before
      new B-components are inserted. Pairs are found with the bounded
      `BracketPairLocator`; when it gives up, the rule keeps whatever was
      already deleted and receives no insertion.
    * The turn angle creeps by up to +-4 degrees and is never clamped back into
      the generation range.
"""

from __future__ import annotations

# Standard library
from abc import ABC
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

# Third-party libraries
import numpy as np

# Local libraries
from biomorphs.config import LETTERS, Symbol, config, console, resolve_rng
from biomorphs.ec.bracket_locator import Abandoned, BracketPairLocator, Matched
from biomorphs.ec.components import generate_library
from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome, Rule

if TYPE_CHECKING:
    from biomorphs.ec.genotypes.genotype import Genotype


def _check_probability(mutation_probability: float) -> float:
    if not 0.0 <= mutation_probability <= 1.0:
        msg = f"Mutation probability must lie in [0, 1], got {mutation_probability}."
        raise ValueError(msg)
    return mutation_probability


def _event(rng: np.random.Generator, mutation_probability: float) -> bool:
    return bool(rng.random() < mutation_probability)


class Mutation(ABC):
    mutations_mapping: dict[str, Callable[..., Genotype]] = NotImplemented
    which_mutation: str = ""

    @classmethod
    def set_which_mutation(cls, mutation_type: str) -> None:
        cls.which_mutation = mutation_type

    def __init_subclass__(cls):
        super().__init_subclass__()
        cls.mutations_mapping = {
            name: getattr(cls, name)
            for name, val in cls.__dict__.items()
            if isinstance(val, staticmethod) and not name.startswith("_")
        }

    @classmethod
    def __call__(
        cls,
        individual: Genotype,
        **kwargs: dict,
    ) -> Genotype:
        """Mutate one genotype with the selected mutation.

        Parameters
        ----------
        individual : Genotype
            The genotype to mutate. It is not modified.
        **kwargs : dict
            Keyword arguments forwarded to the selected mutation.

        Returns
        -------
        Genotype
            The mutated genotype.
        """
        if cls.which_mutation in cls.mutations_mapping:
            return cls.mutations_mapping[cls.which_mutation](
                individual,
                **kwargs
            )
        else:
            msg = f"Mutation type '{cls.which_mutation}' not recognized."
            raise ValueError(msg)

    @classmethod
    def apply(
        cls,
        population: Sequence[Genotype],
        **kwargs: dict,
    ) -> list[Genotype]:
        """Mutate every candidate of a population into a new list."""
        return [cls.__call__(individual, **kwargs) for individual in population]


class BiomorphMutator(Mutation):
    which_mutation: str = "random_biomorph"

    @staticmethod
    def mutate_axiom(
        axiom: str,
        mutation_probability: float,
        rng: np.random.Generator | None = None,
    ) -> str:
        """Swap one symbol of the axiom for a random letter, keeping its length."""
        rng = resolve_rng(rng)
        _check_probability(mutation_probability)
        if not axiom or not _event(rng, mutation_probability):
            return axiom
        position = int(rng.integers(len(axiom)))
        letter = LETTERS[rng.integers(len(LETTERS))]
        return axiom[:position] + letter + axiom[position + 1:]

    @staticmethod
    def _delete_bracket_pairs(
        successor: list[str],
        rng: np.random.Generator,
    ) -> bool:
        """Excise bracket pairs in place; `False` when the locator gave up."""
        open_brackets = successor.count(Symbol.OPEN.value)
        if open_brackets < config.bracket_deletion_threshold:
            return True

        deletions = round(config.bracket_deletion_ratio * open_brackets)
        for _ in range(deletions):
            result = BracketPairLocator(successor, rng).locate()
            match result:
                case Matched(open_index=open_index, close_index=close_index):
                    del successor[open_index:close_index + 1]
                case Abandoned(steps=steps):
                    if config.verbose:
                        console.log(
                            f"[yellow]No bracket pair found after {steps} probes, "
                            "skipping the rest of this rule.[/yellow]"
                        )
                    return False
        return True

    @staticmethod
    def _insert_b_components(
        successor: list[str],
        b_components: Sequence[str],
        rng: np.random.Generator,
    ) -> None:
        low, high = config.inserted_b_components
        for _ in range(int(rng.integers(low=low, high=high, endpoint=True))):
            position = int(rng.integers(low=0, high=len(successor), endpoint=True))
            component = b_components[rng.integers(len(b_components))]
            successor[position:position] = component

    @staticmethod
    def mutate_rule_list(
        rules: Sequence[Rule],
        mutation_probability: float,
        rng: np.random.Generator | None = None,
    ) -> list[Rule]:
        """Prune bracket pairs from each selected rule, then graft new components."""
        rng = resolve_rng(rng)
        _check_probability(mutation_probability)
        b_components = generate_library(rng)

        mutated = []
        for rule in rules:
            if not _event(rng, mutation_probability):
                mutated.append(rule)
                continue

            successor = list(rule.successor)
            if BiomorphMutator._delete_bracket_pairs(successor, rng):
                BiomorphMutator._insert_b_components(successor, b_components, rng)
            mutated.append(Rule(predecessor=rule.predecessor, successor="".join(successor)))
        return mutated

    @staticmethod
    def mutate_turn_angle(
        turn_angle: int,
        mutation_probability: float,
        rng: np.random.Generator | None = None,
    ) -> int:
        """Creep the turn angle by a signed delta in [0, span]."""
        rng = resolve_rng(rng)
        _check_probability(mutation_probability)
        if not _event(rng, mutation_probability):
            return turn_angle
        delta = int(rng.integers(low=0, high=config.turn_angle_creep, endpoint=True))
        sign = 1 if rng.random() < 0.5 else -1
        return turn_angle + sign * delta

    @staticmethod
    def random_biomorph(
        individual: BiomorphGenome,
        mutation_probability: float | None = None,
        rng: np.random.Generator | None = None,
    ) -> BiomorphGenome:
        """Mutate axiom, rules and turn angle of a biomorph."""
        rng = resolve_rng(rng)
        if mutation_probability is None:
            mutation_probability = config.mutation_probability

        axiom = BiomorphMutator.mutate_axiom(individual.axiom, mutation_probability, rng)
        rules = BiomorphMutator.mutate_rule_list(individual.rules, mutation_probability, rng)
        turn_angle = BiomorphMutator.mutate_turn_angle(
            individual.turn_angle, mutation_probability, rng,
        )
        # Drift stays unclamped, but a genome needs a positive angle
        if turn_angle <= 0:
            turn_angle = individual.turn_angle

        mutated = BiomorphGenome(axiom=axiom, rules=tuple(rules), turn_angle=turn_angle)
        if config.verbose:
            console.log("Original:", str(individual))
            console.log("Mutated: ", str(mutated))
        return mutated


def mutate(
    genome: BiomorphGenome,
    probability: float,
    rng: np.random.Generator | None = None,
) -> BiomorphGenome:
    return BiomorphMutator.random_biomorph(genome, probability, rng)
