"""L-system genome of a biomorph: axiom, rewrite rules and turn angle.

Notes
-----
    * Rules are written `"f=<successor>"`, the predecessor being a single
      letter out of `f`, `g` and `h`.
    * Genomes are frozen. Mutation builds a new genome instead of editing one.
    * Successors are not required to have balanced brackets; mutation is
      allowed to leave them unbalanced or empty.
"""

from __future__ import annotations

# Standard library
from typing import TYPE_CHECKING

# Third-party libraries
from pydantic import BaseModel, ConfigDict, field_validator

# Local libraries
from biomorphs.config import LETTERS, RULE_ALPHABET
from biomorphs.ec.genotypes.genotype import Genotype

if TYPE_CHECKING:
    from biomorphs.ec.mutations import BiomorphMutator

RULE_SEPARATOR = "="


class Rule(BaseModel):
    """Rewrite instruction mapping one letter to a successor string."""

    model_config = ConfigDict(frozen=True)

    predecessor: str
    successor: str

    @field_validator("predecessor")
    @classmethod
    def _check_predecessor(cls, value: str) -> str:
        if value not in LETTERS:
            msg = f"Predecessor must be one of {LETTERS}, got {value!r}."
            raise ValueError(msg)
        return value

    @field_validator("successor")
    @classmethod
    def _check_successor(cls, value: str) -> str:
        unknown = set(value) - RULE_ALPHABET
        if unknown:
            msg = f"Successor contains unknown symbols: {sorted(unknown)}."
            raise ValueError(msg)
        return value

    @classmethod
    def parse(cls, text: str) -> Rule:
        """Build a rule from its `"f=..."` form."""
        predecessor, separator, successor = text.partition(RULE_SEPARATOR)
        if not separator:
            msg = f"Rule {text!r} has no '{RULE_SEPARATOR}' separator."
            raise ValueError(msg)
        return cls(predecessor=predecessor, successor=successor)

    def __str__(self) -> str:
        return f"{self.predecessor}{RULE_SEPARATOR}{self.successor}"


class BiomorphGenome(BaseModel, Genotype):
    """Evolvable biomorph: `{axiom, rules, turn_angle}`."""

    model_config = ConfigDict(frozen=True)

    axiom: str
    rules: tuple[Rule, ...]
    turn_angle: int

    @field_validator("axiom")
    @classmethod
    def _check_axiom(cls, value: str) -> str:
        if not value:
            msg = "Axiom must not be empty."
            raise ValueError(msg)
        unknown = set(value) - set(LETTERS)
        if unknown:
            msg = f"Axiom may only contain {LETTERS}, got {sorted(unknown)}."
            raise ValueError(msg)
        return value

    @field_validator("rules")
    @classmethod
    def _check_rules(cls, value: tuple[Rule, ...]) -> tuple[Rule, ...]:
        if not value:
            msg = "A genome needs at least one rule."
            raise ValueError(msg)
        return value

    @field_validator("turn_angle")
    @classmethod
    def _check_turn_angle(cls, value: int) -> int:
        if value <= 0:
            msg = f"Turn angle must be positive, got {value}."
            raise ValueError(msg)
        return value

    @staticmethod
    def get_mutator_object() -> BiomorphMutator:
        """Return the mutator operator for biomorph genomes."""
        from biomorphs.ec.mutations import BiomorphMutator
        return BiomorphMutator()

    @staticmethod
    def create_individual(**kwargs: dict) -> BiomorphGenome:
        """Generate a new random biomorph."""
        from biomorphs.ec.generators import BiomorphFactory
        return BiomorphFactory(**kwargs).generate_random_candidate()

    @property
    def rule_strings(self) -> list[str]:
        return [str(rule) for rule in self.rules]

    def __str__(self) -> str:
        rules = ", ".join(self.rule_strings)
        return f"BiomorphGenome(axiom={self.axiom!r}, rules=[{rules}], turn_angle={self.turn_angle})"
