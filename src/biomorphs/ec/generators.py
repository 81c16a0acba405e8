"""Random biomorph candidates.

Notes
-----
    * The axiom only uses letters; signs and brackets only appear in rules.
    * Every rule list gets its own freshly generated component library, so
      two genomes never share source motifs.
"""

# Third-party libraries
import numpy as np

# Local libraries
from biomorphs.config import LETTERS, config, console, resolve_rng
from biomorphs.ec.components import generate_library
from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome, Rule

# Rule synthesis skips the bare component at index 0
BRACKETED_TEMPLATES_START = 1


class BiomorphFactory:
    """Candidate factory for random biomorphs."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = resolve_rng(rng)

    def _integer(self, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return int(self.rng.integers(low=low, high=high, endpoint=True))

    def _letter(self) -> str:
        return LETTERS[self.rng.integers(len(LETTERS))]

    def generate_axiom(self) -> str:
        size = self._integer(config.axiom_length)
        return "".join(self._letter() for _ in range(size))

    def generate_turn_angle(self) -> int:
        return self._integer(config.turn_angle_range)

    def generate_rule_list(self) -> list[Rule]:
        b_components = generate_library(self.rng)
        rules = []
        for _ in range(self._integer(config.rule_count)):
            predecessor = self._letter()
            successor = "".join(
                b_components[self.rng.integers(BRACKETED_TEMPLATES_START, len(b_components))]
                for _ in range(self._integer(config.rule_b_components))
            )
            rules.append(Rule(predecessor=predecessor, successor=successor))
        return rules

    def generate_random_candidate(self) -> BiomorphGenome:
        genome = BiomorphGenome(
            axiom=self.generate_axiom(),
            rules=tuple(self.generate_rule_list()),
            turn_angle=self.generate_turn_angle(),
        )
        if config.verbose:
            console.log(f"Generated {genome}")
        return genome


def generate_random_genome(rng: np.random.Generator | None = None) -> BiomorphGenome:
    return BiomorphFactory(rng).generate_random_candidate()
