"""Stochastic L-system expansion of a biomorph genome into a command string.

Notes
-----
    * Rule selection is deliberately noisy: for every symbol a draw count `k`
      in [0, n_rules] is sampled and `k` rule indices are drawn; only the last
      one counts. When `k` is zero the previous symbol's rule is reused.
    * A symbol is rewritten only when it equals the selected rule's
      predecessor. Everything else, signs and brackets included, is copied.
    * The expansion never checks bracket balance.

References
----------
    [1] https://en.wikipedia.org/wiki/L-system

"""

# Standard library
from collections.abc import Iterator, Sequence

# Third-party libraries
import numpy as np
from rich.traceback import install

# Local libraries
from biomorphs.config import config, console, resolve_rng
from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome, Rule


class LSystemDecoder:
    """Implements the stochastic grammar expansion of a biomorph."""

    def __init__(
        self,
        axiom: str,
        rules: Sequence[Rule],
        iterations: int | None = None,
        rng: np.random.Generator | None = None,
        verbose: int = 0,
    ) -> None:
        if not rules:
            msg = "L-system expansion needs at least one rule."
            raise ValueError(msg)
        iterations = config.generations if iterations is None else iterations
        if iterations < 0:
            msg = f"Number of iterations must be non-negative, got {iterations}."
            raise ValueError(msg)

        self.axiom = axiom
        self.rules = tuple(rules)
        self.iterations = iterations
        self.rng = resolve_rng(rng)
        self.verbose = verbose or config.verbose

    def rewrite(self, current: str) -> str:
        """Run a single rewriting round over `current`."""
        number_of_rules = len(self.rules)
        rule_to_follow = 0
        pieces = []
        for symbol in current:
            draws = int(self.rng.integers(number_of_rules + 1))
            for _ in range(draws):
                rule_to_follow = int(self.rng.integers(number_of_rules))

            rule = self.rules[rule_to_follow]
            pieces.append(rule.successor if symbol == rule.predecessor else symbol)
        return "".join(pieces)

    def grow(self) -> Iterator[str]:
        """Yield the command string after each round."""
        current = self.axiom
        for generation in range(1, self.iterations + 1):
            current = self.rewrite(current)
            if self.verbose:
                console.log(f"Generation {generation}: {len(current)} symbols")
            yield current

    def expand_lsystem(self) -> str:
        """Generate the command string after all iterations."""
        current = self.axiom
        for current in self.grow():
            pass
        return current


def expand(
    genome: BiomorphGenome,
    generations: int | None = None,
    rng: np.random.Generator | None = None,
) -> str:
    return LSystemDecoder(genome.axiom, genome.rules, generations, rng).expand_lsystem()


def grow(
    genome: BiomorphGenome,
    generations: int | None = None,
    rng: np.random.Generator | None = None,
) -> Iterator[str]:
    """Expand `genome` one generation at a time, yielding each command string."""
    yield from LSystemDecoder(genome.axiom, genome.rules, generations, rng).grow()


def main() -> None:
    """Expand and draw a random biomorph, one generation at a time."""
    from biomorphs.decoders.turtle_decoding import render
    from biomorphs.ec.generators import generate_random_genome

    install(width=180)
    rng = np.random.default_rng(config.seed)
    genome = generate_random_genome(rng)
    console.rule("[bold blue]Biomorph")
    console.log(str(genome))
    for generation, command in enumerate(grow(genome, rng=rng), start=1):
        draw_ops = render(command, genome.turn_angle)
        console.log(f"Generation {generation}: {len(command)} symbols, {len(draw_ops)} draw ops")


if __name__ == "__main__":
    main()
