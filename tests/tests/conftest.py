import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so every test run draws the same numbers."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_genome():
    """Small hand-written genome with one rule per letter."""
    from biomorphs.ec.genotypes.biomorph.biomorph_genome import BiomorphGenome, Rule

    return BiomorphGenome(
        axiom="fg",
        rules=(
            Rule.parse("f=f[+f]f[-f]"),
            Rule.parse("g=gh"),
            Rule.parse("h=[h]"),
        ),
        turn_angle=20,
    )
