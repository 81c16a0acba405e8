"""Component library: short motifs and bracket-templated composites.

Notes
-----
    * F-components are short strings over `f g h + -` used as building blocks.
    * B-components fill each `X` of the fixed bracket templates with an
      F-component drawn (with replacement) from a pool.
    * Pools are rebuilt on every call; nothing is cached between calls.
"""

# Standard library
from collections.abc import Sequence

# Third-party libraries
import numpy as np

# Local libraries
from biomorphs.config import (
    BRACKET_TEMPLATES,
    LETTERS,
    SIGNS,
    SLOT,
    config,
    resolve_rng,
)


class ComponentLibrary:
    @staticmethod
    def f_component(
        rng: np.random.Generator | None = None,
        length: tuple[int, int] | None = None,
        letter_probability: float | None = None,
    ) -> str:
        rng = resolve_rng(rng)
        low, high = length or config.f_component_length
        if letter_probability is None:
            letter_probability = config.letter_probability

        size = int(rng.integers(low=low, high=high, endpoint=True))
        symbols = []
        for _ in range(size):
            # Weighted coin: letter or sign
            if rng.random() < letter_probability:
                symbols.append(LETTERS[rng.integers(len(LETTERS))])
            else:
                symbols.append(SIGNS[rng.integers(len(SIGNS))])
        return "".join(symbols)

    @staticmethod
    def f_components(
        count: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> list[str]:
        rng = resolve_rng(rng)
        count = count or config.f_component_count
        return [ComponentLibrary.f_component(rng) for _ in range(count)]

    @staticmethod
    def fill_template(
        template: str,
        library: Sequence[str],
        rng: np.random.Generator | None = None,
    ) -> str:
        """Replace every slot of `template` with a component from `library`."""
        rng = resolve_rng(rng)
        if not library:
            msg = "Cannot fill a bracket template from an empty library."
            raise ValueError(msg)
        return "".join(
            library[rng.integers(len(library))] if char == SLOT else char
            for char in template
        )

    @staticmethod
    def b_components(
        library: Sequence[str],
        rng: np.random.Generator | None = None,
    ) -> list[str]:
        rng = resolve_rng(rng)
        return [
            ComponentLibrary.fill_template(template, library, rng)
            for template in BRACKET_TEMPLATES
        ]


def generate_f_components(
    count: int | None = None,
    rng: np.random.Generator | None = None,
) -> list[str]:
    return ComponentLibrary.f_components(count, rng)


def generate_b_components(
    library: Sequence[str],
    rng: np.random.Generator | None = None,
) -> list[str]:
    return ComponentLibrary.b_components(library, rng)


def generate_library(rng: np.random.Generator | None = None) -> list[str]:
    """Build a fresh F-component pool and return its B-components."""
    rng = resolve_rng(rng)
    return generate_b_components(generate_f_components(rng=rng), rng)
