"""Symbols, templates and tunable settings for biomorph generation.

Notes
-----
    * Everything that is a closed set of symbols lives here as an enum or a
      module constant.
    * Everything that is a knob lives on `BiomorphSettings` and can be
      overridden through `BIOMORPHS_*` environment variables.
"""

# Standard library
from enum import Enum

# Third-party libraries
import numpy as np
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

# Type Aliases
type Color = tuple[int, int, int]
type Point = tuple[float, float]


class Symbol(str, Enum):
    """Symbols of the biomorph grammar."""

    F = "f"
    G = "g"
    H = "h"
    PLUS = "+"
    MINUS = "-"
    OPEN = "["
    CLOSE = "]"


LETTERS: tuple[str, ...] = (Symbol.F.value, Symbol.G.value, Symbol.H.value)
SIGNS: tuple[str, ...] = (Symbol.PLUS.value, Symbol.MINUS.value)
RULE_ALPHABET = frozenset(symbol.value for symbol in Symbol)
DRAWING_LETTERS = frozenset((Symbol.F.value, Symbol.H.value))
PEN_UP_LETTERS = frozenset((Symbol.G.value,))

# Placeholder replaced by an F-component inside a bracket template
SLOT = "X"

# Index 0 is the bare component, 1-10 are the bracketed shapes
BRACKET_TEMPLATES: tuple[str, ...] = (
    "X",
    "[X]X",
    "X[X",
    "[[X][X]]",
    "[X[X][X]]",
    "[[X]X[X]]",
    "[[X][X]X]",
    "[X[X]X[X]]",
    "[X[X]X[X]X]",
    "[X[X[X]X]X]",
    "[X[X[X]]]",
)
NUM_OF_B_COMPONENTS = len(BRACKET_TEMPLATES)


class Palette(Enum):
    """Drawing colours selected by upper-case symbols."""

    K = (0, 0, 0)  # black
    R = (200, 0, 0)  # deep red
    G = (143, 188, 139)  # sand green
    B = (147, 112, 219)  # medium purple
    C = (15, 82, 186)  # sapphire
    O = (255, 117, 24)  # pumpkin


DEFAULT_COLOR: Color = Palette.K.value


class BiomorphSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BIOMORPHS_")

    seed: int = 42
    verbose: bool = False

    # Component library
    f_component_count: int = 100
    f_component_length: tuple[int, int] = (1, 6)
    letter_probability: float = 0.7

    # Random candidates
    axiom_length: tuple[int, int] = (1, 5)
    rule_count: tuple[int, int] = (1, 4)
    rule_b_components: tuple[int, int] = (1, 3)
    turn_angle_range: tuple[int, int] = (4, 23)

    # Mutation
    mutation_probability: float = 0.1
    bracket_deletion_threshold: int = 3
    bracket_deletion_ratio: float = 0.8
    locator_max_steps: int = 100
    inserted_b_components: tuple[int, int] = (1, 2)
    turn_angle_creep: int = 4

    # Expansion and drawing
    generations: int = 5
    canvas_width: int = 200
    canvas_height: int = 200
    step_length: float = 1.8
    start_heading: float = -190.3


config = BiomorphSettings()
console = Console()
RNG = np.random.default_rng(config.seed)


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return `rng`, or the package-wide generator when none is injected."""
    return RNG if rng is None else rng
