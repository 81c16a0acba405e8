"""Approximate bracket-pair search over a rule successor.

Notes
-----
    * A single pointer walks the successor in one direction at a time. The
      first bracket it meets is remembered; the walk then continues away from
      it until a bracket of the opposite kind closes the pair.
    * Meeting a bracket of the same kind replaces the remembered one (a nested
      reopen), so the innermost pair along the walk is returned.
    * Crossing a boundary while holding a bracket restarts the search from a
      new random position and direction.
    * The search is bounded: after `max_steps` probes it gives up. Giving up is
      a normal outcome, not an error, and callers simply skip the edit.
    * This is not a parser. It does not check global bracket structure and can
      pair brackets of an unbalanced successor.
"""

from __future__ import annotations

# Standard library
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

# Third-party libraries
import numpy as np

# Local libraries
from biomorphs.config import Symbol, config, resolve_rng


class Direction(Enum):
    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class Scanning:
    """No bracket held; walking until one shows up."""

    pointer: int
    direction: Direction


@dataclass(frozen=True)
class FoundFirst:
    """Holding the bracket at `index` and walking away from it."""

    pointer: int
    index: int
    kind: str
    direction: Direction


@dataclass(frozen=True)
class Matched:
    open_index: int
    close_index: int
    steps: int = 0


@dataclass(frozen=True)
class Abandoned:
    steps: int = 0


type ScanState = Scanning | FoundFirst
type LocatorResult = Matched | Abandoned


class BracketPairLocator:
    """Find one `[`...`]` pair in `symbols` within a bounded number of probes.

    Parameters
    ----------
    symbols : Sequence[str]
        Successor symbols. Not modified.
    rng : np.random.Generator | None
        Source of the start positions and directions.
    max_steps : int | None
        Probe budget, restarts included.
    first_index : int
        Lowest index the pointer may start from or walk back to.
    """

    def __init__(
        self,
        symbols: Sequence[str],
        rng: np.random.Generator | None = None,
        max_steps: int | None = None,
        first_index: int = 0,
    ) -> None:
        self.symbols = symbols
        self.rng = resolve_rng(rng)
        self.max_steps = max_steps or config.locator_max_steps
        self.first_index = first_index
        self.last_index = len(symbols) - 1

    def restart(self) -> Scanning:
        """Random start position (never before `first_index`) and direction."""
        pointer = int(self.rng.integers(len(self.symbols)))
        pointer = max(pointer, self.first_index)
        direction = Direction.LEFT if self.rng.random() < 0.5 else Direction.RIGHT
        return Scanning(pointer=pointer, direction=direction)

    def _at_boundary(self, pointer: int) -> bool:
        return pointer in (self.first_index, self.last_index)

    def _in_bounds(self, pointer: int) -> bool:
        return self.first_index <= pointer <= self.last_index

    def step(self, state: ScanState) -> ScanState | Matched:
        """Advance the scan by one probe."""
        match state:
            case Scanning(pointer=pointer, direction=direction):
                symbol = self.symbols[pointer]
                if symbol == Symbol.OPEN:
                    return FoundFirst(pointer + 1, pointer, Symbol.OPEN.value, Direction.RIGHT)
                if symbol == Symbol.CLOSE:
                    return FoundFirst(pointer - 1, pointer, Symbol.CLOSE.value, Direction.LEFT)
                # Flipping at either end costs a probe without moving
                if pointer == self.last_index:
                    return Scanning(pointer, Direction.LEFT)
                if pointer == self.first_index:
                    return Scanning(pointer, Direction.RIGHT)
                return Scanning(pointer + direction.value, direction)

            case FoundFirst(pointer=pointer, index=index, kind=kind, direction=direction):
                if not self._in_bounds(pointer):
                    return self.restart()
                symbol = self.symbols[pointer]
                if symbol == Symbol.OPEN:
                    if kind == Symbol.CLOSE:
                        return Matched(open_index=pointer, close_index=index)
                    return FoundFirst(pointer + 1, pointer, kind, direction)
                if symbol == Symbol.CLOSE:
                    if kind == Symbol.OPEN:
                        return Matched(open_index=index, close_index=pointer)
                    return FoundFirst(pointer - 1, pointer, kind, direction)
                if self._at_boundary(pointer):
                    return self.restart()
                return FoundFirst(pointer + direction.value, index, kind, direction)

        msg = f"Unknown scan state: {state!r}"
        raise TypeError(msg)

    def locate(self) -> LocatorResult:
        if self.last_index < self.first_index:
            return Abandoned(steps=0)

        state: ScanState | Matched = self.restart()
        for steps in range(1, self.max_steps + 1):
            state = self.step(state)
            if isinstance(state, Matched):
                return Matched(state.open_index, state.close_index, steps)
        return Abandoned(steps=self.max_steps)


def locate_bracket_pair(
    symbols: Sequence[str],
    rng: np.random.Generator | None = None,
    max_steps: int | None = None,
) -> LocatorResult:
    return BracketPairLocator(symbols, rng, max_steps).locate()
