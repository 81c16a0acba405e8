"""Turtle interpretation of an expanded biomorph command string.

Notes
-----
    * `f` and `h` draw a segment, `g` moves with the pen up.
    * `+` and `-` turn by the genome's turn angle.
    * `[` saves the position, `]` restores it. Only the position is saved,
      the heading carries on. A `]` without a saved position does nothing.
    * Upper-case `K R G B C O` switch the drawing colour.
    * Every other symbol is ignored, so malformed strings never fail.
"""

# Standard library
import math
from dataclasses import dataclass, field
from enum import Enum

# Local libraries
from biomorphs.config import (
    DEFAULT_COLOR,
    DRAWING_LETTERS,
    PEN_UP_LETTERS,
    Color,
    Palette,
    Point,
    Symbol,
    config,
)


class DrawOpKind(Enum):
    LINE = "line"
    COLOR = "color"
    PUSH = "push"
    POP = "pop"


@dataclass(frozen=True)
class DrawOp:
    """One unit of output for the host renderer.

    `LINE` goes from `start` to `end` in `color`. `COLOR` carries the new
    colour. `PUSH` saves `start`; `POP` moves from `start` back to the saved
    `end`.
    """

    kind: DrawOpKind
    start: Point
    end: Point
    color: Color = DEFAULT_COLOR


@dataclass
class TurtleState:
    x: float
    y: float
    heading: float
    color: Color = DEFAULT_COLOR
    stack: list[Point] = field(default_factory=list)

    @property
    def position(self) -> Point:
        return (self.x, self.y)


class TurtleInterpreter:
    """Stack-based virtual pen over a command string."""

    def __init__(
        self,
        turn_angle: float,
        step_length: float | None = None,
        origin: Point | None = None,
        heading: float | None = None,
    ) -> None:
        self.turn = math.radians(turn_angle)
        self.step_length = step_length or config.step_length
        self.origin = origin or (config.canvas_width / 2, config.canvas_height / 2)
        self.heading = config.start_heading if heading is None else heading

    def initial_state(self) -> TurtleState:
        x, y = self.origin
        return TurtleState(x=x, y=y, heading=self.heading)

    def _forward(self, state: TurtleState) -> tuple[Point, Point]:
        start = state.position
        state.x += self.step_length * math.cos(state.heading)
        state.y += self.step_length * math.sin(state.heading)
        return start, state.position

    def interpret(self, command: str) -> list[DrawOp]:
        state = self.initial_state()
        draw_ops: list[DrawOp] = []
        for symbol in command:
            if symbol in DRAWING_LETTERS:
                start, end = self._forward(state)
                draw_ops.append(DrawOp(DrawOpKind.LINE, start, end, state.color))
            elif symbol in PEN_UP_LETTERS:
                self._forward(state)
            elif symbol == Symbol.PLUS:
                state.heading += self.turn
            elif symbol == Symbol.MINUS:
                state.heading -= self.turn
            elif symbol == Symbol.OPEN:
                state.stack.append(state.position)
                draw_ops.append(DrawOp(DrawOpKind.PUSH, state.position, state.position, state.color))
            elif symbol == Symbol.CLOSE:
                if state.stack:
                    start = state.position
                    state.x, state.y = state.stack.pop()
                    draw_ops.append(DrawOp(DrawOpKind.POP, start, state.position, state.color))
            elif symbol in Palette.__members__:
                state.color = Palette[symbol].value
                draw_ops.append(DrawOp(DrawOpKind.COLOR, state.position, state.position, state.color))
        return draw_ops


def render(command: str, turn_angle: float) -> list[DrawOp]:
    return TurtleInterpreter(turn_angle).interpret(command)
