"""Test: turtle interpretation of command strings."""

import math

import pytest

from biomorphs.config import Palette
from biomorphs.decoders.turtle_decoding import DrawOp, DrawOpKind, TurtleInterpreter, render

STACK_KINDS = {DrawOpKind.PUSH, DrawOpKind.POP}


def _kinds(draw_ops: list[DrawOp]) -> list[DrawOpKind]:
    return [op.kind for op in draw_ops]


class TestDrawing:
    """Tests for moves and turns."""

    def test_turns_without_branches(self) -> None:
        """Test that f+f-f draws three lines and touches no stack."""
        draw_ops = render("f+f-f", 90)
        assert _kinds(draw_ops).count(DrawOpKind.LINE) == 3
        assert not any(op.kind in STACK_KINDS for op in draw_ops)

    def test_first_line_starts_at_canvas_centre(self) -> None:
        """Test the initial turtle position and step length."""
        (line,) = render("f", 15)
        assert line.start == (100.0, 100.0)
        assert math.dist(line.start, line.end) == pytest.approx(1.8)

    def test_lines_are_connected(self) -> None:
        """Test that consecutive lines share their end points."""
        draw_ops = render("f+fhf", 30)
        for previous, current in zip(draw_ops, draw_ops[1:]):
            assert current.start == previous.end

    def test_right_angle_turn(self) -> None:
        """Test that a 90 degree turn gives perpendicular segments."""
        first, second = render("f+f", 90)
        a = (first.end[0] - first.start[0], first.end[1] - first.start[1])
        b = (second.end[0] - second.start[0], second.end[1] - second.start[1])
        assert a[0] * b[0] + a[1] * b[1] == pytest.approx(0.0, abs=1e-9)

    def test_plus_and_minus_cancel(self) -> None:
        """Test that + then - restores the heading."""
        straight = render("ff", 25)
        wiggle = render("f+-f", 25)
        assert wiggle[1].end == pytest.approx(straight[1].end)

    def test_pen_up_moves_without_drawing(self) -> None:
        """Test that g moves the turtle but draws nothing."""
        assert render("ggg", 10) == []
        (line,) = render("gf", 10)
        assert line.start != (100.0, 100.0)

    def test_h_draws_like_f(self) -> None:
        """Test that h is a drawing move."""
        assert render("h", 10) == render("f", 10)

    def test_unknown_symbols_are_ignored(self) -> None:
        """Test that other characters produce nothing."""
        assert render("xyz=X1", 10) == []


class TestBranching:
    """Tests for push and pop."""

    def test_branch_restores_position(self) -> None:
        """Test f[f]f: draw, push, draw, pop, draw."""
        draw_ops = render("f[f]f", 45)
        assert _kinds(draw_ops) == [
            DrawOpKind.LINE,
            DrawOpKind.PUSH,
            DrawOpKind.LINE,
            DrawOpKind.POP,
            DrawOpKind.LINE,
        ]
        first, push, branch, pop, last = draw_ops
        assert push.start == first.end
        assert pop.start == branch.end
        assert pop.end == first.end
        assert last.start == first.end

    def test_heading_is_not_restored(self) -> None:
        """Test that only the position is saved on the stack."""
        draw_ops = render("[+f]f", 90)
        branch, last = [op for op in draw_ops if op.kind is DrawOpKind.LINE]
        assert last.start == branch.start
        assert last.end == pytest.approx(branch.end)

    def test_unmatched_closer_is_a_no_op(self) -> None:
        """Test that ']' with an empty stack does nothing."""
        assert render("]]f]", 10) == render("f", 10)

    def test_unmatched_opener_is_tolerated(self) -> None:
        """Test that pushes without pops do not fail."""
        assert _kinds(render("[[f", 10)) == [DrawOpKind.PUSH, DrawOpKind.PUSH, DrawOpKind.LINE]


class TestColors:
    """Tests for colour symbols."""

    @pytest.mark.parametrize("color", list(Palette))
    def test_color_symbols(self, color: Palette) -> None:
        """Test that each palette symbol switches the line colour."""
        change, line = render(f"{color.name}f", 10)
        assert change.kind is DrawOpKind.COLOR
        assert change.color == color.value
        assert line.color == color.value

    def test_default_color_is_black(self) -> None:
        """Test that lines start black."""
        (line,) = render("f", 10)
        assert line.color == (0, 0, 0)

    def test_color_persists(self) -> None:
        """Test that a colour holds until the next colour symbol."""
        draw_ops = render("Rff[f]Cf", 10)
        lines = [op for op in draw_ops if op.kind is DrawOpKind.LINE]
        assert [line.color for line in lines] == [Palette.R.value] * 3 + [Palette.C.value]


def test_custom_turtle_geometry() -> None:
    """Test that origin, step length and heading can be set."""
    turtle = TurtleInterpreter(90, step_length=2.0, origin=(0.0, 0.0), heading=0.0)
    (line,) = turtle.interpret("f")
    assert line.start == (0.0, 0.0)
    assert line.end == pytest.approx((2.0, 0.0))
