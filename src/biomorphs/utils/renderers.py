"""Matplotlib preview of turtle draw operations."""

# Standard library
from collections.abc import Sequence
from pathlib import Path

# Third-party libraries
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection

# Local libraries
from biomorphs.config import config
from biomorphs.decoders.turtle_decoding import DrawOp, DrawOpKind

DPI = 300


def draw_biomorph(
    draw_ops: Sequence[DrawOp],
    title: str = "Biomorph",
    save_file: Path | str | None = None,
    ax: Axes | None = None,
) -> Axes:
    """Draw the line segments of `draw_ops` in screen coordinates (y down)."""
    if ax is None:
        _, ax = plt.subplots(figsize=(4, 4))

    lines = [op for op in draw_ops if op.kind is DrawOpKind.LINE]
    segments = [(op.start, op.end) for op in lines]
    colors = [tuple(channel / 255 for channel in op.color) for op in lines]
    collection = LineCollection(segments, linewidths=0.8)
    if colors:
        collection.set_color(colors)
    ax.add_collection(collection)

    ax.set_xlim(0, config.canvas_width)
    ax.set_ylim(config.canvas_height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title, fontsize=8)

    if save_file:
        ax.figure.savefig(save_file, dpi=DPI)
    return ax
