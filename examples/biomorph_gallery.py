"""Draw a gallery of random biomorphs and one mutated child of each."""

# Standard library
from pathlib import Path

# Third-party libraries
import matplotlib.pyplot as plt
import numpy as np
from rich.traceback import install

# Local libraries
from biomorphs import expand, generate_random_genome, mutate, render
from biomorphs.config import config, console
from biomorphs.utils.renderers import DPI, draw_biomorph

# --- RANDOM GENERATOR SETUP --- #
SEED = 42
RNG = np.random.default_rng(SEED)

# --- DATA SETUP ---
SCRIPT_NAME = __file__.split("/")[-1][:-3]
CWD = Path.cwd()
DATA = CWD / "__data__" / SCRIPT_NAME
DATA.mkdir(exist_ok=True, parents=True)

# --- TERMINAL OUTPUT SETUP ---
install(width=180)

NUM_OF_PARENTS = 4
MUTATION_PROBABILITY = 0.5


def main() -> None:
    """Entry point."""
    fig, axes = plt.subplots(2, NUM_OF_PARENTS, figsize=(3 * NUM_OF_PARENTS, 6))
    for column in range(NUM_OF_PARENTS):
        parent = generate_random_genome(RNG)
        child = mutate(parent, MUTATION_PROBABILITY, RNG)
        console.log("Parent:", str(parent))
        console.log("Child: ", str(child))

        for row, genome in enumerate((parent, child)):
            command = expand(genome, config.generations, RNG)
            draw_ops = render(command, genome.turn_angle)
            draw_biomorph(
                draw_ops,
                title=f"angle={genome.turn_angle}, {len(draw_ops)} ops",
                ax=axes[row, column],
            )

    fig.tight_layout()
    fig.savefig(DATA / "gallery.png", dpi=DPI)
    console.log(f"[green]Saved gallery to {DATA / 'gallery.png'}[/green]")


if __name__ == "__main__":
    main()
