"""Render a quilt board as an image."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from quilting.position import Position
from quilting.quilt_board import QuiltBoard


def make_quilt_chart(
    board: QuiltBoard,
    output_path: str = "quilt.png",
    title: str = "Quilt",
) -> str:
    """Draw the covered cells of *board* as a grid and save it as a PNG.

    Returns the path to the saved PNG.
    """
    cells = [
        [1 if board.is_position_covered(Position(x, y)) else 0 for x in range(board.width)]
        for y in range(board.height)
    ]

    fig, ax = plt.subplots(figsize=(max(3, board.width * 0.5), max(3, board.height * 0.5)))
    ax.imshow(cells, cmap=ListedColormap(["#F4F1EA", "#4A90D9"]), vmin=0, vmax=1)

    # Grid lines between cells, origin in the upper left
    ax.set_xticks([x - 0.5 for x in range(1, board.width)], minor=True)
    ax.set_yticks([y - 0.5 for y in range(1, board.height)], minor=True)
    ax.grid(which="minor", color="white", linewidth=2)
    ax.tick_params(which="both", length=0, labelbottom=False, labelleft=False)

    ax.set_title(
        f"{title} ({board.positions_covered()}/{board.width * board.height} covered)",
        fontsize=14, fontweight="bold",
    )

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
