"""Fitness chart rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from ..utils.io import ensure_dir  # noqa: E402


def plot_fitness_summary(summary: Sequence[float], save_path: Path) -> Path:
    """Plot the mean fitness of every generation as a 1280x720 PNG."""

    if not summary:
        raise ValueError("No generation summary to plot")
    ensure_dir(save_path.parent)
    generations = np.arange(len(summary))
    fig, ax = plt.subplots(figsize=(12.8, 7.2), dpi=100)
    ax.plot(generations, np.asarray(summary, dtype=float), color="red")
    ax.set_title("Chart of Average Fitness values")
    ax.set_xlabel("Generation Number")
    ax.set_ylabel("Average Fitness")
    ax.set_xlim(0, max(len(summary) - 1, 1))
    ax.grid(True, alpha=0.3)
    fig.savefig(save_path, bbox_inches="tight")
    plt.close(fig)
    return save_path


__all__ = ["plot_fitness_summary"]
