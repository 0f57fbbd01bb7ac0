"""Loss-curve chart for a training run."""
from __future__ import annotations
import logging
import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def plot_loss(losses: Sequence[float], path: Optional[str] = None, title: str = "Training loss"):
    """Plot cost per iteration. Saves to `path` when given; returns the figure."""
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(range(1, len(losses) + 1), losses, linewidth=1.0)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Cost (0.5 * SSE)")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    if path is not None:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fig.savefig(path)
        logger.info(f"Loss chart saved to {path}")
    return fig
