"""
training.py
-----------
Full-batch gradient descent with a fixed learning rate and a fixed number of
iterations. There is no early stopping: the loop always runs to the end.

Each iteration:
  forward -> record cost -> backward -> P <- P - lr * dC/dP   (W1, B1, W2, B2)

Progress reporting is a hook, `callback(iteration, loss, params)`, called every
`log_every` iterations and on the last one. It is never needed for training
itself.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

import numpy as np
from tqdm import tqdm

from iris_mlp.network import Gradients, Parameters, backward, cost, forward

logger = logging.getLogger(__name__)

Callback = Callable[[int, float, Parameters], None]


def sgd_step(params: Parameters, grads: Gradients, lr: float) -> None:
    params.W1 -= lr * grads.dW1
    params.B1 -= lr * grads.dB1
    params.W2 -= lr * grads.dW2
    params.B2 -= lr * grads.dB2


def log_progress(iteration: int, loss: float, params: Parameters) -> None:
    logger.info(f"Iteration {iteration:7d} - loss: {loss:.6f}")


def train(
    X: np.ndarray,
    Y: np.ndarray,
    params: Parameters,
    iterations: int = 100_000,
    lr: float = 0.01,
    log_every: Optional[int] = 10_000,
    callback: Optional[Callback] = log_progress,
    progress: bool = False,
) -> List[float]:
    """
    Train `params` in place and return the cost recorded at every iteration.

    Parameters
    ----------
    X : ndarray (N, n_features)
        Normalized features.
    Y : ndarray (N, n_classes)
        One-hot labels.
    params : Parameters
        Mutated in place by every update.
    iterations : int
        Exact number of updates to perform.
    lr : float
        Learning rate.
    log_every : int or None
        Hook cadence. None disables the hook.
    callback : callable or None
        `callback(iteration, loss, params)`; iterations are 1-based.
    progress : bool
        Show a tqdm progress bar.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    if lr <= 0:
        raise ValueError(f"learning rate must be positive, got {lr}")
    if log_every is not None and log_every <= 0:
        raise ValueError(f"log_every must be positive, got {log_every}")

    X = np.asarray(X, dtype=np.float64)
    Y = np.asarray(Y, dtype=np.float64)
    logger.info(f"Training on {X.shape[0]} rows for {iterations} iterations (lr={lr})")

    losses: List[float] = []
    steps = range(1, iterations + 1)
    if progress:
        steps = tqdm(steps, desc="Training", unit="it")
    for it in steps:
        cache = forward(X, params)
        loss = cost(Y, cache.Y_hat)
        losses.append(loss)
        grads = backward(X, Y, cache, params)
        sgd_step(params, grads, lr)
        if callback is not None and log_every is not None and (it % log_every == 0 or it == iterations):
            callback(it, loss, params)

    logger.info(f"Training finished: first loss {losses[0]:.6f}, last loss {losses[-1]:.6f}")
    return losses
