"""
network.py
----------
A 4 -> 3 -> 3 feedforward network with sigmoid hidden and output layers,
written out as explicit matrix algebra:

  Z2 = X @ W1 + B1        A2   = sigmoid(Z2)
  Z3 = A2 @ W2 + B2       Yhat = sigmoid(Z3)

  C  = 0.5 * sum((Y - Yhat)**2)

Notes
-----
1) Parameters live in a single `Parameters` record that the training loop owns
   and passes around explicitly. Nothing in this module keeps state.

2) Biases are 1-D vectors. They are added to every row through
   `broadcast_bias`, which refuses a vector whose length does not match the
   number of columns instead of letting NumPy recycle it.

3) Gradients are sums over the batch (no 1/N), matching the 0.5 * SSE cost.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from iris_mlp.activations import sigmoid, sigmoid_prime

N_FEATURES = 4
N_HIDDEN = 3
N_CLASSES = 3


class ShapeMismatchError(ValueError):
    """Raised when an array does not have the shape an operation requires."""


# -------------------------
# Parameters
# -------------------------
@dataclass
class Parameters:
    W1: np.ndarray  # (n_features, n_hidden)
    B1: np.ndarray  # (n_hidden,)
    W2: np.ndarray  # (n_hidden, n_classes)
    B2: np.ndarray  # (n_classes,)

    def __post_init__(self):
        # Copies, so training never writes through to the caller's arrays
        self.W1 = np.array(self.W1, dtype=np.float64)
        self.B1 = np.array(self.B1, dtype=np.float64)
        self.W2 = np.array(self.W2, dtype=np.float64)
        self.B2 = np.array(self.B2, dtype=np.float64)
        if self.W1.ndim != 2 or self.W2.ndim != 2:
            raise ShapeMismatchError(
                f"weights must be 2-D, got W1{self.W1.shape} and W2{self.W2.shape}")
        if self.B1.shape != (self.W1.shape[1],):
            raise ShapeMismatchError(f"B1 must have shape ({self.W1.shape[1]},), got {self.B1.shape}")
        if self.W2.shape[0] != self.W1.shape[1]:
            raise ShapeMismatchError(
                f"W2 must have {self.W1.shape[1]} rows to follow W1, got {self.W2.shape}")
        if self.B2.shape != (self.W2.shape[1],):
            raise ShapeMismatchError(f"B2 must have shape ({self.W2.shape[1]},), got {self.B2.shape}")

    @property
    def n_features(self) -> int:
        return self.W1.shape[0]

    @property
    def n_outputs(self) -> int:
        return self.W2.shape[1]

    def copy(self) -> "Parameters":
        return Parameters(self.W1, self.B1, self.W2, self.B2)

    def count(self) -> int:
        """Number of trainable scalars (27 for the default 4-3-3 network)."""
        return self.W1.size + self.B1.size + self.W2.size + self.B2.size


@dataclass
class Gradients:
    dW1: np.ndarray
    dB1: np.ndarray
    dW2: np.ndarray
    dB2: np.ndarray


class ForwardCache(NamedTuple):
    Z2: np.ndarray
    A2: np.ndarray
    Z3: np.ndarray
    Y_hat: np.ndarray


# -------------------------
# Initializers
# -------------------------
def uniform_init(
    rng: Optional[np.random.Generator] = None,
    n_features: int = N_FEATURES,
    n_hidden: int = N_HIDDEN,
    n_classes: int = N_CLASSES,
) -> Parameters:
    """
    Independent U[0, 1) draws, taken in the order W1, B1, W2, B2 so a given
    generator state always produces the same network.
    """
    if rng is None:
        rng = np.random.default_rng()
    W1 = rng.uniform(0.0, 1.0, size=(n_features, n_hidden))
    B1 = rng.uniform(0.0, 1.0, size=n_hidden)
    W2 = rng.uniform(0.0, 1.0, size=(n_hidden, n_classes))
    B2 = rng.uniform(0.0, 1.0, size=n_classes)
    return Parameters(W1, B1, W2, B2)


def constant_init(
    value: float = 0.5,
    n_features: int = N_FEATURES,
    n_hidden: int = N_HIDDEN,
    n_classes: int = N_CLASSES,
) -> Parameters:
    # Every hidden unit starts identical and receives identical gradients,
    # so the hidden layer never breaks symmetry.
    return Parameters(
        np.full((n_features, n_hidden), value),
        np.full(n_hidden, value),
        np.full((n_hidden, n_classes), value),
        np.full(n_classes, value),
    )


# -------------------------
# Building blocks
# -------------------------
def broadcast_bias(B: np.ndarray, n_rows: int) -> np.ndarray:
    """Replicate a length-k bias vector into an (n_rows, k) matrix."""
    B = np.asarray(B, dtype=np.float64)
    if B.ndim != 1:
        raise ShapeMismatchError(f"bias must be a 1-D vector, got shape {B.shape}")
    return np.tile(B, (n_rows, 1))


def _add_bias(Z: np.ndarray, B: np.ndarray) -> np.ndarray:
    if B.shape[0] != Z.shape[1]:
        raise ShapeMismatchError(
            f"bias of length {B.shape[0]} cannot be added to {Z.shape[1]} columns")
    return Z + broadcast_bias(B, Z.shape[0])


def forward(X: np.ndarray, params: Parameters) -> ForwardCache:
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2 or X.shape[1] != params.n_features:
        raise ShapeMismatchError(
            f"X must have shape (N, {params.n_features}), got {X.shape}")
    Z2 = _add_bias(X @ params.W1, params.B1)        # (N,D)@(D,H) -> (N,H)
    A2 = sigmoid(Z2)
    Z3 = _add_bias(A2 @ params.W2, params.B2)       # (N,H)@(H,C) -> (N,C)
    Y_hat = sigmoid(Z3)
    return ForwardCache(Z2, A2, Z3, Y_hat)


def cost(Y: np.ndarray, Y_hat: np.ndarray) -> float:
    Y = np.asarray(Y, dtype=np.float64)
    if Y.shape != Y_hat.shape:
        raise ShapeMismatchError(f"Y{Y.shape} and Y_hat{Y_hat.shape} differ in shape")
    return float(0.5 * np.sum((Y - Y_hat) ** 2))


def backward(X: np.ndarray, Y: np.ndarray, cache: ForwardCache, params: Parameters) -> Gradients:
    X = np.asarray(X, dtype=np.float64)
    Y = np.asarray(Y, dtype=np.float64)
    if Y.shape != cache.Y_hat.shape:
        raise ShapeMismatchError(f"Y{Y.shape} and Y_hat{cache.Y_hat.shape} differ in shape")
    # Output layer
    delta3 = (cache.Y_hat - Y) * sigmoid_prime(cache.Z3)   # (N,C)
    dW2 = cache.A2.T @ delta3                             # (H,N)@(N,C) -> (H,C)
    dB2 = np.sum(delta3, axis=0)                          # (C,)
    # Hidden layer
    delta2 = (delta3 @ params.W2.T) * sigmoid_prime(cache.Z2)  # (N,H)
    dW1 = X.T @ delta2                                    # (D,N)@(N,H) -> (D,H)
    dB1 = np.sum(delta2, axis=0)                          # (H,)
    return Gradients(dW1, dB1, dW2, dB2)
