"""
activations.py
--------------
Logistic activation used by both layers of the network.

The naive 1/(1+exp(-z)) overflows inside exp() for large negative z, so the
positive and negative halves are evaluated separately:
  z >= 0 : 1 / (1 + exp(-z))
  z <  0 : exp(z) / (1 + exp(z))
Neither branch ever exponentiates a positive number.
"""
from __future__ import annotations
import numpy as np


def sigmoid(Z: np.ndarray) -> np.ndarray:
    Z = np.asarray(Z, dtype=np.float64)
    flat = Z.ravel()
    out = np.empty_like(flat)
    pos = flat >= 0
    out[pos] = 1.0 / (1.0 + np.exp(-flat[pos]))
    expz = np.exp(flat[~pos])
    out[~pos] = expz / (1.0 + expz)
    return out.reshape(Z.shape)


def sigmoid_prime(Z: np.ndarray) -> np.ndarray:
    # d/dZ sigma = sigma*(1-sigma), same value as exp(-z)/(1+exp(-z))^2
    S = sigmoid(Z)
    return S * (1.0 - S)
