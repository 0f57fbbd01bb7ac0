"""
gradient_check.py
-----------------
Finite-difference gradients of the cost, for checking `network.backward`.

For every entry p of a parameter array:
  central: (C(p + eps) - C(p - eps)) / (2 * eps)
  forward: (C(p + eps) - C(p))       / eps
The parameters passed in are never modified; each probe works on a copy.
"""
from __future__ import annotations
import numpy as np

from iris_mlp.network import Parameters, cost, forward

PARAMETER_NAMES = ("W1", "B1", "W2", "B2")


def _cost_at(X: np.ndarray, Y: np.ndarray, params: Parameters) -> float:
    return cost(Y, forward(X, params).Y_hat)


def numeric_gradient(
    X: np.ndarray,
    Y: np.ndarray,
    params: Parameters,
    name: str = "W1",
    eps: float = 1e-4,
    method: str = "central",
) -> np.ndarray:
    """Numeric dC/d<name>, same shape as that parameter."""
    if name not in PARAMETER_NAMES:
        raise ValueError(f"Unknown parameter '{name}', expected one of {PARAMETER_NAMES}")
    if method not in ("central", "forward"):
        raise ValueError(f"Unknown method '{method}', expected 'central' or 'forward'")

    target = getattr(params, name)
    grad = np.zeros_like(target)
    base = _cost_at(X, Y, params) if method == "forward" else None
    for idx in np.ndindex(target.shape):
        plus = params.copy()
        getattr(plus, name)[idx] += eps
        c_plus = _cost_at(X, Y, plus)
        if method == "central":
            minus = params.copy()
            getattr(minus, name)[idx] -= eps
            grad[idx] = (c_plus - _cost_at(X, Y, minus)) / (2.0 * eps)
        else:
            grad[idx] = (c_plus - base) / eps
    return grad


def relative_error(analytic: np.ndarray, numeric: np.ndarray) -> np.ndarray:
    """Element-wise |a - n| / max(|a| + |n|, 1e-12)."""
    diff = np.abs(analytic - numeric)
    return diff / np.maximum(1e-12, np.abs(analytic) + np.abs(numeric))
