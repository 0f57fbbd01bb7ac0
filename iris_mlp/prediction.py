"""
prediction.py
-------------
Turning network outputs into species.

Rule: round every output to 0 or 1. If exactly one column of a row rounds to 1,
that column is the predicted class. Any other pattern ([0,0,0], [1,1,0], ...)
is UNCLASSIFIED. Ambiguous rows are never resolved to a class.

np.round rounds halves to even, so an output of exactly 0.5 rounds to 0.
"""
from __future__ import annotations
from typing import List, Sequence

import numpy as np

from iris_mlp.network import Parameters, forward

UNCLASSIFIED = -1
UNCLASSIFIED_LABEL = "unclassified"


def predict_proba(X: np.ndarray, params: Parameters) -> np.ndarray:
    return forward(X, params).Y_hat


def classify_outputs(Y_hat: np.ndarray) -> np.ndarray:
    """Apply the rounding rule to an (M, C) output matrix; returns (M,) class ids."""
    Y_hat = np.atleast_2d(np.asarray(Y_hat, dtype=np.float64))
    rounded = np.round(Y_hat)
    ones = rounded == 1.0
    single = ones.sum(axis=1) == 1
    return np.where(single, np.argmax(ones, axis=1), UNCLASSIFIED)


def predict(X: np.ndarray, params: Parameters) -> np.ndarray:
    return classify_outputs(predict_proba(X, params))


def accuracy(y_pred: np.ndarray, y_true: np.ndarray) -> float:
    """
    Fraction of rows predicted correctly. `y_true` may be class ids (M,) or
    one-hot (M, C). Unclassified rows count as wrong.
    """
    y_true = np.asarray(y_true)
    if y_true.ndim == 2:
        y_true = np.argmax(y_true, axis=1)
    y_pred = np.asarray(y_pred)
    if y_pred.shape != y_true.shape:
        raise ValueError(f"y_pred{y_pred.shape} and y_true{y_true.shape} differ in shape")
    if y_true.size == 0:
        return 0.0
    return float(np.mean(y_pred == y_true))


def to_species(class_ids: np.ndarray, class_names: Sequence[str]) -> List[str]:
    names = []
    for c in np.asarray(class_ids).tolist():
        names.append(UNCLASSIFIED_LABEL if c == UNCLASSIFIED else str(class_names[c]))
    return names
