"""
reference.py
------------
Cross-check against scikit-learn's MLPClassifier.

The library network is only an oracle for aggregate accuracy on the same
split: one hidden layer of 3 logistic units, trained on the same normalized
features. Both models' predictions are reported per row as species names.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
from sklearn.neural_network import MLPClassifier

from iris_mlp.data import DatasetSplit
from iris_mlp.prediction import accuracy, to_species

logger = logging.getLogger(__name__)


@dataclass
class Comparison:
    table: pd.DataFrame
    mlp_accuracy: float
    reference_accuracy: float


def results_table(split: DatasetSplit, y_pred: np.ndarray, reference_pred: Optional[np.ndarray] = None) -> pd.DataFrame:
    """One row per test sample: actual species, our prediction and optionally the oracle's."""
    y_true = np.argmax(split.Y_test, axis=1)
    table = pd.DataFrame({
        "actual": to_species(y_true, split.class_names),
        "mlp": to_species(y_pred, split.class_names),
    })
    if reference_pred is not None:
        table["reference"] = to_species(reference_pred, split.class_names)
    return table


def fit_reference(split: DatasetSplit, max_iter: int = 2000, seed: Optional[int] = 1) -> MLPClassifier:
    clf = MLPClassifier(
        hidden_layer_sizes=(3,),
        activation="logistic",
        solver="lbfgs",
        max_iter=max_iter,
        random_state=seed,
    )
    clf.fit(split.X_train, np.argmax(split.Y_train, axis=1))
    return clf


def compare_with_reference(
    split: DatasetSplit,
    y_pred: np.ndarray,
    max_iter: int = 2000,
    seed: Optional[int] = 1,
) -> Comparison:
    clf = fit_reference(split, max_iter=max_iter, seed=seed)
    reference_pred = clf.predict(split.X_test)
    y_true = np.argmax(split.Y_test, axis=1)
    comparison = Comparison(
        table=results_table(split, y_pred, reference_pred),
        mlp_accuracy=accuracy(y_pred, y_true),
        reference_accuracy=accuracy(reference_pred, y_true),
    )
    logger.info(f"Test accuracy - mlp: {comparison.mlp_accuracy:.3f}, "
                f"reference: {comparison.reference_accuracy:.3f}")
    return comparison
