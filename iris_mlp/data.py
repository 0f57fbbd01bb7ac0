"""
data.py
-------
Dataset preparation for the Iris network.

Steps
-----
1) Features are divided by the per-column maximum of the FULL dataset. The
   divisors are computed once and applied unchanged to both partitions.
2) Integer labels become an (N, C) one-hot matrix, columns in class order
   (setosa, versicolor, virginica for Iris).
3) Rows are split train/test by a seeded permutation, so the same seed always
   gives the same partition.

`DatasetSplit` stores read-only copies; the arrays passed in stay writeable.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
from sklearn.datasets import load_iris

logger = logging.getLogger(__name__)

IRIS_SPECIES = ("setosa", "versicolor", "virginica")


@dataclass(frozen=True)
class DatasetSplit:
    X_train: np.ndarray
    Y_train: np.ndarray
    X_test: np.ndarray
    Y_test: np.ndarray
    divisors: np.ndarray
    class_names: Tuple[str, ...]

    def __post_init__(self):
        for name in ("X_train", "Y_train", "X_test", "Y_test", "divisors"):
            arr = np.array(getattr(self, name), dtype=np.float64)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)


# -------------------------
# Transforms
# -------------------------
def max_divisors(X: np.ndarray) -> np.ndarray:
    X = np.asarray(X, dtype=np.float64)
    divisors = np.max(X, axis=0)
    if np.any(divisors == 0):
        raise ValueError(f"Cannot normalize: column maxima contain zero ({divisors})")
    return divisors


def normalize(X: np.ndarray, divisors: np.ndarray) -> np.ndarray:
    X = np.asarray(X, dtype=np.float64)
    if X.shape[1] != divisors.shape[0]:
        raise ValueError(f"X has {X.shape[1]} columns but {divisors.shape[0]} divisors were given")
    return X / divisors


def one_hot(y: np.ndarray, num_classes: Optional[int] = None) -> np.ndarray:
    y = np.asarray(y).astype(np.int64)
    if num_classes is None:
        if y.size == 0:
            raise ValueError("num_classes is required when there are no labels")
        num_classes = int(y.max()) + 1
    if y.size and (y.min() < 0 or y.max() >= num_classes):
        raise ValueError(f"labels must lie in [0, {num_classes}), got range [{y.min()}, {y.max()}]")
    oh = np.zeros((y.shape[0], num_classes), dtype=np.float64)
    oh[np.arange(y.shape[0]), y] = 1.0
    return oh


def split_indices(n: int, test_fraction: float = 0.2, seed: Optional[int] = 3) -> Tuple[np.ndarray, np.ndarray]:
    """Seeded permutation of range(n) cut into (train_idx, test_idx)."""
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must be in (0, 1), got {test_fraction}")
    rng = np.random.default_rng(seed)
    idx = rng.permutation(n)
    n_train = int(round(n * (1.0 - test_fraction)))
    return np.sort(idx[:n_train]), np.sort(idx[n_train:])


# -------------------------
# Datasets
# -------------------------
def build_split(
    X: np.ndarray,
    y: np.ndarray,
    class_names: Sequence[str],
    test_fraction: float = 0.2,
    seed: Optional[int] = 3,
) -> DatasetSplit:
    X = np.asarray(X, dtype=np.float64)
    divisors = max_divisors(X)          # from train + test together
    Xn = normalize(X, divisors)
    Y = one_hot(y, len(class_names))
    train_idx, test_idx = split_indices(X.shape[0], test_fraction, seed)
    logger.debug(f"Split {X.shape[0]} rows into {len(train_idx)} train / {len(test_idx)} test (seed={seed})")
    return DatasetSplit(
        X_train=Xn[train_idx],
        Y_train=Y[train_idx],
        X_test=Xn[test_idx],
        Y_test=Y[test_idx],
        divisors=divisors,
        class_names=tuple(class_names),
    )


def load_iris_split(test_fraction: float = 0.2, seed: Optional[int] = 3) -> DatasetSplit:
    iris = load_iris()
    logger.info(f"Loaded Iris: {iris.data.shape[0]} rows, {iris.data.shape[1]} features")
    return build_split(iris.data, iris.target, tuple(str(n) for n in iris.target_names), test_fraction, seed)


def make_separable_dataset(
    n_train_per_class: int = 40,
    n_test_per_class: int = 10,
    noise: float = 0.05,
    seed: Optional[int] = 0,
) -> DatasetSplit:
    """
    Synthetic 4-feature / 3-class data with well separated clusters, already in
    the (0, 1] range that max normalization produces.
    """
    centers = np.array([
        [0.8, 0.2, 0.2, 0.3],
        [0.2, 0.8, 0.3, 0.2],
        [0.3, 0.2, 0.8, 0.8],
    ])
    rng = np.random.default_rng(seed)
    n_per_class = n_train_per_class + n_test_per_class
    X = np.vstack([c + noise * rng.standard_normal((n_per_class, c.shape[0])) for c in centers])
    X = np.clip(X, 0.01, 1.0)
    y = np.repeat(np.arange(centers.shape[0]), n_per_class)

    train_mask = np.tile(np.arange(n_per_class) < n_train_per_class, centers.shape[0])
    Y = one_hot(y, centers.shape[0])
    return DatasetSplit(
        X_train=X[train_mask],
        Y_train=Y[train_mask],
        X_test=X[~train_mask],
        Y_test=Y[~train_mask],
        divisors=np.ones(X.shape[1]),
        class_names=("class_0", "class_1", "class_2"),
    )
