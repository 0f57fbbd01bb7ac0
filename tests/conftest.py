import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from iris_mlp.data import make_separable_dataset
from iris_mlp.network import uniform_init


@pytest.fixture
def params():
    return uniform_init(np.random.default_rng(1))


@pytest.fixture
def separable():
    return make_separable_dataset(n_train_per_class=40, n_test_per_class=10, seed=0)


@pytest.fixture
def small_batch():
    rng = np.random.default_rng(7)
    X = rng.uniform(0.1, 1.0, size=(6, 4))
    Y = np.eye(3)[rng.integers(0, 3, size=6)]
    return X, Y
