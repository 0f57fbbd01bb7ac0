import numpy as np
import pytest

from iris_mlp.data import (
    IRIS_SPECIES,
    DatasetSplit,
    build_split,
    load_iris_split,
    make_separable_dataset,
    max_divisors,
    normalize,
    one_hot,
    split_indices,
)


def test_one_hot_rows_have_single_one():
    Y = one_hot(np.array([0, 2, 1, 1, 0]), 3)
    assert Y.shape == (5, 3)
    assert np.all(Y.sum(axis=1) == 1.0), "Every one-hot row must sum to 1."
    assert set(np.unique(Y)) == {0.0, 1.0}
    np.testing.assert_array_equal(np.argmax(Y, axis=1), [0, 2, 1, 1, 0])


def test_one_hot_rejects_out_of_range_labels():
    with pytest.raises(ValueError):
        one_hot(np.array([0, 3]), 3)
    with pytest.raises(ValueError):
        one_hot(np.array([-1, 0]), 3)


def test_max_divisors_and_normalize():
    X = np.array([[1.0, 10.0], [4.0, 5.0], [2.0, 20.0]])
    d = max_divisors(X)
    np.testing.assert_array_equal(d, [4.0, 20.0])
    Xn = normalize(X, d)
    assert Xn.max(axis=0).tolist() == [1.0, 1.0]


def test_max_divisors_rejects_zero_column():
    with pytest.raises(ValueError):
        max_divisors(np.array([[1.0, 0.0], [2.0, 0.0]]))


def test_split_indices_sizes_and_disjoint():
    train_idx, test_idx = split_indices(150, 0.2, seed=3)
    assert len(train_idx) == 120
    assert len(test_idx) == 30
    assert set(train_idx).isdisjoint(test_idx)
    assert sorted(np.concatenate([train_idx, test_idx]).tolist()) == list(range(150))


def test_split_indices_reproducible():
    a = split_indices(150, 0.2, seed=3)
    b = split_indices(150, 0.2, seed=3)
    c = split_indices(150, 0.2, seed=4)
    np.testing.assert_array_equal(a[1], b[1])
    assert not np.array_equal(a[1], c[1])


@pytest.mark.parametrize("fraction", [0.0, 1.0, -0.1, 1.5])
def test_split_indices_rejects_bad_fraction(fraction):
    with pytest.raises(ValueError):
        split_indices(10, fraction)


def test_build_split_uses_divisors_of_whole_dataset():
    X = np.arange(1.0, 41.0).reshape(10, 4)
    y = np.array([0, 1, 2, 0, 1, 2, 0, 1, 2, 0])
    split = build_split(X, y, ("a", "b", "c"), test_fraction=0.2, seed=3)
    np.testing.assert_array_equal(split.divisors, X.max(axis=0))
    # the global max row may land in either partition; together they must reach 1.0
    both = np.vstack([split.X_train, split.X_test])
    np.testing.assert_allclose(both.max(axis=0), 1.0)
    assert split.X_train.shape == (8, 4) and split.X_test.shape == (2, 4)
    assert split.Y_train.shape == (8, 3) and split.Y_test.shape == (2, 3)


def test_split_arrays_are_read_only():
    split = make_separable_dataset(n_train_per_class=4, n_test_per_class=2)
    with pytest.raises(ValueError):
        split.X_train[0, 0] = 5.0
    with pytest.raises(ValueError):
        split.Y_test[0, 0] = 5.0


def test_make_separable_dataset_layout(separable):
    assert separable.X_train.shape == (120, 4)
    assert separable.X_test.shape == (30, 4)
    assert np.all(separable.Y_train.sum(axis=1) == 1.0)
    assert separable.Y_test.sum(axis=0).tolist() == [10.0, 10.0, 10.0]
    assert np.all((separable.X_train > 0) & (separable.X_train <= 1.0))


def test_load_iris_split():
    split = load_iris_split(test_fraction=0.2, seed=3)
    assert split.X_train.shape == (120, 4)
    assert split.X_test.shape == (30, 4)
    assert split.class_names == IRIS_SPECIES
    np.testing.assert_allclose(split.divisors, [7.9, 4.4, 6.9, 2.5])
    assert np.all(split.Y_train.sum(axis=1) == 1.0)
    assert np.vstack([split.X_train, split.X_test]).max() == pytest.approx(1.0)


def test_split_leaves_caller_arrays_writeable():
    X = np.ones((4, 4))
    Y = np.eye(3)[[0, 1, 2, 0]]
    split = DatasetSplit(X[:3], Y[:3], X[3:], Y[3:], np.ones(4), ("a", "b", "c"))
    assert X.flags.writeable and Y.flags.writeable, "Building a split must not freeze the caller's arrays."
    assert not split.X_train.flags.writeable
    X[0, 0] = 7.0
    assert split.X_train[0, 0] == 1.0


def test_one_hot_empty_labels():
    with pytest.raises(ValueError, match="num_classes"):
        one_hot(np.array([], dtype=int))
    assert one_hot(np.array([], dtype=int), 3).shape == (0, 3)
