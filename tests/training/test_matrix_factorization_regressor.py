#!filepath: tests/training/test_matrix_factorization_regressor.py
import numpy as np
import pytest

from mlsamples.training.engines.model.matrix_factorization_regressor import (
    MatrixFactorizationRegressor,
)


@pytest.fixture
def ratings():
    rng = np.random.default_rng(0)
    users = rng.normal(size=(20, 2))
    items = rng.normal(size=(15, 2))
    X, y = [], []
    for u in range(20):
        for i in range(15):
            if rng.random() < 0.8:
                X.append([u + 1, 100 + i])
                y.append(3.0 + users[u] @ items[i])
    return np.asarray(X, dtype=float), np.asarray(y)


def test_fit_beats_global_mean(ratings):
    X, y = ratings
    model = MatrixFactorizationRegressor(approximation_rank=4, random_state=0).fit(X, y)

    rmse = np.sqrt(np.mean((model.predict(X) - y) ** 2))
    baseline = np.sqrt(np.mean((y.mean() - y) ** 2))
    assert rmse < baseline


def test_unknown_ids_fall_back_to_biases(ratings):
    X, y = ratings
    model = MatrixFactorizationRegressor(approximation_rank=4, random_state=0).fit(X, y)

    both_unknown = model.predict([[999, 999]])
    assert both_unknown[0] == pytest.approx(model.global_mean_)

    user_known = model.predict([[1, 999]])
    expected = model.global_mean_ + model.user_bias_[model.user_index_[1.0]]
    assert user_known[0] == pytest.approx(expected)


def test_rank_is_capped_by_matrix_size():
    X = [[1, 1], [1, 2], [2, 1]]
    model = MatrixFactorizationRegressor(approximation_rank=100).fit(X, [4.0, 2.0, 3.0])

    assert model.rank_ == 1
    assert np.isfinite(model.predict(X)).all()


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        MatrixFactorizationRegressor().fit([[1, 2, 3]], [1.0])
