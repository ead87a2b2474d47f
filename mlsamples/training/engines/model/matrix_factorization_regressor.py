# mlsamples/training/engines/model/matrix_factorization_regressor.py
from __future__ import annotations

import numpy as np
from scipy.sparse import csr_matrix
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.decomposition import TruncatedSVD


class MatrixFactorizationRegressor(RegressorMixin, BaseEstimator):
    """
    Biased matrix factorisation on (user, item) → rating.

    rating ≈ global mean + user bias + item bias + <user factors, item factors>

    Biases are per-key mean residuals; the residual matrix is factorised by
    TruncatedSVD. X is a 2-column array-like: [user id, item id]. Ids are
    mapped to keys on fit; unknown ids at predict time contribute no bias
    and no factor term.
    """

    def __init__(self, approximation_rank=100, number_of_iterations=20, random_state=None):
        self.approximation_rank = approximation_rank
        self.number_of_iterations = number_of_iterations
        self.random_state = random_state

    @staticmethod
    def _split(X):
        X = np.asarray(X, dtype=object)
        if X.ndim != 2 or X.shape[1] != 2:
            raise ValueError(f"expected (n, 2) user/item array, got shape {X.shape}")
        return X[:, 0], X[:, 1]

    @staticmethod
    def _keys(values, index):
        return np.array([index.get(v, -1) for v in values], dtype=int)

    def fit(self, X, y):
        users, items = self._split(X)
        y = np.asarray(y, dtype=float)

        self.user_index_ = {v: i for i, v in enumerate(dict.fromkeys(users))}
        self.item_index_ = {v: i for i, v in enumerate(dict.fromkeys(items))}
        u = self._keys(users, self.user_index_)
        i = self._keys(items, self.item_index_)
        n_users, n_items = len(self.user_index_), len(self.item_index_)

        self.global_mean_ = float(y.mean())

        centered = y - self.global_mean_
        user_count = np.bincount(u, minlength=n_users)
        self.user_bias_ = np.bincount(u, weights=centered, minlength=n_users) / np.maximum(user_count, 1)

        centered = centered - self.user_bias_[u]
        item_count = np.bincount(i, minlength=n_items)
        self.item_bias_ = np.bincount(i, weights=centered, minlength=n_items) / np.maximum(item_count, 1)

        residual = centered - self.item_bias_[i]
        R = csr_matrix((residual, (u, i)), shape=(n_users, n_items))

        rank = min(self.approximation_rank, min(n_users, n_items) - 1)
        if rank >= 1:
            svd = TruncatedSVD(
                n_components=rank,
                n_iter=self.number_of_iterations,
                random_state=self.random_state,
            )
            self.user_factors_ = svd.fit_transform(R)
            self.item_factors_ = svd.components_.T
        else:
            self.user_factors_ = np.zeros((n_users, 0))
            self.item_factors_ = np.zeros((n_items, 0))

        self.rank_ = max(rank, 0)
        return self

    def predict(self, X):
        users, items = self._split(X)
        u = self._keys(users, self.user_index_)
        i = self._keys(items, self.item_index_)

        pred = np.full(len(u), self.global_mean_, dtype=float)

        known_u = u >= 0
        known_i = i >= 0
        pred[known_u] += self.user_bias_[u[known_u]]
        pred[known_i] += self.item_bias_[i[known_i]]

        both = known_u & known_i
        if self.rank_ > 0 and both.any():
            pred[both] += np.einsum(
                "ij,ij->i",
                self.user_factors_[u[both]],
                self.item_factors_[i[both]],
            )
        return pred
