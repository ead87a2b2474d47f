# mlsamples/training/engines/evaluation/clustering_evaluate_engine.py
from __future__ import annotations

from typing import Dict, List

import numpy as np
import pandas as pd
from sklearn.metrics import davies_bouldin_score


class ClusteringEvaluateEngine:
    """
    - average_distance: mean squared distance to the assigned centroid
    - davies_bouldin_index: NaN unless 2 <= clusters used < rows
    """

    def evaluate(
        self,
        *,
        y_true: pd.Series | None,
        predictions: pd.DataFrame,
        features: pd.DataFrame | None = None,
    ) -> Dict[str, float]:
        if len(predictions) == 0:
            raise ValueError("[ClusteringEvaluateEngine] empty eval dataset")

        cluster = np.asarray(predictions["predicted_cluster_id"], dtype=int)
        distances = np.asarray(predictions["distances"].tolist(), dtype=float)
        assigned = distances[np.arange(len(cluster)), cluster - 1]

        n_used = len(np.unique(cluster))
        dbi = float("nan")
        if features is not None and 2 <= n_used < len(cluster):
            dbi = float(davies_bouldin_score(np.asarray(features, dtype=float), cluster))

        return {
            "average_distance": float(assigned.mean()),
            "davies_bouldin_index": dbi,
        }

    @staticmethod
    def describe(metrics: Dict[str, float]) -> List[str]:
        return [
            f"Average Distance: {metrics['average_distance']}",
            f"Davies Bouldin Index: {metrics['davies_bouldin_index']}",
            "",
        ]
