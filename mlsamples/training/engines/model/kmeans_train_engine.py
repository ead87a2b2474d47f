# mlsamples/training/engines/model/kmeans_train_engine.py
from __future__ import annotations

from typing import List, Optional

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans
from sklearn.compose import ColumnTransformer
from sklearn.pipeline import Pipeline

from mlsamples.training.engines.model_train_engine import ModelTrainEngine


class KMeansTrainEngine(ModelTrainEngine):
    """
    Unsupervised k-means clustering (iris).

    Output:
    - predicted_cluster_id: 1-based
    - distances: squared Euclidean distance to every centroid
    """

    trainer = "kmeans"
    task = "clustering"

    @property
    def feature_columns(self) -> List[str]:
        return list(self.cfg.feature_columns)

    @property
    def label_column(self) -> Optional[str]:
        return None

    def build(self) -> Pipeline:
        return Pipeline(
            [
                (
                    "concatenate",
                    ColumnTransformer([("features", "passthrough", self.feature_columns)]),
                ),
                (
                    "trainer",
                    KMeans(
                        n_clusters=self.cfg.number_of_clusters,
                        n_init=10,
                        random_state=self.seed,
                    ),
                ),
            ]
        )

    def predict_frame(self, model, data: pd.DataFrame) -> pd.DataFrame:
        X = self.features(data)
        cluster = np.asarray(model.predict(X), dtype=int) + 1
        distances = np.square(model.transform(X))
        return pd.DataFrame(
            {
                "predicted_cluster_id": cluster,
                "distances": [row.tolist() for row in distances],
            }
        )
