# mlsamples/training/engines/model/fast_tree_train_engine.py
from __future__ import annotations

from typing import List

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import GradientBoostingRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from mlsamples.training.engines.model_train_engine import (
    ModelTrainEngine,
    regression_output,
)


class FastTreeTrainEngine(ModelTrainEngine):
    """
    Boosted regression trees (taxi fare).

    Pipeline: one-hot categorical columns + numeric passthrough → GradientBoostingRegressor.
    Unseen categories at prediction time encode as all-zero.
    """

    trainer = "fast_tree"
    task = "regression"

    @property
    def feature_columns(self) -> List[str]:
        return list(self.cfg.categorical_columns) + list(self.cfg.numeric_columns)

    def build(self) -> Pipeline:
        cfg = self.cfg
        return Pipeline(
            [
                (
                    "featurize",
                    ColumnTransformer(
                        [
                            (
                                "one_hot",
                                OneHotEncoder(handle_unknown="ignore"),
                                list(cfg.categorical_columns),
                            ),
                            ("numeric", "passthrough", list(cfg.numeric_columns)),
                        ]
                    ),
                ),
                (
                    "trainer",
                    GradientBoostingRegressor(
                        n_estimators=cfg.number_of_trees,
                        max_leaf_nodes=cfg.number_of_leaves,
                        learning_rate=cfg.learning_rate,
                        min_samples_leaf=cfg.minimum_example_count_per_leaf,
                        random_state=self.seed,
                    ),
                ),
            ]
        )

    def predict_frame(self, model, data: pd.DataFrame) -> pd.DataFrame:
        return regression_output(model, self.features(data))
