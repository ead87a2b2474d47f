# mlsamples/training/engines/model/sdca_regression_train_engine.py
from __future__ import annotations

from typing import List

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import SGDRegressor
from sklearn.pipeline import Pipeline

from mlsamples.training.engines.model_train_engine import (
    ModelTrainEngine,
    regression_output,
)


class SdcaRegressionTrainEngine(ModelTrainEngine):
    """
    Linear regression by stochastic coordinate/gradient descent (HelloML).

    Pipeline: concatenate feature columns → SGDRegressor(max_iter).
    """

    trainer = "sdca_regression"
    task = "regression"

    @property
    def feature_columns(self) -> List[str]:
        return list(self.cfg.feature_columns)

    def build(self) -> Pipeline:
        return Pipeline(
            [
                (
                    "concatenate",
                    ColumnTransformer([("features", "passthrough", self.feature_columns)]),
                ),
                (
                    "trainer",
                    SGDRegressor(
                        max_iter=self.cfg.max_iterations,
                        tol=None,
                        random_state=self.seed,
                    ),
                ),
            ]
        )

    def predict_frame(self, model, data: pd.DataFrame) -> pd.DataFrame:
        return regression_output(model, self.features(data))
