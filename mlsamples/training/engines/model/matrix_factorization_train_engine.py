# mlsamples/training/engines/model/matrix_factorization_train_engine.py
from __future__ import annotations

from typing import List

import pandas as pd
from sklearn.pipeline import Pipeline

from mlsamples.training.engines.model_train_engine import (
    ModelTrainEngine,
    regression_output,
)
from mlsamples.training.engines.model.matrix_factorization_regressor import (
    MatrixFactorizationRegressor,
)


class MatrixFactorizationTrainEngine(ModelTrainEngine):
    """
    Movie rating prediction. user/movie ids → keys → factorisation.
    """

    trainer = "matrix_factorization"
    task = "regression"

    @property
    def feature_columns(self) -> List[str]:
        return [self.cfg.user_column, self.cfg.item_column]

    def build(self) -> Pipeline:
        return Pipeline(
            [
                (
                    "trainer",
                    MatrixFactorizationRegressor(
                        approximation_rank=self.cfg.approximation_rank,
                        number_of_iterations=self.cfg.number_of_iterations,
                        random_state=self.seed,
                    ),
                ),
            ]
        )

    def predict_frame(self, model, data: pd.DataFrame) -> pd.DataFrame:
        return regression_output(model, self.features(data))
