# mlsamples/training/engines/model/sdca_maximum_entropy_train_engine.py
from __future__ import annotations

from typing import List

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from mlsamples.training.engines.model_train_engine import (
    ModelTrainEngine,
    multiclass_output,
)
from mlsamples.training.engines.text_featurizer import build_text_featurizer


class SdcaMaximumEntropyTrainEngine(ModelTrainEngine):
    """
    Multiclass issue classifier (area from title + description).

    Pipeline: FeaturizeText per text column, concatenated → multinomial
    LogisticRegression(saga). String labels are mapped to class keys by
    the estimator and back on prediction.
    """

    trainer = "sdca_maximum_entropy"
    task = "multiclass"

    @property
    def feature_columns(self) -> List[str]:
        return list(self.cfg.text_columns)

    def build(self) -> Pipeline:
        featurizers = [
            (f"{col}_featurized", build_text_featurizer(), col)
            for col in self.feature_columns
        ]
        return Pipeline(
            [
                ("featurize", ColumnTransformer(featurizers)),
                (
                    "trainer",
                    LogisticRegression(
                        solver="saga",
                        max_iter=self.cfg.max_iterations,
                        random_state=self.seed,
                    ),
                ),
            ]
        )

    def labels(self, data: pd.DataFrame) -> pd.Series:
        return super().labels(data).astype(str)

    def predict_frame(self, model, data: pd.DataFrame) -> pd.DataFrame:
        return multiclass_output(model, self.features(data))
