# mlsamples/training/engines/model/sdca_logistic_regression_train_engine.py
from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from mlsamples.training.engines.model_train_engine import ModelTrainEngine
from mlsamples.training.engines.text_featurizer import build_text_featurizer


class SdcaLogisticRegressionTrainEngine(ModelTrainEngine):
    """
    Binary sentiment classifier.

    Pipeline: FeaturizeText(text column) → LogisticRegression(saga).
    Label is boolean; True is the positive class.
    """

    trainer = "sdca_logistic_regression"
    task = "binary"

    @property
    def feature_columns(self) -> List[str]:
        return [self.cfg.text_column]

    def build(self) -> Pipeline:
        return Pipeline(
            [
                (
                    "featurize",
                    ColumnTransformer(
                        [("text", build_text_featurizer(), self.cfg.text_column)]
                    ),
                ),
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
        return super().labels(data).astype(bool)

    def predict_frame(self, model, data: pd.DataFrame) -> pd.DataFrame:
        X = self.features(data)
        positive = list(model.classes_).index(True)

        proba = model.predict_proba(X)[:, positive]
        score = np.asarray(model.decision_function(X), dtype=float)

        return pd.DataFrame(
            {
                "prediction": proba >= 0.5,
                "probability": proba,
                "score": score,
            }
        )
