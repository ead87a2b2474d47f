# mlsamples/training/engines/model/lbfgs_maximum_entropy_train_engine.py
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
from mlsamples.utils.path import PathManager
from mlsamples.vision.inception_featurizer import InceptionFeaturizer


class LbfgsMaximumEntropyTrainEngine(ModelTrainEngine):
    """
    Image classification by transfer learning.

    Pipeline: image_path → load/resize/extract pixels → Inception ONNX
    (penultimate layer) → LogisticRegression(lbfgs).
    """

    trainer = "lbfgs_maximum_entropy"
    task = "multiclass"

    @property
    def feature_columns(self) -> List[str]:
        return ["image_path"]

    def build_featurizer(self) -> InceptionFeaturizer:
        cfg = self.cfg
        return InceptionFeaturizer(
            model_path=str(PathManager.resolve(cfg.inception_model)),
            input_name=cfg.model_input,
            output_name=cfg.model_output,
            image_width=cfg.image_width,
            image_height=cfg.image_height,
            offset=cfg.mean,
            scale=cfg.scale,
            channels_last=cfg.channels_last,
        )

    def build(self) -> Pipeline:
        return Pipeline(
            [
                ("featurize", ColumnTransformer([("inception", self.build_featurizer(), "image_path")])),
                (
                    "trainer",
                    LogisticRegression(
                        solver="lbfgs",
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
