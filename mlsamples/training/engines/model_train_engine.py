# mlsamples/training/engines/model_train_engine.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

import numpy as np
import pandas as pd
from sklearn.pipeline import Pipeline

from mlsamples import logs
from mlsamples.utils.errors import SchemaError


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine (FINAL)

    Contract:
    - build()         → unfitted Pipeline
    - train(data)     → fitted Pipeline
    - predict_frame() → DataFrame of model output columns, row-aligned with input
    """

    trainer: str = ""
    task: str = ""

    def __init__(self, cfg):
        self.cfg = cfg

    # ------------------------------------------------------------------
    # column contract
    # ------------------------------------------------------------------
    @property
    @abstractmethod
    def feature_columns(self) -> List[str]:
        raise NotImplementedError

    @property
    def label_column(self) -> Optional[str]:
        return getattr(self.cfg, "label_column", None)

    @property
    def seed(self) -> Optional[int]:
        return getattr(self.cfg, "seed", None)

    def features(self, data: pd.DataFrame) -> pd.DataFrame:
        missing = [c for c in self.feature_columns if c not in data.columns]
        if missing:
            raise SchemaError(f"[{self.__class__.__name__}] missing feature columns {missing}")
        return data[self.feature_columns]

    def labels(self, data: pd.DataFrame) -> Optional[pd.Series]:
        if self.label_column is None:
            return None
        if self.label_column not in data.columns:
            raise SchemaError(
                f"[{self.__class__.__name__}] missing label column '{self.label_column}'"
            )
        return data[self.label_column]

    # ------------------------------------------------------------------
    # training
    # ------------------------------------------------------------------
    @abstractmethod
    def build(self) -> Pipeline:
        raise NotImplementedError

    @logs.catch()
    def train(self, data: pd.DataFrame) -> Pipeline:
        if len(data) == 0:
            raise ValueError(f"[{self.__class__.__name__}] empty training dataset")

        labels = self.labels(data)
        model = self.build()
        model.fit(self.features(data), labels)
        if labels is not None and hasattr(model, "classes_"):
            # label key order: first appearance in the training data
            model.class_order_ = pd.unique(labels).tolist()

        logs.info(
            f"[{self.__class__.__name__}] fitted {self.trainer} rows={len(data)} "
            f"features={self.feature_columns}"
        )
        return model

    # ------------------------------------------------------------------
    # inference
    # ------------------------------------------------------------------
    @abstractmethod
    def predict_frame(self, model: Any, data: pd.DataFrame) -> pd.DataFrame:
        raise NotImplementedError


def regression_output(model: Any, X: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame({"score": np.asarray(model.predict(X), dtype=float)})


def multiclass_output(model: Any, X: pd.DataFrame) -> pd.DataFrame:
    """
    predicted_label + score (probability vector in class order).

    Class order is `model.class_order_` (first appearance in the training
    labels) when the model carries it, else `model.classes_`.
    """
    proba = model.predict_proba(X)
    classes = np.asarray(model.classes_)

    order = getattr(model, "class_order_", None)
    if order is not None and sorted(map(str, order)) == sorted(map(str, classes.tolist())):
        position = {str(c): k for k, c in enumerate(classes.tolist())}
        perm = [position[str(c)] for c in order]
        classes = classes[perm]
        proba = proba[:, perm]
    frame = pd.DataFrame(
        {
            "predicted_label": classes[np.argmax(proba, axis=1)],
            "score": [row.tolist() for row in proba],
        }
    )
    # score order travels with the frame
    frame.attrs["classes"] = classes.tolist()
    return frame
