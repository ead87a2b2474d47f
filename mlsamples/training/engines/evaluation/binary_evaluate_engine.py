# mlsamples/training/engines/evaluation/binary_evaluate_engine.py
from __future__ import annotations

from typing import Dict, List

import numpy as np
import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)

from mlsamples.training.engines.evaluation.formatting import percent

_EPS = 1e-15


def binary_entropy(p: float) -> float:
    if p <= 0.0 or p >= 1.0:
        return 0.0
    return float(-(p * np.log(p) + (1.0 - p) * np.log(1.0 - p)))


class BinaryEvaluateEngine:
    """
    BinaryEvaluateEngine（FINAL）

    Inputs: boolean labels; predictions["prediction"], predictions["probability"].
    AUC is NaN when the evaluated data holds a single class.
    """

    def evaluate(
        self,
        *,
        y_true: pd.Series,
        predictions: pd.DataFrame,
        features: pd.DataFrame | None = None,
    ) -> Dict[str, float]:
        if len(predictions) == 0:
            raise ValueError("[BinaryEvaluateEngine] empty eval dataset")

        y = np.asarray(y_true, dtype=bool)
        y_pred = np.asarray(predictions["prediction"], dtype=bool)
        proba = np.clip(np.asarray(predictions["probability"], dtype=float), _EPS, 1 - _EPS)

        two_classes = len(np.unique(y)) == 2
        ll = float(log_loss(y, proba, labels=[False, True]))
        prior = binary_entropy(float(y.mean()))

        return {
            "accuracy": float(accuracy_score(y, y_pred)),
            "auc": float(roc_auc_score(y, proba)) if two_classes else float("nan"),
            "f1_score": float(f1_score(y, y_pred, zero_division=0)),
            "positive_precision": float(precision_score(y, y_pred, pos_label=True, zero_division=0)),
            "positive_recall": float(recall_score(y, y_pred, pos_label=True, zero_division=0)),
            "negative_precision": float(precision_score(y, y_pred, pos_label=False, zero_division=0)),
            "negative_recall": float(recall_score(y, y_pred, pos_label=False, zero_division=0)),
            "log_loss": ll,
            "log_loss_reduction": (prior - ll) / prior if prior > 0 else float("nan"),
        }

    @staticmethod
    def describe(metrics: Dict[str, float]) -> List[str]:
        return [
            "",
            "Model quality metrics evaluation",
            "--------------------------------",
            f"Accuracy: {percent(metrics['accuracy'])}",
            f"Auc: {percent(metrics['auc'])}",
            f"F1Score: {percent(metrics['f1_score'])}",
            "=============== End of model evaluation ===============",
        ]
