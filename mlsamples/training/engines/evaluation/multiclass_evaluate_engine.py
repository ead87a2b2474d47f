# mlsamples/training/engines/evaluation/multiclass_evaluate_engine.py
from __future__ import annotations

from typing import Dict, List

import numpy as np
import pandas as pd

from mlsamples.training.engines.evaluation.formatting import trim_decimal

_EPS = 1e-15


class MulticlassEvaluateEngine:
    """
    MulticlassEvaluateEngine（FINAL）

    - micro_accuracy: fraction of rows predicted correctly
    - macro_accuracy: mean per-class recall over classes in the evaluated data
    - log_loss_reduction: relative to the label prior of the evaluated data
    - per_class_log_loss: in model class order (predictions.attrs["classes"]);
      NaN for classes absent from the evaluated data

    Labels unknown to the model get probability eps.
    """

    def evaluate(
        self,
        *,
        y_true: pd.Series,
        predictions: pd.DataFrame,
        features: pd.DataFrame | None = None,
    ) -> Dict[str, object]:
        if len(predictions) == 0:
            raise ValueError("[MulticlassEvaluateEngine] empty eval dataset")

        classes = list(predictions.attrs.get("classes", []))
        if not classes:
            raise ValueError("[MulticlassEvaluateEngine] predictions carry no class order")

        y = np.asarray(y_true).astype(str)
        y_pred = np.asarray(predictions["predicted_label"]).astype(str)
        proba = np.asarray(predictions["score"].tolist(), dtype=float)

        index = {str(c): k for k, c in enumerate(classes)}
        rows = np.arange(len(y))
        cols = np.array([index.get(label, -1) for label in y])

        p_true = np.full(len(y), _EPS)
        known = cols >= 0
        p_true[known] = proba[rows[known], cols[known]]
        row_loss = -np.log(np.clip(p_true, _EPS, 1.0))

        ll = float(row_loss.mean())

        _, counts = np.unique(y, return_counts=True)
        q = counts / counts.sum()
        prior = float(-(q * np.log(q)).sum())

        recalls = [float((y_pred[y == label] == label).mean()) for label in np.unique(y)]

        per_class = []
        for c in classes:
            mask = y == str(c)
            per_class.append(float(row_loss[mask].mean()) if mask.any() else float("nan"))

        return {
            "micro_accuracy": float((y == y_pred).mean()),
            "macro_accuracy": float(np.mean(recalls)),
            "log_loss": ll,
            "log_loss_reduction": (prior - ll) / prior if prior > 0 else float("nan"),
            "per_class_log_loss": per_class,
        }

    @staticmethod
    def describe(metrics: Dict[str, object]) -> List[str]:
        return [
            "",
            "Metrics for Multi-class Classification model - Test Data",
            "",
            f"MicroAccuracy:    {trim_decimal(metrics['micro_accuracy'], 3)}",
            f"MacroAccuracy:    {trim_decimal(metrics['macro_accuracy'], 3)}",
            f"LogLoss:          {trim_decimal(metrics['log_loss'], 3, leading_zero=False)}",
            f"LogLossReduction: {trim_decimal(metrics['log_loss_reduction'], 3, leading_zero=False)}",
            "",
        ]
