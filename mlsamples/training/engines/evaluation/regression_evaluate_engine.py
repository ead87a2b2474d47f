# mlsamples/training/engines/evaluation/regression_evaluate_engine.py
from __future__ import annotations

import math
from typing import Dict, List

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from mlsamples.training.engines.evaluation.formatting import trim_decimal


class RegressionEvaluateEngine:
    """
    RegressionEvaluateEngine（FINAL）

    Responsibility:
    - Compare predictions["score"] with the label column
    - Return pure metrics dict (no side effects)
    """

    def evaluate(
        self,
        *,
        y_true: pd.Series,
        predictions: pd.DataFrame,
        features: pd.DataFrame | None = None,
    ) -> Dict[str, float]:
        if len(predictions) == 0:
            raise ValueError("[RegressionEvaluateEngine] empty eval dataset")

        y = np.asarray(y_true, dtype=float)
        score = np.asarray(predictions["score"], dtype=float)

        mse = float(mean_squared_error(y, score))
        r2 = float(r2_score(y, score)) if len(y) > 1 else float("nan")

        return {
            "r_squared": r2,
            "root_mean_squared_error": math.sqrt(mse),
            "mean_absolute_error": float(mean_absolute_error(y, score)),
            "mean_squared_error": mse,
        }

    @staticmethod
    def describe(metrics: Dict[str, float]) -> List[str]:
        return [
            "Model quality metrics evaluation",
            f"RSquared Score:          {trim_decimal(metrics['r_squared'], 2)}",
            f"Root Mean Squared Error: "
            f"{trim_decimal(metrics['root_mean_squared_error'], 2, leading_zero=False)}",
            "",
        ]
