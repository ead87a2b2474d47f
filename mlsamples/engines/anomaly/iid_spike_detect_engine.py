# mlsamples/engines/anomaly/iid_spike_detect_engine.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from mlsamples.engines.anomaly.base import IidDetectEngine, MIN_HISTORY_FOR_ALERT
from mlsamples.engines.anomaly.kde_pvalue import kde_pvalue


class IidSpikeDetectEngine(IidDetectEngine):
    """
    Spike = a single point improbable under its recent history.

    Output per point: [alert, raw score, p-value]; alert iff the window holds at
    least MIN_HISTORY_FOR_ALERT points and p-value < 1 - confidence/100.
    """

    columns = ("alert", "score", "p_value")

    def __init__(self, confidence: float, pvalue_history_length: int):
        super().__init__(confidence, pvalue_history_length)

    def detect(self, series: Sequence[float]) -> np.ndarray:
        values = np.asarray(series, dtype=float)
        out = np.zeros((values.size, len(self.columns)), dtype=float)

        for t, value in enumerate(values):
            history = self.window(values, t)
            p = kde_pvalue(value, history)

            alert = history.size >= MIN_HISTORY_FOR_ALERT and p < self.alpha
            out[t] = (1.0 if alert else 0.0, value, p)

        return out
