# mlsamples/engines/anomaly/iid_changepoint_detect_engine.py
from __future__ import annotations

import math
from collections import deque
from typing import Sequence

import numpy as np

from mlsamples.engines.anomaly.base import IidDetectEngine, MIN_HISTORY_FOR_ALERT
from mlsamples.engines.anomaly.kde_pvalue import kde_pvalue

_MIN_PVALUE = 1e-12
_MAX_LOG_MARTINGALE = 700.0


class IidChangePointDetectEngine(IidDetectEngine):
    """
    Change point = persistent shift in the distribution of the series.

    Power martingale over the last `change_history_length` p-values:
        log M = sum(log(eps) + (eps - 1) * log(p))
    Points with fewer than two history points do not update M.
    Alert iff M > 1 / (1 - confidence/100); after an alert, alerts are
    suppressed for `change_history_length` points.

    Output per point: [alert, raw score, p-value, martingale].
    """

    columns = ("alert", "score", "p_value", "martingale")

    def __init__(
        self,
        confidence: float,
        change_history_length: int,
        martingale_epsilon: float = 0.1,
    ):
        super().__init__(confidence, change_history_length)
        if not 0.0 < martingale_epsilon < 1.0:
            raise ValueError(
                f"martingale_epsilon must be in (0, 1), got {martingale_epsilon}"
            )
        self.epsilon = float(martingale_epsilon)

    @property
    def log_threshold(self) -> float:
        return -math.log(self.alpha)

    def _log_update(self, p: float) -> float:
        p = max(p, _MIN_PVALUE)
        return math.log(self.epsilon) + (self.epsilon - 1.0) * math.log(p)

    def detect(self, series: Sequence[float]) -> np.ndarray:
        values = np.asarray(series, dtype=float)
        out = np.zeros((values.size, len(self.columns)), dtype=float)

        updates: deque = deque(maxlen=self.history_length)
        cooldown = 0

        for t, value in enumerate(values):
            history = self.window(values, t)
            p = kde_pvalue(value, history)

            if history.size >= MIN_HISTORY_FOR_ALERT:
                updates.append(self._log_update(p))
            log_m = min(sum(updates), _MAX_LOG_MARTINGALE)

            alert = (
                cooldown == 0
                and history.size >= MIN_HISTORY_FOR_ALERT
                and log_m > self.log_threshold
            )
            if alert:
                cooldown = self.history_length
            elif cooldown > 0:
                cooldown -= 1

            out[t] = (1.0 if alert else 0.0, value, p, math.exp(log_m))

        return out
