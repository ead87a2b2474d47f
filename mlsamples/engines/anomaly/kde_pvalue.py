# mlsamples/engines/anomaly/kde_pvalue.py
from __future__ import annotations

from typing import Literal, Sequence

import numpy as np
from scipy.stats import norm

Side = Literal["two_sided", "right", "left"]

# empty history → no evidence either way
EMPTY_HISTORY_PVALUE = 0.5


def silverman_bandwidth(history: np.ndarray) -> float:
    n = history.size
    std = float(history.std(ddof=1)) if n > 1 else 0.0
    if std > 0.0:
        return 1.06 * std * n ** (-1.0 / 5.0)
    # degenerate window: scale to the magnitude of the values
    return 1e-3 * max(1.0, float(np.abs(history).mean()))


def kde_pvalue(value: float, history: Sequence[float], side: Side = "two_sided") -> float:
    """
    p-value of `value` under a Gaussian KDE fit on `history`.
    """
    h = np.asarray(history, dtype=float)
    if h.size == 0:
        return EMPTY_HISTORY_PVALUE

    bw = silverman_bandwidth(h)
    cdf = float(norm.cdf((value - h) / bw).mean())

    if side == "right":
        p = 1.0 - cdf
    elif side == "left":
        p = cdf
    elif side == "two_sided":
        p = 2.0 * min(cdf, 1.0 - cdf)
    else:
        raise ValueError(f"unknown side: {side}")

    return float(np.clip(p, 0.0, 1.0))
