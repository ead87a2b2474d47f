# mlsamples/engines/anomaly/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

# alerts need at least this many history points
MIN_HISTORY_FOR_ALERT = 2


class IidDetectEngine(ABC):
    """
    Base for i.i.d. series detectors.

    Each point is scored against the sliding window of the points before it;
    the window never includes the point itself.
    """

    columns: tuple = ()

    def __init__(self, confidence: float, history_length: int):
        if not 0.0 < confidence < 100.0:
            raise ValueError(f"confidence must be in (0, 100), got {confidence}")
        if history_length < 1:
            raise ValueError(f"history length must be >= 1, got {history_length}")

        self.confidence = float(confidence)
        self.history_length = int(history_length)

    @property
    def alpha(self) -> float:
        return 1.0 - self.confidence / 100.0

    def window(self, values: np.ndarray, t: int) -> np.ndarray:
        return values[max(0, t - self.history_length):t]

    @abstractmethod
    def detect(self, series: Sequence[float]) -> np.ndarray:
        """
        Returns
        -------
        np.ndarray
            shape (n, len(self.columns)); column 0 is the 0/1 alert flag.
        """
        raise NotImplementedError
