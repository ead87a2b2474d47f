# mlsamples/engines/split_engine.py
from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd
from sklearn.model_selection import train_test_split


class TrainTestSplitEngine:
    """
    Random row split. Same seed + same frame → same split.
    """

    def split(
        self,
        frame: pd.DataFrame,
        *,
        test_fraction: float,
        seed: Optional[int] = None,
    ) -> Tuple[pd.DataFrame, pd.DataFrame]:
        if not 0.0 < test_fraction < 1.0:
            raise ValueError(
                f"test_fraction must be in (0, 1), got {test_fraction}"
            )
        if len(frame) < 2:
            raise ValueError("need at least two rows to split")

        train, test = train_test_split(
            frame,
            test_size=test_fraction,
            random_state=seed,
            shuffle=True,
        )
        return train.reset_index(drop=True), test.reset_index(drop=True)
