# mlsamples/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd


@dataclass
class TutorialContext:
    """
    TutorialContext（FINAL）

    Semantics:
    - One context == one tutorial run
    - Steps communicate only through this object
    - Holds facts / intermediate state, never business logic
    """

    # -------------------------
    # Identity
    # -------------------------
    name: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any
    model_dir: Optional[Path] = None

    # -------------------------
    # data layer: named slots ("train", "test", "sales", ...)
    # -------------------------
    data: Dict[str, pd.DataFrame] = field(default_factory=dict)

    # -------------------------
    # model layer
    # -------------------------
    model: Any = None
    train_engine: Any = None
    model_artifact: Any = None

    # -------------------------
    # result layer
    # -------------------------
    metrics: Dict[str, Any] = field(default_factory=dict)
    predictions: Dict[str, list] = field(default_factory=dict)
    outputs: Dict[str, Any] = field(default_factory=dict)

    # -------- runtime flags --------
    abort_pipeline: bool = False
    abort_reason: Optional[str] = None

    def require_data(self, slot: str) -> pd.DataFrame:
        if slot not in self.data:
            raise RuntimeError(
                f"[{self.name}] data slot '{slot}' not loaded; "
                f"available: {sorted(self.data)}"
            )
        return self.data[slot]

    def require_model(self) -> Any:
        if self.model is None:
            raise RuntimeError(f"[{self.name}] no model in context")
        return self.model
