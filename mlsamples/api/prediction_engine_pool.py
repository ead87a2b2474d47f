# mlsamples/api/prediction_engine_pool.py
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Optional, Type

from mlsamples import logs
from mlsamples.pipeline.model_artifact import META_FILE, load_model_artifact
from mlsamples.pipeline.prediction_engine import PredictionEngine
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.utils.errors import ModelArtifactError


class PredictionEnginePool:
    """
    One shared PredictionEngine for a persisted model.

    - loads on first use
    - reloads when artifact.json changes (watch_for_changes)
    - all access serialised by one lock
    """

    def __init__(
        self,
        model_dir: Path,
        *,
        tutorial_cfg: Any,
        output_type: Type,
        watch_for_changes: bool = True,
    ):
        self.model_dir = Path(model_dir)
        self.tutorial_cfg = tutorial_cfg
        self.output_type = output_type
        self.watch_for_changes = watch_for_changes

        self._lock = threading.Lock()
        self._engine: Optional[PredictionEngine] = None
        self._stamp: Optional[float] = None

    def _current_stamp(self) -> float:
        meta = self.model_dir / META_FILE
        if not meta.exists():
            raise ModelArtifactError(f"no model artifact in {self.model_dir}")
        return meta.stat().st_mtime

    def _load(self, stamp: float) -> None:
        model, artifact = load_model_artifact(self.model_dir)
        train_engine = resolve_model_train_engine(artifact.spec.trainer, self.tutorial_cfg)

        self._engine = PredictionEngine(model, train_engine, self.output_type)
        self._stamp = stamp
        logs.info(f"[PredictionEnginePool] loaded {artifact.spec.trainer}/{artifact.spec.version}")

    def _ensure(self) -> PredictionEngine:
        if self._engine is None:
            self._load(self._current_stamp())
        elif self.watch_for_changes:
            stamp = self._current_stamp()
            if stamp != self._stamp:
                logs.info(f"[PredictionEnginePool] {META_FILE} changed, reloading")
                self._load(stamp)
        return self._engine

    def predict(self, record: Any) -> Any:
        with self._lock:
            return self._ensure().predict(record)

    @property
    def loaded(self) -> bool:
        return self._engine is not None
