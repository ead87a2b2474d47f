# mlsamples/pipeline/model_artifact.py
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Tuple

import joblib
import numpy as np

from mlsamples import logs
from mlsamples.utils.errors import ModelArtifactError
from mlsamples.utils.filesystem import FileSystem

MODEL_FILE = "model.joblib"
META_FILE = "artifact.json"


# ============================================================
# Model Spec (FROZEN)
# ============================================================
@dataclass(frozen=True)
class ModelSpec:
    trainer: str
    task: str
    version: str


# ============================================================
# Model Artifact
# ============================================================
@dataclass(frozen=True)
class ModelArtifact:
    """
    ModelArtifact（FINAL / FROZEN）

    Semantics:
    - path always points to an artifact ROOT directory
    - NEVER points to a single file
    """
    path: Path
    spec: ModelSpec
    metrics: dict[str, Any] | None = None
    created_at: datetime | None = None
    feature_names: list[str] | None = None

    @property
    def model_file(self) -> Path:
        return self.path / MODEL_FILE

    @property
    def meta_file(self) -> Path:
        return self.path / META_FILE


def _jsonable(metrics: dict[str, Any]) -> dict[str, Any]:
    out = {}
    for k, v in metrics.items():
        if isinstance(v, (list, tuple, np.ndarray)):
            out[k] = [float(x) for x in v]
        elif isinstance(v, (int, float, str, bool)) or v is None:
            out[k] = v
        else:
            out[k] = float(v)
    return out


def save_model_artifact(
    *,
    model: Any,
    artifact_dir: Path,
    spec: ModelSpec,
    metrics: dict[str, Any] | None = None,
    feature_names: list[str] | None = None,
) -> ModelArtifact:
    """
    Write model.joblib + artifact.json into artifact_dir.

    artifact.json is written last, so its presence marks a complete artifact.
    """
    artifact_dir = FileSystem.ensure_dir(artifact_dir)
    created_at = datetime.now(timezone.utc)

    joblib.dump(model, artifact_dir / MODEL_FILE)

    meta = {
        "created_at": created_at.isoformat(),
        "spec": {
            "trainer": spec.trainer,
            "task": spec.task,
            "version": spec.version,
        },
        "metrics": _jsonable(metrics or {}),
        "feature_names": list(feature_names or []),
    }
    FileSystem.safe_write_text(artifact_dir / META_FILE, json.dumps(meta, indent=2))

    artifact = ModelArtifact(
        path=artifact_dir,
        spec=spec,
        metrics=meta["metrics"],
        created_at=created_at,
        feature_names=meta["feature_names"],
    )
    logs.info(f"[ModelArtifact] saved {spec.trainer}/{spec.version} → {artifact_dir}")
    return artifact


def resolve_model_artifact_from_dir(artifact_dir: Path) -> ModelArtifact:
    """
    Read artifact.json only; the model itself is not loaded.
    """
    artifact_dir = Path(artifact_dir)
    meta_path = artifact_dir / META_FILE
    if not meta_path.exists():
        raise ModelArtifactError(
            f"[ModelArtifact] {META_FILE} not found in {artifact_dir}"
        )

    meta = json.loads(meta_path.read_text(encoding="utf-8"))

    return ModelArtifact(
        path=artifact_dir,
        spec=ModelSpec(
            trainer=meta["spec"]["trainer"],
            task=meta["spec"]["task"],
            version=meta["spec"]["version"],
        ),
        metrics=meta.get("metrics"),
        created_at=datetime.fromisoformat(meta["created_at"]),
        feature_names=meta.get("feature_names"),
    )


def load_model_artifact(artifact_dir: Path) -> Tuple[Any, ModelArtifact]:
    artifact = resolve_model_artifact_from_dir(artifact_dir)

    if not artifact.model_file.exists():
        raise ModelArtifactError(
            f"[ModelArtifact] {MODEL_FILE} not found in {artifact.path}"
        )

    model = joblib.load(artifact.model_file)
    logs.info(f"[ModelArtifact] loaded {artifact.spec.trainer} ← {artifact.path}")
    return model, artifact
