# mlsamples/workflows/iris_clustering.py
from __future__ import annotations

from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import IrisClusteringConfig
from mlsamples.core.records import ClusterPrediction, IrisData
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.clustering_evaluate_engine import (
    ClusteringEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.artifact_persist_step import ArtifactPersistStep
from mlsamples.training.steps.data_load_step import TextFileLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep
from mlsamples.utils.path import PathManager

SETOSA = IrisData(
    sepal_length=5.1,
    sepal_width=3.5,
    petal_length=1.4,
    petal_width=0.2,
)


def render_cluster(_, predictions) -> List[str]:
    lines = []
    for p in predictions:
        lines.append(f"Cluster: {p.predicted_cluster_id}")
        lines.append(f"Distances: {' '.join(str(d) for d in p.distances)}")
    return lines


def build_iris_clustering_pipeline(cfg: IrisClusteringConfig | None = None) -> TutorialPipeline:
    """
    Unsupervised: group iris flowers into k clusters.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.iris
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    return TutorialPipeline(
        name="iris",
        steps=[
            TextFileLoadStep(
                "data",
                cfg.data_file,
                IrisData,
                has_header=cfg.has_header,
                separator=cfg.separator,
                inst=inst,
            ),
            ModelTrainStep(engine, slot="data", inst=inst),
            ArtifactPersistStep(version=cfg.model_version, inst=inst),
            ModelEvaluateStep(ClusteringEvaluateEngine(), engine, slot="data", inst=inst),
            PredictStep("setosa", [SETOSA], ClusterPrediction, render_cluster, inst=inst),
        ],
        cfg=cfg,
        inst=inst,
        model_dir=PathManager.resolve(cfg.model_dir),
    )


def run_iris_clustering(cfg: IrisClusteringConfig | None = None):
    return build_iris_clustering_pipeline(cfg).run()
