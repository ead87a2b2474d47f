# mlsamples/workflows/issue_classification.py
from __future__ import annotations

from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import IssueClassificationConfig
from mlsamples.core.records import GitHubIssue, IssuePrediction
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.multiclass_evaluate_engine import (
    MulticlassEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.artifact_load_step import ArtifactLoadStep
from mlsamples.training.steps.artifact_persist_step import ArtifactPersistStep
from mlsamples.training.steps.data_load_step import TextFileLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep
from mlsamples.utils.path import PathManager

TRAINED_MODEL_SAMPLE = GitHubIssue(
    title="WebSockets communication is slow in my machine",
    description=(
        "The WebSockets communication used under the covers by SignalR "
        "looks like it is going slow in my development machine.."
    ),
)

LOADED_MODEL_SAMPLE = GitHubIssue(
    title="Entity Framework crashes",
    description="When connecting to the database, EF is crashing",
)


def render_trained(_, predictions) -> List[str]:
    return [f"Single Prediction just-trained-model - Result: {p.area}" for p in predictions]


def render_loaded(_, predictions) -> List[str]:
    return [f"Single Prediction - Result: {p.area}" for p in predictions]


def build_issue_classification_pipeline(
    cfg: IssueClassificationConfig | None = None,
) -> TutorialPipeline:
    """
    Multiclass: GitHub issue title + description → area label.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.issues
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    def load(slot: str, path: str) -> TextFileLoadStep:
        return TextFileLoadStep(
            slot,
            path,
            GitHubIssue,
            has_header=cfg.has_header,
            separator=cfg.separator,
            inst=inst,
        )

    return TutorialPipeline(
        name="issues",
        steps=[
            load("train", cfg.train_file),
            ModelTrainStep(engine, inst=inst),
            PredictStep("trained", [TRAINED_MODEL_SAMPLE], IssuePrediction, render_trained, inst=inst),
            load("test", cfg.test_file),
            ModelEvaluateStep(MulticlassEvaluateEngine(), engine, slot="test", inst=inst),
            ArtifactPersistStep(version=cfg.model_version, inst=inst),
            ArtifactLoadStep(inst=inst),
            PredictStep("loaded", [LOADED_MODEL_SAMPLE], IssuePrediction, render_loaded, inst=inst),
        ],
        cfg=cfg,
        inst=inst,
        model_dir=PathManager.resolve(cfg.model_dir),
    )


def run_issue_classification(cfg: IssueClassificationConfig | None = None):
    return build_issue_classification_pipeline(cfg).run()
