# mlsamples/workflows/image_transfer_learning.py
from __future__ import annotations

from pathlib import Path
from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import TransferLearningConfig
from mlsamples.core.records import ImageData, ImagePrediction
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.multiclass_evaluate_engine import (
    MulticlassEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.artifact_persist_step import ArtifactPersistStep
from mlsamples.training.steps.data_load_step import RecordsLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep
from mlsamples.utils.path import PathManager
from mlsamples.vision.image_source import read_image_list


def format_image_prediction(p: ImagePrediction) -> str:
    top = max(p.score) if p.score else float("nan")
    return (
        f"Image: {Path(p.image_path).name} predicted as: "
        f"{p.predicted_label_value} with score: {top}"
    )


def render_images(_, predictions) -> List[str]:
    return [format_image_prediction(p) for p in predictions] + [""]


def describe_metrics(metrics) -> List[str]:
    per_class = " , ".join(str(x) for x in metrics["per_class_log_loss"])
    return [
        f"LogLoss: {metrics['log_loss']}",
        f"PerClassLogLoss: {per_class}",
        "",
    ]


def build_transfer_learning_pipeline(cfg: TransferLearningConfig | None = None) -> TutorialPipeline:
    """
    Inception features + maximum-entropy classifier on a handful of tagged images.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.transfer_learning
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    def train_images():
        return read_image_list(
            PathManager.resolve(cfg.train_tags),
            PathManager.resolve(cfg.train_images_dir),
        )

    def predict_images():
        return read_image_list(
            PathManager.resolve(cfg.predict_image_list),
            PathManager.resolve(cfg.predict_images_dir),
            with_labels=False,
        )

    def single_image():
        return [ImageData(image_path=str(PathManager.resolve(cfg.predict_single_image)))]

    return TutorialPipeline(
        name="transfer_learning",
        steps=[
            RecordsLoadStep("train", train_images, ImageData, inst=inst),
            ModelTrainStep(engine, inst=inst),
            PredictStep("training_images", train_images, ImagePrediction, render_images, inst=inst),
            ModelEvaluateStep(
                MulticlassEvaluateEngine(),
                engine,
                slot="train",
                describe=describe_metrics,
                inst=inst,
            ),
            ArtifactPersistStep(version=cfg.model_version, inst=inst),
            PredictStep("image_list", predict_images, ImagePrediction, render_images, inst=inst),
            PredictStep("single", single_image, ImagePrediction, render_images, inst=inst),
        ],
        cfg=cfg,
        inst=inst,
        model_dir=PathManager.resolve(cfg.model_dir),
    )


def run_transfer_learning(cfg: TransferLearningConfig | None = None):
    return build_transfer_learning_pipeline(cfg).run()
