# mlsamples/workflows/sentiment_analysis.py
from __future__ import annotations

from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import SentimentConfig
from mlsamples.core.records import SentimentData, SentimentPrediction
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.binary_evaluate_engine import (
    BinaryEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.artifact_load_step import ArtifactLoadStep
from mlsamples.training.steps.artifact_persist_step import ArtifactPersistStep
from mlsamples.training.steps.data_load_step import TextFileLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep
from mlsamples.training.steps.train_test_split_step import TrainTestSplitStep
from mlsamples.utils.path import PathManager

SINGLE_SAMPLE = SentimentData(sentiment_text="This was a very bad steak")

BATCH_SAMPLES = [
    SentimentData(sentiment_text="This was a horrible meal"),
    SentimentData(sentiment_text="I love this spaghetti"),
]


def sentiment_label(prediction: bool) -> str:
    return "Positive" if prediction else "Negative"


def format_sentiment(p: SentimentPrediction) -> str:
    return (
        f"Sentiment: {p.sentiment_text} | Prediction: {sentiment_label(p.prediction)} "
        f"| Probability: {p.probability} "
    )


def render_single(_, predictions) -> List[str]:
    return [
        "",
        "=============== Prediction Test of model with a single sample and test dataset ===============",
        "",
        *[format_sentiment(p) for p in predictions],
        "",
        "=============== End of Predictions ===============",
    ]


def render_batch(_, predictions) -> List[str]:
    return [
        "",
        "=============== Prediction Test of loaded model with multiple samples ===============",
        "",
        *[format_sentiment(p) for p in predictions],
        "",
        "=============== End of predictions ===============",
    ]


def build_sentiment_pipeline(cfg: SentimentConfig | None = None) -> TutorialPipeline:
    """
    Binary classification of restaurant reviews.

    The persisted model also backs the prediction API.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.sentiment
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    return TutorialPipeline(
        name="sentiment",
        steps=[
            TextFileLoadStep(
                "data",
                cfg.data_file,
                SentimentData,
                has_header=cfg.has_header,
                separator=cfg.separator,
                inst=inst,
            ),
            TrainTestSplitStep(source="data", test_fraction=cfg.test_fraction, seed=cfg.seed, inst=inst),
            ModelTrainStep(engine, inst=inst),
            ModelEvaluateStep(BinaryEvaluateEngine(), engine, slot="test", inst=inst),
            PredictStep("single", [SINGLE_SAMPLE], SentimentPrediction, render_single, inst=inst),
            ArtifactPersistStep(version=cfg.model_version, inst=inst),
            ArtifactLoadStep(inst=inst),
            PredictStep("batch", BATCH_SAMPLES, SentimentPrediction, render_batch, inst=inst),
        ],
        cfg=cfg,
        inst=inst,
        model_dir=PathManager.resolve(cfg.model_dir),
    )


def run_sentiment(cfg: SentimentConfig | None = None):
    return build_sentiment_pipeline(cfg).run()
