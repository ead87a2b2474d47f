# mlsamples/workflows/hello_ml.py
from __future__ import annotations

from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import HelloMLConfig
from mlsamples.core.records import HouseData, HousePrediction
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.formatting import trim_decimal
from mlsamples.training.engines.evaluation.regression_evaluate_engine import (
    RegressionEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.data_load_step import RecordsLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep

# size in 1000 sq ft, price in $100k
TRAINING_HOUSES = [
    HouseData(size=1.1, price=1.2),
    HouseData(size=1.9, price=2.3),
    HouseData(size=2.8, price=3.0),
    HouseData(size=3.4, price=3.7),
]

TEST_HOUSES = [
    HouseData(size=1.1, price=0.98),
    HouseData(size=1.9, price=2.1),
    HouseData(size=2.8, price=2.9),
    HouseData(size=3.4, price=3.6),
]

SAMPLE_HOUSE = HouseData(size=2.5)


def render_price(houses, predictions) -> List[str]:
    return [
        f"Predicted price for size: {house.size * 1000:g} sq ft = ${pred.price * 100:,.2f}k"
        for house, pred in zip(houses, predictions)
    ]


def describe_metrics(metrics) -> List[str]:
    return [
        f"R^2: {trim_decimal(metrics['r_squared'], 2)}",
        f"RMS error: {trim_decimal(metrics['root_mean_squared_error'], 2)}",
    ]


def build_hello_ml_pipeline(cfg: HelloMLConfig | None = None) -> TutorialPipeline:
    """
    HelloML: fit price ~ size on four houses, predict one, evaluate on four more.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.hello_ml
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    return TutorialPipeline(
        name="hello_ml",
        steps=[
            RecordsLoadStep("train", TRAINING_HOUSES, HouseData, inst=inst),
            RecordsLoadStep("test", TEST_HOUSES, HouseData, inst=inst),
            ModelTrainStep(engine, inst=inst),
            PredictStep("sample", [SAMPLE_HOUSE], HousePrediction, render_price, inst=inst),
            ModelEvaluateStep(
                RegressionEvaluateEngine(),
                engine,
                slot="test",
                describe=describe_metrics,
                inst=inst,
            ),
        ],
        cfg=cfg,
        inst=inst,
    )


def run_hello_ml(cfg: HelloMLConfig | None = None):
    return build_hello_ml_pipeline(cfg).run()
