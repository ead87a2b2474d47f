# mlsamples/workflows/taxi_fare_regression.py
from __future__ import annotations

from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import TaxiFareConfig
from mlsamples.core.records import TaxiTrip, TaxiTripFarePrediction
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.formatting import trim_decimal
from mlsamples.training.engines.evaluation.regression_evaluate_engine import (
    RegressionEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.data_load_step import TextFileLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep

# actual fare of this trip is 15.5
SAMPLE_TRIP = TaxiTrip(
    vendor_id="VTS",
    rate_code="1",
    passenger_count=1,
    trip_time=1140,
    trip_distance=3.75,
    payment_type="CRD",
    fare_amount=0,
)


def render_fare(_, predictions) -> List[str]:
    return [
        "**********************************************************************",
        *[f"Predicted fare: {trim_decimal(p.fare_amount, 4)}, actual fare: 15.5" for p in predictions],
        "**********************************************************************",
    ]


def build_taxi_fare_pipeline(cfg: TaxiFareConfig | None = None) -> TutorialPipeline:
    """
    Regression: taxi trip → fare amount.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.taxi_fare
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    def load(slot: str, path: str) -> TextFileLoadStep:
        return TextFileLoadStep(
            slot,
            path,
            TaxiTrip,
            has_header=cfg.has_header,
            separator=cfg.separator,
            inst=inst,
        )

    return TutorialPipeline(
        name="taxi_fare",
        steps=[
            load("train", cfg.train_file),
            ModelTrainStep(engine, inst=inst),
            load("test", cfg.test_file),
            ModelEvaluateStep(RegressionEvaluateEngine(), engine, slot="test", inst=inst),
            PredictStep("sample", [SAMPLE_TRIP], TaxiTripFarePrediction, render_fare, inst=inst),
        ],
        cfg=cfg,
        inst=inst,
    )


def run_taxi_fare(cfg: TaxiFareConfig | None = None):
    return build_taxi_fare_pipeline(cfg).run()
