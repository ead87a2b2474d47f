#!filepath: tests/api/test_sentiment_api.py
import os

import pandas as pd
import pytest

from mlsamples.api.app import create_app
from mlsamples.api.prediction_engine_pool import PredictionEnginePool
from mlsamples.config.tutorial_config import SentimentConfig
from mlsamples.core.records import SentimentData, SentimentPrediction
from mlsamples.pipeline.model_artifact import META_FILE, ModelSpec, save_model_artifact
from mlsamples.training.engines.model.sdca_logistic_regression_train_engine import (
    SdcaLogisticRegressionTrainEngine,
)

POSITIVE = ["good food", "great place", "love it", "really good", "great service", "lovely staff"]
NEGATIVE = ["bad food", "awful place", "hate it", "really bad", "terrible service", "rude staff"]


def _save_sentiment_model(model_dir, version="v1"):
    cfg = SentimentConfig(seed=0)
    engine = SdcaLogisticRegressionTrainEngine(cfg)
    data = pd.DataFrame(
        {
            "sentiment_text": POSITIVE + NEGATIVE,
            "label": [True] * len(POSITIVE) + [False] * len(NEGATIVE),
        }
    )
    model = engine.train(data)
    save_model_artifact(
        model=model,
        artifact_dir=model_dir,
        spec=ModelSpec(trainer=engine.trainer, task=engine.task, version=version),
    )


def _pool(model_dir, watch=True):
    return PredictionEnginePool(
        model_dir,
        tutorial_cfg=SentimentConfig(),
        output_type=SentimentPrediction,
        watch_for_changes=watch,
    )


@pytest.fixture
def model_dir(tmp_path):
    d = tmp_path / "Models" / "sentiment"
    _save_sentiment_model(d)
    return d


@pytest.fixture
def client(model_dir):
    app = create_app(pool=_pool(model_dir))
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_predict_positive_and_negative(client):
    r = client.post("/api/predict/predictsentiment", json={"sentiment_text": "great service"})
    assert r.status_code == 200
    assert r.get_json() == "Positive"

    r = client.post("/api/predict/predictsentiment", json={"SentimentText": "terrible service"})
    assert r.status_code == 200
    assert r.get_json() == "Negative"


@pytest.mark.parametrize(
    "key, text, expected",
    [
        ("sentimentText", "great place", "Positive"),
        ("SENTIMENTTEXT", "awful place", "Negative"),
        ("Sentiment_Text", "lovely staff", "Positive"),
    ],
)
def test_predict_matches_text_key_case_insensitively(client, key, text, expected):
    r = client.post("/api/predict/predictsentiment", json={key: text})

    assert r.status_code == 200
    assert r.get_json() == expected


@pytest.mark.parametrize("payload", [{}, {"sentiment_text": 3}, {"text": "hello"}])
def test_predict_rejects_bad_payload(client, payload):
    r = client.post("/api/predict/predictsentiment", json=payload)
    assert r.status_code == 400


def test_predict_without_model_is_503(tmp_path):
    app = create_app(pool=_pool(tmp_path / "empty"))
    with app.test_client() as client:
        r = client.post("/api/predict/predictsentiment", json={"sentiment_text": "good"})

    assert r.status_code == 503
    assert r.get_json()["error"] == "model not available"


def test_health_reports_lazy_load(client):
    assert client.get("/health").get_json() == {"ok": True, "model_loaded": False}

    client.post("/api/predict/predictsentiment", json={"sentiment_text": "good food"})
    assert client.get("/health").get_json()["model_loaded"] is True


def test_pool_reloads_when_artifact_changes(model_dir):
    pool = _pool(model_dir)
    pool.predict(SentimentData(sentiment_text="good food"))
    first = pool._engine

    _save_sentiment_model(model_dir, version="v2")
    meta = model_dir / META_FILE
    stamp = meta.stat().st_mtime + 10
    os.utime(meta, (stamp, stamp))

    pool.predict(SentimentData(sentiment_text="good food"))
    assert pool._engine is not first


def test_pool_without_watch_keeps_engine(model_dir):
    pool = _pool(model_dir, watch=False)
    pool.predict(SentimentData(sentiment_text="good food"))
    first = pool._engine

    meta = model_dir / META_FILE
    stamp = meta.stat().st_mtime + 10
    os.utime(meta, (stamp, stamp))

    pool.predict(SentimentData(sentiment_text="good food"))
    assert pool._engine is first
