# mlsamples/api/app.py
from __future__ import annotations

from flask import Flask, jsonify, request

from mlsamples.api.decorators import handle_model_not_ready
from mlsamples.api.prediction_engine_pool import PredictionEnginePool
from mlsamples.config.app_config import AppConfig
from mlsamples.core.records import SentimentData, SentimentPrediction
from mlsamples.utils.path import PathManager
from mlsamples.workflows.sentiment_analysis import sentiment_label

# request key matches case-insensitively, underscores ignored
TEXT_KEY = "sentimenttext"


def sentiment_text_from(payload: dict):
    for key, value in payload.items():
        if isinstance(key, str) and key.replace("_", "").lower() == TEXT_KEY:
            return value
    return None


def build_sentiment_pool(cfg: AppConfig) -> PredictionEnginePool:
    return PredictionEnginePool(
        PathManager.resolve(cfg.api.model_dir),
        tutorial_cfg=cfg.tutorials.sentiment,
        output_type=SentimentPrediction,
        watch_for_changes=cfg.api.watch_for_changes,
    )


def create_app(cfg: AppConfig | None = None, pool: PredictionEnginePool | None = None) -> Flask:
    """
    Sentiment prediction service over the model persisted by the sentiment tutorial.
    """
    if pool is None:
        pool = build_sentiment_pool(cfg if cfg is not None else AppConfig.load())

    app = Flask(__name__)
    app.config["PREDICTION_POOL"] = pool

    @app.post("/api/predict/predictsentiment")
    @handle_model_not_ready
    def predict_sentiment():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "expected a JSON object"}), 400

        text = sentiment_text_from(payload)
        if not isinstance(text, str):
            return jsonify({"error": "missing sentiment_text"}), 400

        prediction = pool.predict(SentimentData(sentiment_text=text))
        return jsonify(sentiment_label(prediction.prediction))

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "model_loaded": pool.loaded})

    return app


if __name__ == "__main__":
    # python -m mlsamples.api.app
    _cfg = AppConfig.load()
    create_app(_cfg).run(host=_cfg.api.host, port=_cfg.api.port)
