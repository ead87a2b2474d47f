# mlsamples/workflows/movie_recommendation.py
from __future__ import annotations

from typing import List

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import MovieRecommendationConfig
from mlsamples.core.records import MovieRating, MovieRatingPrediction
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.training.engines.evaluation.regression_evaluate_engine import (
    RegressionEvaluateEngine,
)
from mlsamples.training.engines.registry import resolve_model_train_engine
from mlsamples.training.steps.artifact_persist_step import ArtifactPersistStep
from mlsamples.training.steps.data_load_step import TextFileLoadStep
from mlsamples.training.steps.model_evaluate_step import ModelEvaluateStep
from mlsamples.training.steps.model_train_step import ModelTrainStep
from mlsamples.training.steps.predict_step import PredictStep
from mlsamples.utils.path import PathManager

SAMPLE_RATING = MovieRating(user_id=6, movie_id=10)

DEFAULT_THRESHOLD = 3.5


def is_recommended(score: float, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """
    Recommended iff the score rounded to one decimal exceeds the threshold.
    Python's round() is round-half-to-even; the decision is monotonic in score.
    """
    return round(score, 1) > threshold


def recommendation_renderer(threshold: float):
    def render(ratings, predictions) -> List[str]:
        lines = []
        for r, p in zip(ratings, predictions):
            verdict = "is recommended" if is_recommended(p.score, threshold) else "is not recommended"
            lines.append(f"Movie {r.movie_id:g} {verdict} for user {r.user_id:g}")
        return lines

    return render


def describe_metrics(metrics) -> List[str]:
    return [
        f"Root Mean Squared Error: {metrics['root_mean_squared_error']}",
        f"RSquared: {metrics['r_squared']}",
    ]


def build_movie_recommendation_pipeline(
    cfg: MovieRecommendationConfig | None = None,
) -> TutorialPipeline:
    """
    Matrix factorisation on (user, movie) → rating.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.movies
    inst = Instrumentation()
    engine = resolve_model_train_engine(cfg.trainer, cfg)

    def load(slot: str, path: str) -> TextFileLoadStep:
        return TextFileLoadStep(
            slot,
            path,
            MovieRating,
            has_header=cfg.has_header,
            separator=cfg.separator,
            inst=inst,
        )

    return TutorialPipeline(
        name="movie_recommendation",
        steps=[
            load("train", cfg.train_file),
            load("test", cfg.test_file),
            ModelTrainStep(engine, inst=inst),
            ModelEvaluateStep(
                RegressionEvaluateEngine(),
                engine,
                slot="test",
                describe=describe_metrics,
                inst=inst,
            ),
            PredictStep(
                "sample",
                [SAMPLE_RATING],
                MovieRatingPrediction,
                recommendation_renderer(cfg.recommendation_threshold),
                inst=inst,
            ),
            ArtifactPersistStep(version=cfg.model_version, inst=inst),
        ],
        cfg=cfg,
        inst=inst,
        model_dir=PathManager.resolve(cfg.model_dir),
    )


def run_movie_recommendation(cfg: MovieRecommendationConfig | None = None):
    return build_movie_recommendation_pipeline(cfg).run()
