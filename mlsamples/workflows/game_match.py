# mlsamples/workflows/game_match.py
from __future__ import annotations

from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import GameMatchConfig
from mlsamples.core.records import GameResult
from mlsamples.engines.skill_rating_engine import SkillRatingEngine
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.steps.skill_rating_step import SkillRatingStep, SkillReportStep
from mlsamples.training.steps.data_load_step import RecordsLoadStep

# six games between five players
GAMES = [
    GameResult(winner=0, loser=1),
    GameResult(winner=0, loser=3),
    GameResult(winner=0, loser=4),
    GameResult(winner=1, loser=2),
    GameResult(winner=3, loser=1),
    GameResult(winner=4, loser=2),
]


def build_game_match_pipeline(cfg: GameMatchConfig | None = None) -> TutorialPipeline:
    """
    GameMatch: infer player skills from who beat whom, print them best first.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.game_match
    inst = Instrumentation()
    engine = SkillRatingEngine(
        prior_mean=cfg.prior_mean,
        prior_variance=cfg.prior_variance,
        performance_variance=cfg.performance_variance,
    )

    return TutorialPipeline(
        name="game_match",
        steps=[
            RecordsLoadStep("games", GAMES, GameResult, inst=inst),
            SkillRatingStep(engine, slot="games", inst=inst),
            SkillReportStep(inst=inst),
        ],
        cfg=cfg,
        inst=inst,
    )


def run_game_match(cfg: GameMatchConfig | None = None):
    return build_game_match_pipeline(cfg).run()
