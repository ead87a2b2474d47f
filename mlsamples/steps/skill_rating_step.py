# mlsamples/steps/skill_rating_step.py
from __future__ import annotations

from typing import List, Sequence

from mlsamples import logs
from mlsamples.core.records import PlayerSkill, frame_to_records
from mlsamples.engines.skill_rating_engine import SkillRatingEngine
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep


def format_gaussian(mean: float, variance: float) -> str:
    return f"Gaussian({mean:.4g}, {variance:.4g})"


def format_skills(skills: Sequence[PlayerSkill]) -> List[str]:
    return [
        f"Player {s.player} skill: {format_gaussian(s.mean, s.variance)}" for s in skills
    ]


class SkillRatingStep(PipelineStep):
    """
    ctx.data[slot] (winner, loser) → ctx.predictions["skills"], best first.
    """

    def __init__(self, engine: SkillRatingEngine, *, slot: str = "games", inst=None):
        super().__init__(inst)
        self.engine = engine
        self.slot = slot

    def run(self, ctx: TutorialContext) -> TutorialContext:
        games = ctx.require_data(self.slot)

        with self.leaf(ctx, "infer_skills"):
            frame = self.engine.infer(games["winner"].to_numpy(), games["loser"].to_numpy())

        ctx.predictions["skills"] = frame_to_records(frame, PlayerSkill)
        logs.info(f"[{self.step_name}] {ctx.name} players={len(frame)}")
        return ctx


class SkillReportStep(PipelineStep):
    """Print ctx.predictions["skills"], one line per player."""

    def run(self, ctx: TutorialContext) -> TutorialContext:
        lines = format_skills(ctx.predictions.get("skills", []))
        for line in lines:
            print(line)
        ctx.outputs["skills_report"] = lines
        return ctx
