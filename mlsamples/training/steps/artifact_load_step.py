# mlsamples/training/steps/artifact_load_step.py
from __future__ import annotations

from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.model_artifact import load_model_artifact
from mlsamples.pipeline.step import PipelineStep


class ArtifactLoadStep(PipelineStep):
    """
    Replace ctx.model with the model persisted in ctx.model_dir.
    """

    def run(self, ctx: TutorialContext) -> TutorialContext:
        if ctx.model_dir is None:
            raise RuntimeError(f"[{self.step_name}] {ctx.name} has no model_dir")

        with self.leaf(ctx, "load_model"):
            ctx.model, ctx.model_artifact = load_model_artifact(ctx.model_dir)
        return ctx
