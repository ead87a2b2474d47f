# mlsamples/training/steps/artifact_persist_step.py
from __future__ import annotations

from mlsamples import logs
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.model_artifact import ModelSpec, save_model_artifact
from mlsamples.pipeline.step import PipelineStep


class ArtifactPersistStep(PipelineStep):
    """
    ArtifactPersistStep（FINAL）

    Semantics:
    - Persist ctx.model into ctx.model_dir
    - Produces ctx.model_artifact
    """

    def __init__(self, version: str = "v1", inst=None):
        super().__init__(inst)
        self.version = version

    def run(self, ctx: TutorialContext) -> TutorialContext:
        model = ctx.require_model()
        if ctx.model_dir is None:
            raise RuntimeError(f"[{self.step_name}] {ctx.name} has no model_dir")

        engine = ctx.train_engine
        spec = ModelSpec(
            trainer=engine.trainer,
            task=engine.task,
            version=self.version,
        )

        with self.leaf(ctx, "persist"):
            ctx.model_artifact = save_model_artifact(
                model=model,
                artifact_dir=ctx.model_dir,
                spec=spec,
                metrics=dict(ctx.metrics),
                feature_names=list(engine.feature_columns),
            )

        logs.info(f"[{self.step_name}] model_artifact={ctx.model_artifact.path}")
        return ctx
