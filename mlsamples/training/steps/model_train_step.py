# mlsamples/training/steps/model_train_step.py
from __future__ import annotations

from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.training.engines.model_train_engine import ModelTrainEngine


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep（FINAL）

    Contract:
    - consumes ctx.data[slot]
    - produces ctx.model, ctx.train_engine
    """

    def __init__(self, engine: ModelTrainEngine, slot: str = "train", inst=None):
        super().__init__(inst)
        self.engine = engine
        self.slot = slot

    def run(self, ctx: TutorialContext) -> TutorialContext:
        data = ctx.require_data(self.slot)

        with self.leaf(ctx, "train"):
            ctx.model = self.engine.train(data)
        ctx.train_engine = self.engine
        return ctx
