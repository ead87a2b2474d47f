# mlsamples/training/steps/train_test_split_step.py
from __future__ import annotations

from typing import Optional

from mlsamples import logs
from mlsamples.engines.split_engine import TrainTestSplitEngine
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep


class TrainTestSplitStep(PipelineStep):
    """
    ctx.data[source] → ctx.data[train_slot], ctx.data[test_slot]
    """

    def __init__(
        self,
        *,
        source: str,
        test_fraction: float,
        seed: Optional[int] = None,
        train_slot: str = "train",
        test_slot: str = "test",
        inst=None,
    ):
        super().__init__(inst)
        self.source = source
        self.test_fraction = test_fraction
        self.seed = seed
        self.train_slot = train_slot
        self.test_slot = test_slot
        self.engine = TrainTestSplitEngine()

    def run(self, ctx: TutorialContext) -> TutorialContext:
        frame = ctx.require_data(self.source)

        train, test = self.engine.split(
            frame,
            test_fraction=self.test_fraction,
            seed=self.seed,
        )
        ctx.data[self.train_slot] = train
        ctx.data[self.test_slot] = test

        logs.info(f"[{self.step_name}] {ctx.name} train={len(train)} test={len(test)}")
        return ctx
