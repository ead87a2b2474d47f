# mlsamples/training/steps/model_evaluate_step.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.training.engines.model_train_engine import ModelTrainEngine

Describe = Callable[[Dict[str, float]], Iterable[str]]


class ModelEvaluateStep(PipelineStep):
    """
    Transform ctx.data[slot] with ctx.model, compute metrics, print them.

    Contract:
    - produces ctx.metrics (merged), run-level metric records
    - `describe` overrides the evaluator's console format
    """

    def __init__(
        self,
        evaluator,
        engine: ModelTrainEngine,
        *,
        slot: str = "test",
        describe: Optional[Describe] = None,
        inst=None,
    ):
        super().__init__(inst)
        self.evaluator = evaluator
        self.engine = engine
        self.slot = slot
        self.describe = describe

    def run(self, ctx: TutorialContext) -> TutorialContext:
        data = ctx.require_data(self.slot)
        model = ctx.require_model()

        with self.leaf(ctx, "evaluate"):
            predictions = self.engine.predict_frame(model, data)
            metrics = self.evaluator.evaluate(
                y_true=self.engine.labels(data),
                predictions=predictions,
                features=self.engine.features(data),
            )

        ctx.metrics.update(metrics)
        ctx.inst.metrics.record_many(ctx.name, metrics)

        describe = self.describe or self.evaluator.describe
        for line in describe(metrics):
            print(line)
        return ctx
