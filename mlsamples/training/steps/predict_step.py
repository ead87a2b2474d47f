# mlsamples/training/steps/predict_step.py
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Sequence, Type, Union

from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.prediction_engine import PredictionEngine
from mlsamples.pipeline.step import PipelineStep

Render = Callable[[Sequence[Any], List[Any]], Iterable[str]]
RecordSource = Union[Sequence[Any], Callable[[], Sequence[Any]]]


class PredictStep(PipelineStep):
    """
    Single or batch prediction with the model currently in ctx.

    Results land in ctx.predictions[name]; `render` turns (inputs, outputs)
    into console lines. `records` may be a callable, evaluated when the
    step runs.
    """

    def __init__(
        self,
        name: str,
        records: RecordSource,
        output_type: Type,
        render: Render,
        inst=None,
    ):
        super().__init__(inst)
        self.name = name
        self.records = records
        self.output_type = output_type
        self.render = render

    def run(self, ctx: TutorialContext) -> TutorialContext:
        records = list(self.records() if callable(self.records) else self.records)
        engine = PredictionEngine(ctx.require_model(), ctx.train_engine, self.output_type)

        with self.leaf(ctx, f"predict_{self.name}"):
            outputs = engine.predict_batch(records)

        ctx.predictions[self.name] = outputs
        for line in self.render(records, outputs):
            print(line)
        return ctx
