# mlsamples/steps/anomaly_detect_step.py
from __future__ import annotations

from mlsamples import logs
from mlsamples.core.records import ProductSalesPrediction
from mlsamples.engines.anomaly.base import IidDetectEngine
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep


class AnomalyDetectStep(PipelineStep):
    """
    ctx.data[slot][column] → ctx.predictions[name] (ProductSalesPrediction per row)

    The detector needs no fitting; it is applied directly to the series.
    """

    def __init__(
        self,
        name: str,
        engine: IidDetectEngine,
        *,
        slot: str,
        column: str,
        inst=None,
    ):
        super().__init__(inst)
        self.name = name
        self.engine = engine
        self.slot = slot
        self.column = column

    def run(self, ctx: TutorialContext) -> TutorialContext:
        series = ctx.require_data(self.slot)[self.column]

        with self.leaf(ctx, f"detect_{self.name}"):
            rows = self.engine.detect(series.to_numpy())

        ctx.predictions[self.name] = [
            ProductSalesPrediction(prediction=[float(v) for v in row]) for row in rows
        ]

        alerts = int(rows[:, 0].sum()) if len(rows) else 0
        logs.info(f"[{self.step_name}] {ctx.name}.{self.name} points={len(rows)} alerts={alerts}")
        return ctx
