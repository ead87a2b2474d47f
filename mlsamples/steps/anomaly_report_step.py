# mlsamples/steps/anomaly_report_step.py
from __future__ import annotations

from typing import List, Sequence

from mlsamples.core.records import ProductSalesPrediction
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep

SPIKE_HEADER = "Alert\tScore\tP-Value"
SPIKE_MARK = " <-- Spike detected"
CHANGEPOINT_HEADER = "Alert\tScore\tP-Value\tMartingale value"
CHANGEPOINT_MARK = " <-- alert is on, predicted changepoint"


def format_anomaly_rows(
    predictions: Sequence[ProductSalesPrediction],
    *,
    header: str,
    mark: str,
) -> List[str]:
    lines = [header]
    for p in predictions:
        alert, *values = p.prediction
        line = "\t".join([str(int(alert))] + [f"{v:.2f}" for v in values])
        if alert == 1:
            line += mark
        lines.append(line)
    lines.append("")
    return lines


class AnomalyReportStep(PipelineStep):
    """Print ctx.predictions[name] as a tab-separated alert table."""

    def __init__(self, name: str, *, header: str, mark: str, inst=None):
        super().__init__(inst)
        self.name = name
        self.header = header
        self.mark = mark

    def run(self, ctx: TutorialContext) -> TutorialContext:
        lines = format_anomaly_rows(
            ctx.predictions.get(self.name, []),
            header=self.header,
            mark=self.mark,
        )
        for line in lines:
            print(line)
        ctx.outputs[f"{self.name}_report"] = lines
        return ctx
