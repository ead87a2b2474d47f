# mlsamples/steps/anomaly_chart_step.py
from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt

from mlsamples import logs
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.utils.filesystem import FileSystem
from mlsamples.utils.path import PathManager

_MARKERS = {"spikes": ("red", "^"), "changepoints": ("orange", "s")}


class AnomalyChartStep(PipelineStep):
    """
    Optional: plot the series with spike and change-point alerts marked.
    Skipped when `chart_file` is None.
    """

    def __init__(
        self,
        chart_file: Optional[str],
        *,
        slot: str,
        column: str,
        label_column: str,
        detections: Sequence[str] = ("spikes", "changepoints"),
        inst=None,
    ):
        super().__init__(inst)
        self.chart_file = chart_file
        self.slot = slot
        self.column = column
        self.label_column = label_column
        self.detections = tuple(detections)

    def run(self, ctx: TutorialContext) -> TutorialContext:
        if not self.chart_file:
            return ctx

        frame = ctx.require_data(self.slot)
        path = PathManager.resolve(self.chart_file)
        FileSystem.ensure_dir(path.parent)

        x = list(range(len(frame)))

        plt.figure(figsize=(10, 4))
        plt.plot(x, frame[self.column], marker="o", label=self.column)

        for name in self.detections:
            hits = [
                i for i, p in enumerate(ctx.predictions.get(name, []))
                if p.prediction and p.prediction[0] == 1
            ]
            if hits:
                color, marker = _MARKERS.get(name, ("black", "x"))
                plt.scatter(hits, frame[self.column].iloc[hits], color=color, marker=marker, s=80, label=name, zorder=3)

        plt.xticks(x, frame[self.label_column], rotation=90, fontsize=7)
        plt.title(ctx.name)
        plt.legend()
        plt.tight_layout()
        plt.savefig(path)
        plt.close()

        ctx.outputs["chart"] = path
        logs.info(f"[{self.step_name}] chart → {path}")
        return ctx
