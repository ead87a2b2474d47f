# mlsamples/steps/bounding_box_filter_step.py
from __future__ import annotations

from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.vision.yolo.yolo_output_parser import YoloOutputParser


class BoundingBoxFilterStep(PipelineStep):
    """
    ctx.outputs[source] (YOLO grids) → ctx.predictions["boxes"] (filtered boxes per image)
    """

    def __init__(
        self,
        parser: YoloOutputParser,
        *,
        confidence_threshold: float,
        iou_threshold: float,
        max_boxes: int,
        source: str = "scores",
        inst=None,
    ):
        super().__init__(inst)
        self.parser = parser
        self.confidence_threshold = confidence_threshold
        self.iou_threshold = iou_threshold
        self.max_boxes = max_boxes
        self.source = source

    def run(self, ctx: TutorialContext) -> TutorialContext:
        with self.leaf(ctx, "parse_boxes"):
            ctx.predictions["boxes"] = [
                self.parser.filter_bounding_boxes(
                    self.parser.parse_outputs(grid, self.confidence_threshold),
                    self.max_boxes,
                    self.iou_threshold,
                )
                for grid in ctx.outputs.get(self.source, [])
            ]
        return ctx
