# mlsamples/steps/detection_report_step.py
from __future__ import annotations

from typing import List, Sequence

from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.utils.path import PathManager
from mlsamples.vision.yolo.box_drawer import BoundingBoxDrawer
from mlsamples.vision.yolo.yolo_bounding_box import YoloBoundingBox


def format_detections(image_name: str, boxes: Sequence[YoloBoundingBox]) -> List[str]:
    lines = [f"Detected objects in {image_name}:"]
    lines += [f"{box.label} - Confidence Score: {box.confidence}" for box in boxes]
    lines.append("")
    return lines


class DetectionReportStep(PipelineStep):
    """
    Draw ctx.predictions["boxes"] onto copies of the images and print them.
    """

    def __init__(self, drawer: BoundingBoxDrawer, *, output_dir: str, slot: str = "images", inst=None):
        super().__init__(inst)
        self.drawer = drawer
        self.output_dir = output_dir
        self.slot = slot

    def run(self, ctx: TutorialContext) -> TutorialContext:
        images = ctx.require_data(self.slot)
        output_dir = PathManager.resolve(self.output_dir)

        drawn = []
        for (_, row), boxes in zip(images.iterrows(), ctx.predictions.get("boxes", [])):
            with self.leaf(ctx, "draw_boxes"):
                drawn.append(self.drawer.draw(row["image_path"], output_dir, boxes))
            for line in format_detections(row["label"], boxes):
                print(line)

        ctx.outputs["drawn_images"] = drawn
        return ctx
