# mlsamples/workflows/object_detection.py
from __future__ import annotations

from typing import Optional

from mlsamples import logs
from mlsamples.config.app_config import AppConfig
from mlsamples.config.tutorial_config import ObjectDetectionConfig
from mlsamples.core.records import ImageNetData
from mlsamples.observability.instrumentation import Instrumentation
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.pipeline import TutorialPipeline
from mlsamples.steps.bounding_box_filter_step import BoundingBoxFilterStep
from mlsamples.steps.detection_report_step import DetectionReportStep
from mlsamples.steps.image_score_step import ImageScoreStep
from mlsamples.training.steps.data_load_step import RecordsLoadStep
from mlsamples.utils.path import PathManager
from mlsamples.vision.image_source import read_image_folder
from mlsamples.vision.image_transform_engine import ImageTransformEngine
from mlsamples.vision.onnx_model_scorer import OnnxModelScorer
from mlsamples.vision.yolo.box_drawer import BoundingBoxDrawer
from mlsamples.vision.yolo.yolo_output_parser import YoloOutputParser


def build_object_detection_pipeline(cfg: ObjectDetectionConfig | None = None) -> TutorialPipeline:
    """
    Tiny YOLOv2: images → grid → boxes → annotated copies + console listing.
    """
    if cfg is None:
        cfg = AppConfig.load().tutorials.object_detection
    inst = Instrumentation()

    scorer = OnnxModelScorer(
        PathManager.resolve(cfg.model_file),
        input_name=cfg.model_input,
        output_name=cfg.model_output,
        transform=ImageTransformEngine(cfg.image_width, cfg.image_height),
    )

    return TutorialPipeline(
        name="object_detection",
        steps=[
            RecordsLoadStep(
                "images",
                lambda: read_image_folder(PathManager.resolve(cfg.images_dir)),
                ImageNetData,
                inst=inst,
            ),
            ImageScoreStep(scorer, inst=inst),
            BoundingBoxFilterStep(
                YoloOutputParser(),
                confidence_threshold=cfg.confidence_threshold,
                iou_threshold=cfg.iou_threshold,
                max_boxes=cfg.max_boxes,
                inst=inst,
            ),
            DetectionReportStep(
                BoundingBoxDrawer(cfg.image_width, cfg.image_height),
                output_dir=cfg.output_dir,
                inst=inst,
            ),
        ],
        cfg=cfg,
        inst=inst,
    )


def run_object_detection(cfg: ObjectDetectionConfig | None = None) -> Optional[TutorialContext]:
    """
    Any failure is logged and printed; returns None instead of raising.
    """
    try:
        return build_object_detection_pipeline(cfg).run()
    except Exception as e:
        logs.exception(f"[object_detection] {e!r}")
        print(repr(e))
        return None
