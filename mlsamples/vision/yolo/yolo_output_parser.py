# mlsamples/vision/yolo/yolo_output_parser.py
"""
Tiny YOLOv2 (Pascal VOC) output decoding.

The `grid` output is 125 x 13 x 13, channel-major: for each of the 5
anchor boxes per cell, 25 channels = x, y, w, h, objectness, 20 class
scores. Value (channel c, row y, col x) sits at `c * 169 + y * 13 + x`.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from mlsamples.vision.yolo.yolo_bounding_box import (
    BoundingBoxDimensions,
    YoloBoundingBox,
    intersection_over_union,
)

ROW_COUNT = 13
COL_COUNT = 13
CHANNEL_COUNT = 125
BOXES_PER_CELL = 5
BOX_INFO_FEATURE_COUNT = 5
CLASS_COUNT = 20
CELL_WIDTH = 32.0
CELL_HEIGHT = 32.0

CHANNEL_STRIDE = ROW_COUNT * COL_COUNT

ANCHORS = (1.08, 1.19, 3.42, 4.41, 6.63, 11.38, 9.42, 5.11, 16.62, 10.52)

LABELS = (
    "aeroplane", "bicycle", "bird", "boat", "bottle",
    "bus", "car", "cat", "chair", "cow",
    "diningtable", "dog", "horse", "motorbike", "person",
    "pottedplant", "sheep", "sofa", "train", "tvmonitor",
)

CLASS_COLORS = (
    "khaki", "fuchsia", "silver", "royalblue", "green",
    "darkorange", "purple", "gold", "red", "aquamarine",
    "lime", "aliceblue", "sienna", "orchid", "tan",
    "lightpink", "yellow", "hotpink", "olivedrab", "sandybrown",
)


def sigmoid(value: float) -> float:
    return float(1.0 / (1.0 + np.exp(-value)))


def softmax(values: np.ndarray) -> np.ndarray:
    shifted = np.exp(values - np.max(values))
    return shifted / shifted.sum()


class YoloOutputParser:

    def __init__(self, labels: Sequence[str] = LABELS, colors: Sequence[str] = CLASS_COLORS):
        if len(labels) != CLASS_COUNT:
            raise ValueError(f"expected {CLASS_COUNT} labels, got {len(labels)}")
        self.labels = tuple(labels)
        self.colors = tuple(colors)

    # ------------------------------------------------------------------
    # decoding
    # ------------------------------------------------------------------
    @staticmethod
    def _grid(output: Sequence[float] | np.ndarray) -> np.ndarray:
        flat = np.asarray(output, dtype=np.float32).reshape(-1)
        expected = CHANNEL_COUNT * CHANNEL_STRIDE
        if flat.size != expected:
            raise ValueError(f"YOLO output must have {expected} values, got {flat.size}")
        return flat.reshape(CHANNEL_COUNT, ROW_COUNT, COL_COUNT)

    def parse_outputs(
        self,
        output: Sequence[float] | np.ndarray,
        threshold: float = 0.3,
    ) -> List[YoloBoundingBox]:
        grid = self._grid(output)
        boxes: List[YoloBoundingBox] = []

        for row in range(ROW_COUNT):
            for col in range(COL_COUNT):
                for box in range(BOXES_PER_CELL):
                    channel = box * (CLASS_COUNT + BOX_INFO_FEATURE_COUNT)
                    tx, ty, tw, th, to = grid[channel:channel + BOX_INFO_FEATURE_COUNT, row, col]

                    confidence = sigmoid(to)
                    if confidence < threshold:
                        continue

                    start = channel + BOX_INFO_FEATURE_COUNT
                    classes = softmax(grid[start:start + CLASS_COUNT, row, col].astype(np.float64))
                    top_class = int(np.argmax(classes))
                    top_score = float(classes[top_class]) * confidence
                    if top_score < threshold:
                        continue

                    center_x = (col + sigmoid(tx)) * CELL_WIDTH
                    center_y = (row + sigmoid(ty)) * CELL_HEIGHT
                    width = float(np.exp(tw)) * CELL_WIDTH * ANCHORS[box * 2]
                    height = float(np.exp(th)) * CELL_HEIGHT * ANCHORS[box * 2 + 1]

                    boxes.append(
                        YoloBoundingBox(
                            dimensions=BoundingBoxDimensions(
                                x=center_x - width / 2,
                                y=center_y - height / 2,
                                width=width,
                                height=height,
                            ),
                            label=self.labels[top_class],
                            confidence=top_score,
                            box_color=self.colors[top_class % len(self.colors)],
                        )
                    )

        return boxes

    # ------------------------------------------------------------------
    # non-max suppression
    # ------------------------------------------------------------------
    @staticmethod
    def filter_bounding_boxes(
        boxes: Sequence[YoloBoundingBox],
        limit: int,
        threshold: float,
    ) -> List[YoloBoundingBox]:
        """
        Greedy suppression by confidence; at most `limit` boxes.
        """
        ordered = sorted(boxes, key=lambda b: b.confidence, reverse=True)
        active = [True] * len(ordered)
        results: List[YoloBoundingBox] = []

        for i, box in enumerate(ordered):
            if len(results) >= limit:
                break
            if not active[i]:
                continue

            results.append(box)
            for j in range(i + 1, len(ordered)):
                if active[j] and intersection_over_union(box, ordered[j]) > threshold:
                    active[j] = False

        return results
