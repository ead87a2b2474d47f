# mlsamples/vision/yolo/yolo_bounding_box.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoundingBoxDimensions:
    """Top-left anchored, in model pixels."""

    x: float
    y: float
    width: float
    height: float


@dataclass
class YoloBoundingBox:
    dimensions: BoundingBoxDimensions
    label: str
    confidence: float
    box_color: str

    @property
    def left(self) -> float:
        return self.dimensions.x

    @property
    def top(self) -> float:
        return self.dimensions.y

    @property
    def right(self) -> float:
        return self.dimensions.x + self.dimensions.width

    @property
    def bottom(self) -> float:
        return self.dimensions.y + self.dimensions.height

    @property
    def area(self) -> float:
        return self.dimensions.width * self.dimensions.height


def intersection_over_union(a: YoloBoundingBox, b: YoloBoundingBox) -> float:
    if a.area <= 0 or b.area <= 0:
        return 0.0

    width = min(a.right, b.right) - max(a.left, b.left)
    height = min(a.bottom, b.bottom) - max(a.top, b.top)
    intersection = max(width, 0.0) * max(height, 0.0)

    return intersection / (a.area + b.area - intersection)
