# mlsamples/vision/yolo/box_drawer.py
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from mlsamples.utils.filesystem import FileSystem
from mlsamples.vision.yolo.yolo_bounding_box import YoloBoundingBox


class BoundingBoxDrawer:
    """
    Draws labelled boxes onto a copy of the source image.

    Boxes are clipped to the model frame, then scaled from model pixels to
    the original image size.
    """

    def __init__(self, model_width: int, model_height: int, line_width: int = 3):
        self.model_width = model_width
        self.model_height = model_height
        self.line_width = line_width
        self.font = ImageFont.load_default()

    def scale_box(self, box: YoloBoundingBox, image_width: int, image_height: int):
        x = max(box.dimensions.x, 0.0)
        y = max(box.dimensions.y, 0.0)
        width = min(self.model_width - x, box.dimensions.width)
        height = min(self.model_height - y, box.dimensions.height)

        sx = image_width / self.model_width
        sy = image_height / self.model_height
        return x * sx, y * sy, max(width, 0.0) * sx, max(height, 0.0) * sy

    def draw(
        self,
        image_path: str | Path,
        output_dir: str | Path,
        boxes: Sequence[YoloBoundingBox],
    ) -> Path:
        image_path = Path(image_path)
        with Image.open(image_path) as src:
            image = src.convert("RGB")

        canvas = ImageDraw.Draw(image)
        for box in boxes:
            x, y, w, h = self.scale_box(box, image.width, image.height)
            text = f"{box.label} ({box.confidence * 100:.0f}%)"

            left, top, right, bottom = canvas.textbbox((0, 0), text, font=self.font)
            text_w, text_h = right - left, bottom - top
            text_y = max(y - text_h - 1, 0)

            canvas.rectangle([x, text_y, x + text_w, text_y + text_h], fill=box.box_color)
            canvas.text((x, text_y), text, fill="black", font=self.font)
            canvas.rectangle([x, y, x + w, y + h], outline=box.box_color, width=self.line_width)

        output = FileSystem.ensure_dir(output_dir) / image_path.name
        image.save(output)
        return output
