# mlsamples/vision/image_transform_engine.py
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image


class ImageTransformEngine:
    """
    LoadImages → ResizeImages → ExtractPixels.

    Pixel values are `(pixel - offset) * scale` as float32, laid out
    (C, H, W) by default or (H, W, C) when `channels_last`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        offset: float = 0.0,
        scale: float = 1.0,
        channels_last: bool = False,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.offset = offset
        self.scale = scale
        self.channels_last = channels_last

    @staticmethod
    def load(path: str | Path) -> Image.Image:
        with Image.open(path) as img:
            return img.convert("RGB")

    def resize(self, image: Image.Image) -> Image.Image:
        if image.size == (self.width, self.height):
            return image
        return image.resize((self.width, self.height), Image.Resampling.BILINEAR)

    def extract_pixels(self, image: Image.Image) -> np.ndarray:
        pixels = np.asarray(image, dtype=np.float32)
        pixels = (pixels - np.float32(self.offset)) * np.float32(self.scale)
        if not self.channels_last:
            pixels = pixels.transpose(2, 0, 1)
        return np.ascontiguousarray(pixels)

    def transform(self, path: str | Path) -> np.ndarray:
        return self.extract_pixels(self.resize(self.load(path)))

    def transform_batch(self, paths: Sequence[str | Path]) -> np.ndarray:
        return np.stack([self.transform(p) for p in paths])
