# mlsamples/vision/onnx_model_scorer.py
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np
import onnxruntime as ort

from mlsamples import logs
from mlsamples.utils.filesystem import FileSystem
from mlsamples.vision.image_transform_engine import ImageTransformEngine


class OnnxModelScorer:
    """
    Applies a pre-trained ONNX model to images.

    The inference session is opened on first use. Images are scored one at
    a time (batch of 1); each result is the flattened output tensor.
    """

    def __init__(
        self,
        model_path: str | Path,
        *,
        input_name: str,
        output_name: str,
        transform: ImageTransformEngine,
    ):
        self.model_path = Path(model_path)
        self.input_name = input_name
        self.output_name = output_name
        self.transform = transform
        self._session = None

    @property
    def session(self):
        if self._session is None:
            FileSystem.require_file(self.model_path, "ONNX model")

            logs.info(
                f"[OnnxModelScorer] load {self.model_path} "
                f"image size=({self.transform.width},{self.transform.height})"
            )
            self._session = ort.InferenceSession(
                str(self.model_path),
                providers=["CPUExecutionProvider"],
            )
        return self._session

    def score_array(self, batch: np.ndarray) -> np.ndarray:
        outputs = self.session.run(
            [self.output_name],
            {self.input_name: batch.astype(np.float32, copy=False)},
        )
        return np.asarray(outputs[0], dtype=np.float32)

    def score_image(self, path: str | Path) -> np.ndarray:
        pixels = self.transform.transform(path)
        return self.score_array(pixels[np.newaxis, ...]).reshape(-1)

    def score(self, image_paths: Sequence[str | Path]) -> List[np.ndarray]:
        return [self.score_image(p) for p in image_paths]
