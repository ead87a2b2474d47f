# mlsamples/vision/inception_featurizer.py
from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin

from mlsamples.vision.image_transform_engine import ImageTransformEngine
from mlsamples.vision.onnx_model_scorer import OnnxModelScorer


class InceptionFeaturizer(TransformerMixin, BaseEstimator):
    """
    image paths → Inception penultimate-layer features.

    Stateless: fit() only returns self. The ONNX session is not pickled;
    a reloaded featurizer reopens `model_path` on first transform.
    """

    def __init__(
        self,
        model_path="",
        input_name="input",
        output_name="softmax2_pre_activation",
        image_width=224,
        image_height=224,
        offset=117.0,
        scale=1.0,
        channels_last=True,
    ):
        self.model_path = model_path
        self.input_name = input_name
        self.output_name = output_name
        self.image_width = image_width
        self.image_height = image_height
        self.offset = offset
        self.scale = scale
        self.channels_last = channels_last

    def _get_scorer(self) -> OnnxModelScorer:
        scorer = getattr(self, "_scorer", None)
        if scorer is None:
            scorer = OnnxModelScorer(
                self.model_path,
                input_name=self.input_name,
                output_name=self.output_name,
                transform=ImageTransformEngine(
                    self.image_width,
                    self.image_height,
                    offset=self.offset,
                    scale=self.scale,
                    channels_last=self.channels_last,
                ),
            )
            self._scorer = scorer
        return scorer

    def fit(self, X, y=None):
        return self

    def transform(self, X):
        paths = np.asarray(X, dtype=object).ravel()
        scorer = self._get_scorer()
        return np.vstack([scorer.score_image(p) for p in paths])

    def __getstate__(self):
        state = super().__getstate__()
        state.pop("_scorer", None)
        return state
