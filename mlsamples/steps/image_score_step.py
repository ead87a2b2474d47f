# mlsamples/steps/image_score_step.py
from __future__ import annotations

from mlsamples import logs
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.vision.onnx_model_scorer import OnnxModelScorer


class ImageScoreStep(PipelineStep):
    """
    ctx.data[slot]["image_path"] → ctx.outputs[output] (one flat tensor per image)
    """

    def __init__(self, scorer: OnnxModelScorer, *, slot: str = "images", output: str = "scores", inst=None):
        super().__init__(inst)
        self.scorer = scorer
        self.slot = slot
        self.output = output

    def run(self, ctx: TutorialContext) -> TutorialContext:
        paths = ctx.require_data(self.slot)["image_path"].tolist()
        logs.info(f"[{self.step_name}] {ctx.name} scoring {len(paths)} images")

        with self.leaf(ctx, "score_images"):
            ctx.outputs[self.output] = self.scorer.score(paths)
        return ctx
