#!filepath: mlsamples/pipeline/pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from mlsamples import logs
from mlsamples.pipeline.context import TutorialContext
from mlsamples.pipeline.step import PipelineStep
from mlsamples.observability.instrumentation import Instrumentation


class TutorialPipeline:
    """
    TutorialPipeline = 调度器（Scheduler）

    规则：
    - Pipeline 负责 orchestration（顺序 / 上下文）
    - Pipeline 不负责任何 Step 级计时
    - A step may stop the run by setting ctx.abort_pipeline
    """

    def __init__(
        self,
        name: str,
        steps: List[PipelineStep],
        cfg: Any,
        inst: Instrumentation,
        model_dir: Optional[Path] = None,
    ):
        self.name = name
        self.steps = steps
        self.cfg = cfg
        self.inst = inst
        self.model_dir = model_dir

    def new_context(self) -> TutorialContext:
        return TutorialContext(
            name=self.name,
            cfg=self.cfg,
            inst=self.inst,
            model_dir=self.model_dir,
        )

    def run(self) -> TutorialContext:
        logs.info(f"[Pipeline] ====== START {self.name} ======")

        ctx = self.new_context()

        for step in self.steps:
            if ctx.abort_pipeline:
                logs.warning(
                    f"[Pipeline] {self.name} aborted before {step.step_name}: "
                    f"{ctx.abort_reason}"
                )
                break
            with step.timed():
                ctx = step.run(ctx)

        self.inst.generate_timeline_report(self.name)
        logs.info(f"[Pipeline] ====== DONE {self.name} ======")
        return ctx
