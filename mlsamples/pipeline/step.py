# mlsamples/pipeline/step.py
from __future__ import annotations

from mlsamples.pipeline.context import TutorialContext
from mlsamples.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step 基类（FINAL）

    职责：
      1. 作为 orchestration 层（顺序 / 条件执行）
      2. 提供 Step 级时间语义边界（parent scope）

    规则：
      - Step 本身不进入 timeline
      - 叶子计时发生在 Step 内部（record=True）
      - Step 行为不依赖 inst 是否存在
      - Semantics live in engines; steps only move data in and out of ctx
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    def timed(self):
        """
        Step 级时间语义边界（record=False，不进入 timeline）
        """
        return self.inst.timer(self.step_name, record=False)

    def leaf(self, ctx: TutorialContext, what: str):
        """Recorded leaf timer named `<tutorial>.<what>`."""
        return self.inst.timer(f"{ctx.name}.{what}")

    def run(self, ctx: TutorialContext) -> TutorialContext:
        raise NotImplementedError
