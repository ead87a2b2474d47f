#!filepath: mlsamples/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from mlsamples.observability.timer import Timer
from mlsamples.observability.metrics import MetricRecorder
from mlsamples.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Instrumentation（Leaf-only accounting + Parent scope）。

    规则：
    1. Timeline 只记录【叶子节点】（record=True）
    2. Step 级 timer 仅作为时间语义边界（record=False）
    3. record=False 的 timer 不产生任何副作用
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            计时名称
        record : bool
            - True  : 叶子节点，记录到 timeline
            - False : 父级 scope，仅定义 wall-time
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def generate_timeline_report(self, title: str):
        TimelineReporter(self.timeline, title).print()


class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, title: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
