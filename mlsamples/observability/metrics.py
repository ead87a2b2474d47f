#!filepath: mlsamples/observability/metrics.py
from dataclasses import dataclass, field
from typing import Dict, Any

from mlsamples import logs


@dataclass
class MetricRecorder:
    """
    Run-level metrics sink.

    Keys are `<tutorial>.<metric>`; a later record overwrites an earlier one.
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def record_many(self, prefix: str, values: Dict[str, Any]):
        for key, value in values.items():
            self.record(f"{prefix}.{key}", value)
