#!filepath: sgd_polyfit/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from sgd_polyfit.utils.logger import logs


@dataclass
class MetricRecorder:
    """
    Named scalar metrics of one pipeline run, e.g. ``rms_final@D=5 a=0.1``.
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def snapshot(self) -> Dict[str, Any]:
        return dict(self.metrics)
