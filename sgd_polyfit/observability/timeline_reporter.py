#!filepath: sgd_polyfit/observability/timeline_reporter.py
from typing import Dict

from sgd_polyfit.utils.logger import logs


class TimelineReporter:
    """
    Per-step wall time of one training run.
    """

    def __init__(self, timeline: Dict[str, float], run_id: str):
        self.timeline = timeline
        self.run_id = run_id

    def total(self) -> float:
        return sum(self.timeline.values())

    def print(self):
        logs.info(f"[Timeline] ===== Training timeline for {self.run_id} =====")

        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")

        logs.info(f"[Timeline] Total{'':<27} {self.total():>8.3f}s")
        logs.info("[Timeline] ===========================================")
