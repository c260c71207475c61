#!filepath: sgd_polyfit/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict

from sgd_polyfit.observability.metrics import MetricRecorder
from sgd_polyfit.observability.progress import ProgressReporter
from sgd_polyfit.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Leaf-only timing + metrics + progress for one pipeline run.

    Rules:
    1. The timeline only holds leaf timers (record=True).
    2. record=False timers mark a parent scope and leave no trace.
    3. Nothing here logs on the hot path.
    """

    enabled: bool = True

    def __post_init__(self):
        self.progress = ProgressReporter(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            timeline key
        record : bool
            - True  : leaf, written to the timeline
            - False : parent scope only
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            start = time.perf_counter()
            try:
                yield
            finally:
                if record:
                    inst.timeline[name] = time.perf_counter() - start

        return _ctx()

    def generate_timeline_report(self, run_id: str):
        TimelineReporter(self.timeline, run_id).print()


class NoOpInstrumentation:
    """Used when observability is disabled."""

    def __init__(self):
        self.progress = ProgressReporter(enabled=False)
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, run_id: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
