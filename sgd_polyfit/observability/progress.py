#!filepath: sgd_polyfit/observability/progress.py
import math

from sgd_polyfit.utils.logger import logs


class ProgressReporter:
    """
    Checkpoint-style progress for long loops (no tqdm, quiet under pytest).

    ``every(total)`` gives the stride of ten evenly spaced checkpoints.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    @staticmethod
    def every(total: int, checkpoints: int = 10) -> int:
        return max(1, math.ceil(total / checkpoints))

    def start(self, task: str, total: int, unit: str = ""):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started total={total} {unit}")

    def update(self, task: str, current: int, total: int, unit: str = ""):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task}: {current}/{total} {unit}")

    def done(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done")
