from __future__ import annotations

from typing import Any

from sgd_polyfit.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step base class

    Responsibilities:
      1. one unit of orchestration (consume ctx -> produce ctx)
      2. owns its own timing boundary

    Rules:
      - the pipeline never times steps
      - leaf timers live inside the step (self.inst.timer(...))
      - Instrumentation is optional; behaviour never depends on it
    """

    stage: str = ""

    def __init__(self, inst: Instrumentation | None = None):
        # always usable (No-op semantics)
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """Class name by default."""
        return self.__class__.__name__

    def timed(self):
        """
        Step-level parent scope (record=False, not in the timeline).
        """
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: Any) -> Any:
        """
        Subclasses must implement.
        """
        raise NotImplementedError
