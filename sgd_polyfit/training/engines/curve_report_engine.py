from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from sgd_polyfit.training.engines.train_result import SGDExport
from sgd_polyfit.training.types import Point, split_xy


def _slug(name: str) -> str:
    # "D=5 a=0.1" -> "D_5_a_0.1"
    return re.sub(r"[^0-9A-Za-z.]+", "_", name).strip("_")


class CurveReportEngine:
    """
    CurveReportEngine（FINAL）

    Responsibility:
    - Persist PNG reports of one run (fit + error trace)
    """

    def plot_fit(
        self,
        points: Sequence[Point],
        export: SGDExport,
        out_dir: Path,
    ) -> Path:
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / f"fit_{_slug(export.name)}.png"

        xs, ys = split_xy(points)

        fig = plt.figure(figsize=(8, 5))
        plt.scatter(xs, ys, s=12, alpha=0.7, label="Training data")
        plt.plot(export.x_points, export.y_points, color="red", label="Fitted curve")
        plt.xlabel("x")
        plt.ylabel("y")
        plt.title(f"Polynomial SGD fit ({export.name})")
        plt.legend()
        plt.grid(True)
        plt.tight_layout()
        fig.savefig(path)
        plt.close(fig)

        return path

    def plot_error(self, export: SGDExport, out_dir: Path) -> Path:
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / f"error_{_slug(export.name)}.png"

        fig = plt.figure(figsize=(8, 4))
        plt.plot(range(len(export.error)), export.error)
        if export.error and all(e > 0 for e in export.error):
            plt.yscale("log")
        plt.xlabel("Iteration")
        plt.ylabel("RMS error")
        plt.title(f"Training error ({export.name})")
        plt.grid(True)
        plt.tight_layout()
        fig.savefig(path)
        plt.close(fig)

        return path
