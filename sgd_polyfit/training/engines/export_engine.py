from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from sgd_polyfit.training.engines.train_result import SGDExport
from sgd_polyfit.training.types import Point, points_payload
from sgd_polyfit.utils.filesystem import FileSystem


class ExportEngine:
    """
    ExportEngine（FINAL / FROZEN）

    Responsibility:
    - Serialize points / run exports to pretty-printed JSON
    - Key order of the payload is kept as-is
    - Atomic write into the export directory
    """

    indent: int = 2

    def dumps(self, payload: Any) -> str:
        return json.dumps(payload, indent=self.indent, ensure_ascii=False)

    def write_json(self, payload: Any, path: Path) -> Path:
        path = Path(path)
        FileSystem.safe_write(path, self.dumps(payload).encode("utf-8"))
        return path

    def write_points(self, points: Sequence[Point], path: Path) -> Path:
        return self.write_json(points_payload(points), path)

    def write_results(self, exports: Sequence[SGDExport], path: Path) -> Path:
        return self.write_json([e.to_dict() for e in exports], path)
