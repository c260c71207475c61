import json
from dataclasses import fields

from sgd_polyfit.training.engines.curve_sampler_engine import CurveSamplerEngine
from sgd_polyfit.training.engines.export_engine import ExportEngine
from sgd_polyfit.training.engines.train_result import SGDExport, TrainResult
from sgd_polyfit.training.types import Point


def _result() -> TrainResult:
    return TrainResult(
        name="D=1 a=0.1",
        thetas=(0.5, -1.0),
        function_str="y = 0.500000 * x ^ 0 + -1.000000 * x ^ 1",
        iterations=3,
        polynomial_degree=1,
        learn_rate=0.1,
        error=(0.9, 0.5, 0.3),
    )


def test_write_points(tmp_path):
    points = (Point(0.0, 1.0), Point(0.5, -0.25))
    path = ExportEngine().write_points(points, tmp_path / "points.json")

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert list(payload) == ["x_points", "y_points"]
    assert payload == {"x_points": [0.0, 0.5], "y_points": [1.0, -0.25]}


def test_write_results_keeps_field_order(tmp_path):
    result = _result()
    curve = CurveSamplerEngine().sample(result.thetas, 4)
    export = SGDExport.from_result(result, curve)

    path = ExportEngine().write_results([export], tmp_path / "results.json")
    payload = json.loads(path.read_text(encoding="utf-8"))

    assert isinstance(payload, list) and len(payload) == 1
    record = payload[0]
    assert list(record) == [f.name for f in fields(SGDExport)]
    assert record["name"] == "D=1 a=0.1"
    assert record["thetas"] == [0.5, -1.0]
    assert record["error"] == [0.9, 0.5, 0.3]
    assert record["x_points"] == [0.0, 0.25, 0.5, 0.75]
    assert record["y_points"] == [0.5, 0.25, 0.0, -0.25]


def test_output_is_pretty_printed(tmp_path):
    path = ExportEngine().write_json({"a": [1, 2]}, tmp_path / "x.json")
    text = path.read_text(encoding="utf-8")

    assert text.startswith('{\n  "a": [\n    1,')


def test_no_tmp_file_left(tmp_path):
    ExportEngine().write_json({"a": 1}, tmp_path / "out" / "x.json")
    assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["x.json"]


def test_export_record_from_result():
    result = _result()
    curve = (Point(0.0, 0.5), Point(0.5, 0.0))
    export = SGDExport.from_result(result, curve)

    assert export.thetas == result.thetas
    assert export.error == result.error
    assert export.x_points == (0.0, 0.5)
    assert export.y_points == (0.5, 0.0)
