from sgd_polyfit.training.engines.curve_report_engine import CurveReportEngine
from sgd_polyfit.training.engines.train_result import SGDExport
from sgd_polyfit.training.types import Point


def _export(error=(0.8, 0.4, 0.2)) -> SGDExport:
    return SGDExport(
        name="D=2 a=0.05",
        thetas=(0.0, 1.0, -1.0),
        function_str="y = ...",
        iterations=len(error),
        polynomial_degree=2,
        learn_rate=0.05,
        x_points=(0.0, 0.5),
        y_points=(0.0, 0.25),
        error=tuple(error),
    )


def test_plot_fit_writes_png(tmp_path):
    points = (Point(0.0, 0.1), Point(0.5, 0.2))
    path = CurveReportEngine().plot_fit(points, _export(), tmp_path / "reports")

    assert path.name == "fit_D_2_a_0.05.png"
    assert path.stat().st_size > 0


def test_plot_error_writes_png(tmp_path):
    path = CurveReportEngine().plot_error(_export(), tmp_path)

    assert path.name == "error_D_2_a_0.05.png"
    assert path.stat().st_size > 0


def test_plot_error_with_empty_trace(tmp_path):
    path = CurveReportEngine().plot_error(_export(error=()), tmp_path)
    assert path.exists()
