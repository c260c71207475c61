import json
from pathlib import Path

import pytest

from sgd_polyfit.config.app_config import AppConfig
from sgd_polyfit.observability.instrumentation import Instrumentation
from sgd_polyfit.training.steps import ModelTrainStep
from sgd_polyfit.workflows.sgd_workflow import build_training_pipeline, run_sgd


def _with(cfg: AppConfig, **sections) -> AppConfig:
    raw = cfg.model_dump()
    for name, values in sections.items():
        raw[name].update(values)
    return AppConfig.model_validate(raw)


def test_pipeline_exports(app_config):
    ctx = run_sgd(app_config, run_id="test_run")

    export_dir = Path(app_config.export.notebook_dir)
    points_file = export_dir / app_config.export.points_file
    results_file = export_dir / app_config.export.results_file

    assert ctx.artifacts == {"points": points_file, "results": results_file}

    points = json.loads(points_file.read_text(encoding="utf-8"))
    assert len(points["x_points"]) == 20
    assert points["x_points"] == [p.x for p in ctx.points]
    assert points["y_points"] == [p.y for p in ctx.points]

    results = json.loads(results_file.read_text(encoding="utf-8"))
    assert [r["name"] for r in results] == ["D=3 a=0.1", "D=1 a=0.05"]
    for record, result in zip(results, ctx.results):
        assert len(record["error"]) == 30
        assert record["thetas"] == list(result.thetas)
        assert record["iterations"] == 30
        # curve sampled with as many points as the dataset
        assert len(record["x_points"]) == 20


def test_results_follow_run_order(app_config):
    ctx = run_sgd(app_config, run_id="order")

    assert [r.polynomial_degree for r in ctx.results] == [3, 1]
    assert [len(r.thetas) for r in ctx.results] == [4, 2]
    assert len(ctx.curves) == len(ctx.exports) == 2


def test_pipeline_is_reproducible(app_config, tmp_path):
    first = run_sgd(_with(app_config, export={"notebook_dir": str(tmp_path / "a")}))
    second = run_sgd(_with(app_config, export={"notebook_dir": str(tmp_path / "b")}))

    assert first.points == second.points
    assert [r.error for r in first.results] == [r.error for r in second.results]
    assert (tmp_path / "a" / app_config.export.results_file).read_bytes() == (
        tmp_path / "b" / app_config.export.results_file
    ).read_bytes()


def test_different_seed_changes_results(app_config):
    first = run_sgd(app_config)
    second = run_sgd(_with(app_config, data={"seed": 1}))

    assert first.results[0].error != second.results[0].error


def test_custom_curve_points(app_config):
    ctx = run_sgd(_with(app_config, export={"curve_points": 7}))
    assert all(len(curve) == 7 for curve in ctx.curves)


def test_plot_report(app_config):
    ctx = run_sgd(_with(app_config, export={"plot": True}))

    reports = Path(app_config.export.notebook_dir) / "reports"
    assert (reports / "fit_D_3_a_0.1.png").exists()
    assert (reports / "error_D_1_a_0.05.png").exists()
    assert ctx.artifacts["fit@D=3 a=0.1"] == reports / "fit_D_3_a_0.1.png"


def test_no_plot_by_default(app_config):
    pipeline = build_training_pipeline(app_config)
    assert [s.step_name for s in pipeline.steps] == [
        "DatasetBuildStep",
        "ModelTrainStep",
        "CurveSampleStep",
        "ArtifactPersistStep",
    ]


def test_timeline_and_metrics(app_config):
    inst = Instrumentation(enabled=True)
    ctx = build_training_pipeline(app_config, inst).run("timed")

    assert "DatasetBuildStep" in inst.timeline
    assert "ModelTrainStep[D=3 a=0.1]" in inst.timeline
    assert "ArtifactPersistStep" in inst.timeline
    assert inst.metrics.metrics["rms_final@D=3 a=0.1"] == ctx.results[0].error[-1]
    assert ctx.metrics["rms_final@D=1 a=0.05"] == ctx.results[1].error[-1]


def test_zero_iterations_pipeline(app_config):
    ctx = run_sgd(_with(app_config, training={"iterations": 0}))

    assert all(r.error == () for r in ctx.results)
    assert ctx.metrics["rms_final@D=3 a=0.1"] is None


def test_train_step_requires_dataset(app_config, tmp_path):
    from sgd_polyfit.training.context import TrainingContext
    from sgd_polyfit.utils.random_source import RandomSource

    ctx = TrainingContext(
        run_id="x",
        cfg=app_config,
        inst=Instrumentation(enabled=False),
        rng=RandomSource(0),
        export_dir=tmp_path,
    )
    with pytest.raises(RuntimeError):
        ModelTrainStep().run(ctx)


def test_close_learn_rates_keep_distinct_names(app_config):
    cfg = _with(
        app_config,
        training={
            "runs": [
                {"learn_rate": 0.1234561, "polynomial_degree": 3},
                {"learn_rate": 0.1234564, "polynomial_degree": 3},
            ]
        },
        export={"plot": True},
    )
    ctx = run_sgd(cfg, run_id="close_rates")

    assert [r.name for r in ctx.results] == ["D=3 a=0.1234561", "D=3 a=0.1234564"]
    assert len(ctx.metrics) == 2
    assert "fit@D=3 a=0.1234561" in ctx.artifacts
    assert "fit@D=3 a=0.1234564" in ctx.artifacts

    reports = Path(cfg.export.notebook_dir) / "reports"
    assert len(list(reports.glob("fit_*.png"))) == 2
    assert len(list(reports.glob("error_*.png"))) == 2
