#!filepath: sgd_polyfit/cli.py
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from sgd_polyfit import __version__, logs
from sgd_polyfit.config.app_config import AppConfig
from sgd_polyfit.config.training_config import TrainingConfig
from sgd_polyfit.training.context import TrainingContext
from sgd_polyfit.utils.errors import InvalidConfiguration
from sgd_polyfit.utils.filesystem import FileSystem
from sgd_polyfit.workflows.sgd_workflow import run_sgd

app = typer.Typer(help="Polynomial SGD fit CLI")


def _load_config(
    config: Optional[Path],
    *,
    seed: Optional[int],
    output_dir: Optional[Path],
    iterations: Optional[int],
    plot: Optional[bool],
    training: Optional[TrainingConfig] = None,
) -> AppConfig:
    cfg = AppConfig.load(str(config) if config is not None else None)

    raw = cfg.model_dump()
    if seed is not None:
        raw["data"]["seed"] = seed
    if output_dir is not None:
        raw["export"]["notebook_dir"] = str(output_dir)
    if training is not None:
        raw["training"]["runs"] = [r.model_dump() for r in training.runs]
    if iterations is not None:
        raw["training"]["iterations"] = iterations
    if plot is not None:
        raw["export"]["plot"] = plot

    cfg = AppConfig.model_validate(raw)
    logs.configure(cfg.log)
    return cfg


def _execute(cfg: AppConfig, clean: bool) -> TrainingContext:
    export_dir = Path(cfg.export.notebook_dir)
    if clean:
        FileSystem.remove(export_dir)

    ctx = run_sgd(cfg)

    for result in ctx.results:
        if result.error:
            print(
                f"[green]{result.name}[/green] "
                f"rms first={result.error[0]:.6f} last={result.final_error:.6f}"
            )
        else:
            print(f"[green]{result.name}[/green] no passes")
        print(f"  {result.function_str}")

    for f in FileSystem.scan_dir(export_dir, suffix=".json"):
        print(f"[blue]exported[/blue] {escape(str(f))}")

    return ctx


def _fail(exc: Exception) -> None:
    logs.error(f"[cli] invalid configuration: {exc}")
    print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
    raise typer.Exit(code=2)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Export directory"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="Passes per run"),
    plot: Optional[bool] = typer.Option(None, "--plot/--no-plot", help="Render PNG reports"),
    clean: bool = typer.Option(False, help="Remove the export directory first"),
):
    """
    Train every configured (learn rate, degree) run and export the results
    """
    try:
        cfg = _load_config(
            config, seed=seed, output_dir=output_dir, iterations=iterations, plot=plot
        )
    except (InvalidConfiguration, ValidationError, FileNotFoundError) as exc:
        _fail(exc)

    try:
        _execute(cfg, clean)
    except InvalidConfiguration as exc:
        _fail(exc)


@app.command()
def sweep(
    learn_rate: List[float] = typer.Option(
        [0.001, 0.01], "--learn-rate", "-a", help="Learning rate (repeatable)"
    ),
    degree: List[int] = typer.Option(
        [3, 4, 5, 6], "--degree", "-d", help="Polynomial degree (repeatable)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Export directory"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="Passes per run"),
    plot: Optional[bool] = typer.Option(None, "--plot/--no-plot", help="Render PNG reports"),
    clean: bool = typer.Option(False, help="Remove the export directory first"),
):
    """
    Train the grid learn_rate x degree on one dataset
    """
    try:
        training = TrainingConfig.sweep(list(learn_rate), list(degree))
        cfg = _load_config(
            config,
            seed=seed,
            output_dir=output_dir,
            iterations=iterations,
            plot=plot,
            training=training,
        )
    except (InvalidConfiguration, ValidationError, FileNotFoundError) as exc:
        _fail(exc)

    print(f"[yellow]Sweep {len(cfg.training.runs)} runs[/yellow]")
    # export I/O errors propagate unchanged
    try:
        _execute(cfg, clean)
    except InvalidConfiguration as exc:
        _fail(exc)


if __name__ == "__main__":
    app()

# python -m sgd_polyfit.cli run --seed 28051998
