"""CLI entry point for sparse-scene.

Usage:
    sparse-scene inspect data/garden                 # Record counts and cameras
    sparse-scene convert data/garden --target dataset
    sparse-scene convert data/garden -c configs/import.yaml
    sparse-scene config-schema                       # Import config JSON schema
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from sparse_scene.core.errors import ColmapError
from sparse_scene.core.logging import setup_logging

app = typer.Typer(name="sparse-scene", help="COLMAP binary export -> scene / dataset")
console = Console()


def _load_step(config: Optional[Path], target: Optional[str], workers: Optional[int]):
    from sparse_scene.core.config import load_config
    from sparse_scene.steps.colmap_import.config import ColmapImportConfig
    from sparse_scene.steps.colmap_import.step import ColmapImportStep

    step_config = load_config(config, ColmapImportConfig) if config else ColmapImportConfig()
    overrides = {}
    if target is not None:
        overrides["target"] = target
    if workers is not None:
        overrides["max_workers"] = workers
    if overrides:
        step_config = ColmapImportConfig(**{**step_config.model_dump(), **overrides})
    return ColmapImportStep(config=step_config)


@app.command()
def inspect(
    source_dir: Path = typer.Argument(..., help="COLMAP project root"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Import config path"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Decode the sparse model and show what it contains."""
    setup_logging(log_level)
    from sparse_scene.steps.colmap_import.contracts import ColmapImportInput

    step = _load_step(config, None, None)
    inputs = ColmapImportInput(source_dir=source_dir)
    if not step.validate_inputs(inputs):
        console.print(f"[red]Not a COLMAP export: {source_dir}[/red]")
        raise typer.Exit(1)

    try:
        summary = step.load_source(inputs).summary()
    except ColmapError as e:
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]{summary.num_cameras} cameras, {summary.num_images} images, "
        f"{summary.num_points} points, {summary.num_image_files} image files found[/green]"
    )
    table = Table(title="Cameras")
    table.add_column("Id", style="dim")
    table.add_column("Model", style="cyan")
    table.add_column("Size", style="green")
    table.add_column("Params", style="yellow")
    for camera in summary.cameras:
        table.add_row(
            str(camera.camera_id),
            camera.model,
            f"{camera.width}x{camera.height}",
            ", ".join(f"{p:.3f}" for p in camera.params),
        )
    console.print(table)


@app.command()
def convert(
    source_dir: Path = typer.Argument(..., help="COLMAP project root"),
    target: Optional[str] = typer.Option(None, "--target", "-t", help="scene | dataset"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Import config path"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Assembly worker threads"),
    log_level: str = typer.Option("INFO", help="Logging level"),
    show_threads: bool = typer.Option(False, help="Include worker thread names in log lines"),
) -> None:
    """Assemble the export into a scene or dataset and report the result."""
    setup_logging(log_level, show_threads=show_threads)
    from pydantic import ValidationError
    from sparse_scene.steps.colmap_import.contracts import ColmapImportInput

    try:
        step = _load_step(config, target, workers)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    try:
        output = step.execute(ColmapImportInput(source_dir=source_dir))
    except (ColmapError, ValueError) as e:
        console.print(f"[red]{type(e).__name__}: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Built {output.target}: {output.num_views} views, "
        f"{output.num_points} points in {output.meta.elapsed_seconds:.2f}s[/green]"
    )


@app.command()
def config_schema() -> None:
    """Print the JSON schema of the import config."""
    from sparse_scene.steps.colmap_import.step import ColmapImportStep

    console.print_json(data=ColmapImportStep.get_config_schema())


if __name__ == "__main__":
    app()
