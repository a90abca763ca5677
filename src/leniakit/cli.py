"""Typer CLI for LeniaKit."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from leniakit.config import load_config
from leniakit.core.errors import LeniaError
from leniakit.core.rng import make_rng
from leniakit.engine.builder import build_artifacts
from leniakit.lenia import GrowthTable, KernelRaster, get_preset, list_presets

DEFAULT_CONFIG = Path(__file__).parent / "config" / "defaults.yaml"

app = typer.Typer(help="Lenia kernel and growth model CLI")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def _preset_or_exit(name: str):
    try:
        return get_preset(name)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0]) from exc


@app.command()
def build(
    config: Path = typer.Option(DEFAULT_CONFIG, help="YAML config path"),
    preset: Optional[str] = typer.Option(None, help="Override the configured rule with a preset"),
    seed: Optional[int] = typer.Option(None, help="Override seed"),
    out: Optional[Path] = typer.Option(None, help="Override output directory"),
    preview: bool = typer.Option(True, help="Render a matplotlib preview"),
):
    """Build a board and write kernel image, growth table and parameter record."""
    cfg = load_config(config)
    if preset is not None:
        _preset_or_exit(preset)
        cfg.preset = preset
    if seed is not None:
        cfg.seed = seed
    if out is not None:
        cfg.outputs.out_dir = out
    cfg.outputs.preview = preview
    try:
        build_artifacts(cfg)
    except LeniaError as exc:
        console.print(f"[red]configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def kernel(
    preset: str = typer.Option("lenia", help="Preset providing the kernel shell"),
    radius: Optional[int] = typer.Option(None, help="Raster radius in pixels (defaults to the preset dx)"),
    zoom: float = typer.Option(1.0, help="Zoom factor"),
    out: Path = typer.Option(Path("kernel.png"), help="Output image path"),
):
    """Export a preset's kernel shell as a 16-bit image."""
    chosen = _preset_or_exit(preset)
    try:
        raster = KernelRaster.rasterize(chosen.rule.kernel_shell, chosen.dx if radius is None else radius, zoom)
    except LeniaError as exc:
        raise typer.BadParameter(str(exc)) from exc
    path = raster.export(out)
    print(f"{raster.side}x{raster.side} kernel, area={raster.total_intensity:.4f} -> {path}")


@app.command()
def growth(
    preset: str = typer.Option("lenia", help="Preset providing the growth mapping"),
    resolution: int = typer.Option(100, help="Number of samples"),
):
    """Print a preset's growth table."""
    chosen = _preset_or_exit(preset)
    try:
        table = GrowthTable.sample(chosen.rule.growth, resolution)
    except LeniaError as exc:
        raise typer.BadParameter(str(exc)) from exc
    out = Table(title=f"{chosen.name}: {chosen.rule.growth.describe()}")
    out.add_column("i", justify="right")
    out.add_column("x", justify="right")
    out.add_column("growth", justify="right")
    for i, (x, g) in enumerate(zip(table.xs, table)):
        out.add_row(str(i), f"{x:.4f}", f"{g:.4f}")
    console.print(out)


@app.command()
def params(
    preset: str = typer.Option("lenia", help="Preset to build"),
    width: int = typer.Option(1280, help="Grid width"),
    height: int = typer.Option(720, help="Grid height"),
    seed: int = typer.Option(0, help="Seed for the random scalar source"),
):
    """Print the parameter record a preset board would upload."""
    chosen = _preset_or_exit(preset)
    try:
        board = chosen.board((width, height), rng=make_rng(seed))
    except LeniaError as exc:
        raise typer.BadParameter(str(exc)) from exc
    record = board.generate_parameters()
    print(record.as_dict())
    print(f"bytes: {record.to_bytes().hex()}")


@app.command()
def presets():
    """List available presets."""
    for name in list_presets():
        print(f"{name}: {get_preset(name).description}")


@app.command()
def doctor():
    import importlib.util

    imageio_ok = importlib.util.find_spec("imageio") is not None
    matplotlib_ok = importlib.util.find_spec("matplotlib") is not None
    pandas_ok = importlib.util.find_spec("pandas") is not None
    print({"imageio": imageio_ok, "matplotlib": matplotlib_ok, "pandas": pandas_ok})


if __name__ == "__main__":
    app()
