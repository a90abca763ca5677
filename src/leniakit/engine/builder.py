"""Build a board from configuration and write its artifacts."""
from __future__ import annotations
import logging
from pathlib import Path
import yaml
from rich.console import Console
from rich.table import Table

from leniakit.config import ConfigSchema, build_board
from leniakit.engine.metrics import save_growth_table
from leniakit.lenia import render_preview

console = Console()
logger = logging.getLogger(__name__)


def run_name(config: ConfigSchema) -> str:
    return f"{config.preset or 'custom'}_{config.seed}"


def build_artifacts(config: ConfigSchema, *, summarize: bool = True) -> Path:
    """Write kernel image, growth table, parameter record and resolved config.

    Returns the output directory ``<out_dir>/<preset|custom>_<seed>``.
    """

    board = build_board(config)
    out_dir = Path(config.outputs.out_dir) / run_name(config)
    out_dir.mkdir(parents=True, exist_ok=True)

    raster = board.kernel_raster()
    try:
        raster.export(out_dir / config.outputs.kernel_image)
    except OSError as exc:
        # kernel image is inspection-only; a write failure leaves the other artifacts valid
        logger.warning("kernel image export failed: %s", exc)
    save_growth_table(board.growth_table(), out_dir / config.outputs.growth_csv)
    params = board.generate_parameters()
    (out_dir / config.outputs.params_file).write_bytes(params.to_bytes())
    if config.outputs.preview:
        render_preview(board, out_dir / "preview.png")

    config_dict = config.model_dump(mode="json")
    with open(out_dir / "config.yaml", "w") as f:
        yaml.safe_dump(config_dict, f)

    if summarize:
        table = Table(title="Lenia board", show_lines=True)
        table.add_column("field")
        table.add_column("value")
        for key, value in board.summary().items():
            table.add_row(key, f"{value:.4f}" if isinstance(value, float) else str(value))
        table.add_row("seed", f"{params.seed:.6f}")
        console.print(table)
    console.print(f"artifacts written -> {out_dir}")
    return out_dir
