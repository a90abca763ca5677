"""Preview rendering for kernels and growth tables."""
from __future__ import annotations
from pathlib import Path
import numpy as np
import matplotlib.pyplot as plt

from .board import SimulationBoard


def render_preview(board: SimulationBoard, path: Path, *, cmap: str = "magma", dpi: int = 140) -> Path:
    """Save a three-panel figure: kernel raster, centre-row profile and growth curve."""

    raster = board.kernel_raster()
    table = board.growth_table()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_kernel, ax_profile, ax_growth) = plt.subplots(1, 3, figsize=(12, 4), dpi=dpi)
    im = ax_kernel.imshow(raster.pixels, cmap=cmap, interpolation="nearest")
    ax_kernel.set_axis_off()
    ax_kernel.set_title(f"kernel {raster.side}x{raster.side} | area={raster.total_intensity:.2f}", fontsize=8)
    fig.colorbar(im, ax=ax_kernel, fraction=0.046, pad=0.04)

    row = raster.pixels[raster.side // 2]
    offsets = np.arange(raster.side) - raster.side // 2
    ax_profile.plot(offsets, row, color="tab:orange")
    ax_profile.set_xlabel("cells from centre")
    ax_profile.set_ylabel("K")
    ax_profile.set_title(board.rule.kernel_shell.core.describe(), fontsize=8)

    ax_growth.plot(table.xs, table.values, color="tab:blue")
    ax_growth.set_xlabel("potential")
    ax_growth.set_ylabel("growth")
    ax_growth.set_title(f"{board.rule.growth.describe()} | N={len(table)}", fontsize=8)

    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
