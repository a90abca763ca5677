"""Tabular export of derived model data."""
from __future__ import annotations
from pathlib import Path
import pandas as pd

from leniakit.lenia import GrowthTable


def growth_frame(table: GrowthTable) -> pd.DataFrame:
    return pd.DataFrame({"index": range(len(table)), "x": table.xs, "growth": table.values})


def save_growth_table(table: GrowthTable, path: Path) -> pd.DataFrame:
    df = growth_frame(table)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return df
