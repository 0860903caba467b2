"""Tabulate one input against every unit of its category and export to CSV.

This module is the output boundary between single conversions and
shareable tabular artifacts.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import pandas as pd

from .engine import convert
from .reference_data import default_registry
from .registry import UnitRegistry
from .schema import TableColumns
from .units import Unit

logger = logging.getLogger(__name__)


def _empty_table() -> pd.DataFrame:
    columns = TableColumns()
    return pd.DataFrame(
        columns=[
            columns.unit_id,
            columns.unit_name,
            columns.abbreviation,
            columns.result,
        ]
    )


def conversion_table(
    unit: Unit, raw: str, registry: Optional[UnitRegistry] = None
) -> pd.DataFrame:
    """Convert ``raw`` from ``unit`` to every unit in the same category.

    Args:
        unit (Unit): Source unit.
        raw (str): Raw user input.
        registry (UnitRegistry | None): Lookup to use. Defaults to the
            process-wide reference registry.

    Returns:
        pandas.DataFrame: One row per target unit in registration order, with
        the ``TableColumns`` labels. The source unit is included (its row
        shows the identity conversion). Empty when the category is unknown.
    """
    if registry is None:
        registry = default_registry()
    if registry.get_category(unit.category_id) is None:
        logger.warning("Unit %r has unknown category %r", unit.id, unit.category_id)
        return _empty_table()

    columns = TableColumns()
    rows = []
    for target in registry.units_in_category(unit.category_id):
        rows.append(
            {
                columns.unit_id: target.id,
                columns.unit_name: target.name,
                columns.abbreviation: target.abbreviations[0] if target.abbreviations else "",
                columns.result: convert(unit, target, raw, registry=registry),
            }
        )
    if not rows:
        return _empty_table()
    return pd.DataFrame(rows)


def save_conversion_table(
    table: pd.DataFrame, output_dir: str = "output", filename: str = "conversions.csv"
) -> str:
    """Write a conversion table to CSV.

    Args:
        table (pandas.DataFrame): Output from ``conversion_table``.
        output_dir (str): Directory for the CSV; created if missing.
        filename (str): CSV file name.

    Returns:
        str: Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    table.to_csv(path, index=False)
    logger.info("Saved conversion table to %s", path)
    return path
