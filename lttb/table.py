"""LTTB row selection for in-memory Arrow tables."""

import logging

import pyarrow as pa
import pyarrow.compute as pc

from .downsampler import select_indices

logger = logging.getLogger(__name__)


def _numeric_column(table: pa.Table, name: str) -> list:
    """Read a column as Python numbers, timestamps as integer epoch units."""
    if name not in table.column_names:
        raise KeyError(f"Column not found: {name}")

    col = table.column(name)
    if col.null_count:
        raise ValueError(f"Column {name} contains {col.null_count} null values")

    if pa.types.is_timestamp(col.type):
        col = pc.cast(col, pa.int64())
    elif pa.types.is_floating(col.type) or pa.types.is_decimal(col.type):
        col = pc.cast(col, pa.float64())
    elif not pa.types.is_integer(col.type):
        raise ValueError(f"Column {name} has non-numeric type {col.type}")
    # Integer columns stay exact Python ints
    return col.to_pylist()


def downsample_table(
    table: pa.Table,
    threshold: int,
    x_column: str = "timestamp",
    y_column: str = "value",
) -> pa.Table:
    """
    Keep the table rows chosen by LTTB over two of its columns.

    Args:
        table: Table with one row per sample, ordered by ``x_column``
        threshold: Target number of rows
        x_column: Column used as x (timestamp or numeric)
        y_column: Numeric column used as y

    Returns:
        Table with all original columns and ``threshold`` rows, or the
        input table when no reduction applies
    """
    xs = _numeric_column(table, x_column)
    ys = _numeric_column(table, y_column)

    indices = select_indices(list(zip(xs, ys)), threshold)
    if len(indices) == len(table):
        return table

    logger.debug(f"Downsampled table: {len(table)} -> {len(indices)} rows")
    return table.take(pa.array(indices, type=pa.int64()))
