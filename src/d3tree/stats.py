"""Treemap statistics: aggregate a flat table into a ``tm`` result.

This is the aggregation half of a classic treemap pipeline (no rectangle
layout).  Every prefix of *index* becomes a grouping level; each group gets
one row carrying its summed size, an optional color value, its ``level`` and
a hex ``color``.  The returned mapping starts with ``"tm"`` so it can be fed
straight into :func:`d3tree.normalize` or :func:`d3tree.d3tree2`.

Example:
    >>> result = treemap_stats(gni, index=["continent", "iso3"],
    ...                        v_size="population", v_color="GNI",
    ...                        color_by="value")
    >>> list(result)[:2]
    ['tm', 'type']
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .exceptions import InvalidConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

COLOR_TYPES = ("index", "value", "categorical")

# ColorBrewer "Dark2" and "RdYlGn" (7 classes).
CATEGORICAL_PALETTE: Tuple[str, ...] = (
    "#1B9E77", "#D95F02", "#7570B3", "#E7298A", "#66A61E", "#E6AB02", "#A6761D", "#666666",
)
DIVERGING_PALETTE: Tuple[str, ...] = (
    "#D73027", "#FC8D59", "#FEE08B", "#FFFFBF", "#D9EF8B", "#91CF60", "#1A9850",
)


def treemap_stats(
    df: pd.DataFrame,
    index: Sequence[str],
    v_size: str,
    v_color: Optional[str] = None,
    color_by: str = "index",
    palette: Optional[Sequence[str]] = None,
    value_range: Optional[Tuple[float, float]] = None,
) -> Dict[str, Any]:
    """Aggregate *df* into a treemap result.

    Args:
        df: One row per leaf observation.
        index: Grouping columns, outermost first.
        v_size: Numeric column summed into ``vSize``.
        v_color: Column used for coloring (required unless ``color_by`` is
            ``"index"``).
        color_by: ``"index"`` colors by top-level group, ``"value"`` maps the
            summed ``v_color`` onto *palette* over equal-width breaks,
            ``"categorical"`` colors by the group's most frequent category.
        palette: Hex colors; defaults depend on ``color_by``.
        value_range: ``(low, high)`` for ``"value"`` breaks; defaults to the
            range of leaf values.

    Returns:
        ``{"tm": DataFrame, "type", "index", "vSize", "vColor", "palette",
        "breaks" | "labels"}``.

    Raises:
        InvalidConfigError: For unknown ``color_by`` or missing/invalid
        columns.
    """
    index = list(index)
    _validate(df, index, v_size, v_color, color_by)

    aggregations: Dict[str, Any] = {v_size: "sum"}
    if color_by == "categorical":
        aggregations[v_color] = _most_frequent
    elif v_color is not None:
        numeric = pd.api.types.is_numeric_dtype(df[v_color])
        aggregations[v_color] = "sum" if numeric else _most_frequent

    levels: List[pd.DataFrame] = []
    for depth in range(1, len(index) + 1):
        keys = index[:depth]
        grouped = df.groupby(keys, sort=False).agg(aggregations).reset_index()
        for column in index[depth:]:
            grouped[column] = None
        grouped["level"] = depth
        levels.append(grouped)

    tm = pd.concat(levels, ignore_index=True)
    tm = tm.rename(columns={v_size: "vSize", **({v_color: "vColor"} if v_color else {})})
    ordered = index + ["vSize"] + (["vColor"] if v_color else []) + ["level"]
    tm = tm[ordered].copy()

    result: Dict[str, Any] = {
        "tm": tm,
        "type": color_by,
        "index": index,
        "vSize": v_size,
        "vColor": v_color,
    }

    if color_by == "value":
        colors, breaks = _value_colors(tm["vColor"], df[v_color], palette, value_range)
        tm["color"] = colors
        result["palette"] = list(palette or DIVERGING_PALETTE)
        result["breaks"] = breaks
    else:
        key_column = index[0] if color_by == "index" else "vColor"
        labels = [str(v) for v in pd.unique(tm[key_column].dropna())]
        cycle = list(palette or CATEGORICAL_PALETTE)
        color_of = {label: cycle[i % len(cycle)] for i, label in enumerate(labels)}
        tm["color"] = [color_of.get(str(v)) if pd.notna(v) else None for v in tm[key_column]]
        result["palette"] = [color_of[label] for label in labels]
        result["labels"] = labels

    logger.debug("Aggregated %d rows into %d groups over %d levels", len(df), len(tm), len(index))
    return result


def _validate(
    df: Any, index: List[str], v_size: str, v_color: Optional[str], color_by: str
) -> None:
    if not isinstance(df, pd.DataFrame):
        raise InvalidConfigError("df", type(df).__name__, "must be a pandas DataFrame")
    if not index:
        raise InvalidConfigError("index", index, "at least one grouping column is required")
    if color_by not in COLOR_TYPES:
        raise InvalidConfigError("color_by", color_by, f"must be one of {', '.join(COLOR_TYPES)}")
    if color_by != "index" and v_color is None:
        raise InvalidConfigError("v_color", v_color, f"required when color_by='{color_by}'")

    required = index + [v_size] + ([v_color] if v_color else [])
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise InvalidConfigError("df", ", ".join(missing), "missing columns")
    if not pd.api.types.is_numeric_dtype(df[v_size]):
        raise InvalidConfigError("v_size", v_size, "column must be numeric")
    if color_by == "value" and not pd.api.types.is_numeric_dtype(df[v_color]):
        raise InvalidConfigError("v_color", v_color, "column must be numeric for color_by='value'")


def _most_frequent(values: pd.Series) -> Any:
    modes = values.dropna().mode()
    return modes.iloc[0] if len(modes) else None


def _value_colors(
    aggregated: pd.Series,
    leaves: pd.Series,
    palette: Optional[Sequence[str]],
    value_range: Optional[Tuple[float, float]],
) -> Tuple[List[Optional[str]], List[float]]:
    """Map values onto *palette* over equal-width breaks."""
    colors = list(palette or DIVERGING_PALETTE)
    if value_range is not None:
        low, high = float(value_range[0]), float(value_range[1])
    else:
        low, high = float(np.nanmin(leaves)), float(np.nanmax(leaves))
    if high <= low:
        high = low + 1.0

    breaks = np.linspace(low, high, len(colors) + 1)
    mapped: List[Optional[str]] = []
    for value in aggregated:
        if pd.isna(value):
            mapped.append(None)
            continue
        slot = int(np.searchsorted(breaks, value, side="right")) - 1
        mapped.append(colors[min(max(slot, 0), len(colors) - 1)])
    return mapped, [float(b) for b in breaks]
