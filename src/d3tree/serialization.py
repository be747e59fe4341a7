"""JSON-safe conversion shared by the converters and the widget layer.

Rules applied everywhere a value crosses into the browser payload:

- numpy scalars become Python scalars, NaN/NaT become ``None``
- pandas DataFrames become row records (one object per row)
- tuples become lists, mapping keys become strings
- ``JS``/``PlainText`` become their text
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping

import numpy as np
import pandas as pd

from .js import JS, PlainText


def to_jsonable(value: Any) -> Any:
    """Recursively convert *value* into plain JSON-compatible Python."""
    if isinstance(value, pd.DataFrame):
        return [to_jsonable(row) for row in value.to_dict(orient="records")]
    if isinstance(value, pd.Series):
        return [to_jsonable(v) for v in value.tolist()]
    if isinstance(value, np.ndarray):
        return [to_jsonable(v) for v in value.tolist()]
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (JS, PlainText)):
        return str(value)
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    if value is pd.NaT or value is pd.NA:
        return None
    return value


def dumps(value: Any) -> str:
    """Compact, deterministic JSON text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
