"""Data models for normalized widget payloads."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .config import RenderOptions
from .js import JS
from .serialization import dumps, to_jsonable


class InputKind(Enum):
    """The three input shapes the normalizer accepts."""

    TREEMAP = "treemap"
    JSON_SOURCE = "json_source"
    HIERARCHY = "hierarchy"


class JSONText(str):
    """Canonical JSON text produced from a JSON source.

    Kept as text so the payload carries exactly the canonical encoding; it is
    parsed back into structure only when the whole payload is serialized.
    """

    def parse(self) -> Any:
        return json.loads(self)


@dataclass(frozen=True)
class LegendEntry:
    """One color swatch of the treemap legend.

    Numeric palettes carry ``range``; categorical palettes carry ``category``.
    """

    color: str
    range: Optional[Tuple[float, float]] = None
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {"color": self.color}
        if self.range is not None:
            entry["range"] = [self.range[0], self.range[1]]
        if self.category is not None:
            entry["category"] = self.category
        return to_jsonable(entry)


@dataclass(frozen=True)
class Payload:
    """Everything the d3tree2 binding receives as ``x``.

    Attributes:
        data: Canonical node tree, a nested list, or :class:`JSONText`
        meta: Side metadata of a treemap result (None when absent)
        legend: Legend entries in palette order (None when absent)
        options: Field mapping and click behaviour
    """

    data: Any
    options: RenderOptions
    meta: Optional[Dict[str, Any]] = None
    legend: Optional[Tuple[LegendEntry, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize; absent ``meta``/``legend`` are omitted."""
        data = self.data.parse() if isinstance(self.data, JSONText) else to_jsonable(self.data)
        x: Dict[str, Any] = {"data": data}
        if self.meta is not None:
            x["meta"] = to_jsonable(self.meta)
        if self.legend is not None:
            x["legend"] = [entry.to_dict() for entry in self.legend]
        x["options"] = self.options.to_dict()
        return x

    def evals(self) -> List[str]:
        """Dotted paths of values the browser must evaluate as JavaScript."""
        if isinstance(self.options.click_action, JS):
            return ["options.clickAction"]
        return []

    def to_json(self) -> str:
        return dumps(self.to_dict())
