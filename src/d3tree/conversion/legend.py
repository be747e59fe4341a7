"""Legend entries from the palette metadata of a treemap result."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..logging_config import get_logger
from ..models import LegendEntry
from ..serialization import to_jsonable

logger = get_logger(__name__)


def extract_legend(meta: Mapping[str, Any]) -> Optional[Tuple[LegendEntry, ...]]:
    """Build legend entries in palette order.

    ``palette`` with ``breaks`` (one more break than colors) yields numeric
    ranges; ``palette`` with ``labels`` (one label per color) yields
    categories.  No palette, or any other combination, yields ``None``.
    """
    palette = to_jsonable(meta.get("palette"))
    if not palette:
        return None
    if not isinstance(palette, list) or not all(isinstance(c, str) for c in palette):
        logger.warning("Ignoring legend: palette is not a list of colors (%r)", palette)
        return None

    breaks = to_jsonable(meta.get("breaks"))
    labels = to_jsonable(meta.get("labels"))

    if isinstance(breaks, list) and len(breaks) == len(palette) + 1:
        if all(isinstance(b, (int, float)) and not isinstance(b, bool) for b in breaks):
            return tuple(
                LegendEntry(color=color, range=(breaks[i], breaks[i + 1]))
                for i, color in enumerate(palette)
            )

    if isinstance(labels, list) and len(labels) == len(palette):
        return tuple(
            LegendEntry(color=color, category=str(label))
            for color, label in zip(palette, labels)
        )

    logger.warning(
        "Ignoring legend: %d colors without matching breaks or labels", len(palette)
    )
    return None
