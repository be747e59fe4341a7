"""
d3tree - interactive d3.js treemaps from Python data

Converts treemap aggregation results, d3-style JSON and nested structures into
the payload of the ``d3tree2`` browser widget.
"""

__version__ = "0.1.0"

from .api import d3tree2
from .config import RenderOptions, WidgetConfig
from .conversion import normalize
from .js import JS, PlainText
from .models import InputKind, LegendEntry, Payload
from .stats import treemap_stats
from .widget import Widget, d3tree2_output, render_d3tree2

__all__ = [
    "d3tree2",  # Main entry point
    "normalize",
    "treemap_stats",
    "d3tree2_output",
    "render_d3tree2",
    "Widget",
    "Payload",
    "LegendEntry",
    "InputKind",
    "RenderOptions",
    "WidgetConfig",
    "JS",
    "PlainText",
]
