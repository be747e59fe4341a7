"""Widget boundary: serialization, HTML embedding and dashboard hooks."""

from .hosting import RenderFunction, d3tree2_output, render_d3tree2
from .htmlwidget import Widget, create_widget, css_size

__all__ = [
    "Widget",
    "create_widget",
    "css_size",
    "d3tree2_output",
    "render_d3tree2",
    "RenderFunction",
]
