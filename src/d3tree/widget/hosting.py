"""Dashboard hooks: output placeholders and render functions.

A host page declares where a widget goes with :func:`d3tree2_output` and
fills it with the value produced by a :class:`RenderFunction`::

    render = render_d3tree2(lambda: d3tree2(flare, celltext="name"))
    page = render.output("treemap", height="600px")
    message = render.bind("treemap")   # {"id": "treemap", "value": {...}}
"""

from __future__ import annotations

import html
from typing import Any, Callable, Dict, Optional

from ..config import DEFAULT_WIDGET_CONFIG, WidgetConfig
from ..exceptions import UnsupportedInputError
from ..logging_config import get_logger
from .htmlwidget import Size, Widget, css_size

logger = get_logger(__name__)


def d3tree2_output(
    output_id: str,
    width: Size = "100%",
    height: Size = "400px",
    config: WidgetConfig = DEFAULT_WIDGET_CONFIG,
) -> str:
    """Placeholder markup for a widget rendered later under *output_id*."""
    width = css_size(width, config.default_width)
    height = css_size(height, config.default_height)
    style = f"width:{width};height:{height};"
    return (
        f'<div id="{html.escape(output_id)}" style="{html.escape(style)}" '
        f'class="{html.escape(config.name)} html-widget html-widget-output"></div>'
    )


class RenderFunction:
    """Evaluates a widget-producing expression for a bound placeholder."""

    def __init__(
        self,
        expr: Callable[[], Optional[Widget]],
        config: WidgetConfig = DEFAULT_WIDGET_CONFIG,
    ):
        if not callable(expr):
            raise UnsupportedInputError(type(expr).__name__)
        self.expr = expr
        self.config = config

    def __call__(self) -> Optional[Dict[str, Any]]:
        widget = self.expr()
        if widget is None:
            return None
        if not isinstance(widget, Widget):
            raise UnsupportedInputError(type(widget).__name__)
        return widget.to_dict()

    def output(self, output_id: str, width: Size = "100%", height: Size = "400px") -> str:
        return d3tree2_output(output_id, width, height, config=self.config)

    def bind(self, output_id: str) -> Dict[str, Any]:
        """Evaluate the expression and address the result to *output_id*."""
        logger.debug("Rendering %s into #%s", self.config.name, output_id)
        return {"id": output_id, "value": self()}


def render_d3tree2(
    expr: Callable[[], Optional[Widget]],
    config: WidgetConfig = DEFAULT_WIDGET_CONFIG,
) -> RenderFunction:
    """Create the render hook for a zero-argument widget expression."""
    return RenderFunction(expr, config=config)
