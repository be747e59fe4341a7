"""Public API for d3tree.

Example:
    >>> from d3tree import d3tree2
    >>>
    >>> # d3.js JSON from a URL, file or string
    >>> widget = d3tree2("https://example.org/flare.json", celltext="name")
    >>>
    >>> # Aggregated table
    >>> from d3tree import treemap_stats
    >>> widget = d3tree2(
    ...     treemap_stats(gni, index=["continent", "iso3"], v_size="population"),
    ...     rootname="World",
    ... )
    >>> widget.save_html("world.html")
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .config import DEFAULT_WIDGET_CONFIG, WidgetConfig
from .conversion import normalize
from .js import ClickAction
from .logging_config import get_logger
from .widget import Widget, create_widget
from .widget.htmlwidget import Size

logger = get_logger(__name__)


def d3tree2(
    data: Any,
    rootname: Optional[str] = None,
    celltext: str = "name",
    id_field: str = "id",
    value_field: str = "size",
    click_action: Union[str, ClickAction, None] = None,
    width: Size = None,
    height: Size = None,
    element_id: Optional[str] = None,
    config: WidgetConfig = DEFAULT_WIDGET_CONFIG,
) -> Widget:
    """Create an interactive ``d3tree2`` treemap widget.

    Args:
        data: A treemap result (``{"tm": ..., ...}``), JSON text, a JSON file
            path, an ``http(s)://`` URL, a readable object, or a nested
            dict/list in d3 hierarchy form.
        rootname: Root label when *data* is a treemap result; defaults to
            ``"root"``.
        celltext: Field holding the cell title.
        id_field: Field holding the node id.  ``"id"`` allows nodes with
            non-unique names; many d3 hierarchies use ``"name"``.
        value_field: Field holding the value the cell area is based on.
        click_action: JavaScript ``function(d){ ... }`` called with the
            clicked node.
        width, height: Pixels or CSS sizes such as ``"100%"``.
        element_id: Id of the container element.
        config: Widget defaults.

    Returns:
        A :class:`~d3tree.widget.Widget`.
    """
    payload = normalize(
        data,
        rootname=rootname,
        celltext=celltext,
        id_field=id_field,
        value_field=value_field,
        click_action=click_action,
        config=config,
    )
    return create_widget(payload, width=width, height=height, element_id=element_id, config=config)
