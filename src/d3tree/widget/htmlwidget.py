"""The widget object handed to notebooks, dashboards and HTML files.

A widget is serialized in the htmlwidgets wire format::

    {"x": {...payload...}, "evals": ["options.clickAction"], "jsHooks": []}

and embedded as a sized ``<div>`` followed by a
``<script type="application/json" data-for="...">`` block that the browser
binding picks up.
"""

from __future__ import annotations

import hashlib
import html
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..config import DEFAULT_WIDGET_CONFIG, WidgetConfig
from ..exceptions import InvalidConfigError
from ..logging_config import get_logger
from ..models import Payload
from ..serialization import dumps

logger = get_logger(__name__)

Size = Union[int, float, str, None]


@dataclass(frozen=True)
class Widget:
    """A normalized payload plus sizing and identity."""

    name: str
    x: Payload
    width: str
    height: str
    package: str
    element_id: str
    script_urls: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x.to_dict(), "evals": self.x.evals(), "jsHooks": []}

    def to_json(self) -> str:
        return dumps(self.to_dict())

    def to_html(self) -> str:
        """Container ``<div>`` and the JSON ``<script>`` block."""
        style = f"width:{self.width};height:{self.height};"
        # "</" inside a <script> block would end it early.
        data = self.to_json().replace("</", "<\\/")
        return (
            f'<div id="{html.escape(self.element_id)}" style="{html.escape(style)}" '
            f'class="{html.escape(self.name)} html-widget"></div>\n'
            f'<script type="application/json" data-for="{html.escape(self.element_id)}">'
            f"{data}</script>"
        )

    def _repr_html_(self) -> str:
        return self.to_html()

    def save_html(self, output_path: str, title: str = "d3tree2") -> str:
        """Write a standalone HTML document.

        Returns
        -------
        str
            Absolute path to the generated file.
        """
        scripts = "\n".join(
            f'<script src="{html.escape(url)}"></script>' for url in self.script_urls
        )
        document = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{html.escape(title)}</title>
{scripts}
</head>
<body style="margin:0;padding:0;">
{self.to_html()}
</body>
</html>
"""
        out = Path(output_path).resolve()
        out.write_text(document, encoding="utf-8")
        logger.debug("Wrote %s widget to %s", self.name, out)
        return str(out)


def create_widget(
    payload: Payload,
    width: Size = None,
    height: Size = None,
    element_id: Optional[str] = None,
    config: WidgetConfig = DEFAULT_WIDGET_CONFIG,
) -> Widget:
    """Wrap *payload* as a ``d3tree2`` widget.

    Sizes may be numbers (pixels) or CSS strings such as ``"100%"``; ``None``
    uses the configured defaults.  Without *element_id* the id is derived
    from the payload, so equal payloads embed identically.
    """
    if element_id is None:
        digest = hashlib.sha1(payload.to_json().encode("utf-8")).hexdigest()
        element_id = f"htmlwidget-{digest[:20]}"
    return Widget(
        name=config.name,
        x=payload,
        width=css_size(width, config.default_width),
        height=css_size(height, config.default_height),
        package=config.package,
        element_id=element_id,
        script_urls=tuple(config.script_urls),
    )


def css_size(value: Size, default: str) -> str:
    """``400`` -> ``"400px"``; strings pass through; ``None`` -> *default*."""
    if value is None:
        return default
    if isinstance(value, bool):
        raise InvalidConfigError("size", value, "must be a number or CSS string")
    if isinstance(value, int):
        return f"{value}px"
    if isinstance(value, float):
        return f"{value:.10g}px"
    return str(value)
