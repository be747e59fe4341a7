"""Configuration for payload options and widget defaults.

Both dataclasses are frozen and validated on construction, so an invalid
value fails where it is created instead of in the browser.

Example:
    >>> options = RenderOptions(celltext="label", value_field="population")
    >>> options.to_dict()
    {'celltext': 'label', 'id': 'id', 'valueField': 'population'}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .exceptions import InvalidConfigError
from .js import JS, ClickAction, PlainText

DEFAULT_ROOTNAME = "root"

# Browser assets loaded by standalone HTML documents. The d3tree2 binding
# itself is served by the host application and appended by callers.
DEFAULT_SCRIPT_URLS: Tuple[str, ...] = ("https://cdn.jsdelivr.net/npm/d3@3.5.17/d3.min.js",)


@dataclass(frozen=True)
class RenderOptions:
    """Field-name mapping and click behaviour forwarded to the widget.

    Attributes:
        celltext: Node field holding the cell label
        id: Node field holding the unique identifier
        value_field: Node field holding the numeric size
        click_action: Optional :class:`JS` or :class:`PlainText`
    """

    celltext: str = "name"
    id: str = "id"
    value_field: str = "size"
    click_action: Optional[ClickAction] = None

    def __post_init__(self) -> None:
        for key in ("celltext", "id", "value_field"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidConfigError(key, value, "must be a non-empty string")
        if self.click_action is not None and not isinstance(self.click_action, (JS, PlainText)):
            raise InvalidConfigError(
                "click_action", self.click_action, "must be tagged as JS or PlainText"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the key names the widget binding reads."""
        options: Dict[str, Any] = {
            "celltext": self.celltext,
            "id": self.id,
            "valueField": self.value_field,
        }
        if self.click_action is not None:
            options["clickAction"] = str(self.click_action)
        return options


@dataclass(frozen=True)
class WidgetConfig:
    """Defaults for widget creation and embedding.

    Attributes:
        name: Widget type identifier understood by the browser binding
        package: Package that owns the widget binding
        default_width: CSS width used when none is given
        default_height: CSS height used when none is given
        default_rootname: Root label for treemap results without ``rootname``
        script_urls: Scripts loaded by standalone HTML documents
        fetch_timeout: Seconds to wait for URL sources (None = no limit)
    """

    name: str = "d3tree2"
    package: str = "d3tree"
    default_width: str = "100%"
    default_height: str = "400px"
    default_rootname: str = DEFAULT_ROOTNAME
    script_urls: Tuple[str, ...] = DEFAULT_SCRIPT_URLS
    fetch_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        for key in ("name", "package", "default_width", "default_height", "default_rootname"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidConfigError(key, value, "must be a non-empty string")
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise InvalidConfigError("fetch_timeout", self.fetch_timeout, "must be positive")


# Default widget configuration (singleton)
DEFAULT_WIDGET_CONFIG = WidgetConfig()
