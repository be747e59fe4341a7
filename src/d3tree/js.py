"""Tagged strings for values handed to the browser.

``JS`` marks source text the widget binding must evaluate (for example a
click handler ``function(d){ console.log(d) }``); ``PlainText`` marks a string
that must reach the browser as a literal.  Neither is parsed or executed in
Python.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import InvalidConfigError


@dataclass(frozen=True)
class JS:
    """JavaScript source evaluated by the rendering side."""

    source: str

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True)
class PlainText:
    """A string delivered to the rendering side verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text


ClickAction = Union[JS, PlainText]


def as_click_action(value: Union[str, ClickAction, None]) -> Optional[ClickAction]:
    """Tag a click action for the payload.

    Plain ``str`` values become :class:`JS`; values already wrapped in
    :class:`JS` or :class:`PlainText` are returned unchanged; ``None`` stays
    ``None``.

    Raises:
        InvalidConfigError: For any other type.
    """
    if value is None or isinstance(value, (JS, PlainText)):
        return value
    if isinstance(value, str):
        return JS(value)
    raise InvalidConfigError(
        "click_action", value, f"expected str, JS or PlainText, got {type(value).__name__}"
    )
