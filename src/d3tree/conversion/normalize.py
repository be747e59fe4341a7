"""Turn any accepted input into the canonical widget payload.

Three input shapes are accepted, checked in this order:

1. **Treemap result** -- a mapping whose first key is ``"tm"`` (see
   :func:`d3tree.stats.treemap_stats`).  The table is converted into a node
   tree, the remaining keys become ``meta`` and palette metadata becomes the
   legend.
2. **JSON source** -- JSON text, a file path, an ``http(s)://`` URL or an open
   readable object.  It is parsed and re-encoded canonically.
3. **Hierarchy** -- any other dict or list, deep-copied so later changes by
   the caller do not reach the payload.

Everything else raises :class:`UnsupportedInputError`.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional, Union

from ..config import DEFAULT_WIDGET_CONFIG, RenderOptions, WidgetConfig
from ..exceptions import UnsupportedInputError
from ..js import ClickAction, as_click_action
from ..logging_config import get_logger
from ..models import InputKind, Payload
from ..serialization import to_jsonable
from .jsonio import is_json_source, read_json_source, to_canonical_json
from .legend import extract_legend
from .treemap import convert_treemap

logger = get_logger(__name__)

TREEMAP_KEY = "tm"


def classify(data: Any) -> InputKind:
    """Decide which of the three input shapes *data* is.

    Raises:
        UnsupportedInputError: If *data* is none of them.
    """
    if isinstance(data, Mapping) and next(iter(data), None) == TREEMAP_KEY:
        return InputKind.TREEMAP
    if is_json_source(data):
        return InputKind.JSON_SOURCE
    if isinstance(data, (Mapping, list, tuple)):
        return InputKind.HIERARCHY
    raise UnsupportedInputError(type(data).__name__)


def normalize(
    data: Any,
    rootname: Optional[str] = None,
    celltext: str = "name",
    id_field: str = "id",
    value_field: str = "size",
    click_action: Union[str, ClickAction, None] = None,
    config: WidgetConfig = DEFAULT_WIDGET_CONFIG,
) -> Payload:
    """Build the ``{data, meta, legend, options}`` payload for *data*.

    Args:
        data: Treemap result, JSON source, or nested dict/list.
        rootname: Root label for treemap results.  When omitted the root is
            named ``config.default_rootname`` (``"root"``); the caller's
            variable name is never inspected.
        celltext: Node field holding the cell label.
        id_field: Node field holding the unique identifier.
        value_field: Node field holding the size.
        click_action: JavaScript run when a cell is clicked; it receives the
            clicked node's data as its only argument.  Plain strings are
            tagged as :class:`~d3tree.js.JS`.
        config: Widget defaults.

    Returns:
        A new :class:`Payload`; nothing is cached between calls.

    Raises:
        UnsupportedInputError: Unrecognized input shape.
        DataFormatError: Unreadable or malformed JSON source or table.
        InvalidConfigError: Invalid option values.
    """
    options = RenderOptions(
        celltext=celltext,
        id=id_field,
        value_field=value_field,
        click_action=as_click_action(click_action),
    )

    kind = classify(data)
    logger.debug("Normalizing %s input (%s)", kind.value, type(data).__name__)

    if kind is InputKind.TREEMAP:
        return _from_treemap(data, rootname, options, config)
    return Payload(data=_CONVERTERS[kind](data, config), options=options)


# ── Private helpers ──────────────────────────────────────────────────


def _from_treemap(
    result: Mapping[str, Any],
    rootname: Optional[str],
    options: RenderOptions,
    config: WidgetConfig,
) -> Payload:
    if rootname is None:
        rootname = config.default_rootname
        logger.info("No rootname given for treemap result; using %r", rootname)

    meta: Dict[str, Any] = {
        str(k): to_jsonable(v) for k, v in result.items() if k != TREEMAP_KEY
    }
    tree = convert_treemap(
        result[TREEMAP_KEY],
        rootname=rootname,
        celltext=options.celltext,
        id_field=options.id,
        value_field=options.value_field,
    )
    return Payload(data=tree, options=options, meta=meta, legend=extract_legend(meta))


def _from_json_source(source: Any, config: WidgetConfig) -> Any:
    parsed = read_json_source(source, timeout=config.fetch_timeout)
    return to_canonical_json(parsed)


def _from_hierarchy(data: Any, config: WidgetConfig) -> Any:
    return copy.deepcopy(data)


_CONVERTERS = {
    InputKind.JSON_SOURCE: _from_json_source,
    InputKind.HIERARCHY: _from_hierarchy,
}
