"""Build a d3 hierarchy from the ``tm`` table of a treemap result.

The table has one row per leaf or intermediate group.  Its grouping-level
columns are the columns before ``vSize``; a row's key path is its non-null
values in those columns, in order::

    continent  iso3  vSize   color
    Asia       NaN   1900    #1B9E77     -> World/Asia
    Asia       CHN   1000    #1B9E77     -> World/Asia/CHN
    Asia       IND    900    #1B9E77     -> World/Asia/IND
    Europe     DEU    300    #D95F02     -> World/Europe/DEU

becomes::

    {"name": "World", "id": "World", "children": [
        {"name": "Asia", "id": "World/Asia", "size": 1900, "children": [
            {"name": "CHN", "id": "World/Asia/CHN", "size": 1000, ...},
            {"name": "IND", "id": "World/Asia/IND", "size": 900, ...}]},
        {"name": "Europe", "id": "World/Europe", "children": [
            {"name": "DEU", "id": "World/Europe/DEU", "size": 300, ...}]}]}

Groups without a row of their own (``Europe`` above) get no value; the
renderer sums their children.  Ids escape ``%`` and ``/`` inside each key
(``%25``, ``%2F``) so distinct paths never share an id.  When the id and
label keys are the same field the label wins and no path id is written.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple, Union

import pandas as pd

from ..exceptions import DataFormatError
from ..logging_config import get_logger
from ..serialization import to_jsonable

logger = get_logger(__name__)

SIZE_COLUMN = "vSize"

# Layout output of the aggregation step; the renderer computes its own.
GEOMETRY_COLUMNS = frozenset({"x0", "y0", "w", "h"})


def convert_treemap(
    tm: Union[pd.DataFrame, Sequence[Dict[str, Any]]],
    rootname: str = "root",
    celltext: str = "name",
    id_field: str = "id",
    value_field: str = "size",
) -> Dict[str, Any]:
    """Convert an aggregation table into a nested node dict.

    Parameters
    ----------
    tm:
        DataFrame (or list of row dicts) with grouping columns, ``vSize``
        and optional extra columns such as ``color`` or ``vColor``.
    rootname:
        Label and id of the synthetic root node.
    celltext, id_field, value_field:
        Node keys for the label, identifier and size.

    Returns
    -------
    Dict[str, Any]
        The root node; every node has a ``children`` list (empty for leaves).

    Raises
    ------
    DataFormatError
        If the table has no ``vSize`` column or no grouping columns.
    """
    if isinstance(tm, pd.DataFrame):
        frame = tm
    else:
        try:
            frame = pd.DataFrame(list(tm))
        except (TypeError, ValueError) as e:
            raise DataFormatError("treemap result", f"'tm' is not a table: {e}") from e
    frame = frame.rename(columns=str)
    columns = list(frame.columns)

    if SIZE_COLUMN not in columns:
        raise DataFormatError("treemap result", f"table has no '{SIZE_COLUMN}' column")
    index = columns[: columns.index(SIZE_COLUMN)]
    if not index:
        raise DataFormatError("treemap result", f"no grouping columns before '{SIZE_COLUMN}'")

    extras = [c for c in columns[columns.index(SIZE_COLUMN) + 1:] if c not in GEOMETRY_COLUMNS]

    path_ids = id_field != celltext
    root: Dict[str, Any] = {celltext: rootname, "children": []}
    if path_ids:
        root[id_field] = _path_id(rootname, ())
    nodes: Dict[Tuple[str, ...], Dict[str, Any]] = {(): root}

    for row in frame.to_dict(orient="records"):
        path = _key_path(row, index)
        if not path:
            continue

        node = root
        for depth in range(1, len(path) + 1):
            prefix = path[:depth]
            existing = nodes.get(prefix)
            if existing is None:
                existing = {celltext: prefix[-1], "children": []}
                if path_ids:
                    existing[id_field] = _path_id(rootname, prefix)
                node["children"].append(existing)
                nodes[prefix] = existing
            node = existing

        size = to_jsonable(row[SIZE_COLUMN])
        if size is not None:
            node[value_field] = size
        for column in extras:
            node[column] = to_jsonable(row[column])

    logger.debug("Converted %d table rows into %d nodes", len(frame), len(nodes))
    return root


def _path_id(rootname: str, prefix: Tuple[str, ...]) -> str:
    parts = (str(rootname),) + prefix
    return "/".join(p.replace("%", "%25").replace("/", "%2F") for p in parts)


def _key_path(row: Dict[str, Any], index: List[str]) -> Tuple[str, ...]:
    """Leading non-null grouping values of *row*, as strings."""
    path: List[str] = []
    for column in index:
        value = to_jsonable(row[column])
        if value is None:
            break
        path.append(str(value))
    return tuple(path)
