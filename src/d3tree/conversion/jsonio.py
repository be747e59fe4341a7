"""Read d3-style JSON from text, files, URLs or streams and canonicalize it.

The canonical encoding follows the widget's wire conventions:

* **auto-unboxing** -- a list holding exactly one scalar is written as that
  scalar, at any depth (``{"tags": ["a"]}`` becomes ``{"tags":"a"}``);
* **row-oriented tables** -- lists of objects stay lists of objects, one
  object per row, so ``{"children": [{"name": "X"}]}`` keeps its array.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

import requests

from ..exceptions import DataFormatError
from ..logging_config import get_logger
from ..models import JSONText
from ..serialization import dumps, to_jsonable

logger = get_logger(__name__)

_SCALARS = (str, int, float, bool, type(None))

# Longest string still checked as a filesystem path.
_MAX_PATH_LENGTH = 4096


def is_json_source(data: Any) -> bool:
    """True for text, bytes, paths and readable objects."""
    if isinstance(data, (str, bytes, os.PathLike)):
        return True
    return callable(getattr(data, "read", None))


def read_json_source(source: Any, timeout: Optional[float] = None) -> Any:
    """Parse JSON from *source*.

    Args:
        source: JSON text, ``bytes``, a file path (``str`` or path-like), an
            ``http(s)://`` or ``file://`` URL, or an object with ``read()``.
        timeout: Seconds to wait for URL sources; ``None`` waits indefinitely.

    Returns:
        The parsed structure.

    Raises:
        DataFormatError: The source is unreadable or not valid JSON.
    """
    label = _describe(source)
    try:
        text = _read_text(source, timeout)
        return json.loads(text)
    except requests.RequestException as e:
        raise DataFormatError(label, f"request failed: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataFormatError(label, str(e)) from e
    except json.JSONDecodeError as e:
        raise DataFormatError(label, f"invalid JSON: {e}") from e


def canonicalize(value: Any) -> Any:
    """Apply auto-unboxing and row orientation to a parsed structure."""
    value = to_jsonable(value)
    return _unbox(value)


def to_canonical_json(value: Any) -> JSONText:
    """Canonicalize *value* and encode it as compact JSON text."""
    try:
        return JSONText(dumps(canonicalize(value)))
    except (TypeError, ValueError) as e:
        raise DataFormatError(type(value).__name__, f"not JSON serializable: {e}") from e


# ── Private helpers ──────────────────────────────────────────────────


def _unbox(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _unbox(v) for k, v in value.items()}
    if isinstance(value, list):
        if len(value) == 1 and isinstance(value[0], _SCALARS):
            return value[0]
        return [_unbox(v) for v in value]
    return value


def _read_text(source: Any, timeout: Optional[float]) -> str:
    if callable(getattr(source, "read", None)):
        content = source.read()
        return content.decode("utf-8") if isinstance(content, bytes) else content

    if isinstance(source, os.PathLike):
        return Path(source).read_text(encoding="utf-8")

    if isinstance(source, bytes):
        return source.decode("utf-8")

    stripped = source.strip()
    if stripped.startswith(("http://", "https://")):
        logger.debug("Fetching JSON from %s", stripped)
        response = requests.get(stripped, timeout=timeout)
        response.raise_for_status()
        return response.text

    if stripped.startswith("file://"):
        return Path(stripped[len("file://"):]).read_text(encoding="utf-8")

    if _looks_like_path(stripped):
        logger.debug("Reading JSON file %s", stripped)
        return Path(stripped).read_text(encoding="utf-8")

    return source


def _looks_like_path(text: str) -> bool:
    if not text or text[0] in "{[\"" or len(text) > _MAX_PATH_LENGTH or "\n" in text:
        return False
    try:
        return Path(text).is_file()
    except (OSError, ValueError):
        return False


def _describe(source: Any) -> str:
    if isinstance(source, (str, bytes)):
        text = source if isinstance(source, str) else source.decode("utf-8", "replace")
        text = text.strip()
        return repr(text if len(text) <= 60 else text[:57] + "...")
    if isinstance(source, os.PathLike):
        return str(source)
    name = getattr(source, "name", None)
    return str(name) if name else type(source).__name__
