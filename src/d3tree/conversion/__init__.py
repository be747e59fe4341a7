"""Input conversion: treemap results, JSON sources and nested structures."""

from .jsonio import canonicalize, read_json_source, to_canonical_json
from .legend import extract_legend
from .normalize import classify, normalize
from .treemap import convert_treemap

__all__ = [
    "normalize",
    "classify",
    "convert_treemap",
    "extract_legend",
    "read_json_source",
    "canonicalize",
    "to_canonical_json",
]
