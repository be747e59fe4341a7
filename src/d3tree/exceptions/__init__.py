"""Exception hierarchy for d3tree."""

from .base import D3TreeError
from .config import ConfigurationError, InvalidConfigError
from .input import DataFormatError, InputError, UnsupportedInputError

__all__ = [
    "D3TreeError",
    "InputError",
    "UnsupportedInputError",
    "DataFormatError",
    "ConfigurationError",
    "InvalidConfigError",
]
