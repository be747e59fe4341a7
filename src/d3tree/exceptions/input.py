"""Input-related exceptions: unrecognized shapes and unreadable JSON."""

from .base import D3TreeError


class InputError(D3TreeError):
    """Base class for errors caused by the data handed to the normalizer."""
    pass


class UnsupportedInputError(InputError):
    """Raised when the input matches none of the accepted shapes."""

    def __init__(self, received_type: str):
        super().__init__(
            f"Unsupported input type: {received_type}",
            details={
                "received": received_type,
                "expected": "treemap result, JSON text/file/URL/stream, dict or list",
            },
        )
        self.received_type = received_type


class DataFormatError(InputError):
    """Raised when JSON or an aggregation table cannot be read or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Cannot read data from {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason
