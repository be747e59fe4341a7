"""Tests for the d3tree exception hierarchy."""

from d3tree.exceptions import (
    ConfigurationError,
    D3TreeError,
    DataFormatError,
    InputError,
    InvalidConfigError,
    UnsupportedInputError,
)


class TestHierarchy:
    def test_input_errors(self):
        assert issubclass(UnsupportedInputError, InputError)
        assert issubclass(DataFormatError, InputError)
        assert issubclass(InputError, D3TreeError)

    def test_config_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(ConfigurationError, D3TreeError)


class TestMessages:
    def test_base_without_details(self):
        assert str(D3TreeError("boom")) == "boom"

    def test_details_appended(self):
        error = D3TreeError("boom", details={"a": "1", "b": "2"})
        assert str(error) == "boom (a=1, b=2)"

    def test_unsupported_input(self):
        error = UnsupportedInputError("int")
        assert error.received_type == "int"
        assert str(error).startswith("Unsupported input type: int (received=int")

    def test_data_format(self):
        error = DataFormatError("'http://x/flare.json'", "request failed: refused")
        assert error.source == "'http://x/flare.json'"
        assert error.reason == "request failed: refused"
        assert "reason=request failed: refused" in str(error)

    def test_invalid_config(self):
        error = InvalidConfigError("celltext", "", "must be a non-empty string")
        assert error.key == "celltext"
        assert str(error).startswith("Invalid configuration for celltext: ''")
