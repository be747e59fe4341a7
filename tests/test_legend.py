"""Tests for legend extraction from palette metadata."""

import logging

import numpy as np

from d3tree.conversion.legend import extract_legend
from d3tree.models import LegendEntry


class TestExtractLegend:
    def test_numeric_breaks(self):
        legend = extract_legend({"palette": ["#000", "#888", "#FFF"], "breaks": [0, 10, 20, 30]})
        assert legend == (
            LegendEntry("#000", range=(0, 10)),
            LegendEntry("#888", range=(10, 20)),
            LegendEntry("#FFF", range=(20, 30)),
        )

    def test_numpy_breaks(self):
        legend = extract_legend({"palette": ("#000", "#FFF"), "breaks": np.array([0.0, 0.5, 1.0])})
        assert [entry.range for entry in legend] == [(0.0, 0.5), (0.5, 1.0)]

    def test_categories_keep_palette_order(self):
        legend = extract_legend({"palette": ["#B", "#A"], "labels": ["beta", "alpha"]})
        assert [(e.color, e.category) for e in legend] == [("#B", "beta"), ("#A", "alpha")]

    def test_absent_palette(self):
        assert extract_legend({"type": "index"}) is None
        assert extract_legend({"palette": []}) is None

    def test_mismatched_lengths_are_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="d3tree"):
            legend = extract_legend({"palette": ["#000", "#FFF"], "breaks": [0, 1]})
        assert legend is None
        assert "Ignoring legend" in caplog.text

    def test_non_color_palette_dropped(self):
        assert extract_legend({"palette": "RdYlGn", "breaks": [0, 1]}) is None

    def test_entry_serialization(self):
        assert LegendEntry("#000", range=(1, 2)).to_dict() == {"color": "#000", "range": [1, 2]}
        assert LegendEntry("#000", category="a").to_dict() == {"color": "#000", "category": "a"}
