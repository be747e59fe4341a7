"""Shared test fixtures for d3tree."""

import sys

sys.path.insert(0, "src")

import pandas as pd
import pytest


@pytest.fixture
def world_table():
    """Leaf rows of a two-level continent/country aggregation."""
    return pd.DataFrame(
        {
            "continent": ["Asia", "Asia", "Europe"],
            "iso3": ["CHN", "IND", "DEU"],
            "vSize": [1000, 900, 300],
        }
    )


@pytest.fixture
def world_result(world_table):
    """A treemap result wrapping ``world_table``."""
    return {"tm": world_table, "type": "index", "vSize": "population"}


@pytest.fixture
def countries():
    """Flat observations for the statistics step."""
    return pd.DataFrame(
        {
            "continent": ["Asia", "Asia", "Europe"],
            "iso3": ["CHN", "IND", "DEU"],
            "population": [1000, 900, 300],
            "GNI": [10.0, 20.0, 30.0],
            "region": ["east", "south", "west"],
        }
    )


@pytest.fixture
def flare():
    """A small d3 hierarchy."""
    return {
        "name": "flare",
        "children": [
            {"name": "analytics", "children": [{"name": "cluster", "size": 3938}]},
            {"name": "animate", "size": 1200},
        ],
    }
