#!/usr/bin/env python3
"""
Example: Basic usage of d3tree as a Python library
"""

import pandas as pd

from d3tree import d3tree2, treemap_stats
from d3tree.logging_config import setup_logging

setup_logging(verbose=True)

gni = pd.DataFrame(
    {
        "continent": ["Asia", "Asia", "Europe", "Europe", "Africa"],
        "iso3": ["CHN", "IND", "DEU", "FRA", "NGA"],
        "population": [1338, 1225, 82, 65, 158],
        "GNI": [4260, 1340, 43330, 42390, 1180],
    }
)

# Aggregated table, colored by GNI
widget = d3tree2(
    treemap_stats(gni, index=["continent", "iso3"], v_size="population",
                  v_color="GNI", color_by="value"),
    rootname="World",
    click_action="function(d){ console.log(d) }",
)
print(f"Legend: {[e.to_dict() for e in widget.x.legend]}")
print(f"Saved to {widget.save_html('world.html', title='World population')}")

# Plain d3 hierarchy
flare = {
    "name": "flare",
    "children": [
        {"name": "analytics", "children": [{"name": "cluster", "size": 3938}]},
        {"name": "animate", "size": 1200},
    ],
}
print(d3tree2(flare, id_field="name", height=600).to_json())
