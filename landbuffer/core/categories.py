# -*- coding: utf-8 -*-
"""Land-cover category codes, their display labels and colours.

The mapping is only applied at render time. The sole place the data itself changes is the
reclassification step, which merges codes into the hidden sentinel.
"""

import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap

from ..config import HIDDEN_CODE, HIDDEN_COLOR

LANDCOVER_CLASSES = {
    1: ("water", "#4f81bd"),
    2: ("barren", "#c8b48a"),
    3: ("developed", "#d7301f"),
    4: ("grassland", "#b8e186"),
    5: ("wetland", "#66c2a5"),
    6: ("non_flowering_crop", "#fdbf6f"),
    7: ("flowering_crop", "#f781bf"),
    8: ("canola", "#ffe119"),
    9: ("forest", "#1b7837"),
    HIDDEN_CODE: ("", HIDDEN_COLOR),
}


def get_label(code):
    """Return the display label for a category code."""
    if code not in LANDCOVER_CLASSES:
        raise ValueError(f"Unknown land-cover code: {code}")
    return LANDCOVER_CLASSES[code][0]


def get_legend(values=None, hidden=None, nodata=None):
    """Build legend entries for a categorical raster.

    Parameters:
    -----------
    values : array-like, optional
        Cell values to build the legend for. Only codes present are listed.
        If None, every known category except the hidden sentinel is listed.
    hidden : iterable of int, optional
        Codes drawn in the neutral colour with an empty label.
    nodata : int, optional
        Value excluded from ``values``

    Returns:
    --------
    legend : list of tuple
        ``(code, label, color)`` entries sorted by code
    """
    hidden = set(hidden or ())

    if values is None:
        codes = [code for code in LANDCOVER_CLASSES if code != HIDDEN_CODE]
    else:
        codes = np.unique(np.asarray(values))
        if nodata is not None:
            codes = codes[codes != nodata]
        codes = [int(code) for code in codes]

    legend = []
    for code in sorted(codes):
        if code not in LANDCOVER_CLASSES:
            raise ValueError(f"Unknown land-cover code: {code}")
        label, color = LANDCOVER_CLASSES[code]
        if code in hidden:
            label, color = "", HIDDEN_COLOR
        legend.append((code, label, color))

    return legend


def category_colormap(legend):
    """Colormap and norm that paint each legend code with its own colour."""
    if not legend:
        raise ValueError("Legend has no entries")

    codes = [code for code, _, _ in legend]
    colors = [color for _, _, color in legend]
    # one bin per code, edges halfway between neighbouring codes
    edges = [codes[0] - 0.5] + [(a + b) / 2 for a, b in zip(codes[:-1], codes[1:])] + [codes[-1] + 0.5]

    return ListedColormap(colors), BoundaryNorm(edges, len(colors))
