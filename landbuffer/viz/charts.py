# -*- coding: utf-8 -*-
"""Charts for land-cover composition statistics."""

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ..config import HIDDEN_CODE, HIDDEN_COLOR
from ..core.categories import LANDCOVER_CLASSES


def composition_table(composition):
    """Flatten a buffer composition dict into a long DataFrame (radius, class, count, percentage)."""
    rows = []
    for radius, stats in composition.items():
        for label, count in stats.get("counts", {}).items():
            rows.append(
                {
                    "radius": radius,
                    "class": label,
                    "count": count,
                    "percentage": stats["percentages"][label],
                }
            )
    return pd.DataFrame(rows, columns=["radius", "class", "count", "percentage"])


def plot_composition(composition, figsize=(10, 6), title=None):
    """Plot the share of each land-cover class per buffer radius.

    Parameters:
    -----------
    composition : dict
        Output of attach_buffer_composition
    figsize : tuple
        Figure size
    title : str, optional
        Axis title

    Returns:
    --------
    fig : matplotlib.figure.Figure
        Figure object
    """
    table = composition_table(composition)
    if table.empty:
        raise ValueError("Composition has no classes to plot")

    palette = {label: color for label, color in LANDCOVER_CLASSES.values() if label}
    palette[str(HIDDEN_CODE)] = HIDDEN_COLOR
    hue_order = [label for label in palette if label in set(table["class"])]

    fig, ax = plt.subplots(figsize=figsize)
    sns.barplot(data=table, x="radius", y="percentage", hue="class", hue_order=hue_order, palette=palette, ax=ax)

    ax.set_title(title if title else "Land-cover composition by buffer")
    ax.set_xlabel("Buffer radius (m)")
    ax.set_ylabel("Share of cells (%)")
    sns.move_legend(ax, "upper left", bbox_to_anchor=(1.02, 1), title="Land cover")

    plt.tight_layout()
    return fig
