# -*- coding: utf-8 -*-
"""Functions to create static land-cover maps with buffers, a legend, a scale bar and a compass."""

import math
import os

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.font_manager import FontProperties
from mpl_toolkits.axes_grid1.anchored_artists import AnchoredSizeBar
from pyproj import Transformer

from ..core.categories import category_colormap, get_legend
from ..core.site import same_crs

WEB_MERCATOR = "EPSG:3857"
GEOGRAPHIC = "EPSG:4326"


def _nice_length(span):
    """Largest 1, 2 or 5 x 10^n not exceeding a fifth of ``span``."""
    target = span / 5
    base = 10 ** math.floor(math.log10(target))
    for step in (5, 2, 1):
        if step * base <= target:
            return step * base
    return base


def _format_distance(length):
    if length >= 1000:
        return f"{length / 1000:g} km"
    return f"{length:g} m"


def _map_units_per_metre(ax, crs):
    """Map units per ground metre at the axis centre. Web Mercator stretches distances by 1/cos(latitude)."""
    if crs is None or not same_crs(crs, WEB_MERCATOR):
        return 1.0

    x0, x1 = ax.get_xlim()
    y0, y1 = ax.get_ylim()
    transformer = Transformer.from_crs(WEB_MERCATOR, GEOGRAPHIC, always_xy=True)
    _, lat = transformer.transform((x0 + x1) / 2, (y0 + y1) / 2)
    return 1 / math.cos(math.radians(lat))


def add_scalebar(ax, length=None, loc="lower left", crs=None, color="black", fontsize=9):
    """Add a scale bar in ground metres to an axis.

    Parameters:
    -----------
    ax : matplotlib.axes.Axes
        Map axis, in a projected CRS
    length : float, optional
        Bar length in ground metres. Chosen from the axis width when None.
    loc : str
        Anchor location, as for matplotlib legends
    crs : optional
        CRS of the axis. Under Web Mercator the bar is stretched to the scale at the latitude of the axis centre;
        other projected systems are taken as true to scale.

    Returns:
    --------
    scalebar : AnchoredSizeBar
        The artist added to the axis
    """
    scale = _map_units_per_metre(ax, crs)

    x0, x1 = ax.get_xlim()
    span = abs(x1 - x0) / scale
    if length is None:
        length = _nice_length(span)

    y0, y1 = ax.get_ylim()
    scalebar = AnchoredSizeBar(
        ax.transData,
        length * scale,
        _format_distance(length),
        loc,
        pad=0.5,
        borderpad=0.8,
        sep=4,
        color=color,
        frameon=False,
        size_vertical=abs(y1 - y0) / 150,
        fontproperties=FontProperties(size=fontsize),
    )
    scalebar.set_gid("scalebar")
    ax.add_artist(scalebar)
    return scalebar


def add_compass(ax, x=0.92, y=0.88, length=0.08, color="black", fontsize=12):
    """Add a north arrow to an axis, positioned in axes fraction coordinates."""
    arrow = ax.annotate(
        "",
        xy=(x, y),
        xytext=(x, y - length),
        xycoords="axes fraction",
        textcoords="axes fraction",
        arrowprops=dict(facecolor=color, edgecolor=color, width=4, headwidth=12, headlength=10),
    )
    arrow.set_gid("compass")
    ax.text(x, y + 0.015, "N", transform=ax.transAxes, ha="center", va="bottom", fontsize=fontsize, fontweight="bold")
    return arrow


def plot_landcover(
    layer,
    buffers=None,
    site=None,
    hidden=None,
    ax=None,
    title=None,
    legend_loc="upper right",
    legend_outside=False,
    legend_title="Land cover",
    frame=False,
    scalebar=True,
    compass=True,
    figsize=(8, 8),
    buffer_color="black",
    site_color="red",
):
    """Plot a categorical land-cover layer with optional buffers and site marker.

    Parameters:
    -----------
    layer : Layer
        Layer with a categorical raster
    buffers : geopandas.GeoDataFrame, optional
        Buffer polygons, drawn as outlines. Must share the layer's CRS.
    site : geopandas.GeoDataFrame, optional
        Site point. Must share the layer's CRS.
    hidden : iterable of int, optional
        Codes drawn in a neutral colour with a blank legend label
    ax : matplotlib.axes.Axes, optional
        Axis to draw on. A new figure is created when None.
    title : str, optional
        Axis title. Defaults to the layer name.
    legend_loc : str
        Legend location inside the axis
    legend_outside : bool
        Place the legend to the right of the axis instead
    legend_title : str
        Title of the legend
    frame : bool
        Whether to draw the axis frame and ticks
    scalebar : bool
        Whether to add a scale bar
    compass : bool
        Whether to add a north arrow
    figsize : tuple
        Figure size, used only when ``ax`` is None

    Returns:
    --------
    fig : matplotlib.figure.Figure
        Figure object
    """
    if layer.raster is None:
        raise ValueError(f"Layer '{layer.name}' has no raster to plot")

    for name, vector in (("buffers", buffers), ("site", site)):
        if vector is not None and not same_crs(layer.crs, vector.crs):
            raise ValueError(f"CRS of {name} ({vector.crs}) does not match raster CRS ({layer.crs})")

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    left, bottom, right, top = layer.bounds
    legend = get_legend(layer.raster, hidden=hidden, nodata=layer.nodata)

    if legend:
        cmap, norm = category_colormap(legend)
        data = layer.raster if layer.nodata is None else np.ma.masked_equal(layer.raster, layer.nodata)
        ax.imshow(data, cmap=cmap, norm=norm, extent=(left, right, bottom, top), interpolation="nearest")

    if buffers is not None and len(buffers) > 0:
        buffers.boundary.plot(ax=ax, color=buffer_color, linewidth=1, label="buffers")

    if site is not None:
        site.plot(ax=ax, color=site_color, edgecolor="white", markersize=40, zorder=5, label="site")

    ax.set_xlim(left, right)
    ax.set_ylim(bottom, top)
    ax.set_aspect("equal")
    ax.set_title(title if title is not None else layer.name)

    if legend:
        patches = [mpatches.Patch(facecolor=color, edgecolor="grey", label=label) for _, label, color in legend]
        labels = [label for _, label, _ in legend]
        if legend_outside:
            ax.legend(handles=patches, labels=labels, title=legend_title, loc="upper left", bbox_to_anchor=(1.02, 1))
        else:
            ax.legend(handles=patches, labels=labels, title=legend_title, loc=legend_loc)

    if not frame:
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    if scalebar:
        add_scalebar(ax, crs=layer.crs)
    if compass:
        add_compass(ax)

    return fig


def plot_comparison(
    before_layer,
    after_layer,
    buffers=None,
    site=None,
    hidden=None,
    figsize=(16, 8),
    title=None,
    titles=("All land-cover classes", "Selected classes hidden"),
    **kwargs,
):
    """Plot the original and the reclassified layer side by side.

    ``hidden`` applies to the right-hand panel only. Extra keyword arguments go to plot_landcover for both panels.
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    if title:
        fig.suptitle(title)

    plot_landcover(before_layer, buffers=buffers, site=site, ax=ax1, title=titles[0], **kwargs)
    plot_landcover(after_layer, buffers=buffers, site=site, hidden=hidden, ax=ax2, title=titles[1], **kwargs)

    fig.tight_layout()
    return fig


def save_figure(fig, output_path, width=None, height=None, dpi=300):
    """Export a figure to a file; the format follows the extension (e.g. ``.pdf``, ``.png``).

    Parameters:
    -----------
    fig : matplotlib.figure.Figure
        Figure to export
    output_path : str
        Destination path
    width, height : float, optional
        Output size in inches. Both must be given to resize.
    dpi : int
        Resolution for raster formats

    Returns:
    --------
    output_path : str
        The written path
    """
    if (width is None) != (height is None):
        raise ValueError("Give both width and height, or neither")
    if width is not None:
        fig.set_size_inches(width, height)

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    return output_path
