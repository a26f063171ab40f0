# -*- coding: utf-8 -*-
"""Circular buffers around the study site and the padded crop box derived from them.

Buffers are computed in the CRS of the point they are built around, so the point must be in a projected system
(metres under EPSG:3857) before radii are applied.
"""

import geopandas as gpd

from ..config import BUFFER_RADII, BUFFER_RESOLUTION, CROP_PADDING


def make_buffer(point, radius, resolution=BUFFER_RESOLUTION):
    """Build a polygon approximating a circle of ``radius`` around the site.

    Parameters:
    -----------
    point : geopandas.GeoDataFrame
        One-row GeoDataFrame with the site point
    radius : float
        Buffer distance in units of the point's CRS. Must be non-negative.
    resolution : int
        Number of segments used to approximate a quarter circle

    Returns:
    --------
    polygon : shapely.geometry.Polygon
        Circle approximation centred on the point (empty when radius is 0)
    """
    if radius < 0:
        raise ValueError(f"Buffer radius must be non-negative, got {radius}")
    if len(point) != 1:
        raise ValueError(f"Expected a single site point, got {len(point)} rows")

    return point.geometry.iloc[0].buffer(radius, resolution)


def make_buffers(point, radii=BUFFER_RADII, resolution=BUFFER_RESOLUTION):
    """Build one buffer per radius, all sharing the site as centre.

    Parameters:
    -----------
    point : geopandas.GeoDataFrame
        One-row GeoDataFrame with the site point
    radii : sequence of float
        Buffer distances, kept in the given order. Nesting is not checked.
    resolution : int
        Number of segments used to approximate a quarter circle

    Returns:
    --------
    buffers : geopandas.GeoDataFrame
        One row per radius with a ``radius`` column, in the CRS of ``point``
    """
    polygons = [make_buffer(point, radius, resolution) for radius in radii]
    return gpd.GeoDataFrame({"radius": list(radii)}, geometry=polygons, crs=point.crs)


def select_buffer(buffers, radius):
    """Return the buffer polygon built for ``radius``."""
    matches = buffers.loc[buffers["radius"] == radius, "geometry"]
    if matches.empty:
        raise ValueError(f"No buffer with radius {radius}; available radii: {list(buffers['radius'])}")
    return matches.iloc[0]


def padded_bounds(geometry, factor=CROP_PADDING):
    """Bounding box of ``geometry`` scaled about its centre by ``factor``.

    Returns:
    --------
    bounds : tuple
        (left, bottom, right, top)
    """
    if factor <= 0:
        raise ValueError(f"Padding factor must be positive, got {factor}")

    left, bottom, right, top = geometry.bounds
    cx, cy = (left + right) / 2, (bottom + top) / 2
    half_w = (right - left) / 2 * factor
    half_h = (top - bottom) / 2 * factor

    return cx - half_w, cy - half_h, cx + half_w, cy + half_h

