# -*- coding: utf-8 -*-
"""Land-cover class statistics for layers and buffers."""

import numpy as np
from rasterio.features import geometry_mask

from ..core.categories import get_label
from ..core.site import same_crs


def _count_codes(values):
    codes, counts = np.unique(values, return_counts=True)
    total = int(counts.sum())

    class_counts = {}
    class_percentages = {}
    for code, count in zip(codes, counts):
        label = get_label(int(code)) or str(int(code))
        class_counts[label] = int(count)
        class_percentages[label] = round(float(count) / total * 100, 2)

    return {"counts": class_counts, "percentages": class_percentages, "total": total}


def attach_class_distribution(layer):
    """Calculate the distribution of land-cover classes in a layer.

    Parameters:
    -----------
    layer : Layer
        Layer with a categorical raster

    Returns:
    --------
    distribution : dict
        Dictionary with class counts, percentages and the number of valid cells.
        No-data cells are excluded; the hidden category is keyed by its code.
    """
    if layer.raster is None:
        return {}

    values = layer.raster if layer.nodata is None else layer.raster[layer.raster != layer.nodata]
    return _count_codes(values)


def attach_buffer_composition(layer, buffers, rings=False):
    """Calculate the land-cover composition inside each buffer.

    Parameters:
    -----------
    layer : Layer
        Layer with a categorical raster
    buffers : geopandas.GeoDataFrame
        Buffers with a ``radius`` column, in the layer's CRS
    rings : bool
        If True, each buffer only counts cells outside the previous (smaller) buffer

    Returns:
    --------
    composition : dict
        Mapping of radius -> class distribution (see attach_class_distribution)
    """
    if layer.raster is None:
        raise ValueError(f"Layer '{layer.name}' has no raster")
    if not same_crs(layer.crs, buffers.crs):
        raise ValueError(f"Buffer CRS {buffers.crs} does not match layer CRS {layer.crs}")

    valid = np.ones(layer.raster.shape, dtype=bool) if layer.nodata is None else layer.raster != layer.nodata
    ordered = buffers.sort_values("radius")

    composition = {}
    previous = np.zeros(layer.raster.shape, dtype=bool)
    for radius, geom in zip(ordered["radius"].tolist(), ordered.geometry):
        if geom.is_empty:
            inside = np.zeros(layer.raster.shape, dtype=bool)
        else:
            inside = geometry_mask([geom], out_shape=layer.raster.shape, transform=layer.transform, invert=True)
        selected = inside & ~previous if rings else inside
        values = layer.raster[selected & valid]
        composition[radius] = _count_codes(values) if values.size else {"counts": {}, "percentages": {}, "total": 0}
        previous = inside

    return composition
