# -*- coding: utf-8 -*-
"""Handles raster input and output operations for single-band categorical images.

Reading returns a Layer carrying the grid, transform, CRS and no-data value. Cropping works on the in-memory grid and
pads with no-data cells wherever the requested box extends past the source.
"""

import math
import os

import numpy as np
import rasterio
from rasterio.windows import Window, from_bounds
from rasterio.windows import transform as window_transform

from ..config import DEFAULT_NODATA
from ..core.layer import Layer

# Window edges closer than this (in cells) to a cell boundary are treated as lying on it.
SNAP_TOLERANCE = 1e-6


def read_raster(raster_path, band=1, layer_manager=None, layer_name=None):
    """Read one band of a raster file into a Layer.

    Parameters:
    -----------
    raster_path : str
        Path to the raster file
    band : int
        Band index to read (1-based)
    layer_manager : LayerManager, optional
        Layer manager to add the layer to
    layer_name : str, optional
        Name for the layer. Defaults to the file name without extension.

    Returns:
    --------
    layer : Layer
        Layer holding the band, transform, CRS and no-data value
    """
    with rasterio.open(raster_path) as src:
        image_data = src.read(band)
        transform = src.transform
        crs = src.crs
        nodata = src.nodata

    if not layer_name:
        layer_name = os.path.splitext(os.path.basename(raster_path))[0]

    layer = Layer(name=layer_name, type="raster")
    layer.raster = image_data
    layer.transform = transform
    layer.crs = crs
    layer.nodata = int(nodata) if nodata is not None else DEFAULT_NODATA
    layer.metadata = {"source": raster_path, "band": band}

    if layer_manager:
        layer_manager.add_layer(layer)

    return layer


def crop_raster(layer, bounds, layer_manager=None, layer_name=None):
    """Crop a layer to a bounding box.

    The box is snapped outward to whole cells, so the result always covers it. Cells outside the source grid are
    filled with the layer's no-data value.

    Parameters:
    -----------
    layer : Layer
        Layer to crop
    bounds : tuple
        (left, bottom, right, top) in the layer's CRS
    layer_manager : LayerManager, optional
        Layer manager to add the result layer to
    layer_name : str, optional
        Name for the result layer

    Returns:
    --------
    cropped : Layer
        Layer with the same CRS, resolution and no-data value as ``layer``
    """
    if layer.raster is None:
        raise ValueError(f"Layer '{layer.name}' has no raster to crop")

    left, bottom, right, top = bounds
    if left >= right or bottom >= top:
        raise ValueError(f"Invalid bounds: {bounds}")

    window = from_bounds(left, bottom, right, top, transform=layer.transform)
    col_start = math.floor(window.col_off + SNAP_TOLERANCE)
    row_start = math.floor(window.row_off + SNAP_TOLERANCE)
    col_stop = math.ceil(window.col_off + window.width - SNAP_TOLERANCE)
    row_stop = math.ceil(window.row_off + window.height - SNAP_TOLERANCE)
    col_stop = max(col_stop, col_start + 1)
    row_stop = max(row_stop, row_start + 1)

    height, width = layer.raster.shape
    nodata = layer.nodata if layer.nodata is not None else DEFAULT_NODATA
    out = np.full((row_stop - row_start, col_stop - col_start), nodata, dtype=layer.raster.dtype)

    # overlap between the requested window and the source grid
    src_r0, src_r1 = max(row_start, 0), min(row_stop, height)
    src_c0, src_c1 = max(col_start, 0), min(col_stop, width)
    if src_r0 < src_r1 and src_c0 < src_c1:
        out[src_r0 - row_start : src_r1 - row_start, src_c0 - col_start : src_c1 - col_start] = layer.raster[
            src_r0:src_r1, src_c0:src_c1
        ]

    crop_window = Window(col_start, row_start, col_stop - col_start, row_stop - row_start)

    if not layer_name:
        layer_name = f"{layer.name}_crop"

    cropped = Layer(name=layer_name, parent=layer, type="crop")
    cropped.raster = out
    cropped.transform = window_transform(crop_window, layer.transform)
    cropped.crs = layer.crs
    cropped.nodata = nodata
    cropped.metadata = {"requested_bounds": tuple(bounds), "window": crop_window}

    if layer_manager:
        layer_manager.add_layer(cropped)

    return cropped


def write_raster(output_path, data, transform, crs, nodata=None):
    """Write raster data to a GeoTIFF file.

    Parameters:
    -----------
    output_path : str
        Path to the output raster file
    data : numpy.ndarray
        Array with raster data values, (height, width) or (bands, height, width)
    transform : affine.Affine
        Affine transformation for the raster
    crs : rasterio.crs.CRS
        Coordinate reference system
    nodata : int or float, optional
        No data value
    """
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if len(data.shape) == 2:
        data = data.reshape(1, *data.shape)

    count, height, width = data.shape

    with rasterio.open(
        output_path,
        "w",
        driver="GTiff",
        height=height,
        width=width,
        count=count,
        dtype=data.dtype,
        crs=crs,
        transform=transform,
        nodata=nodata,
    ) as dst:
        dst.write(data)
