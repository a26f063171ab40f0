# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?

Synthetic land-cover data for trying out the workflow without downloading a real raster.
"""

import os

import numpy as np
from rasterio.crs import CRS
from rasterio.transform import from_origin

from ..config import DEFAULT_NODATA, SOURCE_CRS, TARGET_CRS
from ..core.site import make_point, point_coordinates, reproject_point
from ..io.raster import write_raster
from ..io.vector import write_site

# Every category except canola, so a crop around the site holds eight classes.
SAMPLE_CLASSES = (1, 2, 3, 4, 5, 6, 7, 9)

SAMPLE_SITE = (-106.67, 52.13)


def create_sample_data(
    lon=SAMPLE_SITE[0],
    lat=SAMPLE_SITE[1],
    width=400,
    height=400,
    resolution=30,
    classes=SAMPLE_CLASSES,
    block=20,
    crs=TARGET_CRS,
):
    """Create a deterministic single-band categorical raster centred on a site.

    Classes are laid out in diagonal stripes of ``block`` x ``block`` cells, so any window a few blocks wide holds
    every class.

    Parameters:
    -----------
    lon, lat : float
        Site location in EPSG:4326
    width, height : int
        Grid size in cells
    resolution : float
        Cell size in units of ``crs``
    classes : sequence of int
        Category codes to lay out
    block : int
        Block size in cells
    crs : str
        Projected CRS of the raster

    Returns:
    --------
    image_data : numpy.ndarray
        Synthetic class codes (height, width), uint8
    transform : affine.Affine
        Affine transformation for the raster
    crs : rasterio.crs.CRS
        Coordinate reference system
    """
    x, y = point_coordinates(reproject_point(make_point(lon, lat, crs=SOURCE_CRS), crs))

    rows, cols = np.indices((height, width))
    codes = np.asarray(classes, dtype=np.uint8)
    image_data = codes[(rows // block + cols // block) % len(codes)]

    transform = from_origin(x - width * resolution / 2, y + height * resolution / 2, resolution, resolution)

    return image_data, transform, CRS.from_user_input(crs)


def create_sample_files(output_dir, lon=SAMPLE_SITE[0], lat=SAMPLE_SITE[1], **kwargs):
    """Write a sample site table and land-cover raster.

    Returns:
    --------
    paths : tuple
        (site_csv_path, raster_path)
    """
    os.makedirs(output_dir, exist_ok=True)

    image_data, transform, crs = create_sample_data(lon=lon, lat=lat, **kwargs)

    raster_path = os.path.join(output_dir, "landcover.tif")
    write_raster(raster_path, image_data, transform, crs, nodata=DEFAULT_NODATA)

    site_path = write_site(os.path.join(output_dir, "site.csv"), lon, lat, name="sample_site")

    return site_path, raster_path
