# -*- coding: utf-8 -*-
"""Builds the study-site point and moves it between coordinate reference systems."""

import geopandas as gpd
from pyproj import CRS
from shapely.geometry import Point

from ..config import SOURCE_CRS


def make_point(lon, lat, crs=SOURCE_CRS, name=None):
    """Create a one-row GeoDataFrame holding the site point.

    Parameters:
    -----------
    lon : float
        Longitude (or easting, for projected systems)
    lat : float
        Latitude (or northing)
    crs : str, int or pyproj.CRS
        Coordinate reference system the coordinates are expressed in
    name : str, optional
        Site name, stored in a ``name`` column

    Returns:
    --------
    point : geopandas.GeoDataFrame
        Single point with its declared CRS
    """
    data = {"name": [name]} if name is not None else None
    return gpd.GeoDataFrame(data, geometry=[Point(float(lon), float(lat))], crs=crs)


def reproject_point(point, crs):
    """Return a copy of ``point`` transformed to ``crs``.

    An unsupported or malformed CRS fails in pyproj and is not caught here.
    """
    return point.to_crs(crs)


def point_coordinates(point):
    """Return the (x, y) coordinates of a one-row point GeoDataFrame."""
    if len(point) != 1:
        raise ValueError(f"Expected a single site point, got {len(point)} rows")
    geom = point.geometry.iloc[0]
    return geom.x, geom.y


def same_crs(crs_a, crs_b):
    """Whether two CRS definitions (rasterio, pyproj, EPSG code or string) describe the same system."""
    if crs_a is None or crs_b is None:
        return False

    crs_a = CRS.from_user_input(crs_a)
    crs_b = CRS.from_user_input(crs_b)
    if crs_a.equals(crs_b, ignore_axis_order=True):
        return True

    epsg_a = crs_a.to_epsg()
    return epsg_a is not None and epsg_a == crs_b.to_epsg()
