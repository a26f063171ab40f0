# -*- coding: utf-8 -*-
"""Reads the study-site location from delimited text and turns it into a point layer.

Parsing is left to pandas, so malformed files surface as pandas errors.
"""

import os

import pandas as pd

from ..config import SOURCE_CRS
from ..core.site import make_point


def read_site(csv_path, lon_column="longitude", lat_column="latitude", row=0, crs=SOURCE_CRS, name_column=None, **read_kwargs):
    """Read a site location from a CSV file.

    Parameters:
    -----------
    csv_path : str
        Path to the delimited text file
    lon_column : str
        Column holding longitudes
    lat_column : str
        Column holding latitudes
    row : int
        Position of the row to use
    crs : str, int or pyproj.CRS
        CRS of the coordinates in the file
    name_column : str, optional
        Column holding a site name
    **read_kwargs : dict
        Extra arguments for pandas.read_csv (e.g. ``sep``)

    Returns:
    --------
    point : geopandas.GeoDataFrame
        One-row point layer in ``crs``
    """
    table = pd.read_csv(csv_path, **read_kwargs)

    missing = [col for col in (lon_column, lat_column) if col not in table.columns]
    if missing:
        raise ValueError(f"Columns {missing} not found in {csv_path}; available columns: {list(table.columns)}")
    if not 0 <= row < len(table):
        raise ValueError(f"Row {row} out of range for {csv_path} with {len(table)} rows")

    record = table.iloc[row]
    name = record[name_column] if name_column else None

    return make_point(record[lon_column], record[lat_column], crs=crs, name=name)


def write_site(csv_path, lon, lat, lon_column="longitude", lat_column="latitude", name=None):
    """Write a one-row site file readable by read_site."""
    directory = os.path.dirname(csv_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    data = {lon_column: [lon], lat_column: [lat]}
    if name is not None:
        data["name"] = [name]

    pd.DataFrame(data).to_csv(csv_path, index=False)
    return csv_path
