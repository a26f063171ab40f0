# -*- coding: utf-8 -*-
"""Tests for loading the site location and moving it between coordinate reference systems."""

import pandas as pd
import pytest
from pyproj.exceptions import CRSError

from landbuffer import make_point, point_coordinates, read_site, reproject_point, same_crs, write_site


def test_make_point_declares_crs():
    """The point carries the CRS it was declared with."""
    point = make_point(-106.67, 52.13)
    assert point.crs.to_epsg() == 4326, "Point CRS not set to EPSG:4326."
    assert point_coordinates(point) == (-106.67, 52.13)


def test_reprojection_round_trip():
    """EPSG:4326 -> EPSG:3857 -> EPSG:4326 returns the original coordinates."""
    point = make_point(-106.67, 52.13)

    projected = reproject_point(point, "EPSG:3857")
    assert projected.crs.to_epsg() == 3857, "Reprojected CRS does not match the request."
    x, y = point_coordinates(projected)
    assert abs(x) > 1e6 and abs(y) > 1e6, "Projected coordinates should be in metres."

    back = reproject_point(projected, 4326)
    lon, lat = point_coordinates(back)
    assert lon == pytest.approx(-106.67, abs=1e-7)
    assert lat == pytest.approx(52.13, abs=1e-7)
    assert point_coordinates(point) == (-106.67, 52.13), "Reprojection must not modify its input."


def test_reproject_invalid_crs():
    """A malformed CRS identifier fails immediately."""
    point = make_point(0, 0)
    with pytest.raises(CRSError):
        reproject_point(point, "EPSG:not-a-code")


def test_read_site(tmp_path):
    """The selected row of the table becomes the site point."""
    path = tmp_path / "sites.csv"
    pd.DataFrame({"longitude": [-106.67, 10.5], "latitude": [52.13, 45.2], "name": ["a", "b"]}).to_csv(path, index=False)

    site = read_site(str(path))
    assert len(site) == 1
    assert point_coordinates(site) == (-106.67, 52.13)

    second = read_site(str(path), row=1, name_column="name")
    assert point_coordinates(second) == (10.5, 45.2)
    assert second["name"].iloc[0] == "b"


def test_read_site_custom_columns(tmp_path):
    """Column names and delimiter can be configured."""
    path = tmp_path / "site.txt"
    path.write_text("lon;lat\n5.5;60.25\n")

    site = read_site(str(path), lon_column="lon", lat_column="lat", sep=";")
    assert point_coordinates(site) == (5.5, 60.25)


def test_read_site_errors(tmp_path):
    """Missing columns and rows are reported, reader errors propagate."""
    path = tmp_path / "site.csv"
    write_site(str(path), 1.0, 2.0)

    with pytest.raises(ValueError, match="not found"):
        read_site(str(path), lon_column="x")
    with pytest.raises(ValueError, match="out of range"):
        read_site(str(path), row=3)
    with pytest.raises(FileNotFoundError):
        read_site(str(tmp_path / "missing.csv"))

    empty = tmp_path / "empty.csv"
    empty.write_text("")
    with pytest.raises(pd.errors.EmptyDataError):
        read_site(str(empty))


def test_same_crs():
    """CRS definitions are compared by meaning, not spelling."""
    point = make_point(0, 0, crs="EPSG:3857")
    assert same_crs(point.crs, 3857)
    assert same_crs("EPSG:3857", point.crs)
    assert not same_crs(point.crs, "EPSG:4326")
    assert not same_crs(None, point.crs)
