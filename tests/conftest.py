# -*- coding: utf-8 -*-
"""Shared fixtures: synthetic land-cover data around a sample site."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from landbuffer import (  # noqa: E402
    Layer,
    create_sample_data,
    create_sample_files,
    crop_raster,
    make_buffers,
    make_point,
    padded_bounds,
    reproject_point,
    select_buffer,
)
from landbuffer.utils.helpers import SAMPLE_SITE  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    """Fixture to close every matplotlib figure after each test."""
    yield
    plt.close("all")


@pytest.fixture
def sample_files(tmp_path):
    """Fixture to provide a sample site table and land-cover raster on disk."""
    return create_sample_files(str(tmp_path / "sample"))


@pytest.fixture
def sample_layer():
    """Fixture to provide an in-memory land-cover layer centred on the sample site."""
    image_data, transform, crs = create_sample_data()
    layer = Layer(name="sample", type="raster")
    layer.raster = image_data
    layer.transform = transform
    layer.crs = crs
    layer.nodata = 0
    return layer


@pytest.fixture
def site():
    """Fixture to provide the sample site in the raster's CRS."""
    return reproject_point(make_point(*SAMPLE_SITE), "EPSG:3857")


@pytest.fixture
def buffers(site):
    """Fixture to provide the five default buffers around the sample site."""
    return make_buffers(site)


@pytest.fixture
def cropped_layer(sample_layer, buffers):
    """Fixture to provide the sample layer cropped to the padded 2000 m buffer."""
    return crop_raster(sample_layer, padded_bounds(select_buffer(buffers, 2000), factor=1.35))
