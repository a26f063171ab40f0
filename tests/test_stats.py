# -*- coding: utf-8 -*-
"""Tests for land-cover statistics and the composition chart."""

import numpy as np
import pytest

from landbuffer import (
    attach_buffer_composition,
    attach_class_distribution,
    composition_table,
    hide_categories,
    make_buffers,
    make_point,
    plot_composition,
)


def test_class_distribution(cropped_layer):
    """Counts cover every valid cell and are keyed by label."""
    distribution = attach_class_distribution(cropped_layer)

    assert distribution["total"] == cropped_layer.raster.size
    assert sum(distribution["counts"].values()) == distribution["total"]
    assert set(distribution["counts"]) == {
        "water",
        "barren",
        "developed",
        "grassland",
        "wetland",
        "non_flowering_crop",
        "flowering_crop",
        "forest",
    }
    assert sum(distribution["percentages"].values()) == pytest.approx(100, abs=0.1)


def test_class_distribution_hidden(cropped_layer):
    """The hidden category is reported under its code."""
    distribution = attach_class_distribution(hide_categories(cropped_layer))

    assert "10" in distribution["counts"]
    assert "water" not in distribution["counts"]
    expected = int(np.isin(cropped_layer.raster, [1, 6]).sum())
    assert distribution["counts"]["10"] == expected


def test_buffer_composition(sample_layer, buffers):
    """Each buffer counts the cells inside it; larger buffers hold more cells."""
    composition = attach_buffer_composition(sample_layer, buffers)

    assert list(composition) == [150, 510, 990, 2000, 5000]
    totals = [composition[radius]["total"] for radius in composition]
    assert totals == sorted(totals)
    assert totals[0] > 0

    # a 2000 m disc at 30 m cells holds roughly pi * (2000 / 30) ** 2 cells
    assert totals[3] == pytest.approx(np.pi * (2000 / 30) ** 2, rel=0.02)

    for stats in composition.values():
        assert sum(stats["percentages"].values()) == pytest.approx(100, abs=0.1)


def test_buffer_composition_rings(sample_layer, buffers):
    """Rings split the largest disc without overlap."""
    discs = attach_buffer_composition(sample_layer, buffers)
    rings = attach_buffer_composition(sample_layer, buffers, rings=True)

    assert rings[150]["total"] == discs[150]["total"]
    assert sum(stats["total"] for stats in rings.values()) == discs[5000]["total"]


def test_buffer_composition_crs_mismatch(sample_layer):
    """Buffers must be in the raster CRS."""
    buffers_lonlat = make_buffers(make_point(-106.67, 52.13), radii=(0.01,))
    with pytest.raises(ValueError, match="does not match"):
        attach_buffer_composition(sample_layer, buffers_lonlat)


def test_plot_composition(sample_layer, buffers):
    """The composition chart has one bar group per radius."""
    composition = attach_buffer_composition(sample_layer, buffers)

    table = composition_table(composition)
    assert set(table["radius"]) == {150, 510, 990, 2000, 5000}
    assert list(table.columns) == ["radius", "class", "count", "percentage"]

    fig = plot_composition(composition, title="Composition")
    ax = fig.axes[0]
    assert ax.get_title() == "Composition"
    assert ax.get_legend() is not None
    assert len(ax.patches) > 0

    with pytest.raises(ValueError, match="no classes"):
        plot_composition({150: {"counts": {}, "percentages": {}, "total": 0}})
