# -*- coding: utf-8 -*-
"""Tests for the Layer container and the LayerManager."""

import pytest

from landbuffer import Layer, LayerManager, attach_class_distribution


def test_layer_georeferencing(sample_layer):
    """Bounds and resolution follow the transform."""
    left, bottom, right, top = sample_layer.bounds

    assert right - left == pytest.approx(400 * 30)
    assert top - bottom == pytest.approx(400 * 30)
    assert sample_layer.resolution == (30, 30)
    assert sample_layer.shape == (400, 400)
    assert "sample" in str(sample_layer)


def test_layer_without_raster():
    """Georeferencing needs a raster and a transform."""
    layer = Layer()
    assert layer.name.startswith("Layer_")
    assert layer.shape is None
    with pytest.raises(ValueError):
        layer.bounds
    with pytest.raises(ValueError):
        layer.resolution


def test_layer_copy(sample_layer):
    """Copies do not share the raster or the metadata."""
    copy = sample_layer.copy()
    copy.raster[0, 0] = 99

    assert copy.name == "sample_copy"
    assert sample_layer.raster[0, 0] != 99
    assert copy.transform == sample_layer.transform
    assert copy.nodata == sample_layer.nodata

    copy.metadata["note"] = "edited"
    assert "note" not in sample_layer.metadata, "Copies do not share metadata."
    assert not hasattr(copy, "objects"), "Layers carry rasters only."


def test_attach_function(sample_layer):
    """Attached function results can be retrieved by name."""
    sample_layer.attach_function(attach_class_distribution, name="distribution")

    result = sample_layer.get_function_result("distribution")
    assert result["total"] == sample_layer.raster.size
    with pytest.raises(ValueError, match="not attached"):
        sample_layer.get_function_result("missing")


def test_layer_manager():
    """Layers are found by id or name and removal updates the active layer."""
    manager = LayerManager()
    first = manager.add_layer(Layer(name="first"))
    second = manager.add_layer(Layer(name="second", parent=first))

    assert manager.get_layer_names() == ["first", "second"]
    assert manager.get_layer(first.id) is first
    assert manager.get_layer("second") is second
    assert manager.active_layer is second

    manager.remove_layer("second")
    assert manager.active_layer is first
    with pytest.raises(ValueError, match="not found"):
        manager.get_layer("second")

    manager.remove_layer(first.id)
    assert manager.active_layer is None
    assert manager.get_layer_names() == []
