# -*- coding: utf-8 -*-
"""Defines the Layer class and related functionality for organizing land-cover rasters.

A layer is a container for a categorical raster grid together with its georeferencing (transform, CRS, no-data value),
so that every derived product of the workflow (read, cropped, reclassified) can be traced back to the layer it came from.
This module provides the Layer and LayerManager classes. Layers can be created, copied and looked up by name, and they
support attaching functions to calculate additional properties such as class distributions.
"""

import uuid

import pandas as pd
from rasterio.transform import array_bounds


class Layer:
    """A Layer represents a categorical raster grid and its georeferencing.

    Layers can be read from disk or derived from cropping and reclassification.
    Each layer can have functions attached to calculate additional properties.
    """

    def __init__(self, name=None, parent=None, type="generic"):
        """Initialize a Layer.

        Parameters:
        -----------
        name : str, optional
            Name of the layer. If None, a unique name will be generated.
        parent : Layer, optional
            Parent layer that this layer is derived from.
        type : str
            Type of layer: "raster", "crop", "reclassification", or "generic"
        """
        self.id = str(uuid.uuid4())
        self.name = name if name else f"Layer_{self.id[:8]}"
        self.parent = parent
        self.type = type
        self.created_at = pd.Timestamp.now()

        self.raster = None
        self.metadata = {}
        self.transform = None
        self.crs = None
        self.nodata = None

        self.attached_functions = {}

    @property
    def shape(self):
        """Grid shape as (rows, columns), or None when the layer has no raster."""
        return None if self.raster is None else self.raster.shape

    @property
    def bounds(self):
        """Spatial extent of the grid as (left, bottom, right, top)."""
        if self.raster is None or self.transform is None:
            raise ValueError(f"Layer '{self.name}' has no georeferenced raster")
        height, width = self.raster.shape
        west, south, east, north = array_bounds(height, width, self.transform)
        return west, south, east, north

    @property
    def resolution(self):
        """Cell size as (xres, yres), both positive."""
        if self.transform is None:
            raise ValueError(f"Layer '{self.name}' has no transform")
        return abs(self.transform.a), abs(self.transform.e)

    def attach_function(self, function, name=None, **kwargs):
        """Attach a function to this layer and execute it.

        Parameters:
        -----------
        function : callable
            Function to attach and execute
        name : str, optional
            Name for this function. If None, uses function.__name__
        **kwargs : dict
            Arguments to pass to the function

        Returns:
        --------
        self : Layer
            Returns self for chaining
        """
        func_name = name if name else function.__name__

        result = function(self, **kwargs)

        self.attached_functions[func_name] = {
            "function": function,
            "args": kwargs,
            "result": result,
        }

        return self

    def get_function_result(self, function_name):
        """Get the result of an attached function."""
        if function_name not in self.attached_functions:
            raise ValueError(f"Function '{function_name}' not attached to this layer")

        return self.attached_functions[function_name]["result"]

    def copy(self):
        """Create a copy of this layer.

        Returns:
        --------
        layer_copy : Layer
            Copy of this layer
        """
        new_layer = Layer(name=f"{self.name}_copy", parent=self.parent, type=self.type)

        if self.raster is not None:
            new_layer.raster = self.raster.copy()

        new_layer.metadata = self.metadata.copy()
        new_layer.transform = self.transform
        new_layer.crs = self.crs
        new_layer.nodata = self.nodata

        return new_layer

    def __str__(self):
        """String representation of the layer."""
        shape = "x".join(str(n) for n in self.raster.shape) if self.raster is not None else "empty"
        parent_name = self.parent.name if self.parent else "None"

        return f"Layer '{self.name}' (type: {self.type}, parent: {parent_name}, raster: {shape}, crs: {self.crs})"


class LayerManager:
    """Manages a collection of layers and their relationships."""

    def __init__(self):
        """Initialize the layer manager."""
        self.layers = {}
        self.active_layer = None

    def add_layer(self, layer, set_active=True):
        """Add a layer to the manager.

        Parameters:
        -----------
        layer : Layer
            Layer to add
        set_active : bool
            Whether to set this layer as the active layer

        Returns:
        --------
        layer : Layer
            The added layer
        """
        self.layers[layer.id] = layer

        if set_active:
            self.active_layer = layer

        return layer

    def get_layer(self, layer_id_or_name):
        """Get a layer by ID or name.

        Parameters:
        -----------
        layer_id_or_name : str
            Layer ID or name

        Returns:
        --------
        layer : Layer
            The requested layer
        """
        if layer_id_or_name in self.layers:
            return self.layers[layer_id_or_name]

        for layer in self.layers.values():
            if layer.name == layer_id_or_name:
                return layer

        raise ValueError(f"Layer '{layer_id_or_name}' not found")

    def get_layer_names(self):
        """Get a list of all layer names."""
        return [layer.name for layer in self.layers.values()]

    def remove_layer(self, layer_id_or_name):
        """Remove a layer from the manager."""
        layer = self.get_layer(layer_id_or_name)

        if layer.id in self.layers:
            del self.layers[layer.id]

        if self.active_layer and self.active_layer.id == layer.id:
            if self.layers:
                self.active_layer = list(self.layers.values())[-1]
            else:
                self.active_layer = None
