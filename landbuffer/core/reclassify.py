# -*- coding: utf-8 -*-
"""Value substitution on categorical rasters.

A Reclassifier collects (old code -> new code) substitutions and applies them to a layer, producing a new layer with the
same grid, transform and CRS. All substitutions are matched against the input values, so their order does not matter.
"""

import numpy as np

from ..config import HIDDEN_CODE, HIDDEN_CODES
from .layer import Layer


class Reclassifier:
    """A named collection of category substitutions."""

    def __init__(self, name=None, substitutions=None):
        """Initialize a reclassifier.

        Parameters:
        -----------
        name : str, optional
            Name of the reclassification
        substitutions : dict, optional
            Mapping of old code -> new code
        """
        self.name = name if name else "Reclassification"
        self.substitutions = {}
        for old, new in (substitutions or {}).items():
            self.add_substitution(old, new)

    def add_substitution(self, old, new):
        """Replace every cell valued ``old`` by ``new``."""
        if old in self.substitutions and self.substitutions[old] != new:
            raise ValueError(f"Code {old} is already mapped to {self.substitutions[old]}")
        self.substitutions[old] = new
        return self

    def execute(self, source_layer, layer_manager=None, layer_name=None):
        """Apply the substitutions to a layer.

        Parameters:
        -----------
        source_layer : Layer
            Layer with the categorical raster to reclassify
        layer_manager : LayerManager, optional
            Layer manager to add the result layer to
        layer_name : str, optional
            Name for the result layer

        Returns:
        --------
        result_layer : Layer
            Layer with the substituted raster. No-data cells are left unchanged.
        """
        if source_layer.raster is None:
            raise ValueError(f"Layer '{source_layer.name}' has no raster to reclassify")

        if not layer_name:
            layer_name = f"{source_layer.name}_{self.name}"

        source = source_layer.raster
        raster = source.copy()
        valid = np.ones(source.shape, dtype=bool) if source_layer.nodata is None else source != source_layer.nodata

        for old, new in self.substitutions.items():
            raster[(source == old) & valid] = new

        result_layer = Layer(name=layer_name, parent=source_layer, type="reclassification")
        result_layer.raster = raster
        result_layer.transform = source_layer.transform
        result_layer.crs = source_layer.crs
        result_layer.nodata = source_layer.nodata
        result_layer.metadata = {
            "reclassification_name": self.name,
            "substitutions": dict(self.substitutions),
        }

        if layer_manager:
            layer_manager.add_layer(result_layer)

        return result_layer

    def __str__(self):
        """String representation of the reclassifier."""
        pairs = ", ".join(f"{old}->{new}" for old, new in self.substitutions.items())
        return f"Reclassifier '{self.name}': {pairs}"


def substitute_values(layer, substitutions, layer_manager=None, layer_name=None):
    """Replace codes in ``layer`` according to an {old: new} mapping."""
    return Reclassifier(substitutions=substitutions).execute(layer, layer_manager=layer_manager, layer_name=layer_name)


def hide_categories(layer, codes=HIDDEN_CODES, hidden_code=HIDDEN_CODE, layer_manager=None, layer_name=None):
    """Merge ``codes`` into the hidden sentinel category.

    Applying this to an already merged layer changes nothing: none of ``codes`` remain.
    """
    reclassifier = Reclassifier(name="Hidden", substitutions={code: hidden_code for code in codes})
    return reclassifier.execute(layer, layer_manager=layer_manager, layer_name=layer_name)
