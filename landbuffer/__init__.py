# -*- coding: utf-8 -*-
# landbuffer/__init__.py

"""
LandBuffer: land-cover maps around a study site
===============================================

LandBuffer walks a study site through a short geospatial workflow:
read its coordinates, build concentric buffers around it, crop a
categorical land-cover raster to the buffers, hide selected categories
and render static maps.

Key features:
- Site loading and reprojection
- Circular buffers at fixed radii
- Raster cropping with no-data padding
- Category substitution
- Thematic maps with legend, scale bar and compass
- Land-cover composition per buffer
"""

__version__ = "0.1.0"

from .core.buffers import make_buffer, make_buffers, padded_bounds, select_buffer
from .core.categories import LANDCOVER_CLASSES, category_colormap, get_label, get_legend
from .core.layer import Layer, LayerManager
from .core.reclassify import Reclassifier, hide_categories, substitute_values
from .core.site import make_point, point_coordinates, reproject_point, same_crs

from .io.raster import crop_raster, read_raster, write_raster
from .io.vector import read_site, write_site

from .stats.basic import attach_buffer_composition, attach_class_distribution

from .utils.helpers import create_sample_data, create_sample_files

from .viz.charts import composition_table, plot_composition
from .viz.maps import add_compass, add_scalebar, plot_comparison, plot_landcover, save_figure
