# -*- coding: utf-8 -*-
"""Default settings for the land-cover buffer workflow.

Every value here is only a default: the functions that use them accept keyword arguments to override it.
"""

# Coordinates in the site file are geographic longitude/latitude.
SOURCE_CRS = "EPSG:4326"

# Working system of the land-cover raster. Distances are metres.
TARGET_CRS = "EPSG:3857"

BUFFER_RADII = (150, 510, 990, 2000, 5000)

# The crop box is the extent of this buffer scaled by CROP_PADDING about its centre.
CROP_RADIUS = 2000
CROP_PADDING = 1.35

HIDDEN_CODES = (1, 6)
HIDDEN_CODE = 10
HIDDEN_COLOR = "#d9d9d9"

# Used when a raster file does not declare its own no-data value. 0 is not a class code.
DEFAULT_NODATA = 0

# Segments per quarter circle for buffer polygons (shapely default).
BUFFER_RESOLUTION = 16
