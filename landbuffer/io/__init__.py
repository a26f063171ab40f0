# -*- coding: utf-8 -*-
"""The io package contains modules for reading the site table and reading, cropping and writing land-cover rasters.

It hands everything else back as Layers and GeoDataFrames tagged with their coordinate reference system.
"""
